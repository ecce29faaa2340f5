import asyncio
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Protocol

from google import genai
from google.genai import errors, types

logger = logging.getLogger(__name__)

# Política fixa de segurança, aplicada em toda chamada.
SAFETY_SETTINGS = [
    types.SafetySetting(
        category=category,
        threshold=types.HarmBlockThreshold.BLOCK_MEDIUM_AND_ABOVE,
    )
    for category in (
        types.HarmCategory.HARM_CATEGORY_HARASSMENT,
        types.HarmCategory.HARM_CATEGORY_HATE_SPEECH,
        types.HarmCategory.HARM_CATEGORY_SEXUALLY_EXPLICIT,
        types.HarmCategory.HARM_CATEGORY_DANGEROUS_CONTENT,
    )
]


class UpstreamErrorKind(str, Enum):
    OVERLOADED = "overloaded"
    BAD_REQUEST = "bad_request"
    TIMEOUT = "timeout"
    FAILED = "failed"


@dataclass(frozen=True)
class UpstreamReply:
    text: str


@dataclass(frozen=True)
class UpstreamFailure:
    kind: UpstreamErrorKind
    status: int | None
    message: str


UpstreamResult = UpstreamReply | UpstreamFailure


class UpstreamClient(Protocol):
    async def classify(self, prompt: str) -> UpstreamResult: ...


def failure_from_status(status: int | None, message: str) -> UpstreamFailure:
    """Converte o status HTTP do provedor em um tipo de falha fechado."""
    if status == 503:
        kind = UpstreamErrorKind.OVERLOADED
    elif status == 400:
        kind = UpstreamErrorKind.BAD_REQUEST
    else:
        kind = UpstreamErrorKind.FAILED
    return UpstreamFailure(kind=kind, status=status, message=message)


class GeminiClassifierClient:
    """
    Cliente do Google Gemini para classificação.
    - Prompt enviado como único turno do usuário
    - Safety settings fixos em toda chamada
    - Timeout para evitar pendurar request
    - Sem retries: sobrecarga é repassada ao chamador
    """

    def __init__(
        self,
        api_key: str,
        model: str = "gemini-2.5-flash",
        timeout_seconds: float = 30.0,
        client: genai.Client | None = None,
    ):
        self.model = model
        self.timeout_seconds = timeout_seconds
        self._client = client or genai.Client(api_key=api_key)

    async def classify(self, prompt: str) -> UpstreamResult:
        try:
            response = await asyncio.wait_for(
                self._client.aio.models.generate_content(
                    model=self.model,
                    contents=[types.Content(role="user", parts=[types.Part(text=prompt)])],
                    config=types.GenerateContentConfig(safety_settings=SAFETY_SETTINGS),
                ),
                timeout=self.timeout_seconds,
            )
        except asyncio.TimeoutError:
            logger.warning(
                "Timeout na chamada ao Gemini.",
                extra={"model": self.model, "timeout_seconds": self.timeout_seconds},
            )
            return UpstreamFailure(
                kind=UpstreamErrorKind.TIMEOUT,
                status=None,
                message=f"Sem resposta em {self.timeout_seconds}s.",
            )
        except errors.APIError as e:
            logger.warning(
                "Gemini retornou erro.",
                extra={"model": self.model, "status": e.code},
            )
            return failure_from_status(e.code, e.message or str(e))

        text = response.text
        if not text:
            # resposta vazia: normalmente conteúdo bloqueado pelos safety settings
            feedback = getattr(response, "prompt_feedback", None)
            reason = getattr(feedback, "block_reason", None)
            return UpstreamFailure(
                kind=UpstreamErrorKind.FAILED,
                status=None,
                message=f"Resposta vazia do modelo (block_reason={reason}).",
            )
        return UpstreamReply(text=text)
