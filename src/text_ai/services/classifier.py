from text_ai.errors import (
    ClassificationError,
    InternalUnexpected,
    UpstreamBadRequest,
    UpstreamTimeout,
    UpstreamUnavailable,
)
from text_ai.schemas import ClassificationResult
from text_ai.services.llm import UpstreamClient, UpstreamErrorKind, UpstreamFailure
from text_ai.services.parser import parse_reply
from text_ai.services.prompt import build_prompt

_ERRORS_BY_KIND: dict[UpstreamErrorKind, type[ClassificationError]] = {
    UpstreamErrorKind.OVERLOADED: UpstreamUnavailable,
    UpstreamErrorKind.BAD_REQUEST: UpstreamBadRequest,
    UpstreamErrorKind.TIMEOUT: UpstreamTimeout,
    UpstreamErrorKind.FAILED: InternalUnexpected,
}


class TextClassifier:
    """Serviço de classificação de texto (sentimento, tonalidade, intenção) via LLM."""

    def __init__(self, client: UpstreamClient):
        self.client = client

    async def classify(self, text: str) -> ClassificationResult:
        """Monta o prompt, chama o provedor e interpreta a resposta."""
        prompt = build_prompt(text)
        result = await self.client.classify(prompt)

        if isinstance(result, UpstreamFailure):
            error_cls = _ERRORS_BY_KIND[result.kind]
            raise error_cls(f"upstream {result.kind.value} (status={result.status}): {result.message}")

        return parse_reply(result.text)
