import json

from pydantic import ValidationError

from text_ai.errors import MalformedAIResponse
from text_ai.schemas import ClassificationResult

FENCE_OPEN = "```json"
FENCE_CLOSE = "```"


def strip_code_fence(raw: str) -> str:
    """Remove o bloco ```json ... ``` que o modelo às vezes coloca em volta do JSON."""
    content = raw.strip()
    if (
        content.startswith(FENCE_OPEN)
        and content.endswith(FENCE_CLOSE)
        and len(content) >= len(FENCE_OPEN) + len(FENCE_CLOSE)
    ):
        content = content[len(FENCE_OPEN):-len(FENCE_CLOSE)].strip()
    return content


def parse_reply(raw: str) -> ClassificationResult:
    """
    Converte a resposta bruta do modelo em ClassificationResult.
    Qualquer falha (JSON inválido, chaves ausentes, valores fora das categorias)
    vira MalformedAIResponse. Sem recuperação parcial.
    """
    content = strip_code_fence(raw)
    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise MalformedAIResponse(f"JSON inválido: {e.msg}") from e

    try:
        return ClassificationResult.model_validate(data)
    except ValidationError as e:
        raise MalformedAIResponse(f"JSON fora do schema: {e.error_count()} erro(s)") from e
