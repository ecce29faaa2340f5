from typing import Any

from pydantic import ValidationError

from text_ai.errors import InvalidInput, TextTooLong
from text_ai.schemas import MAX_TEXT_LENGTH, ClassifyRequest, TextTooLongError


def validate_request(body: Any, max_length: int = MAX_TEXT_LENGTH) -> str:
    """
    Valida o corpo da requisição e retorna o texto original (sem trim).
    - InvalidInput: corpo não é objeto, `text` ausente, não-string ou vazio
    - TextTooLong: `text` acima de max_length unidades UTF-16
    """
    try:
        req = ClassifyRequest.model_validate(body, context={"max_length": max_length})
    except ValidationError as e:
        errors = e.errors()
        if any(isinstance((err.get("ctx") or {}).get("error"), TextTooLongError) for err in errors):
            raise TextTooLong(f"text_length acima de {max_length}") from e
        raise InvalidInput(", ".join(sorted({err["type"] for err in errors}))) from e
    return req.text
