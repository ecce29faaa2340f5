from typing import Literal

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator

MAX_TEXT_LENGTH = 5000

Sentimento = Literal["Positivo", "Negativo", "Neutro"]
Tonalidade = Literal["Formal", "Informal"]
Intencao = Literal["Profissional", "Pessoal", "Transacional", "Informativo"]


class TextTooLongError(ValueError):
    """Texto acima do limite; separado do ValueError genérico de texto inválido."""


def text_length(text: str) -> int:
    """Tamanho em unidades UTF-16 (emoji fora do BMP conta 2), como no navegador."""
    return len(text.encode("utf-16-le", "surrogatepass")) // 2


class ClassifyRequest(BaseModel):
    """
    Schema de entrada do endpoint /api/classify.
    O limite de tamanho vem do contexto de validação (``max_length``).
    """
    model_config = ConfigDict(strict=True)

    text: str

    @field_validator("text")
    @classmethod
    def text_must_be_valid(cls, v: str, info: ValidationInfo) -> str:
        # strip só para checar vazio; o texto segue intacto para o modelo
        if not v.strip():
            raise ValueError("Texto vazio.")

        max_length = (info.context or {}).get("max_length", MAX_TEXT_LENGTH)
        length = text_length(v)
        if length > max_length:
            raise TextTooLongError(
                f"Texto com {length} caracteres excede o limite de {max_length}."
            )
        return v


class ClassificationResult(BaseModel):
    """Schema de saída do endpoint /api/classify."""
    sentimento: Sentimento
    tonalidade: Tonalidade
    intencao: Intencao


class ErrorResponse(BaseModel):
    error: str


class ExampleText(BaseModel):
    label: str
    text: str
