import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    """Configuração do serviço, lida das variáveis de ambiente (ou .env)."""
    google_api_key: str
    gemini_model: str = "gemini-2.5-flash"
    gemini_timeout_seconds: float = 30.0
    max_text_length: int = 5000
    rate_limit_max_requests: int = 15
    rate_limit_window_seconds: int = 60


def _env_number(name: str, default, cast):
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = cast(raw)
    except ValueError as e:
        raise RuntimeError(f"{name} inválida: '{raw}'.") from e
    if value <= 0:
        raise RuntimeError(f"{name} deve ser maior que zero.")
    return value


def get_settings() -> Settings:
    """
    Monta as configurações a partir do ambiente.
    Falha rápido se GOOGLE_API_KEY não estiver configurada.
    """
    api_key = os.getenv("GOOGLE_API_KEY")
    if not api_key:
        raise RuntimeError("GOOGLE_API_KEY não configurada.")

    return Settings(
        google_api_key=api_key,
        gemini_model=os.getenv("GEMINI_MODEL", "gemini-2.5-flash"),
        gemini_timeout_seconds=_env_number("GEMINI_TIMEOUT_SECONDS", 30.0, float),
        max_text_length=_env_number("CLASSIFIER_MAX_TEXT_LENGTH", 5000, int),
        rate_limit_max_requests=_env_number("RATE_LIMIT_MAX_REQUESTS", 15, int),
        rate_limit_window_seconds=_env_number("RATE_LIMIT_WINDOW_SECONDS", 60, int),
    )
