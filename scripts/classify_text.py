import asyncio
import json
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from text_ai.config import get_settings  # noqa: E402
from text_ai.errors import ClassificationError  # noqa: E402
from text_ai.services.classifier import TextClassifier  # noqa: E402
from text_ai.services.llm import GeminiClassifierClient  # noqa: E402
from text_ai.services.validator import validate_request  # noqa: E402


async def classificar(texto: str) -> dict:
    """Classifica um texto pela mesma camada de serviço da API (sem HTTP)."""
    settings = get_settings()
    texto = validate_request({"text": texto}, max_length=settings.max_text_length)
    classifier = TextClassifier(
        GeminiClassifierClient(
            api_key=settings.google_api_key,
            model=settings.gemini_model,
            timeout_seconds=settings.gemini_timeout_seconds,
        )
    )
    result = await classifier.classify(texto)
    return result.model_dump()


def main():
    if len(sys.argv) < 2:
        raise SystemExit('Uso: uv run python scripts/classify_text.py "texto a classificar"')

    texto = " ".join(sys.argv[1:])
    print("🔎 Classificando texto...")
    try:
        result = asyncio.run(classificar(texto))
    except ClassificationError as e:
        raise SystemExit(f"❌ [{e.status_code}] {e.message}")

    print(json.dumps(result, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
