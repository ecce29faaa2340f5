from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse
from datetime import datetime, timezone
import logging
from contextlib import asynccontextmanager

from text_ai.config import Settings, get_settings
from text_ai.errors import ClassificationError, InternalUnexpected, InvalidInput, RateLimited
from text_ai.examples import EXAMPLES
from text_ai.schemas import ClassificationResult, ErrorResponse, ExampleText
from text_ai.services.classifier import TextClassifier
from text_ai.services.llm import GeminiClassifierClient
from text_ai.services.rate_limiter import RateLimiter
from text_ai.services.validator import validate_request

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
)
logger = logging.getLogger("text_ai_api")

START_TIME = datetime.now(timezone.utc)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Inicialização e teardown do app. Sem GOOGLE_API_KEY o app não sobe."""
    settings = get_settings()
    app.state.settings = settings
    app.state.rate_limiter = RateLimiter(
        max_requests=settings.rate_limit_max_requests,
        window_seconds=settings.rate_limit_window_seconds,
    )
    app.state.classifier = TextClassifier(
        GeminiClassifierClient(
            api_key=settings.google_api_key,
            model=settings.gemini_model,
            timeout_seconds=settings.gemini_timeout_seconds,
        )
    )
    logger.info("✅ Cliente Gemini configurado.", extra={"model": settings.gemini_model})
    yield
    app.state.rate_limiter.reset()


app = FastAPI(
    title="Text AI",
    description="API de classificação de texto (sentimento, tonalidade e intenção) via LLM.",
    version="1.0.0",
    lifespan=lifespan,
)


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_rate_limiter(request: Request) -> RateLimiter:
    return request.app.state.rate_limiter


def get_classifier(request: Request) -> TextClassifier:
    return request.app.state.classifier


@app.exception_handler(ClassificationError)
async def classification_error_handler(request: Request, exc: ClassificationError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.get("/")
def root():
    return {
        "service": "Text AI",
        "version": app.version,
        "docs": "/docs",
        "health": "/health",
    }


@app.get("/health")
def health_check(settings: Settings = Depends(get_app_settings)):
    now = datetime.now(timezone.utc)
    uptime = (now - START_TIME).total_seconds()

    return {
        "status": "healthy",
        "uptime_seconds": uptime,
        "model": settings.gemini_model,
        "rate_limit": {
            "max_requests": settings.rate_limit_max_requests,
            "window_seconds": settings.rate_limit_window_seconds,
        },
        "timestamp_utc": now.isoformat(),
    }


@app.get("/api/examples", response_model=list[ExampleText])
def list_examples():
    return EXAMPLES


@app.post(
    "/api/classify",
    response_model=ClassificationResult,
    responses={
        code: {"model": ErrorResponse}
        for code in (400, 413, 429, 500, 503, 504)
    },
)
async def classify(
    request: Request,
    settings: Settings = Depends(get_app_settings),
    limiter: RateLimiter = Depends(get_rate_limiter),
    classifier: TextClassifier = Depends(get_classifier),
):
    client_id = request.client.host if request.client else "unknown"
    text_length = None

    try:
        # 1) Rate limit (check + incremento sem await no meio)
        if not limiter.check_and_consume(client_id):
            raise RateLimited(f"client {client_id} acima de {limiter.max_requests}/{limiter.window_seconds}s")

        # 2) Validação
        try:
            body = await request.json()
        except (ValueError, RecursionError) as e:
            raise InvalidInput("corpo não é JSON válido") from e
        text = validate_request(body, max_length=settings.max_text_length)
        text_length = len(text)

        # 3) Prompt + chamada ao LLM + parse
        result = await classifier.classify(text)

    except ClassificationError as e:
        logger.warning(
            "Classificação rejeitada",
            extra={
                "kind": type(e).__name__,
                "status_code": e.status_code,
                "detail": e.detail,
                "client_id": client_id,
                "text_length": text_length,
            },
        )
        raise
    except Exception as e:
        # stacktrace só no log; cliente recebe mensagem genérica
        logger.exception(
            "Erro inesperado no /api/classify",
            extra={"client_id": client_id, "text_length": text_length},
        )
        raise InternalUnexpected() from e

    # 4) Log do request (metadados seguros, sem o texto)
    logger.info(
        "Classificação realizada",
        extra={
            "text_length": text_length,
            "sentimento": result.sentimento,
            "tonalidade": result.tonalidade,
            "intencao": result.intencao,
        },
    )
    return result
