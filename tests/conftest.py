import pytest

from text_ai.services.llm import UpstreamReply

RESPOSTA_OK = '{"sentimento":"Neutro","tonalidade":"Formal","intencao":"Profissional"}'


class FakeUpstream:
    """Provedor falso: registra prompts recebidos e devolve o resultado configurado."""

    def __init__(self, result=None):
        self.result = result if result is not None else UpstreamReply(text=RESPOSTA_OK)
        self.prompts: list[str] = []

    async def classify(self, prompt: str):
        self.prompts.append(prompt)
        if isinstance(self.result, Exception):
            raise self.result
        return self.result


@pytest.fixture
def upstream():
    return FakeUpstream()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    # Isola os testes de variáveis vindas do ambiente/.env
    for name in (
        "GEMINI_MODEL",
        "GEMINI_TIMEOUT_SECONDS",
        "CLASSIFIER_MAX_TEXT_LENGTH",
        "RATE_LIMIT_MAX_REQUESTS",
        "RATE_LIMIT_WINDOW_SECONDS",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("GOOGLE_API_KEY", "test-key")
