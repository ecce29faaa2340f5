class ClassificationError(Exception):
    """
    Erro de domínio com status HTTP e mensagem fixa, segura para o cliente.
    Detalhes internos ficam apenas nos logs.
    """
    status_code: int = 500
    message: str = "Erro interno do servidor ao classificar o texto."

    def __init__(self, detail: str | None = None):
        super().__init__(detail or self.message)
        self.detail = detail


class RateLimited(ClassificationError):
    status_code = 429
    message = "Limite de requisições excedido. Tente novamente em instantes."


class InvalidInput(ClassificationError):
    status_code = 400
    message = "Texto inválido fornecido."


class TextTooLong(ClassificationError):
    status_code = 413
    message = "O texto excede o tamanho máximo permitido."


class UpstreamUnavailable(ClassificationError):
    status_code = 503
    message = "O serviço de IA está sobrecarregado no momento. Tente novamente mais tarde."


class UpstreamBadRequest(ClassificationError):
    status_code = 400
    message = "Requisição inválida para o serviço de IA. Verifique as credenciais da API."


class UpstreamTimeout(ClassificationError):
    status_code = 504
    message = "O serviço de IA demorou demais para responder. Tente novamente."


class MalformedAIResponse(ClassificationError):
    status_code = 500
    message = "Falha ao processar a resposta da IA. O formato retornado não é um JSON válido."


class InternalUnexpected(ClassificationError):
    status_code = 500
    message = "Erro interno do servidor ao classificar o texto."
