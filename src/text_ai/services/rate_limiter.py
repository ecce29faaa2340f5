from limits import RateLimitItemPerSecond
from limits.storage import MemoryStorage
from limits.strategies import FixedWindowRateLimiter


class RateLimiter:
    """
    Limite de requisições por cliente (IP) em janela fixa, em memória.

    - Primeira requisição (ou janela expirada): abre nova janela com contagem 1.
    - Dentro da janela: permite enquanto contagem < max_requests.
    - Janela fixa, não sliding log: na virada da janela pode admitir até 2x a taxa nominal.

    O storage do `limits` é protegido por lock e expira chaves antigas em background.
    """

    def __init__(self, max_requests: int = 15, window_seconds: int = 60):
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self._item = RateLimitItemPerSecond(max_requests, window_seconds)
        self._storage = MemoryStorage()
        self._strategy = FixedWindowRateLimiter(self._storage)

    def check_and_consume(self, client_id: str) -> bool:
        """Consome uma requisição da janela do cliente; False se o limite estourou."""
        return self._strategy.hit(self._item, "classify", client_id)

    def reset(self) -> None:
        self._storage.reset()
