"""
In-memory token map.

Records live for the lifetime of the process only. Reads and writes go
through an asyncio lock, since every request handler shares the same map.
"""

import asyncio
from functools import lru_cache

from token_registry.schemas.token import TokenRecord


class TokenStore:
    """Concurrency-safe mapping of token id -> TokenRecord."""

    def __init__(self) -> None:
        self._tokens: dict[str, TokenRecord] = {}
        self._lock = asyncio.Lock()

    async def get(self, token_id: str) -> TokenRecord | None:
        async with self._lock:
            return self._tokens.get(token_id)

    async def put(self, token: TokenRecord) -> TokenRecord | None:
        """
        Store ``token`` under its own id, replacing any existing record.

        Returns:
            The record that was replaced, or None
        """
        async with self._lock:
            previous = self._tokens.get(token.id)
            self._tokens[token.id] = token
            return previous

    def __len__(self) -> int:
        """Number of stored tokens. Lock-free; a single dict length read."""
        return len(self._tokens)


@lru_cache
def get_token_store() -> TokenStore:
    """Process-wide token store, used as a FastAPI dependency."""
    return TokenStore()
