"""Token storage adapters."""

from zkdrop.infrastructure.persistence.file_token_repository import FileTokenRepository
from zkdrop.infrastructure.persistence.memory_token_repository import (
    InMemoryTokenRepository,
)

__all__ = ["FileTokenRepository", "InMemoryTokenRepository"]
