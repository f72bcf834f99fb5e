from zkdrop.infrastructure.http.http_service import HttpxHttpService

__all__ = ["HttpxHttpService"]
