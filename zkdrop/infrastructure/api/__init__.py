"""Transfer API client.

Usage:
    from zkdrop.infrastructure.api import ZkDropApiService
"""

from zkdrop.infrastructure.api.api_service import ZkDropApiService
from zkdrop.infrastructure.api.authentication_middleware import (
    AuthenticationMiddleware,
)
from zkdrop.infrastructure.api.error_projection import extract_error_code

__all__ = ["AuthenticationMiddleware", "ZkDropApiService", "extract_error_code"]
