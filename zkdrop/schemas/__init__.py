"""Wire schemas for the transfer API.

Usage:
    from zkdrop.schemas.auth_schemas import LoginRequest
    from zkdrop.schemas.common import ErrorResponse
"""
