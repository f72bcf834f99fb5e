"""Application services.

Usage:
    from zkdrop.application.services import AuthenticationService
"""

from zkdrop.application.services.authentication_service import (
    AuthenticationService,
    UserSession,
)
from zkdrop.application.services.user_availability_service import (
    UserAvailabilityService,
)

__all__ = ["AuthenticationService", "UserAvailabilityService", "UserSession"]
