"""Error-code projection from the generic envelope to endpoint enums.

Every endpoint receives ``Result[Response, ErrorResponse]`` from the
transport and hands ``Result[Response, EndpointError]`` to its caller.
The integer code is reinterpreted, not validated: the server is trusted to
send codes that belong to the endpoint. A code the enum does not define
becomes ``UNKNOWN_ERROR`` (see ApiErrorCode._missing_).
"""

from zkdrop.core.result import Failure, Result, Success
from zkdrop.domain.enums import ApiErrorCode
from zkdrop.schemas.common import ErrorResponse


def extract_error_code[T, E: ApiErrorCode](
    result: Result[T, ErrorResponse],
    error_enum: type[E],
) -> Result[T, E]:
    """Project a transport result onto an endpoint's error enum.

    Args:
        result: Result decoded by the transport.
        error_enum: Endpoint error enum (e.g. LoginError).

    Returns:
        Success unchanged, or Failure(error_enum(code)).

    Example:
        >>> extract_error_code(Failure(error=ErrorResponse(error_code=2)), LoginError)
        Failure(error=<LoginError.INVALID_PASSWORD: 2>)
    """
    match result:
        case Success():
            return result
        case Failure(error=envelope):
            return Failure(error=error_enum(envelope.error_code))
