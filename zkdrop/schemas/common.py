"""Common Pydantic schemas shared by every endpoint.

The API speaks camelCase JSON. ApiModel maps snake_case fields to camelCase
aliases; payloads are dumped by alias and responses are validated by alias
or field name.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """Base model for request and response bodies."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class EmptyResponse(ApiModel):
    """Acknowledgement body for endpoints that return no data."""

    pass


class ErrorResponse(ApiModel):
    """Generic error envelope returned for every non-2xx response.

    Attributes:
        error_code: Endpoint-specific integer code. 0 means unknown.
    """

    error_code: int = Field(
        default=0,
        description="Endpoint-specific error code (0 = unknown error)",
    )

    model_config = ConfigDict(
        json_schema_extra={"example": {"errorCode": 2}},
    )
