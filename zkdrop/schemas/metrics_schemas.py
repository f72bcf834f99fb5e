"""Metrics response schemas.

Endpoints:
    GET    {api}/metrics/disk  - Server storage usage (public)
"""

from zkdrop.schemas.common import ApiModel


class DiskMetricsResponse(ApiModel):
    """Storage usage in bytes."""

    allocated: int
    available: int
