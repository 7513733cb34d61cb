"""
Base models for aggregation results and API payloads.

Results are frozen once built so cached values can be shared by every
concurrent reader. Fields serialize in camelCase.
"""
from datetime import datetime, timezone
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from ..core.exceptions import GatewayError


def utc_now() -> datetime:
    """Get current UTC datetime."""
    return datetime.now(timezone.utc)


class BaseSchema(BaseModel):
    """Base schema with common configuration."""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )


class UpstreamFailure(BaseSchema):
    """A failed sub-fetch embedded in an otherwise successful result."""

    provider: str
    cause: str

    @classmethod
    def from_error(cls, error: GatewayError) -> "UpstreamFailure":
        """Build a failure marker from a raised gateway error."""
        return cls(provider=getattr(error, "provider", "unknown"), cause=error.message)
