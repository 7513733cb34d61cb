"""Quote results."""
from typing import Any, Dict, Literal, Optional

from ...models import BaseSchema, UpstreamFailure


class QuoteOutcome(BaseSchema):
    """Per-symbol entry of a batch quote result."""

    symbol: str
    status: Literal["ok", "failed"]
    data: Optional[Dict[str, Any]] = None
    failure: Optional[UpstreamFailure] = None

    @property
    def succeeded(self) -> bool:
        return self.status == "ok"
