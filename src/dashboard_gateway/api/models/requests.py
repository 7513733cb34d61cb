"""Request bodies."""
from typing import Any, Optional

from pydantic import BaseModel


class BatchQuotesRequest(BaseModel):
    """Body of POST /api/stocks/batch.

    ``symbols`` is left untyped so a missing or malformed list reaches the
    gateway's own validation and gets its error category.
    """

    symbols: Optional[Any] = None
