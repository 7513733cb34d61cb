"""Per-route error categories and the documented error responses."""
from contextlib import contextmanager
from typing import Any, Dict, Iterator

from ..core.exceptions import UpstreamError
from .models import ErrorResponse

ERROR_RESPONSES: Dict[int, Dict[str, Any]] = {
    400: {"model": ErrorResponse, "description": "Invalid input"},
    500: {"model": ErrorResponse, "description": "Upstream or internal failure"},
}


@contextmanager
def error_category(category: str) -> Iterator[None]:
    """Label upstream failures raised inside the block with a route's category.

    Validation errors keep their own category.
    """
    try:
        yield
    except UpstreamError as e:
        e.category = category
        raise
