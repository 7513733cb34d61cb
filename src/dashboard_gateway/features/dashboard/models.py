"""Dashboard aggregation result."""
from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import Field

from ...models import BaseSchema
from ..github.models import GitHubProfile
from ..quotes.models import QuoteOutcome
from ..weather.models import WeatherReport


class SectionFailure(BaseSchema):
    """A dashboard section that could not be built."""

    section: str
    provider: str
    cause: str


class DashboardResult(BaseSchema):
    """Combined dashboard payload; failed sections are null."""

    weather: Optional[WeatherReport] = None
    github: Optional[GitHubProfile] = None
    news: Optional[Dict[str, Any]] = None
    stocks: Optional[List[QuoteOutcome]] = None
    failures: List[SectionFailure] = Field(default_factory=list)
    timestamp: datetime
