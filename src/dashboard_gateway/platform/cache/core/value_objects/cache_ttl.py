"""Cache TTL value object.

ONLY TTL handling - time-to-live value object measured against the
store's monotonic clock.

Following maximum separation architecture - one file = one purpose.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class CacheTTL:
    """Cache TTL (Time To Live) value object."""

    seconds: float

    FIVE_MINUTES = 300

    def __post_init__(self):
        """Validate TTL value."""
        if self.seconds <= 0:
            raise ValueError("TTL must be positive")

    @classmethod
    def default(cls) -> "CacheTTL":
        """Gateway-wide default TTL."""
        return cls(cls.FIVE_MINUTES)

    def expires_at(self, stored_at: float) -> float:
        """Absolute expiry instant for an entry stored at ``stored_at``."""
        return stored_at + self.seconds

    def is_expired(self, stored_at: float, now: float) -> bool:
        """Check if TTL has elapsed relative to the store time."""
        return now >= self.expires_at(stored_at)

    def __str__(self) -> str:
        """Human-readable string representation."""
        if self.seconds < 60:
            return f"{self.seconds:g}s"
        return f"{self.seconds / 60:g}m"
