"""
Address value object.
"""

from dataclasses import dataclass

UNKNOWN_REGION = "Unknown"


@dataclass(frozen=True)
class Address:
    """Job site address.

    The ZIP code doubles as a coarse proximity key when ordering stops,
    so it is the only location field besides the street that must be present.
    """

    street: str
    city: str
    state: str
    zip_code: str

    def __post_init__(self):
        """Validate and normalize address fields."""
        if not self.street or not self.street.strip():
            raise ValueError("Street is required")
        if not self.zip_code or not self.zip_code.strip():
            raise ValueError("ZIP code is required")
        if self.state and len(self.state.strip()) != 2:
            raise ValueError("State must be 2 characters")

        # frozen dataclass, so normalize through object.__setattr__
        object.__setattr__(self, "zip_code", self.zip_code.strip())
        object.__setattr__(self, "city", (self.city or "").strip())
        object.__setattr__(self, "state", (self.state or "").strip().upper())

    @property
    def region(self) -> str:
        """State code used for grouping, ``Unknown`` when missing."""
        return self.state or UNKNOWN_REGION

    @property
    def locality(self) -> str:
        """City used for grouping, ``Unknown`` when missing."""
        return self.city or UNKNOWN_REGION

    @property
    def full_address(self) -> str:
        """Get formatted full address."""
        return f"{self.street}, {self.city}, {self.state} {self.zip_code}"

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "street": self.street,
            "city": self.city,
            "state": self.state,
            "zip_code": self.zip_code,
        }
