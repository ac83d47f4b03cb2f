"""
Postcode value object.
"""

import re
from dataclasses import dataclass

_WHITESPACE = re.compile(r"\s+")


@dataclass(frozen=True)
class Postcode:
    """UK-style postcode, normalised to upper case with a single space."""

    value: str

    def __post_init__(self):
        """Validate and normalise the postcode."""
        if not self.value or not self.value.strip():
            raise ValueError("Postcode is required")

        compact = _WHITESPACE.sub("", self.value).upper()
        if len(compact) > 4:
            # Inward code is always the last three characters
            normalised = f"{compact[:-3]} {compact[-3:]}"
        else:
            normalised = compact
        object.__setattr__(self, "value", normalised)

    @property
    def outward_code(self) -> str:
        """Postal district, e.g. ``SW1A`` for ``SW1A 1AA``."""
        return self.value.split(" ")[0]

    def __str__(self) -> str:
        return self.value
