"""Type definitions for bounded integer input validation."""

from dataclasses import dataclass
from enum import Enum, auto

# Representable integer range (signed 32-bit)
INT_MIN = -2 ** 31
INT_MAX = 2 ** 31 - 1


class InvalidBoundsError(ValueError):
    """Raised when a bounded integer field is constructed with unusable bounds."""


class EditClassification(Enum):
    """Outcome of parsing proposed field text against the field bounds.

    - VALID: parses to an integer within [min, max]
    - OUT_OF_RANGE: parses to an integer outside [min, max]
    - MALFORMED: does not parse (includes "" and a lone "-")
    """
    VALID = auto()
    OUT_OF_RANGE = auto()
    MALFORMED = auto()


@dataclass
class EditResult:
    """Result of a single edit applied to a BoundedIntegerModel.

    Args:
        classification: How the proposed text classified.
        value: Parsed integer, or ``None`` when the text is malformed.
        accepted: ``True`` if the text became the displayed text.
        committed: ``True`` if the committed value changed.
    """

    classification: EditClassification
    value: int | None
    accepted: bool
    committed: bool = False
