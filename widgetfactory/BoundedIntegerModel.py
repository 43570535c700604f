"""
BoundedIntegerModel - Validation state for a bounded integer text field.

Holds the displayed text and the committed value of an integer input
restricted to a closed range [minimum, maximum]. The model is toolkit-free:
the tkinter widget feeds every proposed text mutation into edit() and
uses the returned EditResult to accept or reject the keystroke.

Policies:
- Lenient: every proposed text is displayed; only valid text commits.
- Strict: only valid text and transient text (empty, a lone sign, or a
  prefix that more digits could still bring into range) is displayed.

Valid edits commit immediately, not on focus loss.
"""
import logging
import re
from typing import Callable, List, Optional

from widgetfactory.types import (
    INT_MAX,
    INT_MIN,
    EditClassification,
    EditResult,
    InvalidBoundsError,
)

logger = logging.getLogger(__name__)

# Plain decimal syntax: optional leading minus, ASCII digits, no grouping
_INTEGER_PATTERN = re.compile(r'-?[0-9]+')

# Digits in INT_MAX; longer literals cannot be representable
_MAX_DIGITS = len(str(INT_MAX))


class BoundedIntegerModel:
    """
    Validation policy and editable state of a bounded integer field.

    Attributes:
        minimum: Inclusive lower bound
        maximum: Inclusive upper bound
        strict: True rejects invalid edits, False displays them
        _raw_text: Currently displayed text
        _committed_value: Last committed value, None until first commit
        _commit_listeners: Observers receiving (old_value, new_value)
    """

    def __init__(self, minimum: int, maximum: int, strict: bool = False):
        """
        Initialize BoundedIntegerModel.

        Args:
            minimum: Inclusive lower bound
            maximum: Inclusive upper bound
            strict: Select strict (reject) instead of lenient (hold) policy

        Raises:
            InvalidBoundsError: If minimum > maximum or a bound is not representable
        """
        if minimum > maximum:
            raise InvalidBoundsError(
                f"Invalid bounds: minimum {minimum} > maximum {maximum}"
            )
        if minimum < INT_MIN or maximum > INT_MAX:
            raise InvalidBoundsError(
                f"Bounds [{minimum}, {maximum}] outside representable range "
                f"[{INT_MIN}, {INT_MAX}]"
            )

        self.minimum = minimum
        self.maximum = maximum
        self.strict = strict
        self._raw_text = ""
        self._committed_value: Optional[int] = None
        self._commit_listeners: List[Callable[[Optional[int], int], None]] = []

        logger.debug(
            "BoundedIntegerModel: created [%d, %d] %s",
            minimum, maximum, 'strict' if strict else 'lenient'
        )

    def current_value(self) -> Optional[int]:
        """Returns:
            Committed value, or None if nothing has been committed yet
        """
        return self._committed_value

    def displayed_text(self) -> str:
        """Returns:
            Text currently shown in the field
        """
        return self._raw_text

    def is_edit_valid(self) -> bool:
        """Returns:
            True if the displayed text is a valid in-range integer
        """
        return self.classify(self._raw_text) is EditClassification.VALID

    def parse(self, text: str) -> Optional[int]:
        """
        Parse text with plain (non-grouped) decimal syntax.

        Args:
            text: Proposed field text

        Returns:
            Parsed integer, or None if text is not a representable integer
        """
        if not _INTEGER_PATTERN.fullmatch(text):
            return None

        sign = '-' if text.startswith('-') else ''
        significant = text.lstrip('-').lstrip('0') or '0'
        if len(significant) > _MAX_DIGITS:
            return None

        value = int(sign + significant)
        if value < INT_MIN or value > INT_MAX:
            return None
        return value

    def classify(self, text: str) -> EditClassification:
        """
        Classify text against the field bounds.

        Args:
            text: Proposed field text

        Returns:
            VALID, OUT_OF_RANGE or MALFORMED
        """
        value = self.parse(text)
        if value is None:
            return EditClassification.MALFORMED
        if self.minimum <= value <= self.maximum:
            return EditClassification.VALID
        return EditClassification.OUT_OF_RANGE

    def edit(self, text: str) -> EditResult:
        """
        Apply a proposed text mutation.

        Never raises for user input; invalidity is expressed through the
        returned EditResult.

        Args:
            text: Full text the field would contain after the edit

        Returns:
            EditResult describing classification, acceptance and commit
        """
        classification = self.classify(text)
        value = self.parse(text)

        if classification is EditClassification.VALID:
            accepted = True
        elif not self.strict:
            accepted = True
        else:
            accepted = self._is_transient(text, classification)

        if not accepted:
            logger.debug("BoundedIntegerModel: rejected %.40r (%s)", text, classification.name)
            return EditResult(classification=classification, value=value, accepted=False)

        self._raw_text = text

        committed = False
        if classification is EditClassification.VALID:
            committed = self._commit(value)

        return EditResult(
            classification=classification,
            value=value,
            accepted=True,
            committed=committed
        )

    def set_value(self, value: int) -> EditResult:
        """
        Set the field programmatically through the edit contract.

        Args:
            value: Integer to display and commit

        Returns:
            EditResult of editing the field to str(value)
        """
        return self.edit(str(value))

    def revert(self) -> str:
        """
        Restore the displayed text to the committed value.

        Returns:
            Restored text ("" when nothing was ever committed)
        """
        if self._committed_value is None:
            self._raw_text = ""
        else:
            self._raw_text = str(self._committed_value)
        return self._raw_text

    def add_commit_listener(self, listener: Callable[[Optional[int], int], None]) -> None:
        """
        Args:
            listener: Callable that receives (old_value, new_value) on commit
        """
        self._commit_listeners.append(listener)

    def _commit(self, value: int) -> bool:
        """
        Adopt value as the committed value and notify listeners on change.

        Args:
            value: Valid in-range value

        Returns:
            True if the committed value changed
        """
        old_value = self._committed_value
        if old_value == value:
            return False

        self._committed_value = value
        logger.debug("BoundedIntegerModel: committed %s -> %s", old_value, value)

        for listener in self._commit_listeners:
            listener(old_value, value)
        return True

    def _is_transient(self, text: str, classification: EditClassification) -> bool:
        """
        Check whether rejected-by-default text is an in-progress state.

        Transient states: empty text, a lone minus when negatives are
        allowed, and out-of-range text that appending digits can still
        bring into [minimum, maximum].

        Args:
            text: Proposed field text
            classification: Result of classify(text)

        Returns:
            True if the text must still be displayed in strict mode
        """
        if text == "":
            return True
        if text == "-":
            return self.minimum < 0
        if classification is EditClassification.OUT_OF_RANGE:
            return self._can_reach_range(text)
        return False

    def _can_reach_range(self, text: str) -> bool:
        """
        Args:
            text: Parsable integer text

        Returns:
            True if appending one or more digits yields an in-range value
        """
        negative = text.startswith('-')
        prefix = abs(self.parse(text))
        max_digits = len(str(max(abs(self.minimum), abs(self.maximum))))

        for appended in range(1, max_digits + 1):
            scale = 10 ** appended
            low = prefix * scale
            high = low + scale - 1
            if negative:
                low, high = -high, -low
            if low <= self.maximum and high >= self.minimum:
                return True
        return False
