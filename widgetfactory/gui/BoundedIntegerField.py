import tkinter as tk
from tkinter import ttk
from typing import Callable, Optional
from widgetfactory.BoundedIntegerModel import BoundedIntegerModel
from widgetfactory.types import EditResult


class BoundedIntegerField(ttk.Entry):
    """
    Entry widget accepting integers within [minimum, maximum].
    Every keystroke is validated by BoundedIntegerModel through Tk key
    validation; the model decides whether the text is displayed and
    whether it commits.

    Attributes:
        model: BoundedIntegerModel holding text and committed value
        bell_on_reject: Ring the bell when strict mode rejects a keystroke
    """

    def __init__(
        self,
        parent: tk.Widget,
        minimum: int,
        maximum: int,
        strict: bool = False,
        columns: Optional[int] = None,
        bell_on_reject: bool = True,
        revert_on_focus_out: bool = True,
        **kwargs
    ):
        """
        Initialize BoundedIntegerField.

        Args:
            parent: Parent tkinter widget
            minimum: Inclusive lower bound
            maximum: Inclusive upper bound
            strict: Reject invalid keystrokes instead of displaying them
            columns: Entry width in characters (Tk default when None)
            bell_on_reject: Ring the bell on rejected keystrokes
            revert_on_focus_out: Restore committed text when focus leaves
            **kwargs: Additional arguments passed to ttk.Entry

        Raises:
            InvalidBoundsError: If minimum > maximum
        """
        # Validate bounds before any Tk resource is allocated
        self.model = BoundedIntegerModel(minimum, maximum, strict)

        if columns is not None:
            kwargs['width'] = columns
        super().__init__(parent, **kwargs)

        self.bell_on_reject = bell_on_reject

        self.configure(
            validate='key',
            validatecommand=(self.register(self._on_validate), '%P'),
            invalidcommand=(self.register(self._on_invalid),)
        )

        if revert_on_focus_out:
            self.bind('<FocusOut>', self._on_focus_out, add='+')
        self.bind('<Escape>', self._on_escape, add='+')

    def current_value(self) -> Optional[int]:
        """Returns:
            Committed value, or None before the first valid edit
        """
        return self.model.current_value()

    def displayed_text(self) -> str:
        """Returns:
            Text currently shown in the field
        """
        return self.model.displayed_text()

    def set_value(self, value: int) -> EditResult:
        """
        Set the field programmatically through the edit contract.

        Args:
            value: Integer to display and commit

        Returns:
            EditResult from the model
        """
        result = self.model.set_value(value)
        self._show(self.model.displayed_text())
        return result

    def revert(self) -> None:
        """Discard uncommitted text and show the committed value."""
        self._show(self.model.revert())

    def add_commit_listener(self, listener: Callable[[Optional[int], int], None]) -> None:
        """
        Args:
            listener: Callable that receives (old_value, new_value) on commit
        """
        self.model.add_commit_listener(listener)

    def _on_validate(self, proposed: str) -> bool:
        """
        Tk key validation callback.

        Args:
            proposed: Text the entry would contain if the edit is allowed (%P)

        Returns:
            True to let Tk apply the edit
        """
        return self.model.edit(proposed).accepted

    def _on_invalid(self) -> None:
        """Feedback for a keystroke rejected by strict validation."""
        if self.bell_on_reject:
            self.bell()

    def _on_focus_out(self, event: tk.Event) -> None:
        self.revert()

    def _on_escape(self, event: tk.Event) -> str:
        self.revert()
        return 'break'

    def _show(self, text: str) -> None:
        """
        Replace entry text without running key validation.

        Args:
            text: Text already accepted by the model
        """
        self.configure(validate='none')
        try:
            self.delete(0, tk.END)
            self.insert(0, text)
        finally:
            self.configure(validate='key')
