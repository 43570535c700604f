import tkinter as tk
from tkinter import ttk


class ReadOnlyTextField(ttk.Entry):
    """Single-line text display the user cannot edit.
    Content is driven through a StringVar, which readonly entries
    still reflect, so the owner can set it programmatically.
    """

    def __init__(self, parent: tk.Widget, **kwargs):
        """
        Args:
            parent: Parent tkinter widget
            **kwargs: Additional arguments passed to ttk.Entry
        """
        self.text_var = tk.StringVar(master=parent, value="")
        super().__init__(parent, textvariable=self.text_var, **kwargs)
        self.state(['readonly'])

    def set_text(self, text: str) -> None:
        self.text_var.set(text)

    def get_text(self) -> str:
        return self.text_var.get()
