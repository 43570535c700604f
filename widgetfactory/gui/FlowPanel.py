import logging
import tkinter as tk
from tkinter import font as tkfont
from tkinter import ttk
from typing import Callable, List, Optional
from widgetfactory.gui import FlowLayout

logger = logging.getLogger(__name__)


def estimate_baseline(widget: tk.Widget, height: int) -> Optional[int]:
    """
    Estimate the text baseline of a widget from its font metrics.

    Text is assumed vertically centred in the widget.

    Args:
        widget: Child widget
        height: Height the widget will be given

    Returns:
        Baseline offset from the widget top, or None if the widget has no font
    """
    try:
        font_spec = str(widget.cget('font'))
    except tk.TclError:
        return None

    if not font_spec:
        if isinstance(widget, (tk.Entry, ttk.Entry)):
            font_spec = 'TkTextFont'
        else:
            font_spec = 'TkDefaultFont'

    try:
        font = tkfont.Font(root=widget, font=font_spec)
        ascent = font.metrics('ascent')
        linespace = font.metrics('linespace')
    except tk.TclError as e:
        logger.debug("FlowPanel: no baseline for %s: %s", widget, e)
        return None

    return (height - linespace) // 2 + ascent


class FlowPanel(ttk.Frame):
    """
    Frame arranging its children in left-to-right rows that wrap at the
    frame width, with children aligned on their text baselines.
    Children must be created with this panel as parent and registered
    via add(); they are positioned with place().

    Attributes:
        horizontal_gap: Pixels between children and at the leading edge
        vertical_gap: Pixels between rows and at the top
    """

    def __init__(
        self,
        parent: tk.Widget,
        horizontal_gap: int,
        vertical_gap: int = FlowLayout.DEFAULT_VERTICAL_GAP,
        baseline_provider: Callable[[tk.Widget, int], Optional[int]] = estimate_baseline,
        **kwargs
    ):
        """
        Initialize FlowPanel.

        Args:
            parent: Parent tkinter widget
            horizontal_gap: Horizontal gap in pixels
            vertical_gap: Vertical gap in pixels
            baseline_provider: Returns a child's baseline offset or None
            **kwargs: Additional arguments passed to ttk.Frame
        """
        super().__init__(parent, **kwargs)

        self.horizontal_gap = horizontal_gap
        self.vertical_gap = vertical_gap
        self._baseline_provider = baseline_provider
        self._flow_children: List[tk.Widget] = []

        self.bind('<Configure>', self._on_configure, add='+')

    def add(self, widget: tk.Widget) -> tk.Widget:
        """
        Append a child to the flow.

        Args:
            widget: Widget whose master is this panel

        Returns:
            The widget, for chaining
        """
        if widget.master is not self:
            raise ValueError(f"{widget} is not a child of this panel")

        self._flow_children.append(widget)
        self.relayout()
        return widget

    def flow_children(self) -> List[tk.Widget]:
        """Returns:
            Children in flow order
        """
        return list(self._flow_children)

    def relayout(self, width: Optional[int] = None) -> None:
        """
        Position all children for the given width.

        Args:
            width: Available width; current frame width when None
        """
        # Drop children destroyed since the last layout
        self._flow_children = [c for c in self._flow_children if c.winfo_exists()]

        if width is None:
            width = self.winfo_width() if self.winfo_ismapped() else 0

        sizes = [(c.winfo_reqwidth(), c.winfo_reqheight()) for c in self._flow_children]
        baselines = [
            self._baseline_provider(child, height)
            for child, (_, height) in zip(self._flow_children, sizes)
        ]

        positions, (_, required_height) = FlowLayout.layout(
            sizes, baselines, width, self.horizontal_gap, self.vertical_gap
        )
        for child, (x, y) in zip(self._flow_children, positions):
            child.place(x=x, y=y)

        preferred_width, _ = FlowLayout.preferred_size(
            sizes, baselines, self.horizontal_gap, self.vertical_gap
        )
        self._request_size(preferred_width, required_height)

    def _request_size(self, width: int, height: int) -> None:
        """Request single-row width and the height needed at the current width."""
        # Only reconfigure on change to avoid <Configure> feedback loops
        if int(str(self.cget('width')) or 0) != width:
            self.configure(width=width)
        if int(str(self.cget('height')) or 0) != height:
            self.configure(height=height)

    def _on_configure(self, event: tk.Event) -> None:
        self.relayout(event.width)
