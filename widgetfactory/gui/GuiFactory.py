"""
GuiFactory provides pre-configured widgets for the desktop client.
"""
import tkinter as tk
from typing import Dict, Optional
from widgetfactory import WidgetConfig
from widgetfactory.gui.BoundedIntegerField import BoundedIntegerField
from widgetfactory.gui.FlowPanel import FlowPanel
from widgetfactory.gui.ReadOnlyTextField import ReadOnlyTextField


class GuiFactory:
    """Factory for creating GUI components with consistent configuration."""

    @staticmethod
    def create_integer_field(
        parent: tk.Widget,
        minimum: int,
        maximum: int,
        strict: bool = False,
        config: Optional[Dict] = None,
        **kwargs
    ) -> BoundedIntegerField:
        """
        Creates integer entry restricted to [minimum, maximum].

        Args:
            parent: Parent widget
            minimum: Inclusive lower bound
            maximum: Inclusive upper bound
            strict: Reject invalid keystrokes instead of displaying them
            config: Optional configuration dictionary (see WidgetConfig)
            **kwargs: Additional arguments passed to BoundedIntegerField

        Returns:
            Configured BoundedIntegerField

        Raises:
            InvalidBoundsError: If minimum > maximum
        """
        settings = WidgetConfig.section(config, 'integer_field')

        columns_key = 'strict_columns' if strict else 'lenient_columns'
        kwargs.setdefault('columns', settings[columns_key])
        kwargs.setdefault('bell_on_reject', settings['bell_on_reject'])
        kwargs.setdefault('revert_on_focus_out', settings['revert_on_focus_out'])

        return BoundedIntegerField(parent, minimum, maximum, strict=strict, **kwargs)

    @staticmethod
    def create_flow_panel(
        parent: tk.Widget,
        horizontal_gap: int,
        vertical_gap: Optional[int] = None,
        config: Optional[Dict] = None,
        **kwargs
    ) -> FlowPanel:
        """
        Creates panel flowing children left to right, aligned on baseline.

        Args:
            parent: Parent widget
            horizontal_gap: Pixels between children
            vertical_gap: Pixels between rows (config default when None)
            config: Optional configuration dictionary
            **kwargs: Additional arguments passed to FlowPanel

        Returns:
            Configured FlowPanel
        """
        if vertical_gap is None:
            vertical_gap = WidgetConfig.section(config, 'flow_panel')['vertical_gap']

        return FlowPanel(parent, horizontal_gap, vertical_gap=vertical_gap, **kwargs)

    @staticmethod
    def create_non_editable_text_field(parent: tk.Widget, **kwargs) -> ReadOnlyTextField:
        """
        Creates empty text field that only the program can change.

        Args:
            parent: Parent widget
            **kwargs: Additional arguments passed to ttk.Entry

        Returns:
            Configured ReadOnlyTextField
        """
        return ReadOnlyTextField(parent, **kwargs)
