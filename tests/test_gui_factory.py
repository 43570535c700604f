"""
Tests for GuiFactory - pre-configured widget construction.
"""
import pytest
from widgetfactory.types import InvalidBoundsError

try:
    import tkinter as tk
    from tkinter import ttk
    from widgetfactory.gui.GuiFactory import GuiFactory
    from widgetfactory.gui.BoundedIntegerField import BoundedIntegerField
    from widgetfactory.gui.FlowPanel import FlowPanel
    from widgetfactory.gui.ReadOnlyTextField import ReadOnlyTextField
except ImportError:
    pass

pytestmark = pytest.mark.gui


class TestGuiFactory:
    """Test suite for GuiFactory functionality."""

    def test_create_lenient_integer_field(self, root):
        field = GuiFactory.create_integer_field(root, 1, 65535)

        assert isinstance(field, BoundedIntegerField)
        assert not field.model.strict
        assert field.model.minimum == 1
        assert field.model.maximum == 65535

    def test_create_strict_integer_field_has_four_columns(self, root):
        field = GuiFactory.create_integer_field(root, 0, 9999, strict=True)

        assert field.model.strict
        assert int(str(field.cget('width'))) == 4

    def test_integer_field_uses_config(self, root, config):
        config['integer_field']['strict_columns'] = 7

        field = GuiFactory.create_integer_field(root, 0, 10, strict=True, config=config)

        assert int(str(field.cget('width'))) == 7
        assert field.bell_on_reject is False

    def test_explicit_kwargs_override_config(self, root, config):
        field = GuiFactory.create_integer_field(root, 0, 10, strict=True, config=config, columns=2)

        assert int(str(field.cget('width'))) == 2

    def test_integer_field_invalid_bounds(self, root):
        with pytest.raises(InvalidBoundsError):
            GuiFactory.create_integer_field(root, 5, 4)

    def test_create_flow_panel(self, root):
        panel = GuiFactory.create_flow_panel(root, 12)

        assert isinstance(panel, FlowPanel)
        assert isinstance(panel, ttk.Frame)
        assert panel.horizontal_gap == 12
        assert panel.vertical_gap == 8

    def test_flow_panel_vertical_gap_from_config(self, root, config):
        config['flow_panel']['vertical_gap'] = 3

        panel = GuiFactory.create_flow_panel(root, 12, config=config)

        assert panel.vertical_gap == 3

    def test_create_non_editable_text_field(self, root):
        field = GuiFactory.create_non_editable_text_field(root)

        assert isinstance(field, ReadOnlyTextField)
        assert field.get_text() == ""
        assert field.instate(['readonly'])
