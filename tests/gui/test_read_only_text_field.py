"""
Tests for ReadOnlyTextField - programmatically set display field.
"""
import pytest

try:
    import tkinter as tk
    from widgetfactory.gui.ReadOnlyTextField import ReadOnlyTextField
except ImportError:
    pass

pytestmark = pytest.mark.gui


def test_starts_empty(root):
    field = ReadOnlyTextField(root)

    assert field.get_text() == ""
    assert field.get() == ""


def test_is_readonly(root):
    field = ReadOnlyTextField(root)

    assert field.instate(['readonly'])


def test_text_set_programmatically(root):
    field = ReadOnlyTextField(root)

    field.set_text("192.168.0.10")

    assert field.get() == "192.168.0.10"
    assert field.get_text() == "192.168.0.10"
