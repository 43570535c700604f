"""
Tests for FlowPanel - baseline-aligned flowing frame.
"""
import pytest
from unittest.mock import Mock

try:
    import tkinter as tk
    from tkinter import ttk
    from widgetfactory.gui.FlowPanel import FlowPanel, estimate_baseline
except ImportError:
    pass

pytestmark = pytest.mark.gui


class TestFlowPanel:
    """Test suite for FlowPanel placement."""

    def test_children_placed_left_to_right(self, root):
        panel = FlowPanel(root, horizontal_gap=5, baseline_provider=Mock(return_value=None))
        first = panel.add(ttk.Label(panel, text="Port"))
        second = panel.add(ttk.Entry(panel))

        first_info = first.place_info()
        second_info = second.place_info()

        assert int(first_info['x']) == 5
        assert int(first_info['y']) >= 8
        assert int(second_info['x']) == 5 + first.winfo_reqwidth() + 5

    def test_requests_single_row_width(self, root):
        panel = FlowPanel(root, horizontal_gap=10, baseline_provider=Mock(return_value=None))
        label = panel.add(ttk.Label(panel, text="Address"))

        assert int(str(panel.cget('width'))) == 10 + label.winfo_reqwidth() + 10

    def test_relayout_wraps_at_given_width(self, root):
        panel = FlowPanel(root, horizontal_gap=0, vertical_gap=0,
                          baseline_provider=Mock(return_value=None))
        first = panel.add(tk.Frame(panel, width=50, height=10))
        second = panel.add(tk.Frame(panel, width=50, height=10))

        panel.relayout(60)

        assert int(second.place_info()['x']) == 0
        assert int(second.place_info()['y']) == 10
        assert int(first.place_info()['y']) == 0

    def test_rejects_foreign_child(self, root):
        panel = FlowPanel(root, horizontal_gap=5)
        stranger = ttk.Label(root, text="not mine")

        with pytest.raises(ValueError):
            panel.add(stranger)

    def test_destroyed_children_dropped(self, root):
        panel = FlowPanel(root, horizontal_gap=5)
        label = panel.add(ttk.Label(panel, text="gone"))
        label.destroy()

        panel.relayout()

        assert panel.flow_children() == []


class TestEstimateBaseline:
    """Baseline estimation from font metrics."""

    def test_frame_has_no_baseline(self, root):
        assert estimate_baseline(ttk.Frame(root), 20) is None

    def test_label_baseline_within_height(self, root):
        label = ttk.Label(root, text="Port")
        height = label.winfo_reqheight()

        baseline = estimate_baseline(label, height)

        assert baseline is not None
        assert 0 < baseline <= height
