# tests/conftest.py
import pytest

try:
    import tkinter as tk
    TKINTER_AVAILABLE = True
except ImportError:
    TKINTER_AVAILABLE = False


@pytest.fixture
def root():
    """Provide a withdrawn Tk root, skipping when no display is available.

    Yields:
        tk.Tk: Root window, destroyed after the test
    """
    if not TKINTER_AVAILABLE:
        pytest.skip("tkinter not available")

    try:
        root = tk.Tk()
    except tk.TclError as e:
        pytest.skip(f"tkinter initialization failed: {e}")

    root.withdraw()
    yield root
    try:
        root.destroy()
    except tk.TclError:
        pass


@pytest.fixture
def config():
    """Provide widget configuration matching config/widgets_config.json.

    Returns:
        Dict: Configuration dictionary
    """
    return {
        'integer_field': {
            'strict_columns': 4,
            'lenient_columns': None,
            'bell_on_reject': False,
            'revert_on_focus_out': True
        },
        'flow_panel': {
            'vertical_gap': 8
        }
    }
