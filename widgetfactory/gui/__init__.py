"""GUI subsystem - tkinter widgets and their factory."""
from widgetfactory.gui.BoundedIntegerField import BoundedIntegerField
from widgetfactory.gui.FlowPanel import FlowPanel
from widgetfactory.gui.ReadOnlyTextField import ReadOnlyTextField
from widgetfactory.gui.GuiFactory import GuiFactory

__all__ = ['BoundedIntegerField', 'FlowPanel', 'ReadOnlyTextField', 'GuiFactory']
