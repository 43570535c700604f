# widgetfactory/__init__.py
from .types import EditClassification, EditResult, InvalidBoundsError
from .BoundedIntegerModel import BoundedIntegerModel
from .LoggingSetup import configure_logging

__all__ = [
    'BoundedIntegerModel',
    'EditClassification',
    'EditResult',
    'InvalidBoundsError',
    'configure_logging'
]
