"""Field descriptors bound by the rendering layer."""

from .descriptor import native_descriptor
from .field import Field

__all__ = [
    "Field",
    "native_descriptor",
]
