from .layouts import base_layout
from .draw import draw_family

__all__ = [
    "base_layout",
    "draw_family",
]
