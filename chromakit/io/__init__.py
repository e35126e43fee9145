"""Collaborator boundary: hex strings and external pixel values.

    - hexcodec: "#rgb", "#rgba", "#rrggbb", "#rrggbbaa" ↔ Color
    - pixel: Pillow pixel values (8/16-bit, straight or premultiplied alpha) ↔ Color
"""

from . import hexcodec, pixel

__all__ = ['hexcodec', 'pixel']
