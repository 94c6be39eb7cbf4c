"""Strokeport - Export freeform stroke content as portable vector documents.

Strokeport takes a collection of drawing strokes (brush strokes, shapes, bitmap
and vector images) together with an optional background, computes their
aggregate bounds and renders them into a self-contained SVG document that is
suitable for clipboard transfer, printing and file export.

Example:
    $ strokeport export selection.json --optimize-printing

This will create selection.svg with every vector stroke reduced to its darkest
color, except for strokes that sit inside an image.
"""

__version__ = "0.1.0"
__author__ = "Dimosthenis Kaponis"

__all__ = ["__author__", "__version__"]
