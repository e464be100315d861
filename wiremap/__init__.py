"""Height maps, rotation matrices, line drawing, and an in-memory display, image and XPM toolkit."""

__version__ = "0.1.0"

__all__ = [
    "colors",
    "controls",
    "display",
    "image",
    "mapfile",
    "render",
    "rotation",
    "text",
    "xpm",
]