"""Grid maps, player movement, pixel images, XPM loading and text helpers."""

__version__ = "0.1.0"

__all__ = [
    "colors",
    "images",
    "linereader",
    "movement",
    "player",
    "printf",
    "textutil",
    "worldmap",
    "xpm",
]