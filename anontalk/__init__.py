"""Anonymous chat rooms: room models, client broadcast and a room request handler."""

__version__ = "0.1.0"
__all__ = ["__version__"]