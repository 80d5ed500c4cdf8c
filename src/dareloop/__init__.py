"""dareloop - turn-based dare party game engine."""

__version__ = "0.1.0"
