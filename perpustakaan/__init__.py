"""Library loan management with priority queues and undo, plus the list, queue and stack containers it uses."""

__version__ = "0.1.0"
__all__ = ["containers", "intlist", "library", "linked", "menu"]