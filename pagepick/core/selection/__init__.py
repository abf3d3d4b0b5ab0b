"""Page selection management."""

from .selection_store import SelectionStore

__all__ = ["SelectionStore"]
