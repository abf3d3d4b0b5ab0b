"""
Page selection state.
"""

from typing import FrozenSet, Iterable, List, Set

from PyQt5.QtCore import QObject, pyqtSignal


class SelectionStore(QObject):
    """
    Tracks which pages of the current document are marked for extraction.

    The set is membership only. Consumers that need an order use
    ``sorted_pages``, which is always ascending regardless of toggle order.
    """

    # Signals
    selection_changed = pyqtSignal(int)  # number of selected pages

    def __init__(self, parent=None):
        super().__init__(parent)
        self._pages: Set[int] = set()

    # ===== Mutations =====

    def reset(self) -> None:
        """Clear the selection for a newly loaded document."""
        self._pages.clear()
        self.selection_changed.emit(0)

    def toggle(self, page_number: int) -> bool:
        """
        Flip the selection state of one page.

        Args:
            page_number: 1-based page number within the loaded document

        Returns:
            True if the page is selected afterwards
        """
        if page_number in self._pages:
            self._pages.discard(page_number)
            selected = False
        else:
            self._pages.add(page_number)
            selected = True

        self.selection_changed.emit(len(self._pages))
        return selected

    def select_all(self, page_count: int) -> None:
        """Select every page from 1 to page_count."""
        self._replace(range(1, page_count + 1))

    def deselect_all(self) -> None:
        self._replace(())

    def _replace(self, pages: Iterable[int]) -> None:
        new_pages = set(pages)
        if new_pages == self._pages:
            return
        self._pages = new_pages
        self.selection_changed.emit(len(self._pages))

    # ===== Queries =====

    def is_selected(self, page_number: int) -> bool:
        return page_number in self._pages

    def is_empty(self) -> bool:
        return not self._pages

    @property
    def pages(self) -> FrozenSet[int]:
        """Snapshot of the selected page numbers."""
        return frozenset(self._pages)

    @property
    def sorted_pages(self) -> List[int]:
        """Selected page numbers in ascending order."""
        return sorted(self._pages)

    def __contains__(self, page_number) -> bool:
        return page_number in self._pages

    def __len__(self) -> int:
        return len(self._pages)

    def __iter__(self):
        return iter(self.sorted_pages)
