"""Library members and the items they have on loan."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import TextIO

from librarykeeper.items import LibraryError, LibraryItem


@dataclass(eq=False)
class User:
    """A registered library member."""

    user_id: str
    name: str
    _borrowed: list[LibraryItem] = field(default_factory=list, init=False, repr=False)

    @property
    def borrowed_items(self) -> tuple[LibraryItem, ...]:
        """Items currently on loan to this user, oldest first."""
        return tuple(self._borrowed)

    def borrow_item(self, item: LibraryItem) -> None:
        """Lend ``item`` to this user."""
        item.mark_borrowed()
        self._borrowed.append(item)

    def return_item(self, item: LibraryItem) -> None:
        """Take ``item`` back from this user."""
        try:
            self._borrowed.remove(item)
        except ValueError:
            raise LibraryError("User did not borrow this item") from None
        item.mark_returned()

    def display_borrowed_items(self, file: TextIO | None = None) -> None:
        """Write the user's header and loaned items to ``file`` (stdout by default)."""
        out = file if file is not None else sys.stdout
        print(f"Borrowed items by {self.name} ({self.user_id}):", file=out)
        if not self._borrowed:
            print("  None", file=out)
            return
        for item in self._borrowed:
            item.display(out)