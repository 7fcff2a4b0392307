"""The library catalogue: items, members, loans and the transaction log."""

from __future__ import annotations

import sys
from datetime import datetime
from os import PathLike
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, TextIO

from librarykeeper.items import Book, LibraryError, LibraryItem
from librarykeeper.user import User

DEFAULT_LOG_PATH = Path("logs") / "transactions.txt"


class LibrarySystem:
    """Holds the catalogue and registered users and records every loan."""

    def __init__(
        self,
        log_path: str | PathLike[str] = DEFAULT_LOG_PATH,
        output: TextIO | None = None,
    ) -> None:
        self.log_path = Path(log_path)
        self._output = output
        self._items: dict[str, LibraryItem] = {}
        self._users: dict[str, User] = {}

    @property
    def items(self) -> Mapping[str, LibraryItem]:
        """Read-only view of the catalogue, keyed by item id."""
        return MappingProxyType(self._items)

    @property
    def users(self) -> Mapping[str, User]:
        """Read-only view of the registered users, keyed by user id."""
        return MappingProxyType(self._users)

    @property
    def output(self) -> TextIO:
        return self._output if self._output is not None else sys.stdout

    def add_item(self, item: LibraryItem) -> None:
        """Add ``item`` to the catalogue; its id must be new."""
        if item.item_id in self._items:
            raise LibraryError("Item already exists")
        self._items[item.item_id] = item

    def add_user(self, user: User) -> None:
        """Register ``user``; the user id must be new."""
        if user.user_id in self._users:
            raise LibraryError("User already exists")
        self._users[user.user_id] = user

    def _lookup(self, user_id: str, item_id: str) -> tuple[User, LibraryItem]:
        try:
            user = self._users[user_id]
        except KeyError:
            raise LibraryError("Accessing nonexistent user") from None
        try:
            item = self._items[item_id]
        except KeyError:
            raise LibraryError("Accessing nonexistent item") from None
        return user, item

    def borrow_item(self, user_id: str, item_id: str) -> None:
        """Lend the item ``item_id`` to the user ``user_id`` and log it."""
        user, item = self._lookup(user_id, item_id)
        user.borrow_item(item)
        self.log_transaction("borrowed", user_id, item_id)

    def return_item(self, user_id: str, item_id: str) -> None:
        """Take the item ``item_id`` back from the user ``user_id`` and log it."""
        user, item = self._lookup(user_id, item_id)
        user.return_item(item)
        self.log_transaction("returned", user_id, item_id)

    def display_all_items(self, file: TextIO | None = None) -> None:
        """Write every item, ordered by id, to ``file`` (stdout by default)."""
        out = file if file is not None else sys.stdout
        if not self._items:
            print("No items in the library.", file=out)
            return
        print("Library Items:", file=out)
        for _, item in sorted(self._items.items()):
            item.display(out)

    def display_all_users(self, file: TextIO | None = None) -> None:
        """Write every user with their loans, ordered by id, to ``file``."""
        out = file if file is not None else sys.stdout
        if not self._users:
            print("No users in the system.", file=out)
            return
        print("Library Users:", file=out)
        for _, user in sorted(self._users.items()):
            user.display_borrowed_items(out)

    def log_transaction(self, action: str, user_id: str, item_id: str) -> None:
        """Append a timestamped record of ``action`` to the transaction log.

        Problems are reported on stderr; they never interrupt the caller.
        """
        try:
            log_file = self.log_path.open("a", encoding="utf-8")
        except OSError:
            print(
                f"Error opening {self.log_path.name} for logging! Path: {self.log_path}",
                file=sys.stderr,
            )
            return

        with log_file:
            user = self._users.get(user_id)
            item = self._items.get(item_id)
            if user is None or item is None:
                print(
                    f"Error: User or item not found! UserID: {user_id}, ItemID: {item_id}",
                    file=sys.stderr,
                )
                return

            stamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
            kind = "Book" if isinstance(item, Book) else "Magazine"
            log_file.write(
                f"[{stamp}] User: {user_id} ({user.name}) {action} {kind}: {item}\n"
            )

        print(f"Transaction logged: {user_id} {action} {item_id}", file=self.output)