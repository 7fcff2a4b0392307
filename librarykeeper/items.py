"""Items held by the library: books and magazines."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TextIO


class LibraryError(Exception):
    """Raised when a library operation cannot be carried out."""


@dataclass(eq=False)
class LibraryItem(ABC):
    """Something that can be borrowed from the library."""

    item_id: str
    title: str
    author: str
    is_borrowed: bool = False

    def mark_borrowed(self) -> None:
        """Mark the item as lent out."""
        if self.is_borrowed:
            raise LibraryError("Borrowing an already borrowed book")
        self.is_borrowed = True

    def mark_returned(self) -> None:
        """Mark the item as back on the shelf."""
        if not self.is_borrowed:
            raise LibraryError("Returning an unborrowed book")
        self.is_borrowed = False

    @abstractmethod
    def _details(self) -> str:
        """The kind-specific part of the description."""

    @property
    @abstractmethod
    def kind(self) -> str:
        """Name of the item kind, such as "Book"."""

    def describe(self) -> str:
        """One-line description of the item, including its loan state."""
        text = f'{self.kind}: {self.item_id} "{self.title}" by {self.author}, {self._details()}'
        if self.is_borrowed:
            text += " (Borrowed)"
        return text

    def display(self, file: TextIO | None = None) -> None:
        """Write the description as a line to ``file`` (stdout by default)."""
        print(self.describe(), file=file if file is not None else sys.stdout)

    def __str__(self) -> str:
        return f'{self.item_id} "{self.title}"'


@dataclass(eq=False)
class Book(LibraryItem):
    """A book with a genre."""

    genre: str = ""

    def __init__(
        self,
        item_id: str,
        title: str,
        author: str,
        genre: str,
        is_borrowed: bool = False,
    ) -> None:
        super().__init__(item_id, title, author, is_borrowed)
        self.genre = genre

    @property
    def kind(self) -> str:
        return "Book"

    def _details(self) -> str:
        return f"Genre: {self.genre}"

    def describe(self) -> str:
        return super().describe()


@dataclass(eq=False)
class Magazine(LibraryItem):
    """A magazine issue for a given month."""

    issue_number: int = 0
    month: str = ""

    def __init__(
        self,
        item_id: str,
        title: str,
        author: str,
        issue_number: int,
        month: str,
    ) -> None:
        super().__init__(item_id, title, author, False)
        self.issue_number = issue_number
        self.month = month

    @property
    def kind(self) -> str:
        return "Magazine"

    def _details(self) -> str:
        return f"Issue: {self.issue_number}, Month: {self.month}"

    def describe(self) -> str:
        return super().describe()