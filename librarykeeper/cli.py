"""Interactive menu for managing the library."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence, TextIO

from librarykeeper.items import Book, LibraryError, Magazine
from librarykeeper.system import LibrarySystem
from librarykeeper.user import User

MENU = (
    "\nLibrary Management System Menu:\n"
    "1. Add Book\n"
    "2. Add Magazine\n"
    "3. Add User\n"
    "4. Borrow Book\n"
    "5. Return Book\n"
    "6. View All Items\n"
    "7. View All Users\n"
    "8. Exit\n"
    "Enter your choice: "
)

INVALID_NUMBER = "Invalid input! Please enter a number."


class _Session:
    """One menu session reading from ``stdin`` and writing to ``stdout``."""

    def __init__(self, library: LibrarySystem, stdin: TextIO, stdout: TextIO) -> None:
        self.library = library
        self.stdin = stdin
        self.stdout = stdout

    def say(self, text: str) -> None:
        print(text, file=self.stdout)

    def ask(self, prompt: str) -> str:
        self.stdout.write(prompt)
        line = self.stdin.readline()
        if not line:
            raise EOFError
        return line.rstrip("\r\n")

    def ask_number(self, prompt: str) -> int | None:
        """Read an integer; blank lines are skipped, bad input yields None."""
        self.stdout.write(prompt)
        while True:
            line = self.stdin.readline()
            if not line:
                raise EOFError
            text = line.strip()
            if text:
                break
        try:
            return int(text)
        except ValueError:
            self.say(INVALID_NUMBER)
            return None

    def add_book(self) -> None:
        item_id = self.ask("Enter Book ID: ")
        title = self.ask("Enter Title: ")
        author = self.ask("Enter Author: ")
        genre = self.ask("Enter Genre: ")
        self.library.add_item(Book(item_id, title, author, genre))
        self.say("Book added successfully!")

    def add_magazine(self) -> None:
        item_id = self.ask("Enter Magazine ID: ")
        title = self.ask("Enter Title: ")
        author = self.ask("Enter Author: ")
        issue = self.ask_number("Enter Issue Number: ")
        if issue is None:
            return
        month = self.ask("Enter Month: ")
        self.library.add_item(Magazine(item_id, title, author, issue, month))
        self.say("Magazine added successfully!")

    def add_user(self) -> None:
        user_id = self.ask("Enter User ID: ")
        name = self.ask("Enter User Name: ")
        self.library.add_user(User(user_id, name))
        self.say("User added successfully!")

    def borrow(self) -> None:
        self.say("Available Items:")
        self.library.display_all_items(self.stdout)
        user_id = self.ask("Enter User ID: ")
        item_id = self.ask("Enter Item ID: ")
        self.library.borrow_item(user_id, item_id)
        self.say("Item borrowed successfully!")

    def give_back(self) -> None:
        self.say("Borrowed Items:")
        self.library.display_all_users(self.stdout)
        user_id = self.ask("Enter User ID: ")
        item_id = self.ask("Enter Item ID: ")
        self.library.return_item(user_id, item_id)
        self.say("Item returned successfully!")

    def loop(self) -> None:
        actions = {
            1: self.add_book,
            2: self.add_magazine,
            3: self.add_user,
            4: self.borrow,
            5: self.give_back,
            6: lambda: self.library.display_all_items(self.stdout),
            7: lambda: self.library.display_all_users(self.stdout),
        }
        while True:
            choice = self.ask_number(MENU)
            if choice is None:
                continue
            if choice == 8:
                self.say("Exiting program...")
                return
            action = actions.get(choice)
            if action is None:
                self.say("Invalid choice! Please try again.")
                continue
            try:
                action()
            except LibraryError as exc:
                self.say(f"Error: {exc}")


def run(library: LibrarySystem, stdin: TextIO, stdout: TextIO) -> None:
    """Run the menu until the user exits or the input ends."""
    try:
        _Session(library, stdin, stdout).loop()
    except EOFError:
        pass


def main(argv: Sequence[str] | None = None) -> int:
    """Start the interactive library menu."""
    parser = argparse.ArgumentParser(
        prog="librarykeeper",
        description="Interactive library management menu.",
    )
    parser.parse_args(argv)
    run(LibrarySystem(), sys.stdin, sys.stdout)
    return 0