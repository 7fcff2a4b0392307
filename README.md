# librarykeeper

librarykeeper is a small library management system. It keeps track of
books and magazines, of registered users, and of who has borrowed what.
Every loan and every return is appended to a transaction log.

## Installation

    pip install .

## Interactive use

Start the menu-driven program:

    librarykeeper

The menu offers these choices:

1. Add Book
2. Add Magazine
3. Add User
4. Borrow Book
5. Return Book
6. View All Items
7. View All Users
8. Exit

The menu choice and a magazine's issue number must be whole numbers;
anything else prints `Invalid input! Please enter a number.` and shows
the menu again. The program ends on choice 8 or when the input runs out.

If an operation fails, for example when you borrow an item that is
already on loan, return an item the user never borrowed, add an item or
user whose identifier is already taken, or refer to an unknown user or
item, the program prints `Error: <message>` and shows the menu again.

## Transaction log

Loans and returns are appended to `logs/transactions.txt`, relative to the
current directory, one timestamped line each:

    [2024-05-01 14:03:22] User: u1 (Alice) borrowed Book: b1 "Dune"

The `logs` directory is not created for you. If the log file cannot be
opened, a message is printed on standard error and the loan or return
still takes effect. After a successful write, a line such as
`Transaction logged: u1 borrowed b1` is printed.

## Use as a library

    from librarykeeper.items import Book, Magazine, LibraryError
    from librarykeeper.user import User
    from librarykeeper.system import LibrarySystem

    library = LibrarySystem(log_path="transactions.txt")
    library.add_item(Book("b1", "Dune", "Frank Herbert", "Science Fiction"))
    library.add_item(Magazine("m1", "Nature", "Various", 42, "May"))
    library.add_user(User("u1", "Alice"))

    library.borrow_item("u1", "b1")
    library.display_all_items()
    library.display_all_users()

    try:
        library.borrow_item("u1", "b1")
    except LibraryError as exc:
        print(f"Error: {exc}")

    library.return_item("u1", "b1")

`LibrarySystem` takes an optional `log_path` (default
`logs/transactions.txt`) and an optional `output` stream for the
"Transaction logged" messages (default standard output). Its `items` and
`users` properties are read-only mappings keyed by identifier.
`display_all_items` and `display_all_users` write to standard output or to
the `file` they are given, listing items and users in the order of their
identifiers.

Each item has `describe()`, returning its one-line description, and
`display(file)`, which prints it. A `User` has `borrowed_items`,
`borrow_item(item)`, `return_item(item)` and `display_borrowed_items(file)`.

## Limitations

The catalogue, users and loans live in memory only; they are lost when the
program ends. The transaction log is written but never read back.

## Running the tests

    pip install .[test]
    pytest