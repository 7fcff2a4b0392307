import io

import pytest

from librarykeeper.items import Book, LibraryError, LibraryItem, Magazine


def make_book(**overrides):
    values = dict(item_id="B1", title="Dune", author="Herbert", genre="SciFi")
    values.update(overrides)
    return Book(**values)


def make_magazine():
    return Magazine("M1", "Wired", "Staff", 12, "May")


def test_book_starts_not_borrowed():
    assert make_book().is_borrowed is False


def test_book_can_start_borrowed():
    assert make_book(is_borrowed=True).is_borrowed is True


def test_magazine_starts_not_borrowed():
    assert make_magazine().is_borrowed is False


def test_book_describe():
    assert make_book().describe() == 'Book: B1 "Dune" by Herbert, Genre: SciFi'


def test_book_describe_borrowed():
    book = make_book()
    book.mark_borrowed()
    assert book.describe() == 'Book: B1 "Dune" by Herbert, Genre: SciFi (Borrowed)'


def test_magazine_describe():
    assert make_magazine().describe() == 'Magazine: M1 "Wired" by Staff, Issue: 12, Month: May'


def test_magazine_describe_borrowed():
    magazine = make_magazine()
    magazine.mark_borrowed()
    assert magazine.describe().endswith(" (Borrowed)")
    assert magazine.describe().startswith("Magazine: M1")


def test_display_writes_line():
    out = io.StringIO()
    make_book().display(out)
    assert out.getvalue() == 'Book: B1 "Dune" by Herbert, Genre: SciFi\n'


def test_display_defaults_to_stdout(capsys):
    make_magazine().display()
    assert capsys.readouterr().out == make_magazine().describe() + "\n"


def test_str_is_id_and_quoted_title():
    assert str(make_book()) == 'B1 "Dune"'
    assert str(make_magazine()) == 'M1 "Wired"'


def test_borrow_then_return_round_trip():
    book = make_book()
    book.mark_borrowed()
    assert book.is_borrowed is True
    book.mark_returned()
    assert book.is_borrowed is False


def test_borrow_twice_raises():
    book = make_book()
    book.mark_borrowed()
    with pytest.raises(LibraryError, match="Borrowing an already borrowed book"):
        book.mark_borrowed()
    assert book.is_borrowed is True


def test_return_unborrowed_raises():
    magazine = make_magazine()
    with pytest.raises(LibraryError, match="Returning an unborrowed book"):
        magazine.mark_returned()
    assert magazine.is_borrowed is False


def test_library_item_is_abstract():
    with pytest.raises(TypeError):
        LibraryItem("X", "t", "a")


def test_items_with_same_data_keep_separate_state():
    first = make_book()
    second = make_book()
    first.mark_borrowed()
    assert first.is_borrowed is True
    assert second.is_borrowed is False
    assert second.describe() == 'Book: B1 "Dune" by Herbert, Genre: SciFi'