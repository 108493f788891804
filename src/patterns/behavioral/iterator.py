"""Iterator: recorrer una estantería sin exponer su representación interna."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from core.domain.models import PatternCategory, PatternInfo
from core.interfaces.demo import Emit
from patterns._base import DemoBase


@dataclass(frozen=True)
class Book:
    title: str
    author: str


class BookShelfIterator(Iterator[Book]):
    def __init__(self, books: list[Book], reverse: bool = False) -> None:
        self._books = books
        self._step = -1 if reverse else 1
        self._index = len(books) - 1 if reverse else 0

    def __next__(self) -> Book:
        if not 0 <= self._index < len(self._books):
            raise StopIteration
        book = self._books[self._index]
        self._index += self._step
        return book


class BookShelf:
    def __init__(self) -> None:
        self._books: list[Book] = []

    def add(self, book: Book) -> None:
        self._books.append(book)

    def __len__(self) -> int:
        return len(self._books)

    def __iter__(self) -> BookShelfIterator:
        return BookShelfIterator(self._books)

    def reverse_iterator(self) -> BookShelfIterator:
        return BookShelfIterator(self._books, reverse=True)


class IteratorDemo(DemoBase):
    info = PatternInfo(
        slug="iterator",
        name="Iterator",
        category=PatternCategory.BEHAVIORAL,
        intent="Provide a way to access the elements of an aggregate sequentially without exposing its representation.",
        intent_es="Permite recorrer secuencialmente un agregado sin exponer su representación interna.",
        aliases=("cursor",),
    )

    def run(self, emit: Emit) -> None:
        shelf = BookShelf()
        for title, author in (
            ("Design Patterns", "Gamma et al."),
            ("Refactoring", "Martin Fowler"),
            ("Clean Code", "Robert C. Martin"),
        ):
            shelf.add(Book(title, author))

        emit("Forward: " + "; ".join(book.title for book in shelf))
        emit("Reverse: " + "; ".join(book.title for book in shelf.reverse_iterator()))
