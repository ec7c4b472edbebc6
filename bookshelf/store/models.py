"""Data models for the store module."""

import uuid
from dataclasses import dataclass, field

__all__ = ["BookRecord", "new_book_id"]


def new_book_id() -> str:
    """Return a fresh, process-unique record identifier."""
    return uuid.uuid4().hex


@dataclass(frozen=True)
class BookRecord:
    """
    One catalog entry.

    Fields
    ──────
    title   — book title; the only field searched
    author  — free-text author name
    year    — publication year, kept as opaque text (never parsed)
    id      — generated identifier, in-memory only; not persisted and
              not part of equality
    """
    title:  str
    author: str
    year:   str
    id:     str = field(default_factory=new_book_id, compare=False)

    def to_dict(self) -> dict[str, str]:
        """Return the persisted shape: ``{"title", "author", "year"}``."""
        return {"title": self.title, "author": self.author, "year": self.year}

    @classmethod
    def from_dict(cls, data: dict) -> "BookRecord":
        """
        Build a record from its persisted shape.

        Raises:
            TypeError / KeyError if *data* is not a mapping with the three
            string fields.
        """
        if not isinstance(data, dict):
            raise TypeError(f"expected object, got {type(data).__name__}")
        values = [data["title"], data["author"], data["year"]]
        for value in values:
            if not isinstance(value, str):
                raise TypeError(f"expected string field, got {type(value).__name__}")
        return cls(title=values[0], author=values[1], year=values[2])

    def __str__(self) -> str:
        return f"{self.title} — {self.author} ({self.year})"
