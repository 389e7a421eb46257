"""Book data model for the Bookworm reading list.

Defines the ``BookRecord`` dataclass shared by the catalogue, the personal
list store and the list manager, together with its JSON field mapping.
"""

from dataclasses import dataclass, replace
from datetime import date, datetime
from typing import Optional

# Attribute name -> key used in the persisted JSON payload
JSON_FIELDS = {
    "title": "title",
    "author": "author",
    "cover_image_ref": "coverImageResId",
    "info_url": "websiteUrl",
    "return_date_millis": "returnDateMillis",
}


@dataclass(frozen=True)
class BookRecord:
    """A book in the catalogue or in the personal list.

    Records are immutable; setting a return date produces a new record via
    ``with_return_date``.

    Attributes
    ----------
    title : str
        Title of the book. Also the deduplication key (case-insensitive).
    author : str
        Author name(s).
    cover_image_ref : str
        Opaque cover identifier resolved by the presentation layer.
    info_url : str
        Link with more information about the book, may be empty.
    return_date_millis : int
        Return date as epoch milliseconds at local midnight, or ``0`` when
        no reminder is set.
    """

    title: str
    author: str
    cover_image_ref: str = ""
    info_url: str = ""
    return_date_millis: int = 0

    def __post_init__(self) -> None:
        if not isinstance(self.title, str) or not self.title:
            raise ValueError("Book title must be a non-empty string")
        if not isinstance(self.author, str):
            raise ValueError("Book author must be a string")
        if isinstance(self.return_date_millis, bool) or not isinstance(
            self.return_date_millis, int
        ):
            raise ValueError("returnDateMillis must be an integer")
        if self.return_date_millis < 0:
            raise ValueError("returnDateMillis cannot be negative")

    @property
    def has_return_date(self) -> bool:
        """Whether a return-date reminder has been set."""
        return self.return_date_millis > 0

    @property
    def return_date(self) -> Optional[date]:
        """Return the reminder as a local calendar date, or ``None``."""
        if not self.has_return_date:
            return None
        return datetime.fromtimestamp(self.return_date_millis / 1000).date()

    def same_title(self, other: "BookRecord") -> bool:
        """Return ``True`` if *other* has the same title, ignoring case."""
        return self.title.casefold() == other.title.casefold()

    def with_return_date(self, millis: int) -> "BookRecord":
        """Return a copy of this record with ``return_date_millis`` set."""
        return replace(self, return_date_millis=millis)

    def display_title(self, max_length: int = 50) -> str:
        """Return title truncated with ellipsis if needed.

        Parameters
        ----------
        max_length : int, optional
            Maximum character length before truncation, by default 50.

        Returns
        -------
        str
            The title, truncated with ``...`` if it exceeds *max_length*.
        """
        if len(self.title) <= max_length:
            return self.title
        return self.title[: max_length - 3] + "..."

    def display_author(self, max_length: int = 30) -> str:
        """Return author truncated with ellipsis if needed."""
        if len(self.author) <= max_length:
            return self.author
        return self.author[: max_length - 3] + "..."

    def to_dict(self) -> dict:
        """Convert the record to its JSON object form.

        Returns
        -------
        dict
            Mapping with the persisted key names (``title``, ``author``,
            ``coverImageResId``, ``websiteUrl``, ``returnDateMillis``).
        """
        return {key: getattr(self, attr) for attr, key in JSON_FIELDS.items()}

    @classmethod
    def from_dict(cls, data: dict) -> "BookRecord":
        """Build a record from its JSON object form.

        Missing optional keys fall back to their defaults. The cover
        identifier is kept opaque, so numeric resource ids are accepted
        and stored as strings.

        Parameters
        ----------
        data : dict
            A decoded JSON object.

        Returns
        -------
        BookRecord
            The decoded record.

        Raises
        ------
        ValueError
            If *data* is not an object or a field has the wrong type.
        """
        if not isinstance(data, dict):
            raise ValueError(f"Expected a JSON object, got {type(data).__name__}")
        cover = data.get("coverImageResId")
        info_url = data.get("websiteUrl")
        return cls(
            title=data.get("title"),
            author=data.get("author") or "",
            cover_image_ref="" if cover is None else str(cover),
            info_url=info_url if isinstance(info_url, str) else "",
            return_date_millis=data.get("returnDateMillis") or 0,
        )
