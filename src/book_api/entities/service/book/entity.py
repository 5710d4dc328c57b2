"""Entity: Book."""

from pydantic import BaseModel, Field

# Range of the 32-bit integer column holding the year
_MIN_YEAR = -(2**31)
_MAX_YEAR = 2**31 - 1


class Book(BaseModel):
    """Book entity as exchanged with API clients.

    The ISBN is the natural key: caller supplied, unique and immutable once
    the book is stored. Field names are camelCase on the wire, and only the
    wire names are accepted when parsing.
    """

    isbn: str = Field(min_length=1, description="Unique ISBN of the book")
    title: str = Field(description="Title of the book")
    author: str = Field(description="Author of the book")
    publish_year: int = Field(
        alias="publishYear",
        ge=_MIN_YEAR,
        le=_MAX_YEAR,
        description="Year of publication of the book",
    )
