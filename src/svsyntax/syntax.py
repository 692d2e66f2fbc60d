"""
Separated-Values Syntax Model

Defines the data structures produced by the parser.

These are pure data classes representing:
    - Newlines (line terminators, kept exactly)
    - Horizontal spaces (layout around fields)
    - Fields (quoted or unquoted content)
    - Records (rows) and the alternating record/newline body
    - The header and the trailing ending
    - Sv (root container)

ARCHITECTURAL RULE:
    These objects:
        - Are immutable (frozen=True)
        - Keep every byte of layout needed to print the original text
        - Know nothing about column types or row widths
        - Represent syntax, not meaning
"""

from abc import ABC
from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, Iterator, Optional, Tuple, TypeVar


COMMA = ","
PIPE = "|"
TAB = "\t"


class Newline(Enum):
    """
    A single line terminator.

    CRLF is one unit. It is never split into CR followed by LF.
    """

    CR = "\r"
    LF = "\n"
    CRLF = "\r\n"

    @property
    def text(self) -> str:
        return self.value


class HorizontalSpace(Enum):
    """Layout whitespace that may surround a field."""

    SPACE = " "
    TAB = "\t"

    @property
    def text(self) -> str:
        return self.value


class Quote(Enum):
    """The two supported quote characters."""

    SINGLE = "'"
    DOUBLE = '"'

    @property
    def char(self) -> str:
        return self.value


class Headedness(Enum):
    """Whether the first line of a document is a header row."""

    HEADED = "headed"
    UNHEADED = "unheaded"


class Field(ABC):
    """
    Base class for field contents.

    This class is structure only. Subclasses are Unquoted and Quoted.
    """
    pass


@dataclass(frozen=True)
class Unquoted(Field):
    """
    A field written without quotes.

    The content never includes the layout whitespace before or after it;
    that belongs to the enclosing Spaced wrapper.
    """

    content: str = ""


@dataclass(frozen=True)
class Quoted(Field):
    """
    A field surrounded by single or double quotes.

    Example:
        'It''s'

    Becomes:
        Quoted(quote=Quote.SINGLE, content="It's")

    Properties:
        quote: Which quote character delimits the field
        content: The unescaped text (each doubled quote collapsed to one)

    IMPORTANT:
        Re-escaping is the printer's job, never the parser's.
    """

    quote: Quote
    content: str = ""


Spaces = Tuple[HorizontalSpace, ...]

T = TypeVar("T")


@dataclass(frozen=True)
class Spaced(Generic[T]):
    """
    A value with the horizontal whitespace found on either side of it.

    Properties:
        leading: Spaces before the value, in order
        value: The wrapped value (a Field, for records)
        trailing: Spaces after the value, in order
    """

    leading: Spaces
    value: T
    trailing: Spaces = ()


@dataclass(frozen=True)
class Record:
    """
    One row: a non-empty sequence of spaced fields.

    An empty line still holds one empty unquoted field.
    """

    fields: Tuple[Spaced[Field], ...]

    def __post_init__(self):
        if not self.fields:
            raise ValueError("A record must contain at least one field")

    def __len__(self) -> int:
        return len(self.fields)

    def __iter__(self) -> Iterator[Spaced[Field]]:
        return iter(self.fields)

    def values(self) -> Tuple[Field, ...]:
        """Return the fields without their surrounding spaces."""
        return tuple(spaced.value for spaced in self.fields)


@dataclass(frozen=True)
class Records:
    """
    The body of a document: records separated by single newlines.

    Properties:
        first:
            The first record, or None when there are no records at all
        rest:
            (newline, record) pairs, where newline is the separator
            that preceded the record

    INVARIANTS:
        - No records and zero-length records are the same state
        - rest is empty whenever first is None
    """

    first: Optional[Record] = None
    rest: Tuple[Tuple[Newline, Record], ...] = field(default_factory=tuple)

    def __post_init__(self):
        if self.first is None and self.rest:
            raise ValueError("Records without a first record cannot have subsequent records")

    @property
    def is_empty(self) -> bool:
        return self.first is None

    def __len__(self) -> int:
        if self.first is None:
            return 0
        return 1 + len(self.rest)

    def __iter__(self) -> Iterator[Record]:
        if self.first is None:
            return
        yield self.first
        for _, record in self.rest:
            yield record

    def separators(self) -> Tuple[Newline, ...]:
        """Return the newlines found between records."""
        return tuple(newline for newline, _ in self.rest)


@dataclass(frozen=True)
class Header:
    """A header row together with the newline that terminates it."""

    record: Record
    newline: Newline


@dataclass(frozen=True)
class Sv:
    """
    Root container for a parsed separated-values document.

    Everything needed to print the original text back out is held here.

    Properties:
        separator:
            The single character dividing fields (e.g. ",", "|", "\\t")

        header:
            The header row, present only for headed documents

        records:
            The body rows

        ending:
            Newlines after the last record (or after the header, or
            making up the whole document) with nothing following them
    """

    separator: str
    header: Optional[Header] = None
    records: Records = field(default_factory=Records)
    ending: Tuple[Newline, ...] = ()

    def all_records(self) -> Tuple[Record, ...]:
        """Return the header record (if any) followed by the body records."""
        head = (self.header.record,) if self.header is not None else ()
        return head + tuple(self.records)


__all__ = [
    "COMMA",
    "PIPE",
    "TAB",
    "Newline",
    "HorizontalSpace",
    "Quote",
    "Headedness",
    "Field",
    "Unquoted",
    "Quoted",
    "Spaces",
    "Spaced",
    "Record",
    "Records",
    "Header",
    "Sv",
]
