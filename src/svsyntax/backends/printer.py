"""
Text printer for Sv syntax values.

Turns a parsed Sv back into separated-values text. For any text the
parser accepts, printing the result gives back exactly that text:
    - Spaces around fields are written as recorded
    - Quoted fields are re-escaped by doubling their own quote
    - Every newline is written with its original CR / LF / CRLF form
"""

from typing import Callable, Iterable, Optional

from svsyntax.syntax import (
    Field,
    Header,
    HorizontalSpace,
    Newline,
    Quoted,
    Record,
    Records,
    Spaced,
    Sv,
    Unquoted,
)


def print_newline(newline: Newline) -> str:
    return newline.text


def print_newlines(newlines: Iterable[Newline]) -> str:
    return "".join(print_newline(nl) for nl in newlines)


def print_spaces(spaces: Iterable[HorizontalSpace]) -> str:
    return "".join(space.text for space in spaces)


def print_field(field: Field) -> str:
    """Print a field, escaping quotes inside quoted content."""
    if isinstance(field, Quoted):
        q = field.quote.char
        return q + field.content.replace(q, q * 2) + q
    if isinstance(field, Unquoted):
        return field.content
    raise TypeError(f"Unsupported Field type: {type(field)}")


def print_spaced(spaced: Spaced, print_value: Optional[Callable[[object], str]] = None) -> str:
    if print_value is None:
        print_value = print_field
    return print_spaces(spaced.leading) + print_value(spaced.value) + print_spaces(spaced.trailing)


def print_record(record: Record, separator: str) -> str:
    return separator.join(print_spaced(f) for f in record.fields)


def print_records(records: Records, separator: str) -> str:
    if records.first is None:
        return ""
    parts = [print_record(records.first, separator)]
    for newline, record in records.rest:
        parts.append(print_newline(newline))
        parts.append(print_record(record, separator))
    return "".join(parts)


def print_header(header: Optional[Header], separator: str) -> str:
    if header is None:
        return ""
    return print_record(header.record, separator) + print_newline(header.newline)


def print_sv(sv: Sv) -> str:
    """
    Print a whole document.

    Args:
        sv: Parsed (or hand-built) Sv value

    Returns:
        Separated-values text
    """
    return (
        print_header(sv.header, sv.separator)
        + print_records(sv.records, sv.separator)
        + print_newlines(sv.ending)
    )


__all__ = [
    "print_newline",
    "print_newlines",
    "print_spaces",
    "print_field",
    "print_spaced",
    "print_record",
    "print_records",
    "print_header",
    "print_sv",
]
