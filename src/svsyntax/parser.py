"""
Separated-values parser (raw text → Sv syntax model).

Parses comma, pipe, tab or any other single-character separated text
into an Sv value that keeps every detail needed to print it back
exactly: spaces around fields, quoting style, escaped quotes and the
newline used at every line break.

Grammar Notes:
    - Every parse function takes (text, pos) and returns (value, new_pos)
    - A failing function raises SvParseError and leaves the caller's pos
      untouched, so the next alternative starts from the same place
    - Ordered choices: CRLF before CR before LF; single quoted before
      double quoted before unquoted
    - Whitespace before a separator, newline or end of input is layout,
      kept by the Spaced wrapper rather than the field
"""

import logging
from typing import Callable, List, Optional, Tuple, TypeVar

from svsyntax.config import SvConfig, validate_separator
from svsyntax.syntax import (
    COMMA,
    PIPE,
    TAB,
    Field,
    Header,
    Headedness,
    HorizontalSpace,
    Newline,
    Quote,
    Quoted,
    Record,
    Records,
    Spaced,
    Spaces,
    Sv,
    Unquoted,
)


logger = logging.getLogger(__name__)

T = TypeVar("T")

_NEWLINE_CHARS = "\r\n"
_SPACE_CHARS = {" ": HorizontalSpace.SPACE, "\t": HorizontalSpace.TAB}


class SvParseError(Exception):
    """
    Raised when the text does not match the grammar.

    Properties:
        position: 0-based offset where parsing stopped
        line, column: 1-based location of that offset
        expected: What the grammar expected to find there
    """

    def __init__(self, text: str, position: int, expected: str):
        self.text = text
        self.position = position
        self.expected = expected
        super().__init__(position, expected)

    @property
    def line(self) -> int:
        return _line_and_column(self.text, self.position)[0]

    @property
    def column(self) -> int:
        return _line_and_column(self.text, self.position)[1]

    def __str__(self) -> str:
        line, column = _line_and_column(self.text, self.position)
        return f"line {line}, column {column}: expected {self.expected}"


def _line_and_column(text: str, position: int) -> Tuple[int, int]:
    line = 1
    line_start = 0
    i = 0
    while i < position:
        c = text[i]
        if c == "\r" and text.startswith("\n", i + 1) and i + 1 < position:
            i += 1
        if c in _NEWLINE_CHARS:
            line += 1
            line_start = i + 1
        i += 1
    return line, position - line_start + 1


def _is_space(c: str, separator: str) -> bool:
    return c in _SPACE_CHARS and c != separator


def _starts_newline(text: str, pos: int) -> bool:
    return pos < len(text) and text[pos] in _NEWLINE_CHARS


def _is_field_end(text: str, pos: int, separator: str) -> bool:
    return pos >= len(text) or text[pos] in _NEWLINE_CHARS or text[pos] == separator


# Lexical primitives

def newline(text: str, pos: int) -> Tuple[Newline, int]:
    """Parse one line terminator, trying CRLF before a bare CR or LF."""
    if text.startswith("\r\n", pos):
        return Newline.CRLF, pos + 2
    if text.startswith("\r", pos):
        return Newline.CR, pos + 1
    if text.startswith("\n", pos):
        return Newline.LF, pos + 1
    raise SvParseError(text, pos, "newline")


def horizontal_space(text: str, pos: int, separator: str) -> Tuple[HorizontalSpace, int]:
    """Parse a space or tab, unless that character is the separator."""
    if pos < len(text) and _is_space(text[pos], separator):
        return _SPACE_CHARS[text[pos]], pos + 1
    raise SvParseError(text, pos, "space or tab")


def spaces(text: str, pos: int, separator: str) -> Tuple[Spaces, int]:
    """Parse a possibly empty run of horizontal spaces."""
    run: List[HorizontalSpace] = []
    while pos < len(text) and _is_space(text[pos], separator):
        space, pos = horizontal_space(text, pos, separator)
        run.append(space)
    return tuple(run), pos


def escaped_quote(text: str, pos: int, quote: Quote) -> Tuple[str, int]:
    """Parse a doubled quote character, yielding one literal quote."""
    doubled = quote.char * 2
    if text.startswith(doubled, pos):
        return quote.char, pos + 2
    raise SvParseError(text, pos, f"escaped quote {doubled!r}")


# Fields

def quoted_field(text: str, pos: int, quote: Quote) -> Tuple[Quoted, int]:
    """
    Parse a field surrounded by the given quote character.

    Separators and newlines are ordinary content inside the quotes.
    Each doubled quote in the body is unescaped to a single quote.

    Raises:
        SvParseError: If the field does not open with the quote, or
            if the closing quote is missing
    """
    q = quote.char
    if not text.startswith(q, pos):
        raise SvParseError(text, pos, f"opening quote {q!r}")
    pos += 1
    chunks: List[str] = []
    while True:
        end = text.find(q, pos)
        if end == -1:
            raise SvParseError(text, len(text), f"closing quote {q!r}")
        chunks.append(text[pos:end])
        pos = end
        if text.startswith(q * 2, pos):
            char, pos = escaped_quote(text, pos, quote)
            chunks.append(char)
        else:
            return Quoted(quote=quote, content="".join(chunks)), pos + 1


def single_quoted_field(text: str, pos: int) -> Tuple[Quoted, int]:
    return quoted_field(text, pos, Quote.SINGLE)


def double_quoted_field(text: str, pos: int) -> Tuple[Quoted, int]:
    return quoted_field(text, pos, Quote.DOUBLE)


def unquoted_field(text: str, pos: int, separator: str) -> Tuple[Unquoted, int]:
    """
    Parse a field that is not surrounded by quotes.

    The field stops at a separator, a newline or the end of input.
    A run of spaces is field content when something other than a
    field ending follows it; otherwise the run is left unconsumed
    for the surrounding Spaced wrapper.
    """
    start = pos
    while pos < len(text):
        c = text[pos]
        if c in _NEWLINE_CHARS or c == separator:
            break
        if _is_space(c, separator):
            _, run_end = spaces(text, pos, separator)
            if _is_field_end(text, run_end, separator):
                break
            pos = run_end
        else:
            pos += 1
    return Unquoted(content=text[start:pos]), pos


def field(text: str, pos: int, separator: str) -> Tuple[Field, int]:
    """Parse a single quoted, double quoted or unquoted field, in that order."""
    if text.startswith(Quote.SINGLE.char, pos):
        return single_quoted_field(text, pos)
    if text.startswith(Quote.DOUBLE.char, pos):
        return double_quoted_field(text, pos)
    return unquoted_field(text, pos, separator)


def spaced(text: str, pos: int, separator: str,
           inner: Callable[[str, int], Tuple[T, int]]) -> Tuple[Spaced[T], int]:
    """Parse `inner` together with the spaces on either side of it."""
    leading, pos = spaces(text, pos, separator)
    value, pos = inner(text, pos)
    trailing, pos = spaces(text, pos, separator)
    return Spaced(leading=leading, value=value, trailing=trailing), pos


def spaced_field(text: str, pos: int, separator: str) -> Tuple[Spaced[Field], int]:
    return spaced(text, pos, separator, lambda t, p: field(t, p, separator))


# Records

def record(text: str, pos: int, separator: str) -> Tuple[Record, int]:
    """
    Parse one row: spaced fields divided by the separator.

    Every separator is followed by another field, so "a," holds two
    fields, the second one empty.
    """
    first, pos = spaced_field(text, pos, separator)
    fields = [first]
    while text.startswith(separator, pos):
        next_field, pos = spaced_field(text, pos + 1, separator)
        fields.append(next_field)
    return Record(fields=tuple(fields)), pos


def ending(text: str, pos: int, open_ended: bool = False) -> Tuple[Tuple[Newline, ...], int]:
    """
    Parse the newlines that end a document.

    Accepts nothing at end of input, exactly one newline followed by end
    of input, or two or more newlines. Unless `open_ended` is set, the
    two-or-more form must also be followed by end of input.

    Raises:
        SvParseError: If the text at `pos` has any other shape
    """
    if pos == len(text):
        return (), pos
    if not _starts_newline(text, pos):
        raise SvParseError(text, pos, "newline or end of input")
    first, pos = newline(text, pos)
    if pos == len(text):
        return (first,), pos
    second, pos = newline(text, pos)
    newlines = [first, second]
    while _starts_newline(text, pos):
        nl, pos = newline(text, pos)
        newlines.append(nl)
    if not open_ended and pos != len(text):
        raise SvParseError(text, pos, "newline or end of input")
    return tuple(newlines), pos


def _at_ending(text: str, pos: int) -> bool:
    """Lookahead: end of input, one newline then end of input, or a blank line."""
    if pos == len(text):
        return True
    if not _starts_newline(text, pos):
        return False
    _, after = newline(text, pos)
    return after == len(text) or _starts_newline(text, after)


def _at_record_separator(text: str, pos: int) -> bool:
    """Lookahead: a newline followed by something other than a newline or end of input."""
    if not _starts_newline(text, pos):
        return False
    _, after = newline(text, pos)
    return after < len(text) and text[after] not in _NEWLINE_CHARS


def records(text: str, pos: int, separator: str) -> Tuple[Records, int]:
    """
    Parse the body rows of a document.

    There are no records when the text at `pos` begins an ending.
    After each record, a single newline separates it from the next
    record. A blank line or a final newline stops the records and is
    left for `ending`.

    Args:
        text: Input text
        pos: Offset to start from
        separator: Field separator character

    Returns:
        (Records, new position)
    """
    if _at_ending(text, pos):
        return Records(), pos
    first, pos = record(text, pos, separator)
    rest: List[Tuple[Newline, Record]] = []
    while _at_record_separator(text, pos):
        nl, pos = newline(text, pos)
        next_record, pos = record(text, pos, separator)
        rest.append((nl, next_record))
    return Records(first=first, rest=tuple(rest)), pos


def header(text: str, pos: int, separator: str, headedness: Headedness) -> Tuple[Optional[Header], int]:
    """
    Parse the header row if the document is headed.

    A header row must be terminated by a newline, even when it is the
    only line in the document.
    """
    if headedness is Headedness.UNHEADED:
        return None, pos
    header_record, pos = record(text, pos, separator)
    if not _starts_newline(text, pos):
        raise SvParseError(text, pos, "newline after header")
    nl, pos = newline(text, pos)
    return Header(record=header_record, newline=nl), pos


# Documents

def separated_values(text: str, separator: str, headedness: Headedness,
                     pos: int = 0) -> Tuple[Sv, int]:
    """
    Parse separated values without requiring end of input.

    The records end at the first blank line (two or more newlines) or at
    a final newline. The ending keeps those newlines, and whatever
    follows them is left for the caller.

    Returns:
        (Sv, position just after the ending)

    Raises:
        SvConfigError: If the separator is not a single non-newline character
        SvParseError: If parsing fails
    """
    validate_separator(separator)
    head, pos = header(text, pos, separator, headedness)
    body, pos = records(text, pos, separator)
    end, pos = ending(text, pos, open_ended=True)
    return Sv(separator=separator, header=head, records=body, ending=end), pos


def separated_values_eof(text: str, separator: str, headedness: Headedness) -> Sv:
    """
    Parse separated values and ensure the end of the text follows.

    A blank line followed by more content is therefore an error.

    Raises:
        SvConfigError: If the separator is not a single non-newline character
        SvParseError: If the text is not a complete document
    """
    logger.debug("Parsing %d characters (separator=%r, %s)", len(text), separator, headedness.value)
    sv, pos = separated_values(text, separator, headedness)
    if pos != len(text):
        raise SvParseError(text, pos, "end of input")
    logger.debug("Parsed %d records, ending of %d newlines", len(sv.records), len(sv.ending))
    return sv


def parse_sv(text: str, config: Optional[SvConfig] = None) -> Sv:
    """
    Parse a whole document using the given configuration.

    Args:
        text: Already decoded input text
        config: Separator and headedness (defaults to unheaded CSV)

    Returns:
        Sv value that prints back to exactly `text`

    Raises:
        SvParseError: If parsing fails
    """
    if config is None:
        config = SvConfig()
    return separated_values_eof(text, config.separator, config.headedness)


def csv(text: str, headedness: Headedness = Headedness.UNHEADED) -> Sv:
    """Parse comma-separated values."""
    return separated_values_eof(text, COMMA, headedness)


def psv(text: str, headedness: Headedness = Headedness.UNHEADED) -> Sv:
    """Parse pipe-separated values."""
    return separated_values_eof(text, PIPE, headedness)


def tsv(text: str, headedness: Headedness = Headedness.UNHEADED) -> Sv:
    """Parse tab-separated values."""
    return separated_values_eof(text, TAB, headedness)


__all__ = [
    "SvParseError",
    "newline",
    "horizontal_space",
    "spaces",
    "escaped_quote",
    "quoted_field",
    "single_quoted_field",
    "double_quoted_field",
    "unquoted_field",
    "field",
    "spaced",
    "spaced_field",
    "record",
    "records",
    "ending",
    "header",
    "separated_values",
    "separated_values_eof",
    "parse_sv",
    "csv",
    "psv",
    "tsv",
]
