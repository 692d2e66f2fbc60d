"""
Test the hand-built example document.

Validates that the example builder creates the expected header, rows
and newline styles.
"""

from svsyntax.backends import print_sv
from svsyntax.examples import build_example_sv
from svsyntax.syntax import Newline, Quote, Quoted


def test_example_sv_structure():
    sv = build_example_sv(row_count=3, newline=Newline.CRLF)

    # Header plus 3 rows
    assert sv.header is not None
    assert len(sv.records) == 3
    assert sv.records.separators() == (Newline.CRLF, Newline.CRLF)
    assert sv.ending == (Newline.LF,)

    # Second field is double quoted with embedded quotes and separator
    second = sv.records.first.fields[1]
    assert second.value == Quoted(Quote.DOUBLE, 'Item "1", boxed')


def test_example_sv_text():
    text = print_sv(build_example_sv(row_count=1, newline=Newline.LF))
    assert text == "id,name,note\n1, \"Item \"\"1\"\", boxed\"\t,'It''s number 1'\n"


def test_example_sv_without_rows():
    sv = build_example_sv(row_count=0)
    assert sv.records.is_empty
    assert print_sv(sv) == "id,name,note\r\n\n"
