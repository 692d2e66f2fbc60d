"""
Example document builder.

Builds a small headed CSV by hand, covering quoted fields with escapes,
spaced fields and mixed newline styles. Printing it and parsing the
result gives back the same value.
"""
from svsyntax.syntax import (
    COMMA,
    Header,
    HorizontalSpace,
    Newline,
    Quote,
    Quoted,
    Record,
    Records,
    Spaced,
    Sv,
    Unquoted,
)


def _plain(content: str) -> Spaced:
    return Spaced(leading=(), value=Unquoted(content), trailing=())


def build_example_sv(row_count: int = 3, newline: Newline = Newline.CRLF) -> Sv:
    header = Header(
        record=Record(fields=(_plain("id"), _plain("name"), _plain("note"))),
        newline=newline,
    )

    rows = []
    for i in range(1, row_count + 1):
        rows.append(Record(fields=(
            _plain(str(i)),
            Spaced(
                leading=(HorizontalSpace.SPACE,),
                value=Quoted(quote=Quote.DOUBLE, content=f'Item "{i}", boxed'),
                trailing=(HorizontalSpace.TAB,),
            ),
            Spaced(
                leading=(),
                value=Quoted(quote=Quote.SINGLE, content=f"It's number {i}"),
                trailing=(),
            ),
        )))

    if rows:
        records = Records(first=rows[0], rest=tuple((newline, r) for r in rows[1:]))
    else:
        records = Records()

    return Sv(separator=COMMA, header=header, records=records, ending=(Newline.LF,))
