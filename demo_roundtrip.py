#!/usr/bin/env python3
"""
Demo: Parse separated values and print them back unchanged.

Shows the parsed structure for a CSV, PSV and TSV document.
"""

from svsyntax.backends import print_sv
from svsyntax.config import SvConfig
from svsyntax.parser import parse_sv
from svsyntax.serialization import sv_to_yaml
from svsyntax.syntax import Headedness


def main():
    documents = [
        ("CSV", SvConfig.csv(Headedness.HEADED), "id, name\r\n1,'It''s'\r\n2, \"a, b\" \n\n"),
        ("PSV", SvConfig.psv(), "a|b c |d\n"),
        ("TSV", SvConfig.tsv(), "a\t b\nc\n\n"),
    ]

    print("=" * 80)
    print("ROUND TRIP DEMO")
    print("=" * 80)

    for name, config, text in documents:
        print(f"\n{name}:")
        print("-" * 80)

        sv = parse_sv(text, config)
        print(sv_to_yaml(sv))

        printed = print_sv(sv)
        print(f"Printed: {printed!r}")
        print(f"Identical: {printed == text}")

    print("\n" + "=" * 80)


if __name__ == "__main__":
    main()
