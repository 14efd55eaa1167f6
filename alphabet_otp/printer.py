"""
Symbol / index tables for eyeballing what the cipher does.

    Message           T  E  S  T
                     19  4 18 19

Only reads alphabet positions from the engine; no cryptographic logic.
"""

import sys

LABEL_WIDTH  = 15
CELL_WIDTH   = 3
SUMMARY_WIDTH = 13


def format_table(engine, label: str, text) -> str:
    """Two aligned rows: the symbols, then their alphabet indices."""
    symbols = "".join(f"{str(s):>{CELL_WIDTH}}" for s in text)
    indices = "".join(f"{_index_or_unknown(engine, s):>{CELL_WIDTH}}" for s in text)
    return (
        f"{label:<{LABEL_WIDTH}} {symbols}\n"
        f"{'':<{LABEL_WIDTH}} {indices}\n"
    )


def pretty_print(engine, label: str, text, file=None):
    print(format_table(engine, label, text), file=file or sys.stdout)


def format_summary(label: str, text) -> str:
    if not isinstance(text, str):
        text = "".join(map(str, text))
    return f'{label:<{SUMMARY_WIDTH}}: "{text}"'


def _index_or_unknown(engine, symbol) -> str:
    if symbol in engine:
        return str(engine.index_of(symbol))
    return "?"
