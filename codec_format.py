"""
codec_format.py

Text layout of encoded documents: the ranked token list on one line, a line of
ten asterisks, then the rank codes on one line.
"""

from typing import List, Sequence, Tuple

from tokenizer import RankCodecError, RankTable

SEPARATOR = "**********"


class FormatError(RankCodecError):
    pass


def render_encoded(table: RankTable, codes: Sequence[int]) -> str:
    return "\n".join(
        [
            " ".join(table.ranked_tokens),
            SEPARATOR,
            " ".join(str(code) for code in codes),
        ]
    )


def render_decoded(tokens: Sequence[str]) -> str:
    return " ".join(tokens)


def parse_encoded(text: str) -> Tuple[RankTable, List[int]]:
    """
    Read back what render_encoded wrote. Blank token or code lines are fine
    (empty input encodes to exactly that); anything else malformed raises
    FormatError.
    """
    lines = text.splitlines()
    # A token may itself be ten asterisks, so look for the separator by
    # position rather than by searching.
    if len(lines) > 1 and lines[1].strip() == SEPARATOR:
        sep_index = 1
    elif lines and lines[0].strip() == SEPARATOR:
        sep_index = 0
    else:
        raise FormatError(f"Missing separator line {SEPARATOR!r}.")

    head = lines[:sep_index]
    tail = [line for line in lines[sep_index + 1 :] if line.strip()]
    if len(tail) > 1:
        raise FormatError("Code sequence must fit on a single line.")

    ranked = head[0].split() if head else []
    try:
        table = RankTable.from_ranked_tokens(ranked)
    except RankCodecError as e:
        raise FormatError(str(e)) from e

    codes = []
    for field in tail[0].split() if tail else []:
        if not (field.isascii() and field.isdigit()):
            raise FormatError(f"Code {field!r} is not a decimal integer.")
        codes.append(int(field))
    return table, codes
