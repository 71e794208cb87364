"""
tokenizer.py

A word-level rank tokenizer. Splits text on whitespace, counts how often each
distinct token occurs, ranks the tokens (most frequent first, ties broken by
plain string order) and replaces every token with its 1-based rank.
Decoding maps the ranks back through the same table.
"""

import logging
from collections import Counter
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Mapping, NamedTuple, Sequence

logger = logging.getLogger(__name__)


class RankCodecError(ValueError):
    """Base class for every encode/decode failure."""


class UnknownTokenError(RankCodecError):
    def __init__(self, token: str, position: int):
        super().__init__(f"Token {token!r} at position {position} has no rank.")
        self.token = token
        self.position = position


class InvalidRankError(RankCodecError):
    def __init__(self, rank, position: int, size: int):
        super().__init__(
            f"Invalid rank {rank!r} at position {position}; expected 1..{size}."
        )
        self.rank = rank
        self.position = position
        self.size = size


class DuplicateTokenError(RankCodecError):
    def __init__(self, token: str):
        super().__init__(f"Token {token!r} appears more than once in the ranked list.")
        self.token = token


def split_tokens(text: str) -> List[str]:
    """
    Split text on any run of whitespace. Never yields empty tokens.
    """
    return text.split()


def count_frequencies(tokens: Iterable[str]) -> Mapping[str, int]:
    return MappingProxyType(Counter(tokens))


class RankTable:
    """
    Bijection between distinct tokens and ranks 1..D.

    Both directions are filled from one ordered pass and exposed read-only,
    so they cannot drift apart.
    """

    __slots__ = ("_ranked", "_stoi", "_itos")

    def __init__(self, ranked_tokens: Sequence[str]):
        ranked = tuple(ranked_tokens)
        stoi: Dict[str, int] = {}
        itos: Dict[int, str] = {}
        for rank, token in enumerate(ranked, start=1):
            if token in stoi:
                raise DuplicateTokenError(token)
            stoi[token] = rank
            itos[rank] = token
        self._ranked = ranked
        self._stoi = MappingProxyType(stoi)
        self._itos = MappingProxyType(itos)

    @classmethod
    def from_frequencies(cls, frequencies: Mapping[str, int]) -> "RankTable":
        """
        Rank by count descending, then token ascending. Tokens are unique so
        the key is a strict total order and the result is fully determined.
        """
        ordered = sorted(frequencies.items(), key=lambda x: (-x[1], x[0]))
        table = cls([token for token, _ in ordered])
        logger.debug("Built rank table with %d distinct tokens", len(table))
        return table

    @classmethod
    def from_tokens(cls, tokens: Iterable[str]) -> "RankTable":
        return cls.from_frequencies(count_frequencies(tokens))

    @classmethod
    def from_ranked_tokens(cls, ranked_tokens: Sequence[str]) -> "RankTable":
        """
        Restore a table from tokens already listed in rank order.
        """
        return cls(ranked_tokens)

    @property
    def stoi(self) -> Mapping[str, int]:
        return self._stoi

    @property
    def itos(self) -> Mapping[int, str]:
        return self._itos

    @property
    def ranked_tokens(self) -> tuple:
        return self._ranked

    def rank_of(self, token: str) -> int:
        return self._stoi[token]

    def token_at(self, rank: int) -> str:
        return self._itos[rank]

    def __len__(self) -> int:
        return len(self._ranked)

    def __contains__(self, token) -> bool:
        return token in self._stoi

    def __iter__(self) -> Iterator[str]:
        return iter(self._ranked)

    def __eq__(self, other) -> bool:
        if not isinstance(other, RankTable):
            return NotImplemented
        return self._ranked == other._ranked

    def __hash__(self) -> int:
        return hash(self._ranked)

    def __repr__(self) -> str:
        return f"RankTable(size={len(self)})"


def encode_tokens(tokens: Sequence[str], table: RankTable) -> List[int]:
    """
    Replace each token with its rank, keeping order and length.
    Raises UnknownTokenError instead of dropping a token the table lacks.
    """
    stoi = table.stoi
    codes = []
    for position, token in enumerate(tokens):
        rank = stoi.get(token)
        if rank is None:
            raise UnknownTokenError(token, position)
        codes.append(rank)
    return codes


def decode_ranks(ranks: Iterable[int], table: RankTable) -> List[str]:
    """
    Map each rank back to its token. Any rank outside 1..D aborts the whole
    decode with InvalidRankError; nothing partial is returned.
    """
    itos = table.itos
    size = len(table)
    tokens = []
    for position, rank in enumerate(ranks):
        if isinstance(rank, bool) or not isinstance(rank, int) or not 1 <= rank <= size:
            raise InvalidRankError(rank, position, size)
        tokens.append(itos[rank])
    return tokens


class EncodeResult(NamedTuple):
    tokens: List[str]
    table: RankTable
    codes: List[int]


def encode_text(text: str) -> EncodeResult:
    """
    Tokenize once, rank, and encode from the same token list.
    """
    tokens = split_tokens(text)
    table = RankTable.from_tokens(tokens)
    codes = encode_tokens(tokens, table)
    return EncodeResult(tokens, table, codes)
