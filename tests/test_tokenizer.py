import random

import pytest

from tokenizer import (
    DuplicateTokenError,
    InvalidRankError,
    RankCodecError,
    RankTable,
    UnknownTokenError,
    count_frequencies,
    decode_ranks,
    encode_text,
    encode_tokens,
    split_tokens,
)

SAMPLE = "the cat sat on the mat the cat ran"


@pytest.mark.parametrize(
    "text, expected",
    [
        ("", []),
        ("   \t\n ", []),
        ("x", ["x"]),
        ("  a  b\tc\n\nd  ", ["a", "b", "c", "d"]),
        ("a b c", ["a", "b", "c"]),
        ("don't stop-me now!", ["don't", "stop-me", "now!"]),
    ],
)
def test_split_tokens(text, expected):
    assert split_tokens(text) == expected


def test_count_frequencies():
    freq = count_frequencies(split_tokens(SAMPLE))
    assert dict(freq) == {"the": 3, "cat": 2, "sat": 1, "on": 1, "mat": 1, "ran": 1}


def test_frequencies_are_read_only():
    freq = count_frequencies(["a", "b", "a"])
    with pytest.raises(TypeError):
        freq["c"] = 1
    with pytest.raises(TypeError):
        del freq["a"]
    assert dict(freq) == {"a": 2, "b": 1}


def test_sample_ranking_and_codes():
    result = encode_text(SAMPLE)
    assert result.table.ranked_tokens == ("the", "cat", "mat", "on", "ran", "sat")
    assert dict(result.table.stoi) == {
        "the": 1, "cat": 2, "mat": 3, "on": 4, "ran": 5, "sat": 6,
    }
    assert result.codes == [1, 2, 6, 4, 1, 3, 1, 2, 5]
    assert " ".join(decode_ranks(result.codes, result.table)) == SAMPLE


def test_single_token():
    result = encode_text("x")
    assert dict(result.table.stoi) == {"x": 1}
    assert result.codes == [1]
    assert decode_ranks([1], result.table) == ["x"]


def test_empty_input():
    result = encode_text("")
    assert len(result.table) == 0
    assert result.tokens == []
    assert result.codes == []
    assert decode_ranks([], result.table) == []


def test_equal_frequencies_use_string_order():
    table = RankTable.from_tokens(["pear", "Apple", "banana", "apple", "Banana"])
    # Ordinal comparison: upper case sorts before lower case.
    assert table.ranked_tokens == ("Apple", "Banana", "apple", "banana", "pear")


def test_ties_inside_a_frequency_band():
    table = RankTable.from_tokens("b a b a c d d e".split())
    assert table.ranked_tokens == ("a", "b", "d", "c", "e")


def test_rank_table_lookups_agree():
    table = RankTable.from_tokens(split_tokens(SAMPLE))
    assert set(table.itos) == set(range(1, len(table) + 1))
    for token, rank in table.stoi.items():
        assert table.itos[rank] == token
        assert table.rank_of(token) == rank
        assert table.token_at(rank) == token
    assert list(table) == list(table.ranked_tokens)
    assert "cat" in table
    assert "dog" not in table


def test_rank_table_is_read_only():
    table = RankTable.from_tokens(["a", "b"])
    with pytest.raises(TypeError):
        table.stoi["c"] = 3
    with pytest.raises(TypeError):
        table.itos[3] = "c"


def test_rank_table_rejects_duplicates():
    with pytest.raises(DuplicateTokenError):
        RankTable.from_ranked_tokens(["a", "b", "a"])


def test_rank_table_equality():
    assert RankTable.from_tokens(["b", "a", "b"]) == RankTable.from_ranked_tokens(["b", "a"])
    assert RankTable.from_tokens(["a"]) != RankTable.from_tokens(["b"])


def test_deterministic_table():
    rng = random.Random(7)
    words = [rng.choice(["x", "y", "z", "xy", "yz"]) for _ in range(100)]
    shuffled = list(words)
    random.Random(3).shuffle(shuffled)
    assert RankTable.from_tokens(words) == RankTable.from_tokens(words)
    # Ranking depends only on counts, not on the order tokens arrive in.
    assert RankTable.from_tokens(words) == RankTable.from_tokens(shuffled)


@pytest.mark.parametrize("seed", [0, 1, 2, 3])
def test_roundtrip_random_text(seed):
    rng = random.Random(seed)
    vocab = ["w%d" % i for i in range(rng.randint(1, 40))]
    tokens = [rng.choice(vocab) for _ in range(rng.randint(0, 300))]
    table = RankTable.from_tokens(tokens)
    codes = encode_tokens(tokens, table)
    assert len(codes) == len(tokens)
    assert sorted(set(codes)) == list(range(1, len(table) + 1))
    assert decode_ranks(codes, table) == tokens


def test_unknown_token_is_an_error():
    table = RankTable.from_tokens(["a", "b"])
    with pytest.raises(UnknownTokenError) as excinfo:
        encode_tokens(["a", "z", "b"], table)
    assert excinfo.value.token == "z"
    assert excinfo.value.position == 1
    assert isinstance(excinfo.value, RankCodecError)


@pytest.mark.parametrize("bad", [0, -1, 4, 2.0, True, "1", None])
def test_invalid_rank_is_an_error(bad):
    table = RankTable.from_tokens(["a", "b", "c"])
    with pytest.raises(InvalidRankError) as excinfo:
        decode_ranks([1, bad, 2], table)
    assert excinfo.value.position == 1
    assert excinfo.value.size == 3


def test_any_rank_is_invalid_against_empty_table():
    with pytest.raises(InvalidRankError):
        decode_ranks([1], RankTable([]))


def test_decode_does_not_keep_original_spacing():
    result = encode_text("a  b\n\ta")
    assert decode_ranks(result.codes, result.table) == ["a", "b", "a"]
