import numpy as np
import pytest
from pyskiena.Substring import RollingHash, find_substring


@pytest.mark.parametrize(
    "text, pattern, expected",
    [
        ("Hello World!", "H", 0),
        ("Hello World!", "Hello", 0),
        ("Hello World!", "World!", 6),
        ("Hello World!", "W", 6),
        ("Hello World, and to all who enjoy it.", "World,", 6),
        ("abcabcabd", "abd", 6),
        ("aaaa", "aa", 0),
        ("abc", "abc", 0),
    ],
)
def test_finds_first_match(text, pattern, expected):
    assert find_substring(text, pattern) == expected


@pytest.mark.parametrize(
    "text, pattern",
    [("Hello", "World"), ("ab", "abc"), ("Hello", ""), ("", "a"), ("", "")],
)
def test_no_match(text, pattern):
    assert find_substring(text, pattern) is None


def test_bytes():
    assert find_substring(b"\x00\x01\x02\x03", b"\x02\x03") == 2


def test_non_ascii_text():
    assert find_substring("naïve café", "café") == 6


@pytest.mark.parametrize("seed", range(10))
def test_agrees_with_str_find(seed):
    rng = np.random.default_rng(seed)
    text = "".join(rng.choice(list("ab"), 60))
    pattern = "".join(rng.choice(list("ab"), int(rng.integers(1, 6))))
    expected = text.find(pattern)
    assert find_substring(text, pattern) == (None if expected < 0 else expected)


def test_rolling_hash_matches_fresh_hash():
    codes = [ord(c) for c in "the quick brown fox"]
    k = 4
    window = RollingHash(codes[:k])
    for start in range(1, len(codes) - k + 1):
        rolled = window.slide(codes[start + k - 1])
        assert rolled == RollingHash(codes[start:start + k]).hash


@pytest.mark.parametrize("text, pattern", [("abc", b"bc"), (b"abc", "bc"), ("", b"")])
def test_mixed_str_and_bytes_rejected(text, pattern):
    with pytest.raises(TypeError):
        find_substring(text, pattern)


def test_bytearray_text_with_bytes_pattern():
    assert find_substring(bytearray(b"xxabc"), b"abc") == 2
