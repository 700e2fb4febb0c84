from fractions import Fraction
from math import gcd, prod

import pytest

from dailyalgos.text import (
    compressed_string,
    count_consistent_strings,
    diff_ways_to_compute,
    fraction_addition,
    get_lucky,
    is_prefix_of_word,
    min_changes,
    rotate_string,
    uncommon_from_sentences,
)


def _decode(encoded):
    pairs = zip(encoded[::2], encoded[1::2])
    return "".join(char * int(count) for count, char in pairs)


WORDS = ["alpha", "beta", "gamma", "delta"]


@pytest.mark.parametrize("position", range(len(WORDS)))
def test_prefix_found_at_position(position):
    sentence = " ".join(WORDS)
    assert is_prefix_of_word(sentence, WORDS[position][:3]) == position + 1


def test_prefix_first_match_wins():
    assert is_prefix_of_word("cat car cart", "ca") == 1


def test_prefix_missing_gives_minus_one():
    assert is_prefix_of_word("hello world", "xyz") == -1


def test_prefix_must_start_word():
    assert is_prefix_of_word("hello world", "orld") == -1


def test_consistent_all_allowed():
    words = ["ab", "ba", "", "aab"]
    assert count_consistent_strings("ab", words) == len(words)


def test_consistent_none_allowed():
    assert count_consistent_strings("", ["a", "b"]) == 0


def test_consistent_filters():
    words = ["ad", "bd", "aaab", "baa", "badab"]
    result = count_consistent_strings("ab", words)
    assert result == len([w for w in words if "d" not in w])


def test_diff_ways_pinned():
    assert sorted(diff_ways_to_compute("2-1-1")) == [0, 2]


def test_diff_ways_single_number():
    assert diff_ways_to_compute("42") == [42]


def test_diff_ways_empty():
    assert diff_ways_to_compute("") == []


def test_diff_ways_addition_is_associative():
    numbers = [1, 2, 3, 4]
    results = diff_ways_to_compute("+".join(map(str, numbers)))
    assert set(results) == {sum(numbers)}


def test_diff_ways_multiplication_is_associative():
    numbers = [2, 3, 5]
    results = diff_ways_to_compute("*".join(map(str, numbers)))
    assert set(results) == {prod(numbers)}
    assert len(results) == 2


def test_diff_ways_unknown_operator():
    with pytest.raises(ValueError):
        diff_ways_to_compute("2/3")


def test_fraction_zero():
    assert fraction_addition("-1/2+1/2") == "0/1"


@pytest.mark.parametrize(
    "expression, terms",
    [
        ("1/3-1/2", [Fraction(1, 3), Fraction(-1, 2)]),
        ("-1/2+1/2+1/3", [Fraction(-1, 2), Fraction(1, 2), Fraction(1, 3)]),
        ("5/3+1/3", [Fraction(5, 3), Fraction(1, 3)]),
        ("-7/10", [Fraction(-7, 10)]),
    ],
)
def test_fraction_matches_exact_sum(expression, terms):
    result = fraction_addition(expression)
    numerator, denominator = map(int, result.split("/"))
    assert denominator > 0
    assert gcd(numerator, denominator) == 1
    assert Fraction(numerator, denominator) == sum(terms)


def test_fraction_rejects_garbage():
    with pytest.raises(ValueError):
        fraction_addition("1/3 plus 1/2")


def test_uncommon_identical_sentences():
    assert uncommon_from_sentences("a b c", "a b c") == []


def test_uncommon_order():
    assert uncommon_from_sentences("this apple is sweet", "this apple is sour") == [
        "sweet",
        "sour",
    ]


def test_uncommon_repeated_in_one_sentence():
    assert uncommon_from_sentences("apple apple", "banana") == ["banana"]


@pytest.mark.parametrize("word", ["abcde", "aaaaaaaaaaaaaabb", "z" * 30, "abba"])
def test_compression_round_trip(word):
    encoded = compressed_string(word)
    assert _decode(encoded) == word
    assert all(1 <= int(count) <= 9 for count in encoded[::2])


def test_compression_empty():
    assert compressed_string("") == ""


def test_lucky_single_transform_of_a_run():
    s = "a" * 12
    assert get_lucky(s, 1) == len(s)


def test_lucky_settles_to_one_digit():
    result = get_lucky("leetcodexyz", 10)
    assert 1 <= result <= 9


def test_lucky_rejects_non_letters():
    with pytest.raises(ValueError):
        get_lucky("ab1", 1)


def test_min_changes_already_beautiful():
    assert min_changes("1100" * 3) == 0


def test_min_changes_alternating():
    n = 5
    assert min_changes("10" * n) == n


def test_min_changes_bounded():
    s = "100101101"
    assert min_changes(s) <= len(s) // 2


@pytest.mark.parametrize("shift", range(5))
def test_rotate_every_rotation(shift):
    s = "abcde"
    assert rotate_string(s, s[shift:] + s[:shift])


def test_rotate_not_a_rotation():
    assert not rotate_string("abcde", "abced")


def test_rotate_length_mismatch():
    assert not rotate_string("abc", "abca")


def test_rotate_empty_is_false():
    assert not rotate_string("", "")