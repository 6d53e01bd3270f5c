import math

import pytest

from dsakit.recursion import (
    count_decodings,
    count_up,
    factorial,
    fibonacci,
    is_palindrome,
    last_occurrence,
    power_of_two,
    remove_all,
    reverse,
    subsequences,
    substrings,
    sum_to,
)


@pytest.mark.parametrize("text", ["", "0", "012"])
def test_count_decodings_invalid_start(text):
    assert count_decodings(text) == 0


@pytest.mark.parametrize("length", range(1, 12))
def test_count_decodings_all_ones_follows_fibonacci(length):
    assert count_decodings("1" * length) == fibonacci(length + 1)


def test_count_decodings_single_digit():
    assert count_decodings("7") == 1


def test_count_decodings_zero_must_pair():
    assert count_decodings("30") == 0
    assert count_decodings("10") == count_decodings("1")


def test_count_decodings_rejects_non_digits():
    with pytest.raises(ValueError):
        count_decodings("1a2")


@pytest.mark.parametrize("n", range(0, 15))
def test_factorial_matches_math(n):
    assert factorial(n) == math.factorial(n)


def test_factorial_negative():
    with pytest.raises(ValueError):
        factorial(-1)


@pytest.mark.parametrize("n", range(0, 20))
def test_power_of_two(n):
    assert power_of_two(n) == 2**n


def test_fibonacci_base_cases_and_recurrence():
    assert fibonacci(0) == 0
    assert fibonacci(1) == 1
    for n in range(2, 30):
        assert fibonacci(n) == fibonacci(n - 1) + fibonacci(n - 2)


@pytest.mark.parametrize("n", range(1, 30))
def test_sum_to(n):
    assert sum_to(n) == sum(range(n + 1))


def test_sum_to_negative():
    with pytest.raises(ValueError):
        sum_to(-3)


def test_count_up():
    assert count_up(6) == list(range(1, 7))
    assert count_up(0) == []


def test_last_occurrence_missing():
    assert last_occurrence("amitchowdhuryamit", "z") == -1


def test_last_occurrence_found():
    text = "amitchowdhuryamit"
    index = last_occurrence(text, "a")
    assert text[index] == "a"
    assert "a" not in text[index + 1 :]


def test_is_palindrome():
    assert is_palindrome("amitma") is False
    assert is_palindrome("racecar") is True
    assert is_palindrome("") is True


def test_remove_all_source_example():
    result = remove_all("abcjhdfabcfhjaabcbc", "abc")
    assert result == "jhdffhj"
    assert "abc" not in result


def test_remove_all_empty_part():
    with pytest.raises(ValueError):
        remove_all("abc", "")


@pytest.mark.parametrize("text", ["adhiraj", "", "x", "hello world"])
def test_reverse_round_trip(text):
    assert reverse(reverse(text)) == text
    assert len(reverse(text)) == len(text)
    assert reverse(text)[:1] == text[-1:]


def test_substrings_order_and_content():
    text = "amit"
    result = substrings(text)
    assert len(result) == len(text) * (len(text) + 1) // 2
    assert all(part in text for part in result)
    assert result[: len(text)] == [text[:end] for end in range(1, len(text) + 1)]


def test_subsequences():
    text = "amit"
    result = subsequences(text)
    assert len(result) == 2 ** len(text)
    assert len(set(result)) == len(result)
    assert result[0] == text
    assert result[-1] == ""