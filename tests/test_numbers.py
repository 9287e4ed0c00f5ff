import pytest

from algonotes.numbers import INT32_MAX, INT32_MIN, is_palindrome_number, reverse_integer


@pytest.mark.parametrize(
    "x, expected",
    [(121, True), (-121, False), (10, False), (0, True), (12321, True), (1221, True), (1231, False)],
)
def test_is_palindrome_number(x, expected):
    assert is_palindrome_number(x) is expected


@pytest.mark.parametrize("x", [7, 44, 505, 9009, 1234321])
def test_palindromes_reverse_to_themselves(x):
    assert is_palindrome_number(x) is True
    assert reverse_integer(x) == x


def test_reverse_integer_pinned():
    assert reverse_integer(123) == 321


@pytest.mark.parametrize("x", [123, 98765, 1, 2147447412])
def test_reverse_integer_round_trip(x):
    assert reverse_integer(reverse_integer(x)) == x


@pytest.mark.parametrize("x", [123, 4567, 90001])
def test_reverse_integer_keeps_sign(x):
    assert reverse_integer(-x) == -reverse_integer(x)


def test_reverse_integer_drops_trailing_zeros():
    assert reverse_integer(120) == reverse_integer(12)


@pytest.mark.parametrize("x", [1534236469, INT32_MAX, INT32_MIN])
def test_reverse_integer_overflow_gives_zero(x):
    assert reverse_integer(x) == 0


def test_reverse_integer_stays_in_range():
    for x in (1463847412, -1463847412, 1000000003):
        assert INT32_MIN <= reverse_integer(x) <= INT32_MAX