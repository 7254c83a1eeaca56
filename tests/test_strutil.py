import pytest

from my_defender.strutil import compare, compare_n, get_nbr, nbr_to_str, reverse


@pytest.mark.parametrize("number", [0, 1, 7, 42, 1234, 999999])
def test_get_nbr_round_trip(number):
    assert get_nbr(str(number)) == number


def test_get_nbr_minus_sign():
    assert get_nbr("-12abc") == -12


def test_get_nbr_double_minus_is_positive():
    assert get_nbr("--7") == 7


def test_get_nbr_mixed_signs():
    assert get_nbr("+-+5") == -5


def test_get_nbr_stops_at_non_digit():
    assert get_nbr("31x99") == 31


def test_get_nbr_without_digits():
    assert get_nbr("abc") == 0


def test_compare_equal():
    assert compare("abc", "abc") == 0


def test_compare_sign():
    assert compare("abd", "abc") > 0
    assert compare("abc", "abd") < 0


def test_compare_prefix_uses_missing_character():
    assert compare("ab", "abc") == -ord("c")


@pytest.mark.parametrize("first,second", [("a", "b"), ("hello", "help"), ("", "x")])
def test_compare_antisymmetric(first, second):
    assert compare(first, second) == -compare(second, first)


def test_compare_rejects_none():
    with pytest.raises(TypeError):
        compare(None, "a")


def test_compare_n_ignores_after_limit():
    assert compare_n("abcdef", "abcxyz", 3) == 0


def test_compare_n_inside_limit():
    assert compare_n("abc", "abd", 3) < 0


def test_compare_n_rejects_none():
    with pytest.raises(TypeError):
        compare_n("a", None, 1)


def test_nbr_to_str_positive():
    assert nbr_to_str(1234) == "1234"


@pytest.mark.parametrize("number", [0, -5])
def test_nbr_to_str_non_positive_is_empty(number):
    assert nbr_to_str(number) == ""


@pytest.mark.parametrize("number", [1, 15, 800, 65536])
def test_nbr_to_str_round_trip(number):
    assert get_nbr(nbr_to_str(number)) == number


def test_reverse():
    assert reverse("hello") == "olleh"


@pytest.mark.parametrize("text", ["", "a", "defender", "ab cd"])
def test_reverse_twice_is_identity(text):
    assert reverse(reverse(text)) == text