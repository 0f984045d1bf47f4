import pytest

from philosim.numbers import (
    ULONG_MAX,
    atoul,
    digit_len,
    exceeds_ulong_max,
    is_num,
    ultoa,
)


def test_limit_is_the_64_bit_maximum():
    assert exceeds_ulong_max("18446744073709551615") is False
    assert exceeds_ulong_max("18446744073709551616") is True
    assert atoul("18446744073709551615") == ULONG_MAX


@pytest.mark.parametrize("text", ["0", "42", "0007", "18446744073709551615"])
def test_is_num_accepts_digit_strings(text):
    assert is_num(text) is True


@pytest.mark.parametrize("text", [None, "", "-1", "+5", "12a", " 3", "1.5", "\u0663"])
def test_is_num_rejects_other_strings(text):
    assert is_num(text) is False


def test_exceeds_limit_boundary():
    assert exceeds_ulong_max(str(ULONG_MAX)) is False
    assert exceeds_ulong_max(str(ULONG_MAX + 1)) is True


def test_exceeds_limit_longer_string():
    assert exceeds_ulong_max(str(ULONG_MAX) + "0") is True


def test_exceeds_limit_ignores_leading_zeros():
    assert exceeds_ulong_max("000" + str(ULONG_MAX)) is False
    assert exceeds_ulong_max("000" + str(ULONG_MAX + 1)) is True


def test_exceeds_limit_small_values_and_none():
    assert exceeds_ulong_max("200") is False
    assert exceeds_ulong_max(None) is False


@pytest.mark.parametrize("value", [0, 1, 42, 800, ULONG_MAX])
def test_atoul_round_trips_str(value):
    assert atoul(str(value)) == value


def test_atoul_empty_and_none_give_zero():
    assert atoul("") == 0
    assert atoul(None) == 0


def test_atoul_skips_leading_spaces_and_zeros():
    assert atoul("   000410") == 410
    assert atoul("0000") == 0


def test_atoul_wraps_above_limit():
    assert atoul(str(ULONG_MAX + 1)) == 0


def test_atoul_rejects_non_digits():
    with pytest.raises(ValueError):
        atoul("12x")


@pytest.mark.parametrize("value", [0, 7, 123456, ULONG_MAX])
def test_ultoa_round_trips_through_atoul(value):
    assert atoul(ultoa(value)) == value


@pytest.mark.parametrize("value", [0, 9, 10, 99999, ULONG_MAX])
def test_ultoa_has_fixed_width(value):
    assert len(ultoa(value)) == len(ultoa(ULONG_MAX))


def test_ultoa_of_limit_is_plain_decimal():
    assert ultoa(ULONG_MAX) == "18446744073709551615"


def test_ultoa_pads_with_zeros():
    rendered = ultoa(5)
    assert rendered.endswith("5")
    assert set(rendered[:-1]) == {"0"}


@pytest.mark.parametrize("value", [-1, ULONG_MAX + 1])
def test_ultoa_rejects_out_of_range(value):
    with pytest.raises(ValueError):
        ultoa(value)


@pytest.mark.parametrize("value", [0, 5, 10, 99, 100, 1234567, ULONG_MAX])
def test_digit_len_matches_decimal_rendering(value):
    assert digit_len(value) == len(str(value))


def test_digit_len_grows_at_powers_of_ten():
    for exponent in range(1, 20):
        power = 10**exponent
        assert digit_len(power) == digit_len(power - 1) + 1


def test_digit_len_rejects_negative():
    with pytest.raises(ValueError):
        digit_len(-3)