import pytest

from uniquote.utils.decimals import normalize_decimals, scale_to_decimals


def test_normalize_decimals_equal():
    assert normalize_decimals(12345, 6, 6, "down") == 12345
    assert normalize_decimals(12345, 6, 6, "up") == 12345


def test_normalize_decimals_scale_up():
    # from 6 decimals to 18 decimals
    amount = 12345
    result = normalize_decimals(amount, 6, 18)
    assert result == amount * 10**12


def test_normalize_decimals_scale_down_round_down():
    # from 18 decimals to 6 decimals, round down
    amount = 123456789000000000000  # 123.456789 tokens at 18 decimals
    result = normalize_decimals(amount, 18, 6, "down")
    assert result == amount // 10**12


def test_normalize_decimals_scale_down_round_up():
    # from 18 decimals to 6 decimals, round up
    amount = 123456789000000000001  # just slightly above
    result = normalize_decimals(amount, 18, 6, "up")
    expected = (amount + (10**12 - 1)) // 10**12
    assert result == expected
    # Verify it's strictly greater than floor division
    assert result == amount // 10**12 + 1


def test_normalize_decimals_negative_truncates_toward_zero():
    assert normalize_decimals(-1_999_999_999_999, 18, 6) == -1


def test_scale_to_decimals():
    assert scale_to_decimals(7, 6, 18) == 7 * 10**12
    assert scale_to_decimals(7, 18, 18) == 7


def test_scale_to_decimals_down_raises():
    with pytest.raises(ValueError):
        scale_to_decimals(7, 18, 6)
