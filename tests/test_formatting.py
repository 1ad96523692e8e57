import pytest

from home_funds.formatting import format_currency, simplified_form


@pytest.mark.parametrize(
    "value,decimals,expected",
    [
        (0, 3, "0"),
        (9_999, 3, "9999"),
        (25_000, 1, "25.0K"),
        (99_999, 3, "99.999K"),
        (100_000, 2, "1.00L"),
        (8_000_000, 3, "80.000L"),
        (10_000_000, 1, "1.0CR"),
        (1_456_000_000, 2, "145.60CR"),
        (-250_000, 1, "-2.5L"),
        (-500, 3, "-500"),
    ],
)
def test_simplified_form(value, decimals, expected):
    assert simplified_form(value, decimals) == expected


def test_simplified_form_default_precision():
    assert simplified_form(12_345_678) == "1.235CR"


def test_format_currency_groups_thousands():
    assert format_currency(8_000_000) == "8,000,000"
    assert format_currency(69_679.49) == "69,679"
