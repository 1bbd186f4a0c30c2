import pytest

from photostore.utils.validators import (
    is_positive_int,
    looks_like_email,
    validate_amount,
    validate_currency,
    validate_email,
    validate_quantity,
)


@pytest.mark.parametrize("value", [1, 2, 10497])
def test_positive_ints(value):
    assert is_positive_int(value)


@pytest.mark.parametrize("value", [0, -1, 1.5, "2", True, None])
def test_not_positive_ints(value):
    assert not is_positive_int(value)


def test_quantity_message():
    with pytest.raises(ValueError, match="Invalid quantity: must be a positive integer"):
        validate_quantity(0)


@pytest.mark.parametrize("value", [0, -100, 10.5, "100"])
def test_amount_message(value):
    with pytest.raises(ValueError, match=r"Invalid amount: must be a positive integer in cents"):
        validate_amount(value)


@pytest.mark.parametrize("value", ["US", "usdx", "usd", "USDX", 840])
def test_currency_rejected(value):
    with pytest.raises(ValueError, match=r"Invalid currency: must be a 3-letter code \(e\.g\., USD\)"):
        validate_currency(value)


def test_currency_accepted():
    assert validate_currency("EUR") == "EUR"


@pytest.mark.parametrize("value", [None, ""])
def test_empty_email_is_absent(value):
    assert validate_email(value) is None


@pytest.mark.parametrize("value", ["buyer@example.com", "first.last+tag@sub.example.org", "user@localhost"])
def test_valid_emails(value):
    assert validate_email(value) == value


@pytest.mark.parametrize("value", ["not-an-email", "a@b@c.com", "user@-example.com", "a" * 250 + "@x.com"])
def test_invalid_emails(value):
    with pytest.raises(ValueError, match="Invalid email address format"):
        validate_email(value)


def test_client_side_email_shape():
    assert looks_like_email("buyer@example.com")
    assert not looks_like_email("buyer@example")
    assert not looks_like_email("buyer example@x.com")
    assert not looks_like_email("")


def test_whole_floats_count_as_integers():
    assert is_positive_int(2.0)
    assert validate_quantity(2.0) == 2
    assert isinstance(validate_quantity(2.0), int)
    assert validate_amount(10497.0) == 10497
    assert not is_positive_int(0.0)
    assert not is_positive_int(float("nan"))
    assert not is_positive_int(float("inf"))
