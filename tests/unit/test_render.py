import pytest

from photostore.catalog import PRODUCTS
from photostore.storefront.cart import CartState
from photostore.storefront.render import (
    CheckoutSnapshot,
    format_price,
    is_trusted_receipt_url,
    render_cart,
    render_checkout,
    render_products,
    render_success,
)


@pytest.mark.parametrize("cents,expected", [(2999, "29.99"), (5, "0.05"), (10497, "104.97"), (0, "0.00")])
def test_format_price(cents, expected):
    assert format_price(cents) == expected


@pytest.mark.parametrize(
    "url",
    [
        "https://squareup.com/receipt/preview/abc",
        "https://squareupsandbox.com/receipt/preview/abc",
        "https://app.squareupsandbox.com/receipt/preview/abc",
        "http://squareup.com/receipt",
    ],
)
def test_trusted_receipt_urls(url):
    assert is_trusted_receipt_url(url) is True


@pytest.mark.parametrize(
    "url",
    [
        None,
        "",
        "javascript:alert(1)",
        "ftp://squareup.com/receipt",
        "https://evil.example.com/squareup.com",
        "https://squareup.com.evil.example.com/receipt",
        "https://notsquareup.com/receipt",
        "https://evil.com\\@squareup.com/receipt",
        "https://evil.com\\.squareup.com/r",
        "https://squareup.com/receipt\n",
        "https://evil.com\t@squareup.com/receipt",
    ],
)
def test_untrusted_receipt_urls(url):
    assert is_trusted_receipt_url(url) is False


def test_render_products_formats_prices():
    view = render_products(PRODUCTS, cart_count=2)
    assert view.cart_count == 2
    assert [p.id for p in view.products] == [p.id for p in PRODUCTS]
    assert view.products[0].price == "29.99"


def test_render_empty_cart():
    view = render_cart(CartState(PRODUCTS))
    assert view.lines == ()
    assert view.checkout_enabled is False
    assert view.empty_message == "Your cart is empty"


def test_render_cart_lines():
    cart = CartState(PRODUCTS)
    cart.add("photo-2")
    cart.add("photo-2")
    view = render_cart(cart)
    assert view.lines[0].unit_price == "34.99"
    assert view.lines[0].line_total == "69.98"
    assert view.total == "69.98"
    assert view.checkout_enabled is True
    assert view.empty_message is None


def test_checkout_snapshot_is_not_resynced_with_cart():
    cart = CartState(PRODUCTS)
    cart.add("photo-2")
    snapshot = CheckoutSnapshot.of(cart.lines)
    cart.add("photo-2")
    cart.add("photo-1")
    assert snapshot.total == 3499
    assert snapshot.order_items() == [{"id": "photo-2", "quantity": 1}]


def test_render_checkout_labels():
    cart = CartState(PRODUCTS)
    for _ in range(3):
        cart.add("photo-2")
    snapshot = CheckoutSnapshot.of(cart.lines)

    ready = render_checkout(snapshot, payment_available=True)
    assert ready.total == "104.97"
    assert ready.pay_label == "Pay $104.97"
    assert ready.submit_enabled is True
    assert ready.lines[0].line_total == "104.97"

    busy = render_checkout(snapshot, payment_available=True, submit_enabled=False)
    assert busy.pay_label == "Processing..."
    assert busy.submit_enabled is False

    unavailable = render_checkout(snapshot, payment_available=False, notice="Payment processing is not configured")
    assert unavailable.submit_enabled is False
    assert unavailable.notice == "Payment processing is not configured"


def test_render_success_drops_untrusted_receipt():
    trusted = render_success("ord-1", "https://squareupsandbox.com/receipt/preview/p1", 10497)
    assert trusted.receipt_url == "https://squareupsandbox.com/receipt/preview/p1"
    assert trusted.charged == "104.97"

    untrusted = render_success("ord-1", "https://evil.example.com/receipt", 10497)
    assert untrusted.order_id == "ord-1"
    assert untrusted.receipt_url is None


def test_render_success_drops_backslash_host_confusion():
    view = render_success("ord-1", "https://evil.com\\@squareup.com/receipt", 100)
    assert view.receipt_url is None
    assert view.order_id == "ord-1"
