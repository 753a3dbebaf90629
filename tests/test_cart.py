import pytest
from pydantic import ValidationError

from storefront.cart import (
    AddressDocument,
    ApplicationType,
    CartDocument,
    OrderDocument,
    PaymentSessionStatus,
)

PAYLOAD = {
    "id": "cart_01",
    "currency_code": "eur",
    "region": {"id": "reg_eu", "name": "Europe", "currency_code": "eur"},
    "email": "ada@example.com",
    "items": [
        {
            "id": "item_1",
            "title": "Linen shirt",
            "quantity": 2,
            "unit_price": 4500,
            "original_unit_price": 5000,
            "total": 9000,
            "original_total": 10000,
            "thumbnail": "https://cdn.example.com/shirt.png",
        },
        {"id": "item_2", "title": "Socks", "quantity": 1, "unit_price": 1000, "total": 1000},
    ],
    "shipping_methods": [{"id": "sm_1", "name": "Standard", "amount": 500}],
    "payment_collection": {
        "id": "paycol_1",
        "payment_sessions": [
            {"id": "ps_old", "provider_id": "pp_paypal_paypal", "status": "error"},
            {
                "id": "ps_1",
                "provider_id": "pp_stripe_stripe",
                "status": "pending",
                "amount": 10500,
                "data": {"client_secret": "pi_secret"},
            },
        ],
    },
    "promotions": [
        {"id": "promo_auto", "code": None},
        {"id": "promo_1", "code": "SUMMER10", "application_method": {"type": "percentage", "value": 10}},
        {"id": "promo_2", "code": "", "is_automatic": False},
    ],
    "gift_cards": [],
    "subtotal": 11000,
    "discount_total": 1000,
    "shipping_total": 500,
    "tax_total": 0,
    "total": 10500.0,
}


def test_cart_document_to_domain():
    cart = CartDocument.model_validate(PAYLOAD).to_domain()

    assert cart.currency_code == "eur"
    assert cart.total == 10500
    assert cart.items[1].original_total == 1000
    assert cart.items[1].original_unit_price == 1000
    assert cart.shipping_address is None


def test_active_session_skips_errored_sessions():
    cart = CartDocument.model_validate(PAYLOAD).to_domain()

    session = cart.active_payment_session
    assert session is not None
    assert session.id == "ps_1"
    assert session.status is PaymentSessionStatus.PENDING
    assert session.client_secret == "pi_secret"


def test_promotion_flags():
    promotions = CartDocument.model_validate(PAYLOAD).to_domain().promotions

    assert promotions[0].is_automatic
    assert not promotions[0].removable
    assert promotions[1].removable
    assert promotions[1].application_method.type is ApplicationType.PERCENTAGE
    assert promotions[2].code is None


def test_promotion_codes_of_cart():
    assert CartDocument.model_validate(PAYLOAD).to_domain().promotion_codes == ("SUMMER10",)


def test_zero_quantity_line_is_rejected():
    payload = {**PAYLOAD, "items": [{"id": "i", "quantity": 0, "unit_price": 0, "total": 0}]}

    with pytest.raises(ValidationError):
        CartDocument.model_validate(payload)


def test_address_round_trip():
    doc = AddressDocument(first_name="Ada", last_name="Lovelace", city="London", country_code="gb")

    assert AddressDocument.from_domain(doc.to_domain()) == doc


def test_order_document():
    order = OrderDocument.model_validate(
        {"id": "order_1", "display_id": 7, "currency_code": "eur", "total": 10500, "items": []}
    ).to_domain()

    assert order.display_id == 7
    assert order.items == ()
