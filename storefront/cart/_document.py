"""
Backend documents — validated JSON in, immutable domain out.

    cart = CartDocument.model_validate(payload).to_domain()

Amounts arrive as JSON numbers; whole floats (1000.0) are accepted and
narrowed to int by pydantic.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from storefront.cart._types import (
    Address,
    ApplicationMethod,
    ApplicationType,
    Cart,
    GiftCard,
    LineItem,
    Order,
    PaymentCollection,
    PaymentSession,
    PaymentSessionStatus,
    Promotion,
    Region,
    ShippingMethod,
)


class _Document(BaseModel):
    model_config = ConfigDict(extra="ignore")


class AddressDocument(_Document):
    first_name: str = ""
    last_name: str = ""
    address_1: str = ""
    address_2: str | None = None
    company: str | None = None
    city: str = ""
    postal_code: str = ""
    province: str | None = None
    country_code: str = ""
    phone: str | None = None

    def to_domain(self) -> Address:
        return Address(
            first_name=self.first_name,
            last_name=self.last_name,
            address_1=self.address_1,
            address_2=self.address_2,
            company=self.company,
            city=self.city,
            postal_code=self.postal_code,
            province=self.province,
            country_code=self.country_code,
            phone=self.phone,
        )

    @classmethod
    def from_domain(cls, address: Address) -> AddressDocument:
        return cls(
            first_name=address.first_name,
            last_name=address.last_name,
            address_1=address.address_1,
            address_2=address.address_2,
            company=address.company,
            city=address.city,
            postal_code=address.postal_code,
            province=address.province,
            country_code=address.country_code,
            phone=address.phone,
        )


class RegionDocument(_Document):
    id: str
    name: str = ""
    currency_code: str

    def to_domain(self) -> Region:
        return Region(id=self.id, name=self.name, currency_code=self.currency_code)


class LineItemDocument(_Document):
    id: str
    title: str = ""
    quantity: int = Field(ge=1)
    unit_price: int
    original_unit_price: int | None = None
    total: int
    original_total: int | None = None

    def to_domain(self) -> LineItem:
        return LineItem(
            id=self.id,
            title=self.title,
            quantity=self.quantity,
            unit_price=self.unit_price,
            original_unit_price=(
                self.original_unit_price
                if self.original_unit_price is not None
                else self.unit_price
            ),
            total=self.total,
            original_total=(
                self.original_total if self.original_total is not None else self.total
            ),
        )


class ShippingMethodDocument(_Document):
    id: str
    name: str = ""
    amount: int = 0
    shipping_option_id: str | None = None

    def to_domain(self) -> ShippingMethod:
        return ShippingMethod(
            id=self.id,
            name=self.name,
            amount=self.amount,
            shipping_option_id=self.shipping_option_id,
        )


class PaymentSessionDocument(_Document):
    id: str
    provider_id: str
    status: PaymentSessionStatus
    amount: int = 0
    data: dict[str, Any] = Field(default_factory=dict)

    def to_domain(self) -> PaymentSession:
        secret = self.data.get("client_secret")
        return PaymentSession(
            id=self.id,
            provider_id=self.provider_id,
            status=self.status,
            amount=self.amount,
            client_secret=secret if isinstance(secret, str) else None,
        )


class PaymentCollectionDocument(_Document):
    id: str
    payment_sessions: list[PaymentSessionDocument] = Field(default_factory=list)

    def to_domain(self) -> PaymentCollection:
        return PaymentCollection(
            id=self.id,
            payment_sessions=tuple(s.to_domain() for s in self.payment_sessions),
        )


class ApplicationMethodDocument(_Document):
    type: ApplicationType
    value: int
    currency_code: str | None = None

    def to_domain(self) -> ApplicationMethod:
        return ApplicationMethod(
            type=self.type, value=self.value, currency_code=self.currency_code
        )


class PromotionDocument(_Document):
    id: str
    code: str | None = None
    is_automatic: bool | None = None
    application_method: ApplicationMethodDocument | None = None

    def to_domain(self) -> Promotion:
        code = self.code or None
        return Promotion(
            id=self.id,
            code=code,
            application_method=(
                self.application_method.to_domain()
                if self.application_method is not None
                else None
            ),
            # Missing flag: a codeless promotion can only be automatic.
            is_automatic=(
                self.is_automatic if self.is_automatic is not None else code is None
            ),
        )


class GiftCardDocument(_Document):
    id: str
    code: str = ""
    balance: int = 0

    def to_domain(self) -> GiftCard:
        return GiftCard(id=self.id, code=self.code, balance=self.balance)


class CartDocument(_Document):
    id: str
    currency_code: str | None = None
    region: RegionDocument | None = None
    items: list[LineItemDocument] = Field(default_factory=list)
    email: str | None = None
    shipping_address: AddressDocument | None = None
    billing_address: AddressDocument | None = None
    shipping_methods: list[ShippingMethodDocument] = Field(default_factory=list)
    payment_collection: PaymentCollectionDocument | None = None
    promotions: list[PromotionDocument] = Field(default_factory=list)
    gift_cards: list[GiftCardDocument] = Field(default_factory=list)
    subtotal: int = 0
    discount_total: int = 0
    gift_card_total: int = 0
    shipping_total: int | None = None
    tax_total: int | None = None
    total: int = 0

    def to_domain(self) -> Cart:
        return Cart(
            id=self.id,
            currency_code=self.currency_code or None,
            region=self.region.to_domain() if self.region else None,
            items=tuple(i.to_domain() for i in self.items),
            email=self.email or None,
            shipping_address=(
                self.shipping_address.to_domain() if self.shipping_address else None
            ),
            billing_address=(
                self.billing_address.to_domain() if self.billing_address else None
            ),
            shipping_methods=tuple(m.to_domain() for m in self.shipping_methods),
            payment_collection=(
                self.payment_collection.to_domain()
                if self.payment_collection
                else None
            ),
            promotions=tuple(p.to_domain() for p in self.promotions),
            gift_cards=tuple(g.to_domain() for g in self.gift_cards),
            subtotal=self.subtotal,
            discount_total=self.discount_total,
            gift_card_total=self.gift_card_total,
            shipping_total=self.shipping_total,
            tax_total=self.tax_total,
            total=self.total,
        )


class OrderDocument(_Document):
    id: str
    display_id: int | None = None
    cart_id: str | None = None
    email: str | None = None
    currency_code: str
    total: int = 0
    items: list[LineItemDocument] = Field(default_factory=list)

    def to_domain(self) -> Order:
        return Order(
            id=self.id,
            display_id=self.display_id,
            cart_id=self.cart_id,
            email=self.email,
            currency_code=self.currency_code,
            total=self.total,
            items=tuple(i.to_domain() for i in self.items),
        )


__all__ = (
    "AddressDocument",
    "RegionDocument",
    "LineItemDocument",
    "ShippingMethodDocument",
    "PaymentSessionDocument",
    "PaymentCollectionDocument",
    "ApplicationMethodDocument",
    "PromotionDocument",
    "GiftCardDocument",
    "CartDocument",
    "OrderDocument",
)
