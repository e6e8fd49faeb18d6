"""Checkout forms and the order request they produce.

``Form.collect_values()`` reads every field whether or not it is valid;
``build_order_request`` is where validity is enforced.
"""

from collections.abc import Sequence

from protean.exceptions import ValidationError

from storefront.basket.basket import Basket
from storefront.checkout.fields import (
    Field,
    create_choice_field,
    create_text_field,
    field_is_valid,
    field_value,
)
from storefront.order.order import OrderRequest, PaymentType


class Form:
    """Ordered fields behind one submit button."""

    def __init__(self, submit_text: str, fields: Sequence[Field]) -> None:
        self.submit_text = submit_text
        self.fields = list(fields)

    def is_valid(self) -> bool:
        return all(field_is_valid(field) for field in self.fields)

    def invalid_fields(self) -> list[Field]:
        return [field for field in self.fields if not field_is_valid(field)]

    def collect_values(self) -> dict[str, str]:
        """Field name to current value, for every field."""
        return {field.name: field_value(field) for field in self.fields}

    def field(self, name: str) -> Field:
        for field in self.fields:
            if field.name == name:
                return field
        raise KeyError(name)


def payment_form() -> Form:
    return Form(
        "Next",
        [
            create_choice_field("payment", [payment.value for payment in PaymentType]),
            create_text_field("address", "Enter delivery address"),
        ],
    )


def contacts_form() -> Form:
    return Form(
        "Pay",
        [
            create_text_field("email", "Enter email"),
            create_text_field("phone", "+7 ("),
        ],
    )


def build_order_request(basket: Basket, *forms: Form) -> OrderRequest:
    """Summarize the basket and the filled forms into an order request."""
    errors = {
        field.name: ["This field is required"] for form in forms for field in form.invalid_fields()
    }
    if errors:
        raise ValidationError(errors)

    values: dict[str, str] = {}
    for form in forms:
        values.update(form.collect_values())

    return OrderRequest(
        payment=values.get("payment"),
        email=values.get("email"),
        phone=values.get("phone"),
        address=values.get("address"),
        total=basket.basket_total(),
        items=basket.item_ids(),
    )
