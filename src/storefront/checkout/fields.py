"""Checkout form fields.

A field is either free text or a choice among fixed options. Validity and the
value a field contributes are decided by matching on the variant.
"""

from dataclasses import dataclass
from typing import assert_never


@dataclass
class TextField:
    name: str
    hint: str = ""
    value: str = ""


@dataclass
class ChoiceField:
    name: str
    choices: frozenset[str]
    selected: str | None = None

    def select(self, choice: str) -> None:
        if choice not in self.choices:
            raise ValueError(f"{choice!r} is not one of the choices of {self.name!r}")
        self.selected = choice


Field = TextField | ChoiceField


def create_text_field(name: str, hint: str = "") -> TextField:
    return TextField(name=name, hint=hint)


def create_choice_field(name: str, choices) -> ChoiceField:
    return ChoiceField(name=name, choices=frozenset(choices))


def field_is_valid(field: Field) -> bool:
    match field:
        case TextField(value=value):
            return bool(value.strip())
        case ChoiceField(selected=selected):
            return bool(selected)
        case _:
            assert_never(field)


def field_value(field: Field) -> str:
    """Current value of the field, valid or not."""
    match field:
        case TextField(value=value):
            return value
        case ChoiceField(selected=selected):
            return selected or ""
        case _:
            assert_never(field)
