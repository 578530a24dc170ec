"""
Declarative settings fields.

A plugin declares its options as ``{option_name: type}`` or
``{option_name: {"type": ..., "options": ..., "attributes": ...}}``. The map is
parsed once into the typed variants below; the same map drives both the
storage keys (``<plugin>_<option>``) and the settings form.
"""
from dataclasses import dataclass, field
from typing import ClassVar, Dict, Mapping, Union

from .exceptions import InvalidFieldDeclaration


@dataclass(frozen=True)
class SettingField:
    name: str
    kind: ClassVar[str] = ""
    stores_value: ClassVar[bool] = True

    @property
    def help_key(self) -> str:
        return f"{self.name}_help"


@dataclass(frozen=True)
class HtmlField(SettingField):
    """Static block; the label string is rendered as-is and nothing is stored."""

    kind: ClassVar[str] = "html"
    stores_value: ClassVar[bool] = False


@dataclass(frozen=True)
class WysiwygField(SettingField):
    kind: ClassVar[str] = "wysiwyg"


@dataclass(frozen=True)
class TextField(SettingField):
    kind: ClassVar[str] = "text"


@dataclass(frozen=True)
class BooleanField(SettingField):
    """Yes/no radio pair, stored as "true" / "false"."""

    kind: ClassVar[str] = "boolean"


@dataclass(frozen=True)
class CheckboxField(SettingField):
    """Rendered inside the shared checkbox group of the form."""

    kind: ClassVar[str] = "checkbox"


@dataclass(frozen=True)
class SelectField(SettingField):
    kind: ClassVar[str] = "select"
    options: Mapping[str, str] = field(default_factory=dict)
    attributes: Mapping[str, str] = field(default_factory=dict)


FIELD_KINDS = {
    variant.kind: variant
    for variant in (HtmlField, WysiwygField, TextField, BooleanField, CheckboxField, SelectField)
}

FieldDeclaration = Union[str, None, Mapping]


def _normalize_options(options) -> Dict[str, str]:
    if isinstance(options, Mapping):
        return {str(value): str(label) for value, label in options.items()}
    return {str(value): str(value) for value in options}


def parse_field(name: str, declaration: FieldDeclaration) -> SettingField:
    """Turn one field map entry into its typed variant."""
    if isinstance(declaration, Mapping):
        kind = declaration.get("type") or TextField.kind
        payload = declaration
    else:
        kind = declaration or TextField.kind
        payload = {}

    variant = FIELD_KINDS.get(kind)
    if variant is None:
        raise InvalidFieldDeclaration(f"Unknown setting type '{kind}' for field '{name}'")

    if variant is SelectField:
        if "options" not in payload:
            raise InvalidFieldDeclaration(f"Select field '{name}' declares no options")
        return SelectField(
            name=name,
            options=_normalize_options(payload["options"]),
            attributes=dict(payload.get("attributes") or {}),
        )
    return variant(name=name)


def parse_fields(field_map: Mapping[str, FieldDeclaration]) -> Dict[str, SettingField]:
    return {name: parse_field(name, declaration) for name, declaration in (field_map or {}).items()}
