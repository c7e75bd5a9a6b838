"""System property records."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from vco_api.types.date_time import DateTime
from vco_api.types.fields import as_enum, as_int, as_str, decode_field, require_object
from vco_api.types.tinyint import TinyInt

if TYPE_CHECKING:
    from collections.abc import Iterable


class PropertyDataType(enum.StrEnum):
    STRING = "STRING"
    NUMBER = "NUMBER"
    BOOLEAN = "BOOLEAN"
    JSON = "JSON"
    DATE = "DATE"
    DATETIME = "DATETIME"


@dataclass(frozen=True, slots=True)
class SystemProperty:
    """A system property as sent to insert or update calls."""

    id: int
    name: str
    value: str
    data_type: PropertyDataType
    is_read_only: TinyInt
    is_password: TinyInt
    default_value: str | None = None
    description: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to the camelCase wire object."""
        return {
            "id": self.id,
            "name": self.name,
            "value": self.value,
            "defaultValue": self.default_value,
            "isReadOnly": self.is_read_only.encode(),
            "isPassword": self.is_password.encode(),
            "dataType": self.data_type.value,
            "description": self.description,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SystemProperty:
        data = require_object(data)
        return cls(
            id=decode_field(data, "id", as_int),
            name=decode_field(data, "name", as_str),
            value=decode_field(data, "value", as_str),
            data_type=decode_field(data, "dataType", as_enum(PropertyDataType)),
            is_read_only=decode_field(data, "isReadOnly", TinyInt.decode),
            is_password=decode_field(data, "isPassword", TinyInt.decode),
            default_value=decode_field(data, "defaultValue", as_str, optional=True),
            description=decode_field(data, "description", as_str, optional=True),
        )


@dataclass(frozen=True, slots=True)
class SystemPropertyItem:
    """A system property as returned by ``systemProperty/getSystemProperties``.

    On the wire the property's own keys sit beside ``created`` and
    ``modified`` in one flat object.
    """

    system_property: SystemProperty
    created: DateTime
    modified: DateTime

    @property
    def name(self) -> str:
        return self.system_property.name

    def to_dict(self) -> dict[str, Any]:
        result = self.system_property.to_dict()
        result["created"] = self.created.encode()
        result["modified"] = self.modified.encode()
        return result

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SystemPropertyItem:
        data = require_object(data)
        return cls(
            system_property=SystemProperty.from_dict(data),
            created=decode_field(data, "created", DateTime.decode),
            modified=decode_field(data, "modified", DateTime.decode),
        )


def properties_by_name(items: Iterable[SystemPropertyItem]) -> dict[str, SystemPropertyItem]:
    """Index system properties by name, sorted by name."""
    return {item.name: item for item in sorted(items, key=lambda item: item.name)}
