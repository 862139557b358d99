r"""Classic API computer extension attributes
(``/computerextensionattributes``)."""

from __future__ import annotations

__all__ = [
    "ComputerExtensionAttribute",
    "ComputerExtensionAttributesService",
    "DataType",
    "InputType",
    "InputTypePlatform",
    "InputTypeType",
    "InventoryDisplay",
    "ListComputerExtensionAttribute",
    "ListComputerExtensionAttributes",
]

from dataclasses import dataclass, field
from enum import Enum

from jamfpro.classic.common import ClassicService


class DataType(str, Enum):
    STRING = "String"
    INTEGER = "Integer"
    DATE = "Date"


class InputTypeType(str, Enum):
    SCRIPT = "script"
    TEXT_FIELD = "Text Field"
    POPUP_MENU = "Pop-up Menu"


class InputTypePlatform(str, Enum):
    MAC = "Mac"


class InventoryDisplay(str, Enum):
    GENERAL = "General"
    HARDWARE = "Hardware"
    OPERATING_SYSTEM = "Operating System"
    USER_AND_LOCATION = "User and Location"
    PURCHASING = "Purchasing"
    EXTENSION_ATTRIBUTES = "Extension Attributes"


@dataclass
class InputType:
    """How the value of the attribute is collected.

    ``platform``, ``popup_choices`` and ``script`` are undocumented but
    returned by the server.
    """

    type: InputTypeType | None = None
    platform: InputTypePlatform | None = None
    popup_choices: list[str] | None = field(default=None, metadata={"xml": "popup_choices>choice"})
    script: str | None = None


@dataclass
class ComputerExtensionAttribute:
    id: int | None = None
    name: str | None = None
    enabled: bool | None = None
    description: str | None = None
    data_type: DataType | None = None
    input_type: InputType | None = None
    inventory_display: InventoryDisplay | None = None


@dataclass
class ListComputerExtensionAttribute:
    id: int | None = None
    name: str | None = None
    enabled: bool | None = None


@dataclass
class ListComputerExtensionAttributes:
    size: int | None = None
    computer_extension_attributes: list[ListComputerExtensionAttribute] | None = field(
        default=None, metadata={"xml": "computer_extension_attribute"}
    )


class ComputerExtensionAttributesService(
    ClassicService[ComputerExtensionAttribute, ListComputerExtensionAttributes]
):
    path = "/computerextensionattributes"
    root_tag = "computer_extension_attribute"
    model = ComputerExtensionAttribute
    list_model = ListComputerExtensionAttributes

    @staticmethod
    def _check(operation: str, attribute: ComputerExtensionAttribute | None) -> ComputerExtensionAttribute:
        if attribute is None:
            msg = (
                f"ComputerExtensionAttributesService.{operation}(): "
                f"cannot {operation} None computer extension attribute"
            )
            raise ValueError(msg)
        if attribute.name is None:
            msg = (
                f"ComputerExtensionAttributesService.{operation}(): "
                f"cannot {operation} computer extension attribute with None name"
            )
            raise ValueError(msg)
        return attribute

    def create(self, attribute: ComputerExtensionAttribute) -> int | None:
        return self._create(self._check("create", attribute))

    def get(self, attribute_id: int) -> ComputerExtensionAttribute:
        return self._get(attribute_id)

    def list(self) -> ListComputerExtensionAttributes:
        return self._list()

    def update(self, attribute: ComputerExtensionAttribute) -> None:
        self._check("update", attribute)
        if attribute.id is None:
            msg = (
                "ComputerExtensionAttributesService.update(): "
                "cannot update computer extension attribute with None id"
            )
            raise ValueError(msg)
        self._update(attribute.id, attribute)

    def delete(self, attribute_id: int) -> None:
        self._delete(attribute_id)
