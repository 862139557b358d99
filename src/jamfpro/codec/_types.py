r"""Type introspection used by the XML codec."""

from __future__ import annotations

__all__ = ["model_fields", "resolve_type", "scalar_from_text", "scalar_to_text"]

import dataclasses
import functools
import types
import typing
from enum import Enum
from typing import Any, Union

NoneType = type(None)


@functools.lru_cache(maxsize=None)
def model_fields(cls: type) -> tuple[tuple[dataclasses.Field, Any], ...]:
    """Return the fields of a dataclass paired with their resolved type."""
    hints = typing.get_type_hints(cls)
    return tuple((field, hints[field.name]) for field in dataclasses.fields(cls))


def resolve_type(tp: Any) -> tuple[Any, bool]:
    """Strip ``Optional`` and tell whether the type is a list.

    Returns:
        A ``(item_type, is_list)`` tuple.

    Example:
        ```pycon
        >>> from jamfpro.codec._types import resolve_type
        >>> resolve_type(int | None)
        (<class 'int'>, False)
        >>> resolve_type(list[str] | None)
        (<class 'str'>, True)

        ```
    """
    origin = typing.get_origin(tp)
    if origin is Union or origin is types.UnionType:
        args = [arg for arg in typing.get_args(tp) if arg is not NoneType]
        if len(args) == 1:
            return resolve_type(args[0])
        return (Any, False)
    if origin is list:
        (item,) = typing.get_args(tp) or (Any,)
        return (resolve_type(item)[0], True)
    return (tp, False)


def scalar_from_text(tp: Any, text: str) -> Any:
    """Convert the text of an XML element to a scalar value.

    Raises:
        ValueError: If the text is not a valid value of the type.
    """
    if tp is bool:
        lowered = text.strip().lower()
        if lowered not in ("true", "false"):
            msg = f"invalid boolean {text!r}"
            raise ValueError(msg)
        return lowered == "true"
    if tp is int:
        return int(text.strip())
    if tp is float:
        return float(text.strip())
    if isinstance(tp, type) and issubclass(tp, Enum):
        return tp(text)
    return text


def scalar_to_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)
