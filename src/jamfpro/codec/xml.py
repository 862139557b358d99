r"""Conversion between dataclass models and Classic API XML documents.

Each field of a model maps to a child element named after the field.
The ``xml`` metadata key overrides the tag, and a ``>`` in it names a
wrapper element, e.g. ``field(metadata={"xml": "popup_choices>choice"})``.
List fields repeat their tag once per item. ``None`` fields are left
out of the document.

Example:
    ```pycon
    >>> from dataclasses import dataclass
    >>> from jamfpro.codec.xml import decode_xml, encode_xml
    >>> @dataclass
    ... class Site:
    ...     id: int | None = None
    ...     name: str | None = None
    ...
    >>> encode_xml(Site(id=-1, name="None"), "site")
    b'<site><id>-1</id><name>None</name></site>'
    >>> decode_xml(b"<site><id>1</id><name>Tokyo</name></site>", Site)
    Site(id=1, name='Tokyo')

    ```
"""

from __future__ import annotations

__all__ = ["decode_xml", "encode_xml", "from_element", "to_element"]

import dataclasses
import logging
from typing import Any, TypeVar
from xml.etree import ElementTree

from jamfpro.codec._types import model_fields, resolve_type, scalar_from_text, scalar_to_text
from jamfpro.exceptions import DecodeError

logger: logging.Logger = logging.getLogger(__name__)

T = TypeVar("T")


def _tag_path(field: dataclasses.Field) -> list[str]:
    return field.metadata.get("xml", field.name).split(">")


def _value_to_element(tag: str, value: Any) -> ElementTree.Element:
    if dataclasses.is_dataclass(value):
        return to_element(value, tag)
    element = ElementTree.Element(tag)
    element.text = scalar_to_text(value)
    return element


def to_element(obj: Any, tag: str) -> ElementTree.Element:
    """Convert a dataclass instance to an element named ``tag``."""
    root = ElementTree.Element(tag)
    for field, _ in model_fields(type(obj)):
        value = getattr(obj, field.name)
        if value is None:
            continue
        *wrappers, leaf = _tag_path(field)
        parent = root
        for wrapper in wrappers:
            child = parent.find(wrapper)
            parent = child if child is not None else ElementTree.SubElement(parent, wrapper)
        items = value if isinstance(value, list) else [value]
        for item in items:
            parent.append(_value_to_element(leaf, item))
    return root


def encode_xml(obj: Any, root_tag: str) -> bytes:
    """Serialize a dataclass instance to an XML document.

    Args:
        obj: The model to serialize.
        root_tag: The tag of the document element, e.g.
            ``computer_group``.

    Returns:
        The UTF-8 encoded document, without XML declaration.
    """
    return ElementTree.tostring(to_element(obj, root_tag), encoding="unicode").encode("utf-8")


def _element_to_value(element: ElementTree.Element, tp: Any) -> Any:
    if dataclasses.is_dataclass(tp):
        return from_element(element, tp)
    text = element.text or ""
    if not text.strip() and tp is not str:
        return None
    return scalar_from_text(tp, text)


def from_element(element: ElementTree.Element, cls: type[T]) -> T:
    """Build a dataclass instance from an element.

    Unknown child elements are ignored, missing ones give ``None``.

    Raises:
        DecodeError: If an element holds a value of the wrong type.
    """
    kwargs: dict[str, Any] = {}
    for field, hint in model_fields(cls):
        if not field.init:
            continue
        tp, is_list = resolve_type(hint)
        *wrappers, leaf = _tag_path(field)
        parent: ElementTree.Element | None = element
        for wrapper in wrappers:
            parent = parent.find(wrapper) if parent is not None else None
        if parent is None:
            continue
        try:
            if is_list:
                kwargs[field.name] = [_element_to_value(child, tp) for child in parent.findall(leaf)]
            else:
                child = parent.find(leaf)
                if child is not None:
                    kwargs[field.name] = _element_to_value(child, tp)
        except ValueError as exc:
            msg = f"invalid value for {cls.__name__}.{field.name}: {exc}"
            raise DecodeError(msg) from exc
    return cls(**kwargs)


def decode_xml(data: bytes | str, cls: type[T], root_tag: str | None = None) -> T:
    """Parse an XML document into a dataclass instance.

    Args:
        data: The document.
        cls: The model class.
        root_tag: If given, the expected tag of the document element.

    Raises:
        DecodeError: If the document is malformed or does not match
            the model.
    """
    try:
        root = ElementTree.fromstring(data)
    except ElementTree.ParseError as exc:
        msg = f"malformed XML document: {exc}"
        raise DecodeError(msg) from exc
    if root_tag is not None and root.tag != root_tag:
        msg = f"expected <{root_tag}> document element, got <{root.tag}>"
        raise DecodeError(msg)
    return from_element(root, cls)
