r"""Codec between the dataclass models and the XML documents of the
Classic API."""

from __future__ import annotations

__all__ = ["decode_xml", "encode_xml"]

from jamfpro.codec.xml import decode_xml, encode_xml
