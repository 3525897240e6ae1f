#!/usr/bin/env python3
"""
Decoding of the decoder's XML output using its own encoding declaration
"""

import codecs
import re

from ..utils.logger import get_logger
from .constants import XML_DEFAULT_ENCODING

logger = get_logger(__name__)

# UTF-32 first: its little-endian BOM starts with the UTF-16 one
_BYTE_ORDER_MARKS = (
    (codecs.BOM_UTF32_LE, "utf-32"),
    (codecs.BOM_UTF32_BE, "utf-32"),
    (codecs.BOM_UTF8, "utf-8-sig"),
    (codecs.BOM_UTF16_LE, "utf-16"),
    (codecs.BOM_UTF16_BE, "utf-16"),
)

_XML_DECLARATION = re.compile(
    rb"""<\?xml\s[^>]*?\bencoding\s*=\s*["']([A-Za-z][A-Za-z0-9._-]*)["']"""
)

DECLARATION_SCAN_SIZE = 1024


def detect_xml_encoding(data: bytes) -> str:
    """Return the encoding an XML document declares for itself."""
    for bom, encoding in _BYTE_ORDER_MARKS:
        if data.startswith(bom):
            return encoding

    match = _XML_DECLARATION.match(data[:DECLARATION_SCAN_SIZE])
    if match:
        return match.group(1).decode("ascii").lower()
    return XML_DEFAULT_ENCODING


def decode_xml_bytes(data: bytes) -> str:
    """Decode an XML document honouring its BOM or ``encoding`` declaration."""
    encoding = detect_xml_encoding(data)
    try:
        codecs.lookup(encoding)
    except LookupError:
        logger.warning(f"Unknown XML encoding {encoding!r}, using {XML_DEFAULT_ENCODING}")
        encoding = XML_DEFAULT_ENCODING
    return data.decode(encoding, errors="replace")
