"""
Boundary encodings for keys, plaintext and signatures.

Plaintext is always UTF-8. Signatures travel as standard base64 text.
Ed25519 keys travel as base-58 text (Bitcoin alphabet).
"""

from __future__ import annotations
import base64
import binascii
from typing import Union

import base58

from .errors import MalformedInputError


def to_utf8(text: Union[str, bytes], what: str = "text") -> bytes:
    """
    Encode text as UTF-8.

    Args:
        text: Text to encode
        what: Name of the value, used in the error message

    Returns:
        UTF-8 bytes

    Raises:
        MalformedInputError: If the text is missing or not encodable as UTF-8
    """
    if text is None:
        raise MalformedInputError(f"Missing {what}.", {"field": what})
    if isinstance(text, bytes):
        return text
    try:
        return text.encode("utf-8")
    except UnicodeEncodeError as e:
        raise MalformedInputError(f"Invalid UTF-8 {what}: {e}", {"field": what}, e)


def encode_base64(data: bytes) -> str:
    """Encode bytes as padded standard base64 text."""
    return base64.b64encode(data).decode("ascii")


def decode_base64(text: Union[str, bytes], what: str = "signature") -> bytes:
    """
    Strictly decode standard base64 text.

    Args:
        text: Base64 text
        what: Name of the value, used in the error message

    Returns:
        Decoded bytes

    Raises:
        MalformedInputError: If the text is missing or not valid base64
    """
    if text is None:
        raise MalformedInputError(f"Missing {what}.", {"field": what})
    try:
        return base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError) as e:
        raise MalformedInputError(f"Invalid base64 {what}: {e}", {"field": what}, e)


def encode_base58(data: bytes) -> str:
    """Encode bytes as base-58 text."""
    return base58.b58encode(data).decode("ascii")


def decode_base58(text: Union[str, bytes], what: str = "key") -> bytes:
    """
    Decode base-58 text.

    Args:
        text: Base-58 text
        what: Name of the value, used in the error message

    Returns:
        Decoded bytes

    Raises:
        MalformedInputError: If the text is missing or not valid base-58
    """
    if not text:
        raise MalformedInputError(f"Missing {what}.", {"field": what})
    try:
        return base58.b58decode(text)
    except ValueError as e:
        raise MalformedInputError(f"Invalid base58 {what}: {e}", {"field": what}, e)


__all__ = [
    "to_utf8",
    "encode_base64",
    "decode_base64",
    "encode_base58",
    "decode_base58",
]
