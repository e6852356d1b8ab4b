"""
Digest name resolution.

Maps OpenSSL-style digest names to ``cryptography`` hash algorithms. The
only normalization applied to a caller's ``hashType`` is upper-casing.
"""

from __future__ import annotations
from typing import Callable, Dict, Optional

from cryptography.hazmat.primitives import hashes

from ..runtime.errors import MalformedInputError, UnsupportedDigestError


DIGESTS: Dict[str, Callable[[], hashes.HashAlgorithm]] = {
    "MD5": hashes.MD5,
    "SHA1": hashes.SHA1,
    "SHA224": hashes.SHA224,
    "SHA256": hashes.SHA256,
    "SHA384": hashes.SHA384,
    "SHA512": hashes.SHA512,
    "SHA512-224": hashes.SHA512_224,
    "SHA512-256": hashes.SHA512_256,
    "SHA3-224": hashes.SHA3_224,
    "SHA3-256": hashes.SHA3_256,
    "SHA3-384": hashes.SHA3_384,
    "SHA3-512": hashes.SHA3_512,
    "SM3": hashes.SM3,
}


def resolve_digest(hash_type: Optional[str]) -> hashes.HashAlgorithm:
    """
    Resolve a digest name to a hash algorithm instance.

    Accepts the plain names in ``DIGESTS`` as well as their ``RSA-`` prefixed
    aliases (e.g. ``RSA-SHA256``).

    Args:
        hash_type: Digest name, any case

    Returns:
        A fresh hash algorithm instance

    Raises:
        MalformedInputError: If no hash type was given
        UnsupportedDigestError: If the name is not a known digest
    """
    if hash_type is None:
        raise MalformedInputError("Missing hashType.", {"field": "hashType"})

    name = hash_type.upper()
    if name.startswith("RSA-"):
        name = name[len("RSA-"):]

    factory = DIGESTS.get(name)
    if factory is None:
        raise UnsupportedDigestError(
            f"Unknown message digest '{hash_type}'",
            {"hashType": hash_type},
        )
    return factory()


def supported_digests() -> list[str]:
    """Get the list of recognized digest names."""
    return sorted(DIGESTS)


__all__ = ["DIGESTS", "resolve_digest", "supported_digests"]
