"""
Ed25519 provider.

Keys are base-58 text. Private keys use the libsodium layout
(32-byte seed followed by the 32-byte public key, which must match the
seed); a bare 32-byte seed is accepted as well. Signatures are 64 bytes,
carried as base64 text.
"""

from __future__ import annotations
from typing import Tuple

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.ed25519 import (
    Ed25519PrivateKey,
    Ed25519PublicKey,
)

from ..runtime.codec import decode_base58, decode_base64, encode_base58, encode_base64, to_utf8
from ..runtime.errors import MalformedInputError
from .provider import AlgorithmProvider, SignRequest, VerifyRequest, require_field

SEED_SIZE = 32
PUBLIC_KEY_SIZE = 32
SECRET_KEY_SIZE = 64
SIGNATURE_SIZE = 64


def _load_private_key(private_key_base58: str) -> Ed25519PrivateKey:
    secret = decode_base58(private_key_base58, "privateKeyBase58")
    if len(secret) not in (SEED_SIZE, SECRET_KEY_SIZE):
        raise MalformedInputError(
            f"Ed25519 private key must be {SEED_SIZE} or {SECRET_KEY_SIZE} bytes, got {len(secret)}",
            {"field": "privateKeyBase58"},
        )
    key = Ed25519PrivateKey.from_private_bytes(secret[:SEED_SIZE])
    if len(secret) == SECRET_KEY_SIZE:
        public = key.public_key().public_bytes(
            encoding=serialization.Encoding.Raw,
            format=serialization.PublicFormat.Raw,
        )
        if public != secret[SEED_SIZE:]:
            raise MalformedInputError(
                "Ed25519 private key public half does not match its seed",
                {"field": "privateKeyBase58"},
            )
    return key


def _load_public_key(public_key_base58: str) -> Ed25519PublicKey:
    public = decode_base58(public_key_base58, "publicKeyBase58")
    if len(public) != PUBLIC_KEY_SIZE:
        raise MalformedInputError(
            f"Ed25519 public key must be {PUBLIC_KEY_SIZE} bytes, got {len(public)}",
            {"field": "publicKeyBase58"},
        )
    try:
        return Ed25519PublicKey.from_public_bytes(public)
    except ValueError as e:
        raise MalformedInputError(f"Invalid Ed25519 public key: {e}", {"field": "publicKeyBase58"}, e)


class Ed25519Provider(AlgorithmProvider):
    """Ed25519 detached signatures. Ignores ``hashType``."""

    def sign(self, request: SignRequest) -> str:
        key = _load_private_key(require_field(request, "private_key_base58", "privateKeyBase58"))
        plaintext = to_utf8(require_field(request, "plaintext", "plaintext"), "plaintext")
        return encode_base64(key.sign(plaintext))

    def verify(self, request: VerifyRequest) -> bool:
        key = _load_public_key(require_field(request, "public_key_base58", "publicKeyBase58"))
        plaintext = to_utf8(require_field(request, "plaintext", "plaintext"), "plaintext")
        signature = decode_base64(request.signature)
        if len(signature) != SIGNATURE_SIZE:
            return False
        try:
            key.verify(signature, plaintext)
            return True
        except InvalidSignature:
            return False


def generate_ed25519_key_pair() -> Tuple[str, str]:
    """
    Generate an Ed25519 key pair.

    Returns:
        Tuple of (public_key_base58, private_key_base58); the private key
        is in 64-byte libsodium layout
    """
    private_key = Ed25519PrivateKey.generate()
    seed = private_key.private_bytes(
        encoding=serialization.Encoding.Raw,
        format=serialization.PrivateFormat.Raw,
        encryption_algorithm=serialization.NoEncryption(),
    )
    public = private_key.public_key().public_bytes(
        encoding=serialization.Encoding.Raw,
        format=serialization.PublicFormat.Raw,
    )
    return encode_base58(public), encode_base58(seed + public)


__all__ = ["Ed25519Provider", "generate_ed25519_key_pair"]
