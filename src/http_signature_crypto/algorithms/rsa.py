"""
RSA provider.

Implements RSASSA-PKCS1-v1_5 signatures over the digest named by
``hashType``. Keys are PEM text; signatures are base64 text.
"""

from __future__ import annotations
from typing import Tuple

from cryptography import x509
from cryptography.exceptions import InvalidSignature, UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import padding, rsa

from ..runtime.codec import decode_base64, encode_base64, to_utf8
from ..runtime.errors import MalformedInputError
from .digests import resolve_digest
from .provider import AlgorithmProvider, SignRequest, VerifyRequest, require_field


def load_private_key(private_key_pem: str) -> rsa.RSAPrivateKey:
    """
    Load an RSA private key from PEM text (PKCS#1 or PKCS#8, unencrypted).

    Raises:
        MalformedInputError: If the PEM cannot be parsed or is not an RSA key
    """
    try:
        key = serialization.load_pem_private_key(to_utf8(private_key_pem, "privateKeyPem"), password=None)
    except (ValueError, TypeError, UnsupportedAlgorithm) as e:
        raise MalformedInputError(f"Invalid RSA private key: {e}", {"field": "privateKeyPem"}, e)

    if not isinstance(key, rsa.RSAPrivateKey):
        raise MalformedInputError("Key is not an RSA private key", {"field": "privateKeyPem"})
    return key


def load_public_key(public_key_pem: str) -> rsa.RSAPublicKey:
    """
    Load an RSA public key from PEM text.

    Accepts a public key, an X.509 certificate, or a private key whose
    public half is used.

    Raises:
        MalformedInputError: If the PEM cannot be parsed or is not an RSA key
    """
    data = to_utf8(public_key_pem, "publicKeyPem")
    try:
        if b"-----BEGIN CERTIFICATE-----" in data:
            key = x509.load_pem_x509_certificate(data).public_key()
        elif b"PRIVATE KEY-----" in data:
            key = serialization.load_pem_private_key(data, password=None).public_key()
        else:
            key = serialization.load_pem_public_key(data)
    except (ValueError, TypeError, UnsupportedAlgorithm) as e:
        raise MalformedInputError(f"Invalid RSA public key: {e}", {"field": "publicKeyPem"}, e)

    if not isinstance(key, rsa.RSAPublicKey):
        raise MalformedInputError("Key is not an RSA public key", {"field": "publicKeyPem"})
    return key


class RsaProvider(AlgorithmProvider):
    """RSA signatures with PKCS#1 v1.5 padding."""

    def sign(self, request: SignRequest) -> str:
        algorithm = resolve_digest(request.hash_type)
        key = load_private_key(require_field(request, "private_key_pem", "privateKeyPem"))
        plaintext = to_utf8(require_field(request, "plaintext", "plaintext"), "plaintext")
        return encode_base64(key.sign(plaintext, padding.PKCS1v15(), algorithm))

    def verify(self, request: VerifyRequest) -> bool:
        algorithm = resolve_digest(request.hash_type)
        key = load_public_key(require_field(request, "public_key_pem", "publicKeyPem"))
        plaintext = to_utf8(require_field(request, "plaintext", "plaintext"), "plaintext")
        signature = decode_base64(request.signature)
        try:
            key.verify(signature, plaintext, padding.PKCS1v15(), algorithm)
            return True
        except InvalidSignature:
            return False


def generate_rsa_key_pair(key_size: int = 2048) -> Tuple[str, str]:
    """
    Generate an RSA key pair.

    Args:
        key_size: Key size in bits (default: 2048)

    Returns:
        Tuple of (public_key_pem, private_key_pem)
    """
    private_key = rsa.generate_private_key(public_exponent=65537, key_size=key_size)
    private_pem = private_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    )
    public_pem = private_key.public_key().public_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PublicFormat.SubjectPublicKeyInfo,
    )
    return public_pem.decode("ascii"), private_pem.decode("ascii")


__all__ = ["RsaProvider", "load_private_key", "load_public_key", "generate_rsa_key_pair"]
