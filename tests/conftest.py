"""
Shared test fixtures: key material and fresh dispatchers.
"""
import pytest

from http_signature_crypto import AlgorithmRegistry, Dispatcher, DispatcherConfig
from http_signature_crypto.algorithms import generate_rsa_key_pair

from vectors import (
    PLAINTEXT,
    ED25519_PRIVATE_KEY_BASE58,
    ED25519_PUBLIC_KEY_BASE58,
    SHARED_KEY,
)


@pytest.fixture(scope="session")
def rsa_key_pair():
    """Provide a 2048-bit RSA key pair as (public_pem, private_pem)."""
    return generate_rsa_key_pair(2048)


@pytest.fixture
def registry():
    """Provide a registry with all built-in providers."""
    return AlgorithmRegistry.with_builtin_providers()


@pytest.fixture
def dispatcher(registry):
    """Provide a dispatcher over a fresh built-in registry."""
    return Dispatcher(registry)


@pytest.fixture
def inline_dispatcher(registry):
    """Provide a dispatcher that runs providers on the event loop thread."""
    return Dispatcher(registry, DispatcherConfig(offload_blocking=False))


@pytest.fixture
def sign_requests(rsa_key_pair):
    """One valid sign request per built-in algorithm."""
    _, private_pem = rsa_key_pair
    return {
        "ed25519": {"algorithm": "ed25519", "plaintext": PLAINTEXT,
                    "privateKeyBase58": ED25519_PRIVATE_KEY_BASE58},
        "hmac": {"algorithm": "hmac", "hashType": "sha256", "plaintext": PLAINTEXT,
                 "sharedKey": SHARED_KEY},
        "rsa": {"algorithm": "rsa", "hashType": "sha256", "plaintext": PLAINTEXT,
                "privateKeyPem": private_pem},
    }


@pytest.fixture
def verify_fields(rsa_key_pair):
    """Verification key material matching ``sign_requests``, per algorithm."""
    public_pem, _ = rsa_key_pair
    return {
        "ed25519": {"algorithm": "ed25519", "publicKeyBase58": ED25519_PUBLIC_KEY_BASE58},
        "hmac": {"algorithm": "hmac", "hashType": "sha256", "sharedKey": SHARED_KEY},
        "rsa": {"algorithm": "rsa", "hashType": "sha256", "publicKeyPem": public_pem},
    }
