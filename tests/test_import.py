"""Test package imports and the module-level facade."""

import asyncio

import pytest

from vectors import PLAINTEXT, SHARED_KEY, HMAC_SHA256_SIGNATURE


def test_main_import():
    """Test that the main package imports successfully."""
    import http_signature_crypto
    assert http_signature_crypto.__version__ == "1.0.0"
    assert hasattr(http_signature_crypto, 'sign')
    assert hasattr(http_signature_crypto, 'verify')
    assert hasattr(http_signature_crypto, 'use')
    assert hasattr(http_signature_crypto, 'Dispatcher')


def test_algorithms_import():
    """Test algorithms module imports."""
    import http_signature_crypto.algorithms as algorithms
    assert hasattr(algorithms, 'AlgorithmProvider')
    assert algorithms.get_builtin_algorithms() == ["ed25519", "hmac", "rsa"]


def test_runtime_import():
    """Test runtime module imports."""
    import http_signature_crypto.runtime as runtime
    assert hasattr(runtime, 'SignatureCryptoError')
    assert hasattr(runtime, 'callbackify')


class TestDefaultDispatcher:
    """Module-level sign/verify/use backed by the process dispatcher."""

    def test_is_shared(self):
        import http_signature_crypto as hsc
        assert hsc.get_default_dispatcher() is hsc.get_default_dispatcher()

    def test_builtins_registered(self):
        import http_signature_crypto as hsc
        for name in ("ed25519", "hmac", "rsa"):
            assert hsc.use(name) is not None

    def test_sign_awaitable(self):
        import http_signature_crypto as hsc
        signature = asyncio.run(hsc.sign({
            "algorithm": "hmac", "hashType": "sha256",
            "plaintext": PLAINTEXT, "sharedKey": SHARED_KEY,
        }))
        assert signature == HMAC_SHA256_SIGNATURE

    def test_verify_callback(self):
        import http_signature_crypto as hsc
        calls = []
        hsc.verify({
            "algorithm": "hmac", "hashType": "sha256", "plaintext": PLAINTEXT,
            "sharedKey": SHARED_KEY, "signature": HMAC_SHA256_SIGNATURE,
        }, lambda err, result: calls.append((err, result)))
        assert calls == [(None, True)]

    def test_unknown_algorithm(self):
        import http_signature_crypto as hsc
        with pytest.raises(hsc.UnknownAlgorithmError, match=r"^Unknown algorithm 'abc'\.$"):
            asyncio.run(hsc.sign({"algorithm": "abc"}))
