"""Configuration for the signing/verification dispatcher."""

from __future__ import annotations
from concurrent.futures import Executor
from dataclasses import dataclass
from typing import Optional, Tuple


BUILTIN_ALGORITHMS: Tuple[str, ...] = ("ed25519", "hmac", "rsa")


@dataclass
class DispatcherConfig:
    """Configuration for a Dispatcher."""

    # Providers registered when the dispatcher builds its own registry
    builtin_algorithms: Tuple[str, ...] = BUILTIN_ALGORITHMS
    # Run synchronous provider methods in an executor instead of on the loop
    offload_blocking: bool = True
    # None means the event loop's default executor
    executor: Optional[Executor] = None
    debug: bool = False


__all__ = ["DispatcherConfig", "BUILTIN_ALGORITHMS"]
