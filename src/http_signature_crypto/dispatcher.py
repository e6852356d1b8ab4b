"""
Sign/verify dispatcher.

Resolves a request's algorithm through an AlgorithmRegistry and delegates
to the provider. Each operation exists once, as a coroutine; the
completion-callback form is the same coroutine passed through
``callbackify``.
"""

from __future__ import annotations
import asyncio
import inspect
import logging
from typing import Any, Awaitable, Mapping, Optional, Type, Union

from pydantic import BaseModel, ValidationError

from .algorithms.provider import AlgorithmProvider, SignRequest, VerifyRequest
from .config import DispatcherConfig
from .registry import AlgorithmRegistry
from .runtime.completion import Callback, callbackify
from .runtime.errors import InvalidRequestError, UnknownAlgorithmError

logger = logging.getLogger(__name__)

_REQUEST_MODELS = {
    "sign": SignRequest,
    "verify": VerifyRequest,
}


def _coerce_request(model: Type[BaseModel], request: Any) -> BaseModel:
    if isinstance(request, model):
        return request
    try:
        if isinstance(request, BaseModel):
            return model.model_validate(request.model_dump())
        if isinstance(request, Mapping):
            return model.model_validate(dict(request))
    except ValidationError as e:
        raise InvalidRequestError(
            f"Invalid {model.__name__}: {e.error_count()} validation error(s)",
            {"errors": e.errors(include_url=False)},
            e,
        )
    raise InvalidRequestError(
        f"Invalid {model.__name__}: expected a mapping, got {type(request).__name__}",
    )


class Dispatcher:
    """
    Uniform sign/verify entry points over registered providers.

    Both ``sign`` and ``verify`` support two completion styles:

    - without a callback they return an awaitable that yields the result or
      raises the error;
    - with a callback they return None and invoke
      ``callback(error, None)`` or ``callback(None, result)`` exactly once.

    Once registration has finished, concurrent calls are safe: providers
    keep no per-call state.
    """

    def __init__(self, registry: Optional[AlgorithmRegistry] = None,
                 config: Optional[DispatcherConfig] = None):
        """
        Initialize the dispatcher.

        Args:
            registry: Provider registry; a registry with the configured
                built-in providers is created when omitted
            config: Dispatcher configuration
        """
        self.config = config or DispatcherConfig()
        self.registry = registry if registry is not None else \
            AlgorithmRegistry.with_builtin_providers(self.config.builtin_algorithms)

        self.logger = logger
        if self.config.debug:
            self.logger.setLevel(logging.DEBUG)

        self._dispatch_with_callback = callbackify(self._dispatch)

    def use(self, name: str, provider: Optional[AlgorithmProvider] = None) -> Optional[AlgorithmProvider]:
        """Register or look up a provider; see ``AlgorithmRegistry.use``."""
        return self.registry.use(name, provider)

    def sign(self, request: Union[SignRequest, Mapping[str, Any]],
             callback: Optional[Callback] = None) -> Optional[Awaitable[str]]:
        """
        Sign plaintext with the request's algorithm.

        Args:
            request: SignRequest or mapping with its fields
            callback: Optional completion callback

        Returns:
            Awaitable signature text, or None when a callback is given
        """
        return self._invoke("sign", request, callback)

    def verify(self, request: Union[VerifyRequest, Mapping[str, Any]],
               callback: Optional[Callback] = None) -> Optional[Awaitable[bool]]:
        """
        Verify a signature with the request's algorithm.

        Args:
            request: VerifyRequest or mapping with its fields
            callback: Optional completion callback

        Returns:
            Awaitable verification result, or None when a callback is given
        """
        return self._invoke("verify", request, callback)

    def _invoke(self, operation: str, request: Any, callback: Optional[Callback]):
        if callable(callback):
            return self._dispatch_with_callback(operation, request, callback)
        return self._dispatch(operation, request)

    async def _dispatch(self, operation: str, request: Any) -> Any:
        request = _coerce_request(_REQUEST_MODELS[operation], request)

        provider = self.registry.use(request.algorithm)
        if provider is None:
            self.logger.debug(f"Rejected {operation}: no provider for algorithm {request.algorithm!r}")
            raise UnknownAlgorithmError(request.algorithm)

        method = getattr(provider, operation)
        self.logger.debug(f"Dispatching {operation} for algorithm {request.algorithm!r} to {provider!r}")

        if inspect.iscoroutinefunction(method):
            result = await method(request)
        elif self.config.offload_blocking:
            loop = asyncio.get_running_loop()
            result = await loop.run_in_executor(self.config.executor, method, request)
        else:
            result = method(request)

        self.logger.debug(f"Completed {operation} for algorithm {request.algorithm!r}")
        return result


# Process-wide dispatcher backing the module-level sign/verify/use
_default_dispatcher: Optional[Dispatcher] = None


def get_default_dispatcher() -> Dispatcher:
    """Get the process-wide dispatcher, creating it on first use."""
    global _default_dispatcher
    if _default_dispatcher is None:
        _default_dispatcher = Dispatcher()
    return _default_dispatcher


def sign(request: Union[SignRequest, Mapping[str, Any]],
         callback: Optional[Callback] = None) -> Optional[Awaitable[str]]:
    """Sign with the default dispatcher."""
    return get_default_dispatcher().sign(request, callback)


def verify(request: Union[VerifyRequest, Mapping[str, Any]],
           callback: Optional[Callback] = None) -> Optional[Awaitable[bool]]:
    """Verify with the default dispatcher."""
    return get_default_dispatcher().verify(request, callback)


def use(name: str, provider: Optional[AlgorithmProvider] = None) -> Optional[AlgorithmProvider]:
    """Register or look up a provider on the default dispatcher."""
    return get_default_dispatcher().use(name, provider)


__all__ = [
    "Dispatcher",
    "get_default_dispatcher",
    "sign",
    "verify",
    "use",
]
