"""
Registry of public key kinds.

Each key kind (for example ``"secp256k1"``) registers a parser turning raw
key bytes into an object that satisfies :class:`Verifiable`. Callers that
store keys next to their kind string use :func:`public_key_from_bytes` to
get a key back without knowing the concrete class.
"""

import logging
import typing as t


logger = logging.getLogger(__name__)


@t.runtime_checkable
class Verifiable(t.Protocol):
    """A public key that can check signatures."""

    @property
    def kind(self) -> str:
        ...

    @property
    def to_bytes(self) -> bytes:
        ...

    def verify(self, message: bytes, signature: bytes) -> bool:
        ...


Parser = t.Callable[[bytes], Verifiable]


class UnknownKeyKindError(KeyError):
    """Raised when no parser is registered for a key kind."""


_PARSERS: dict[str, Parser] = {}


def register(kind: str, parser: Parser) -> None:
    """
    Register the parser for a key kind.

    Args:
        kind: Key kind identifier.
        parser: Callable building a key from its byte encoding.

    Raises:
        ValueError: If the kind is already registered.
    """
    if kind in _PARSERS:
        raise ValueError(f"Key kind already registered: {kind}")
    _PARSERS[kind] = parser
    logger.debug("Registered key kind %s", kind)


def unregister(kind: str) -> None:
    """Remove a key kind from the registry."""
    try:
        del _PARSERS[kind]
    except KeyError:
        raise UnknownKeyKindError(kind) from None


def registered_kinds() -> tuple[str, ...]:
    """Return the registered key kinds, sorted."""
    return tuple(sorted(_PARSERS))


def public_key_from_bytes(kind: str, data: bytes) -> Verifiable:
    """
    Parse a public key of the given kind.

    Args:
        kind: Key kind identifier.
        data: Key bytes in one of the encodings the kind accepts.

    Returns:
        Parsed public key.

    Raises:
        UnknownKeyKindError: If the kind is not registered.
    """
    try:
        parser = _PARSERS[kind]
    except KeyError:
        raise UnknownKeyKindError(kind) from None
    return parser(data)
