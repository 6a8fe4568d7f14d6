from . import key_kind
from .public_key import KIND
from .public_key import InvalidPublicKeyError
from .public_key import PublicKey
from .public_key import public_key_from_bytes

key_kind.register(KIND, PublicKey.from_bytes)

__all__ = [
    "KIND",
    "InvalidPublicKeyError",
    "PublicKey",
    "key_kind",
    "public_key_from_bytes",
]
