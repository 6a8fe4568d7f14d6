import logging
import typing as t

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.hazmat.primitives.asymmetric import utils

from .crypto_utils import encoding
from .crypto_utils import hashing
from .crypto_utils import secp256k1_curve


logger = logging.getLogger(__name__)

KIND = "secp256k1"

_BYTES_TYPES = (bytes, bytearray, memoryview)


class InvalidPublicKeyError(ValueError):
    """Raised when bytes or coordinates do not describe a secp256k1 point."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"invalid public key: {reason}")
        self.reason = reason


class PublicKey:
    """Represents a secp256k1 public key."""

    def __init__(self) -> None:
        """
        Prevent direct initialization.

        """
        raise TypeError("Use PublicKey.from_* classmethods for construction")

    @classmethod
    def _from_ecdsa_key(cls, ecdsa_key: ec.EllipticCurvePublicKey) -> "PublicKey":
        """
        Construct a PublicKey from an already validated cryptography key.

        Args:
            ecdsa_key: secp256k1 public key.

        Returns:
            PublicKey instance.
        """
        instance = object.__new__(cls)
        instance._init_from_ecdsa_key(ecdsa_key)
        return instance

    def _init_from_ecdsa_key(self, ecdsa_key: ec.EllipticCurvePublicKey) -> None:
        """
        Initialize key state from a cryptography key.

        Args:
            ecdsa_key: secp256k1 public key.
        """
        self._ecdsa_key = ecdsa_key
        self._x, self._y = secp256k1_curve.coordinates(ecdsa_key)
        self._compressed_bytes_cache: t.Optional[bytes] = None
        self._uncompressed_bytes_cache: t.Optional[bytes] = None

    @classmethod
    def from_bytes(cls, data: bytes) -> "PublicKey":
        """
        Create from a byte encoding.

        Accepted encodings are SEC1 compressed (33 bytes), raw ``X || Y``
        (64 bytes) and SEC1 uncompressed (65 bytes).

        Args:
            data: Public key bytes.

        Returns:
            PublicKey instance.

        Raises:
            InvalidPublicKeyError: If the bytes are not a valid secp256k1 point.
        """
        if not isinstance(data, _BYTES_TYPES):
            raise TypeError(f"Public key must be bytes, not {type(data).__name__}")
        try:
            sec1_bytes = encoding.normalize_public_key(data)
            ecdsa_key = secp256k1_curve.key_from_sec1(sec1_bytes)
        except ValueError as exc:
            logger.debug("Rejected %d-byte public key: %s", len(data), exc)
            raise InvalidPublicKeyError(str(exc)) from exc
        return cls._from_ecdsa_key(ecdsa_key)

    @classmethod
    def from_hex(cls, hex_str: str) -> "PublicKey":
        """Create from a hex string (with or without 0x prefix)."""
        try:
            data = encoding.hex_to_bytes(hex_str)
        except ValueError as exc:
            raise InvalidPublicKeyError(str(exc)) from exc
        return cls.from_bytes(data)

    @classmethod
    def from_coordinates(cls, x: int, y: int) -> "PublicKey":
        """
        Create from affine coordinates.

        Args:
            x: X coordinate.
            y: Y coordinate.

        Returns:
            PublicKey instance.

        Raises:
            InvalidPublicKeyError: If (x, y) is not on the curve.
        """
        try:
            ecdsa_key = secp256k1_curve.key_from_coordinates(x, y)
        except ValueError as exc:
            logger.debug("Rejected public key coordinates: %s", exc)
            raise InvalidPublicKeyError(str(exc)) from exc
        return cls._from_ecdsa_key(ecdsa_key)

    @classmethod
    def from_ecdsa(cls, ecdsa_key: ec.EllipticCurvePublicKey) -> "PublicKey":
        """
        Create from a cryptography elliptic curve public key.

        Args:
            ecdsa_key: Public key, which must be on secp256k1.

        Returns:
            PublicKey instance.
        """
        if not isinstance(ecdsa_key, ec.EllipticCurvePublicKey):
            raise TypeError(
                f"Expected an EllipticCurvePublicKey, not {type(ecdsa_key).__name__}"
            )
        if not secp256k1_curve.is_secp256k1(ecdsa_key.curve):
            raise InvalidPublicKeyError(f"unsupported curve {ecdsa_key.curve.name}")
        return cls._from_ecdsa_key(ecdsa_key)

    @property
    def x(self) -> int:
        return self._x

    @property
    def y(self) -> int:
        return self._y

    @property
    def kind(self) -> str:
        """Return the key kind identifier."""
        return KIND

    @property
    def to_bytes(self) -> bytes:
        """
        Return the SEC1 compressed public key bytes (33 bytes).

        Returns:
            Parity prefix followed by the 32-byte x coordinate.
        """
        if self._compressed_bytes_cache is None:
            self._compressed_bytes_cache = secp256k1_curve.sec1_encode(
                self._x, self._y, compressed=True
            )
        return self._compressed_bytes_cache

    @property
    def to_uncompressed_bytes(self) -> bytes:
        """
        Return the SEC1 uncompressed public key bytes (65 bytes).

        Returns:
            0x04 followed by the 32-byte x and y coordinates.
        """
        if self._uncompressed_bytes_cache is None:
            self._uncompressed_bytes_cache = secp256k1_curve.sec1_encode(
                self._x, self._y, compressed=False
            )
        return self._uncompressed_bytes_cache

    @property
    def to_raw_bytes(self) -> bytes:
        """Return the 64-byte ``X || Y`` encoding, without prefix."""
        return self.to_uncompressed_bytes[1:]

    def to_ecdsa(self) -> ec.EllipticCurvePublicKey:
        """Return the key as a cryptography elliptic curve public key."""
        return self._ecdsa_key

    def verify(self, message: bytes, signature: bytes) -> bool:
        """
        Check an ECDSA signature over a message.

        The message is hashed with SHA256. The signature is 64 bytes
        ``r || s``, optionally followed by a recovery id byte that is
        ignored here.

        Args:
            message: Signed message.
            signature: Compact signature.

        Returns:
            True if the signature is well formed and valid for this key.
        """
        try:
            r, s = encoding.split_signature(signature)
            digest = hashing.message_digest(message)
        except (TypeError, ValueError) as exc:
            logger.debug("Malformed signature: %s", exc)
            return False

        if not (1 <= r < secp256k1_curve.N and 1 <= s < secp256k1_curve.N):
            logger.debug("Signature component out of range")
            return False

        try:
            self._ecdsa_key.verify(
                utils.encode_dss_signature(r, s),
                digest,
                ec.ECDSA(utils.Prehashed(hashes.SHA256())),
            )
        except InvalidSignature:
            logger.debug("Signature does not match message and key")
            return False
        return True

    def __eq__(self, other: object) -> bool:
        """Check equality with another PublicKey."""
        if not isinstance(other, PublicKey):
            return NotImplemented
        return self.to_bytes == other.to_bytes

    def __hash__(self) -> int:
        return hash(self.to_bytes)

    def __repr__(self) -> str:
        return f"PublicKey(0x{self._x:064x}, 0x{self._y:064x})"

    def __str__(self) -> str:
        """
        Return the SEC1 compressed public key as hex.

        Returns:
            Hex-encoded compressed SEC1 public key.
        """
        return self.to_bytes.hex()


def public_key_from_bytes(data: bytes) -> PublicKey:
    """Parse a secp256k1 public key from 33, 64 or 65 bytes."""
    return PublicKey.from_bytes(data)
