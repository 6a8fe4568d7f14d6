from . import secp256k1_curve


SIGNATURE_LENGTH = 2 * secp256k1_curve.COORDINATE_LENGTH
RECOVERABLE_SIGNATURE_LENGTH = SIGNATURE_LENGTH + 1


def int_to_be_bytes(value: int, length: int = secp256k1_curve.COORDINATE_LENGTH) -> bytes:
    """Serialize an integer to big-endian bytes, left-padded to a fixed length."""
    if value < 0:
        raise ValueError("Value must be non-negative")
    return value.to_bytes(length, byteorder="big")


def hex_to_bytes(hex_str: str) -> bytes:
    """
    Decode a hex string, ignoring whitespace and an optional 0x prefix.

    Args:
        hex_str: Hex string

    Returns:
        Decoded bytes
    """
    cleaned = "".join(hex_str.strip().split()).lower()
    cleaned = cleaned.removeprefix("0x")
    if any(c not in "0123456789abcdef" for c in cleaned):
        raise ValueError("Hex string contains non-hex characters")
    if len(cleaned) % 2:
        raise ValueError("Hex string has an odd number of digits")
    return bytes.fromhex(cleaned)


def normalize_public_key(data: bytes) -> bytes:
    """
    Bring a public key encoding into SEC1 form.

    The 64-byte raw ``X || Y`` form gets the uncompressed 0x04 prefix;
    the 33 and 65-byte SEC1 forms are returned unchanged.

    Args:
        data: 33, 64 or 65 bytes of public key

    Returns:
        SEC1-encoded bytes

    Raises:
        ValueError: If the length is not one of the accepted ones
    """
    if len(data) == secp256k1_curve.RAW_LENGTH:
        return bytes([secp256k1_curve.PREFIX_UNCOMPRESSED]) + bytes(data)
    if len(data) in (
        secp256k1_curve.COMPRESSED_LENGTH,
        secp256k1_curve.UNCOMPRESSED_LENGTH,
    ):
        return bytes(data)
    raise ValueError(f"Unsupported public key length: {len(data)}")


def split_signature(signature: bytes) -> tuple[int, int]:
    """
    Split a compact signature into its r and s components.

    Args:
        signature: 64 bytes ``r || s``, or 65 bytes with a trailing
            recovery id, which is dropped

    Returns:
        Tuple of (r, s)

    Raises:
        ValueError: If the signature length is invalid
    """
    if len(signature) not in (SIGNATURE_LENGTH, RECOVERABLE_SIGNATURE_LENGTH):
        raise ValueError(f"Invalid signature length: {len(signature)}")
    half = secp256k1_curve.COORDINATE_LENGTH
    r = int.from_bytes(signature[:half], byteorder="big")
    s = int.from_bytes(signature[half:SIGNATURE_LENGTH], byteorder="big")
    return r, s


def join_signature(r: int, s: int, recovery_id: int | None = None) -> bytes:
    """
    Encode r and s as a compact signature.

    Args:
        r: Signature r component
        s: Signature s component
        recovery_id: Optional recovery id appended as a final byte

    Returns:
        64 or 65 signature bytes
    """
    signature = int_to_be_bytes(r) + int_to_be_bytes(s)
    if recovery_id is not None:
        signature += bytes([recovery_id])
    return signature
