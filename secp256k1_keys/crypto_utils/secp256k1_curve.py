from cryptography.hazmat.primitives.asymmetric import ec

# Secp256k1 curve parameters
P = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F
N = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141
Gx = 0x79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798
Gy = 0x483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8

CURVE = ec.SECP256K1()
CURVE_NAME = CURVE.name

# SEC1 encoding
COORDINATE_LENGTH = 32
COMPRESSED_LENGTH = 1 + COORDINATE_LENGTH
RAW_LENGTH = 2 * COORDINATE_LENGTH
UNCOMPRESSED_LENGTH = 1 + RAW_LENGTH

PREFIX_EVEN_Y = 0x02
PREFIX_ODD_Y = 0x03
PREFIX_UNCOMPRESSED = 0x04


def is_secp256k1(curve: ec.EllipticCurve) -> bool:
    """Return True if the given cryptography curve is secp256k1."""
    return isinstance(curve, ec.SECP256K1)


def key_from_coordinates(x: int, y: int) -> ec.EllipticCurvePublicKey:
    """
    Build a cryptography public key from affine coordinates.

    Args:
        x: X coordinate.
        y: Y coordinate.

    Returns:
        Validated secp256k1 public key.

    Raises:
        ValueError: If the coordinates are out of range or not on the curve.
    """
    if not (0 <= x < P and 0 <= y < P):
        raise ValueError("Point coordinates out of field range")
    # cryptography rejects points that do not satisfy y^2 = x^3 + 7 (mod P)
    return ec.EllipticCurvePublicNumbers(x, y, CURVE).public_key()


def key_from_sec1(data: bytes) -> ec.EllipticCurvePublicKey:
    """
    Decode a cryptography public key from SEC1-encoded bytes.

    Args:
        data: SEC1-encoded bytes (33 bytes compressed or 65 bytes uncompressed)

    Returns:
        Validated secp256k1 public key

    Raises:
        ValueError: If SEC1 format is invalid or the point is not on the curve
    """
    if len(data) == COMPRESSED_LENGTH:
        if data[0] not in (PREFIX_EVEN_Y, PREFIX_ODD_Y):
            raise ValueError("Invalid SEC1 compressed prefix")

        x = int.from_bytes(data[1:], byteorder="big")
        if x >= P:
            raise ValueError("Invalid SEC1 x-coordinate")

    elif len(data) == UNCOMPRESSED_LENGTH:
        if data[0] != PREFIX_UNCOMPRESSED:
            raise ValueError("Invalid SEC1 uncompressed prefix")

        x = int.from_bytes(data[1:33], byteorder="big")
        y = int.from_bytes(data[33:], byteorder="big")
        if x >= P or y >= P:
            raise ValueError("Invalid SEC1 uncompressed coordinates")

    else:
        raise ValueError("Invalid SEC1 length")

    # Decompression and the on-curve check are done by cryptography
    return ec.EllipticCurvePublicKey.from_encoded_point(CURVE, bytes(data))


def coordinates(key: ec.EllipticCurvePublicKey) -> tuple[int, int]:
    """Return the affine (x, y) coordinates of a cryptography public key."""
    numbers = key.public_numbers()
    return numbers.x, numbers.y


def sec1_encode(x: int, y: int, compressed: bool = True) -> bytes:
    """
    Encode affine coordinates to SEC1 format.

    Args:
        x: X coordinate.
        y: Y coordinate.
        compressed: Emit the 33-byte compressed form instead of the
            65-byte uncompressed one.

    Returns:
        SEC1-encoded bytes
    """
    x_bytes = x.to_bytes(COORDINATE_LENGTH, byteorder="big")
    if compressed:
        prefix = PREFIX_EVEN_Y if y % 2 == 0 else PREFIX_ODD_Y
        return bytes([prefix]) + x_bytes
    y_bytes = y.to_bytes(COORDINATE_LENGTH, byteorder="big")
    return bytes([PREFIX_UNCOMPRESSED]) + x_bytes + y_bytes
