import hashlib

# Digest size of the hash ECDSA verification is performed over
DIGEST_LENGTH = 32


def sha256(data: bytes) -> bytes:
    """
    Compute SHA256 hash of data.

    Args:
        data: Bytes to hash

    Returns:
        SHA256 digest as bytes
    """
    digest = hashlib.new("sha256")
    digest.update(data)
    return digest.digest()


def message_digest(message: bytes) -> bytes:
    """Return the digest a secp256k1 signature over ``message`` commits to."""
    return sha256(message)
