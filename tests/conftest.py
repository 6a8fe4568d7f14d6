"""
Shared fixtures: reference public keys and a signing helper.
"""

import pytest
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.hazmat.primitives.asymmetric import utils

from secp256k1_keys import public_key
from secp256k1_keys.crypto_utils import encoding

ALICE_RAW_HEX = (
    "69d908510e355beb1d5bf2df8129e5b6401e1969891e8016a0b2300739bbb006"
    "87055e5924a2fd8dd35f069dc14d8147aa11c1f7e2f271573487e1beeb2be9d0"
)
BOB_RAW_HEX = (
    "bdf6fb97c97c126b492186a4d5b28f34f0671a5aacc974da3bde0be93e45a1c5"
    "0f89ceff72bd04ac9e25a04a1a6cb010aedaf65f91cec8ebe75901c49b63355d"
)
ALICE_COMPRESSED_HEX = "02" + ALICE_RAW_HEX[:64]
BOB_COMPRESSED_HEX = "03" + BOB_RAW_HEX[:64]

SIGNER_SCALAR = 0x7E888E146BCF7D8849ED3D8E1341B3A412172D8C886CF76DCC852900D0C51C3E
OTHER_SIGNER_SCALAR = 0x1E99423A4ED27608A15A2616A2B0E9E52CED330AC530EDCC32C8FFC6A526AEDD


@pytest.fixture
def alice():
    return public_key.PublicKey.from_hex(ALICE_RAW_HEX)


@pytest.fixture
def bob():
    return public_key.PublicKey.from_hex(BOB_RAW_HEX)


@pytest.fixture
def signer():
    return ec.derive_private_key(SIGNER_SCALAR, ec.SECP256K1())


@pytest.fixture
def other_signer():
    return ec.derive_private_key(OTHER_SIGNER_SCALAR, ec.SECP256K1())


@pytest.fixture
def signer_public_key(signer):
    return public_key.PublicKey.from_ecdsa(signer.public_key())


@pytest.fixture
def sign():
    """Return a helper producing compact ``r || s [|| recid]`` signatures."""

    def _sign(private_key, message, recovery_id=None):
        der_signature = private_key.sign(message, ec.ECDSA(hashes.SHA256()))
        r, s = utils.decode_dss_signature(der_signature)
        return encoding.join_signature(r, s, recovery_id)

    return _sign
