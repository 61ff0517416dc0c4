"""Password-based key derivation for ENC0 tokens."""

from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC
from cryptography.hazmat.primitives.hashes import SHA256

from .types import KeyPurpose, KEY_SIZE, PBKDF2_ITERATIONS, SALT_SIZE, MAC_SALT_SIZE


_SALT_SIZES = {
    KeyPurpose.CIPHER: SALT_SIZE,
    KeyPurpose.MAC: MAC_SALT_SIZE,
}


def derive_key(password: str, salt: bytes, purpose: KeyPurpose) -> bytes:
    """
    Derive a 16-byte key from a password using PBKDF2-HMAC-SHA256.

    Cipher and MAC keys use the same algorithm and length; they differ only
    in the salt they are derived from, which must never be shared between
    the two purposes.

    Args:
        password: The user's password (UTF-8 encoded before derivation)
        salt: 16-byte salt taken from the frame
        purpose: Which key is being derived

    Returns:
        16-byte key
    """
    expected = _SALT_SIZES[purpose]
    if len(salt) != expected:
        raise ValueError(f"Salt must be {expected} bytes, got {len(salt)}")

    kdf = PBKDF2HMAC(
        algorithm=SHA256(),
        length=KEY_SIZE,
        salt=salt,
        iterations=PBKDF2_ITERATIONS,
    )
    return kdf.derive(password.encode("utf-8"))


def derive_cipher_key(password: str, cipher_salt: bytes) -> bytes:
    """Derive the AES key from the cipher salt."""
    return derive_key(password, cipher_salt, KeyPurpose.CIPHER)


def derive_mac_key(password: str, mac_salt: bytes) -> bytes:
    """Derive the HMAC key from the MAC salt."""
    return derive_key(password, mac_salt, KeyPurpose.MAC)
