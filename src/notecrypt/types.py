"""Type definitions for notecrypt."""

from enum import Enum


class KeyPurpose(Enum):
    """What a derived key is used for."""
    CIPHER = "cipher"
    MAC = "mac"


# Format constants (ENC0)
RESERVED_VALUE = b"ENC0"
RESERVED_SIZE = len(RESERVED_VALUE)
SALT_SIZE = 16
MAC_SALT_SIZE = 16
IV_SIZE = 16
MAC_SIZE = 32
HEADER_SIZE = RESERVED_SIZE + SALT_SIZE + MAC_SALT_SIZE + IV_SIZE  # 52 bytes
MIN_TOKEN_SIZE = HEADER_SIZE + MAC_SIZE  # 84 bytes

# Key derivation constants
PBKDF2_ITERATIONS = 50_000
KEY_SIZE = 128 // 8  # AES-128

# Cipher constants
BLOCK_SIZE = 16

# Legacy markup removed from decrypted text
LEGACY_MARKUP = ("<div>", "</div>")


# Exception types
class NoteCryptError(Exception):
    """Base exception for notecrypt errors."""
    pass


class EncryptionError(NoteCryptError):
    """Encryption failed in an underlying primitive."""
    pass


class DecryptionError(NoteCryptError):
    """A token could not be decrypted."""
    pass


class MalformedInputError(DecryptionError):
    """Token is not valid base64 or is too short to be a frame."""
    pass


class AuthenticationFailedError(DecryptionError):
    """MAC verification failed (wrong password or tampered token)."""

    def __init__(self) -> None:
        super().__init__("Authentication failed - incorrect password or corrupted data")


class InvalidPaddingError(DecryptionError):
    """Ciphertext has an invalid length or padding."""
    pass


class InvalidEncodingError(DecryptionError):
    """Decrypted bytes are not valid UTF-8."""
    pass


class EmptyPasswordError(NoteCryptError):
    """Password is empty or only whitespace."""

    def __init__(self) -> None:
        super().__init__("Please enter a password")
