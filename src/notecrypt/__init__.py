"""
notecrypt - Password-protected secrets inside plain-text notes

Python implementation of the ENC0 token format using PBKDF2-SHA256,
AES-128-CBC and HMAC-SHA256.
"""

from .types import (
    KeyPurpose,
    RESERVED_VALUE,
    SALT_SIZE,
    MAC_SALT_SIZE,
    IV_SIZE,
    MAC_SIZE,
    HEADER_SIZE,
    MIN_TOKEN_SIZE,
    PBKDF2_ITERATIONS,
    KEY_SIZE,
    NoteCryptError,
    EncryptionError,
    DecryptionError,
    MalformedInputError,
    AuthenticationFailedError,
    InvalidPaddingError,
    InvalidEncodingError,
    EmptyPasswordError,
)
from .keys import derive_key, derive_cipher_key, derive_mac_key
from .cipher import encrypt_block, decrypt_block, strip_legacy_markup
from .mac import compute_mac, verify_mac
from .frame import (
    Frame,
    encode_frame,
    decode_frame,
    frame_to_token,
    token_to_frame_bytes,
    is_enc0_token,
)
from .crypto import build_frame, encrypt_text, decrypt_text
from .markers import (
    FORMAT_PREFIX,
    SecretMarker,
    format_secret,
    extract_token,
    find_secrets,
    encrypt_selection,
    decrypt_selection,
    decrypt_document,
)

__version__ = "0.1.0"

__all__ = [
    # Keys
    "KeyPurpose",
    "derive_key",
    "derive_cipher_key",
    "derive_mac_key",
    # Cipher
    "encrypt_block",
    "decrypt_block",
    "strip_legacy_markup",
    # MAC
    "compute_mac",
    "verify_mac",
    # Frame
    "Frame",
    "encode_frame",
    "decode_frame",
    "frame_to_token",
    "token_to_frame_bytes",
    "is_enc0_token",
    # Crypto
    "build_frame",
    "encrypt_text",
    "decrypt_text",
    # Markers
    "FORMAT_PREFIX",
    "SecretMarker",
    "format_secret",
    "extract_token",
    "find_secrets",
    "encrypt_selection",
    "decrypt_selection",
    "decrypt_document",
    # Errors
    "NoteCryptError",
    "EncryptionError",
    "DecryptionError",
    "MalformedInputError",
    "AuthenticationFailedError",
    "InvalidPaddingError",
    "InvalidEncodingError",
    "EmptyPasswordError",
    # Constants
    "RESERVED_VALUE",
    "SALT_SIZE",
    "MAC_SALT_SIZE",
    "IV_SIZE",
    "MAC_SIZE",
    "HEADER_SIZE",
    "MIN_TOKEN_SIZE",
    "PBKDF2_ITERATIONS",
    "KEY_SIZE",
]
