"""Encryption and decryption of ENC0 tokens."""

import logging
import os

from cryptography.exceptions import InternalError, UnsupportedAlgorithm

from .types import (
    RESERVED_VALUE,
    SALT_SIZE,
    MAC_SALT_SIZE,
    IV_SIZE,
    EncryptionError,
    MalformedInputError,
    AuthenticationFailedError,
    InvalidEncodingError,
)
from .keys import derive_cipher_key, derive_mac_key
from .cipher import encrypt_block, decrypt_block, strip_legacy_markup
from .mac import compute_mac, verify_mac
from .frame import Frame, encode_frame, decode_frame, frame_to_token, token_to_frame_bytes

logger = logging.getLogger(__name__)


def build_frame(
    plaintext: str,
    password: str,
    cipher_salt: bytes,
    mac_salt: bytes,
    iv: bytes,
) -> Frame:
    """
    Build an authenticated frame from explicit salts and IV.

    encrypt_text() calls this with fresh random values. Passing fixed
    values is only meant for reproducing known vectors; reusing salts or
    an IV across real tokens breaks the format's guarantees.

    Args:
        plaintext: Text to encrypt
        password: Password to derive both keys from
        cipher_salt: 16-byte salt for the cipher key
        mac_salt: 16-byte salt for the MAC key
        iv: 16-byte AES-CBC initialization vector

    Returns:
        Frame with ciphertext and MAC filled in
    """
    cipher_key = derive_cipher_key(password, cipher_salt)
    mac_key = derive_mac_key(password, mac_salt)

    ciphertext = encrypt_block(cipher_key, iv, plaintext.encode("utf-8"))

    frame = Frame(
        magic=RESERVED_VALUE,
        cipher_salt=cipher_salt,
        mac_salt=mac_salt,
        iv=iv,
        ciphertext=ciphertext,
        mac=b"",
    )
    frame.mac = compute_mac(mac_key, frame.body())
    return frame


def encrypt_text(plaintext: str, password: str) -> str:
    """
    Encrypt text under a password into an ENC0 token.

    Every call draws new salts and a new IV, so encrypting the same text
    twice gives two different tokens.

    Args:
        plaintext: Text to encrypt
        password: Password to encrypt with

    Returns:
        Base64 token text

    Raises:
        EncryptionError: If the text or password has no UTF-8 form, or the
            random source or a primitive fails
    """
    try:
        cipher_salt = os.urandom(SALT_SIZE)
        mac_salt = os.urandom(MAC_SALT_SIZE)
        iv = os.urandom(IV_SIZE)

        frame = build_frame(plaintext, password, cipher_salt, mac_salt, iv)
    except UnicodeEncodeError as e:
        raise EncryptionError("Text or password is not encodable as UTF-8") from e
    except (OSError, NotImplementedError, UnsupportedAlgorithm, InternalError) as e:
        raise EncryptionError(f"Encryption failed: {e}") from e

    data = encode_frame(frame)
    logger.debug("Encrypted %d-byte frame", len(data))
    return frame_to_token(data)


def decrypt_text(token: str, password: str, *, strip_markup: bool = True) -> str:
    """
    Decrypt an ENC0 token.

    The MAC is verified before the cipher key is even derived, so no
    plaintext is produced for a token that fails authentication.

    Args:
        token: Base64 token text
        password: Password the token was encrypted with
        strip_markup: Remove legacy <div> and </div> tags from the result

    Returns:
        Decrypted text

    Raises:
        MalformedInputError: If the token is not base64, is too short or
            carries an unknown format tag
        AuthenticationFailedError: If the password is wrong or the token
            was modified
        InvalidPaddingError: If the authenticated ciphertext is badly padded
        InvalidEncodingError: If the decrypted bytes are not UTF-8

    A password with no UTF-8 form raises AuthenticationFailedError.
    """
    try:
        data = token_to_frame_bytes(token)
    except MalformedInputError as e:
        logger.debug("Token rejected: %s", e)
        raise

    frame = decode_frame(data)

    try:
        mac_key = derive_mac_key(password, frame.mac_salt)
    except UnicodeEncodeError:
        # Passwords without a UTF-8 form never authenticate
        logger.debug("Token rejected: password not encodable")
        raise AuthenticationFailedError() from None

    if not verify_mac(mac_key, frame.body(), frame.mac):
        logger.debug("Token rejected: MAC mismatch")
        raise AuthenticationFailedError()

    if frame.magic != RESERVED_VALUE:
        logger.debug("Token rejected: unknown format tag")
        raise MalformedInputError("Unsupported format tag")

    cipher_key = derive_cipher_key(password, frame.cipher_salt)
    plaintext_bytes = decrypt_block(cipher_key, frame.iv, frame.ciphertext)

    try:
        text = plaintext_bytes.decode("utf-8")
    except UnicodeDecodeError as e:
        raise InvalidEncodingError("Decrypted data is not valid UTF-8") from e

    if strip_markup:
        text = strip_legacy_markup(text)

    return text
