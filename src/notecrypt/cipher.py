"""AES-128-CBC transform with PKCS#7 padding."""

from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from .types import KEY_SIZE, IV_SIZE, BLOCK_SIZE, LEGACY_MARKUP, InvalidPaddingError


def _check_sizes(key: bytes, iv: bytes) -> None:
    if len(key) != KEY_SIZE:
        raise ValueError(f"Key must be {KEY_SIZE} bytes, got {len(key)}")
    if len(iv) != IV_SIZE:
        raise ValueError(f"IV must be {IV_SIZE} bytes, got {len(iv)}")


def encrypt_block(key: bytes, iv: bytes, plaintext: bytes) -> bytes:
    """
    Pad and encrypt plaintext with AES-128-CBC.

    Args:
        key: 16-byte cipher key
        iv: 16-byte initialization vector
        plaintext: Bytes to encrypt

    Returns:
        Ciphertext, a non-empty multiple of the block size
    """
    _check_sizes(key, iv)

    padder = padding.PKCS7(BLOCK_SIZE * 8).padder()
    padded = padder.update(plaintext) + padder.finalize()

    encryptor = Cipher(algorithms.AES(key), modes.CBC(iv)).encryptor()
    return encryptor.update(padded) + encryptor.finalize()


def decrypt_block(key: bytes, iv: bytes, ciphertext: bytes) -> bytes:
    """
    Decrypt AES-128-CBC ciphertext and remove the PKCS#7 padding.

    Args:
        key: 16-byte cipher key
        iv: 16-byte initialization vector
        ciphertext: Bytes to decrypt

    Returns:
        Unpadded plaintext bytes

    Raises:
        InvalidPaddingError: If the ciphertext length or padding is invalid
    """
    _check_sizes(key, iv)

    if not ciphertext or len(ciphertext) % BLOCK_SIZE:
        raise InvalidPaddingError(
            f"Ciphertext length {len(ciphertext)} is not a positive multiple of {BLOCK_SIZE}"
        )

    decryptor = Cipher(algorithms.AES(key), modes.CBC(iv)).decryptor()
    padded = decryptor.update(ciphertext) + decryptor.finalize()

    unpadder = padding.PKCS7(BLOCK_SIZE * 8).unpadder()
    try:
        return unpadder.update(padded) + unpadder.finalize()
    except ValueError as e:
        raise InvalidPaddingError("Invalid padding") from e


def strip_legacy_markup(text: str) -> str:
    """
    Remove literal <div> and </div> tags from decrypted text.

    Notes exported from older editors wrapped secret lines in bare div tags.
    Only these exact tags are removed; tags with attributes are kept.
    """
    for tag in LEGACY_MARKUP:
        text = text.replace(tag, "")
    return text
