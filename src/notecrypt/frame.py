"""Frame encoding and decoding for ENC0 tokens."""

import base64
import binascii
from dataclasses import dataclass

from .types import (
    RESERVED_VALUE,
    RESERVED_SIZE,
    SALT_SIZE,
    MAC_SALT_SIZE,
    IV_SIZE,
    MAC_SIZE,
    MIN_TOKEN_SIZE,
    MalformedInputError,
)


@dataclass
class Frame:
    """One ENC0 token before base64 encoding."""
    magic: bytes  # 4 bytes, b"ENC0"
    cipher_salt: bytes  # 16 bytes
    mac_salt: bytes  # 16 bytes
    iv: bytes  # 16 bytes
    ciphertext: bytes  # variable, multiple of 16
    mac: bytes  # 32 bytes

    def body(self) -> bytes:
        """Bytes covered by the MAC (everything except the MAC itself)."""
        return self.magic + self.cipher_salt + self.mac_salt + self.iv + self.ciphertext


def encode_frame(frame: Frame) -> bytes:
    """
    Encode a frame to bytes.

    Format (52-byte header + ciphertext + 32-byte MAC):
        [0-3]    magic ("ENC0")
        [4-19]   cipherSalt (16 bytes)
        [20-35]  macSalt (16 bytes)
        [36-51]  iv (16 bytes)
        [52..-32] ciphertext (variable)
        [-32..]  mac (32 bytes)

    Args:
        frame: Frame to encode

    Returns:
        Encoded bytes
    """
    return frame.body() + frame.mac


def decode_frame(data: bytes) -> Frame:
    """
    Split frame bytes into fields at their fixed offsets.

    The magic is not checked here; it is covered by the MAC and checked
    once the MAC has been verified.

    Args:
        data: Encoded frame bytes

    Returns:
        Decoded Frame

    Raises:
        MalformedInputError: If data is shorter than the minimum frame
    """
    if len(data) < MIN_TOKEN_SIZE:
        raise MalformedInputError(f"Data too short: {len(data)} bytes (minimum {MIN_TOKEN_SIZE})")

    offset = 0
    magic = data[offset : offset + RESERVED_SIZE]
    offset += RESERVED_SIZE

    cipher_salt = data[offset : offset + SALT_SIZE]
    offset += SALT_SIZE

    mac_salt = data[offset : offset + MAC_SALT_SIZE]
    offset += MAC_SALT_SIZE

    iv = data[offset : offset + IV_SIZE]
    offset += IV_SIZE

    ciphertext = data[offset:-MAC_SIZE]
    mac = data[-MAC_SIZE:]

    return Frame(
        magic=magic,
        cipher_salt=cipher_salt,
        mac_salt=mac_salt,
        iv=iv,
        ciphertext=ciphertext,
        mac=mac,
    )


def frame_to_token(data: bytes) -> str:
    """Encode frame bytes as standard base64 text."""
    return base64.b64encode(data).decode("ascii")


def token_to_frame_bytes(token: str) -> bytes:
    """
    Decode token text into frame bytes.

    Args:
        token: Standard base64 text (with padding)

    Returns:
        Frame bytes, at least the minimum frame size

    Raises:
        MalformedInputError: If token is not base64 or is too short
    """
    try:
        data = base64.b64decode(token, validate=True)
    except (binascii.Error, ValueError) as e:
        raise MalformedInputError("Token is not valid base64") from e

    if len(data) < MIN_TOKEN_SIZE:
        raise MalformedInputError(f"Data too short: {len(data)} bytes (minimum {MIN_TOKEN_SIZE})")

    return data


def is_enc0_token(token: str) -> bool:
    """
    Check if text looks like an ENC0 token.

    Only the shape is checked; no key is derived.

    Args:
        token: Text to check

    Returns:
        True if token decodes to a frame starting with the ENC0 magic
    """
    try:
        data = token_to_frame_bytes(token)
    except MalformedInputError:
        return False

    return data[:RESERVED_SIZE] == RESERVED_VALUE
