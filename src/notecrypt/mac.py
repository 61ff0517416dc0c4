"""HMAC-SHA256 authentication of ENC0 frames."""

from cryptography.hazmat.primitives import constant_time, hmac
from cryptography.hazmat.primitives.hashes import SHA256

from .types import MAC_SIZE


def compute_mac(mac_key: bytes, data: bytes) -> bytes:
    """
    Compute the HMAC-SHA256 tag of a frame body.

    Args:
        mac_key: Key derived from the MAC salt
        data: Frame bytes from the magic through the ciphertext

    Returns:
        32-byte tag
    """
    h = hmac.HMAC(mac_key, SHA256())
    h.update(data)
    return h.finalize()


def verify_mac(mac_key: bytes, data: bytes, tag: bytes) -> bool:
    """
    Check a tag against a frame body in constant time.

    Args:
        mac_key: Key derived from the MAC salt
        data: Frame bytes from the magic through the ciphertext
        tag: The 32-byte tag carried by the frame

    Returns:
        True if the tag matches
    """
    # Tag length is fixed and public
    if len(tag) != MAC_SIZE:
        return False

    return constant_time.bytes_eq(compute_mac(mac_key, data), tag)
