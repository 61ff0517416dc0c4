"""
Secret markers embedded in plain-text notes.

A secret is stored in a note as an inline code span holding a prefix and
an ENC0 token:

    `evernote_secret RU5DM...`

These helpers find, format and unwrap such markers, and connect them to
the codec for callers that work on selections or whole documents.
"""

import logging
import re
from dataclasses import dataclass
from typing import List

from .crypto import encrypt_text, decrypt_text
from .types import DecryptionError, EmptyPasswordError

logger = logging.getLogger(__name__)

FORMAT_PREFIX = "evernote_secret "

# Single-backtick inline code span on one line
_INLINE_CODE = re.compile(r"(?<!`)`([^`\n]+)`(?!`)")
_EDGE_BACKTICKS = re.compile(r"^`+|`+$")


@dataclass
class SecretMarker:
    """A secret marker found in a document."""
    start: int  # offset of the opening backtick
    end: int  # offset just past the closing backtick
    token: str


def _require_password(password: str) -> None:
    if not password or not password.strip():
        raise EmptyPasswordError()


def format_secret(token: str, prefix: str = FORMAT_PREFIX) -> str:
    """Wrap a token as an inline code marker."""
    return f"`{prefix}{token}`"


def extract_token(selection: str, prefix: str = FORMAT_PREFIX) -> str:
    """
    Get the bare token out of a selected marker.

    Accepts a full marker, a marker without backticks, or a bare token.
    """
    text = _EDGE_BACKTICKS.sub("", selection.strip())
    if text.startswith(prefix):
        text = text[len(prefix):]
    return text.strip()


def find_secrets(document: str, prefix: str = FORMAT_PREFIX) -> List[SecretMarker]:
    """
    Find every secret marker in a document.

    Args:
        document: Note text to scan
        prefix: Marker prefix inside the code span

    Returns:
        Markers in document order
    """
    markers = []
    for match in _INLINE_CODE.finditer(document):
        content = match.group(1)
        if content.startswith(prefix):
            markers.append(
                SecretMarker(
                    start=match.start(),
                    end=match.end(),
                    token=content[len(prefix):].strip(),
                )
            )
    return markers


def encrypt_selection(selection: str, password: str, prefix: str = FORMAT_PREFIX) -> str:
    """
    Encrypt selected text and return it as a marker.

    Raises:
        EmptyPasswordError: If the password is blank
    """
    _require_password(password)
    return format_secret(encrypt_text(selection, password), prefix)


def decrypt_selection(selection: str, password: str, prefix: str = FORMAT_PREFIX) -> str:
    """
    Decrypt a selected marker or bare token.

    Raises:
        EmptyPasswordError: If the password is blank
        DecryptionError: If the token cannot be decrypted
    """
    _require_password(password)
    return decrypt_text(extract_token(selection, prefix), password)


def decrypt_document(document: str, password: str, prefix: str = FORMAT_PREFIX) -> str:
    """
    Replace every marker that decrypts under password with its plaintext.

    Markers encrypted under another password, or otherwise undecryptable,
    are left as they are.

    Raises:
        EmptyPasswordError: If the password is blank
    """
    _require_password(password)

    parts = []
    last = 0
    for marker in find_secrets(document, prefix):
        try:
            plaintext = decrypt_text(marker.token, password)
        except DecryptionError as e:
            logger.debug("Leaving marker at offset %d: %s", marker.start, type(e).__name__)
            continue
        parts.append(document[last:marker.start])
        parts.append(plaintext)
        last = marker.end

    parts.append(document[last:])
    return "".join(parts)
