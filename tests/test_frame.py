"""Tests for frame layout and token text."""

import base64

import pytest
from notecrypt.frame import (
    Frame,
    encode_frame,
    decode_frame,
    frame_to_token,
    token_to_frame_bytes,
    is_enc0_token,
)
from notecrypt.types import MIN_TOKEN_SIZE, HEADER_SIZE, MalformedInputError


def make_frame(ciphertext: bytes = b"C" * 16) -> Frame:
    return Frame(
        magic=b"ENC0",
        cipher_salt=b"S" * 16,
        mac_salt=b"M" * 16,
        iv=b"I" * 16,
        ciphertext=ciphertext,
        mac=b"T" * 32,
    )


class TestFrameLayout:
    """Test byte-exact frame encoding."""

    def test_field_offsets(self) -> None:
        """Fields sit at fixed offsets with no padding."""
        data = encode_frame(make_frame())

        assert data[0:4] == b"ENC0"
        assert data[4:20] == b"S" * 16
        assert data[20:36] == b"M" * 16
        assert data[36:52] == b"I" * 16
        assert data[52:68] == b"C" * 16
        assert data[68:] == b"T" * 32
        assert len(data) == HEADER_SIZE + 16 + 32

    def test_body_excludes_mac(self) -> None:
        """The MAC covers magic through ciphertext only."""
        frame = make_frame()
        assert frame.body() == encode_frame(frame)[:-32]

    def test_decode_splits_fields(self) -> None:
        """Decoding recovers every field, including a multi-block ciphertext."""
        frame = make_frame(ciphertext=bytes(range(48)))
        assert decode_frame(encode_frame(frame)) == frame

    def test_minimum_size(self) -> None:
        """Frames under 84 bytes are rejected; exactly 84 parses with no ciphertext."""
        assert MIN_TOKEN_SIZE == 84

        with pytest.raises(MalformedInputError, match="too short"):
            decode_frame(bytes(83))

        frame = decode_frame(bytes(84))
        assert frame.ciphertext == b""
        assert len(frame.mac) == 32


class TestTokenText:
    """Test the base64 outer representation."""

    def test_token_is_standard_base64(self) -> None:
        """Token text is padded standard base64 of the frame bytes."""
        data = encode_frame(make_frame())
        token = frame_to_token(data)

        assert token == base64.b64encode(data).decode("ascii")
        assert token_to_frame_bytes(token) == data

    @pytest.mark.parametrize(
        "token",
        [
            "not base64!",
            "RU5DMA",  # missing padding
            "RU5DéMA==",  # non-ASCII
            "RU5D-_MA==",  # urlsafe alphabet
        ],
    )
    def test_rejects_non_base64(self, token: str) -> None:
        """Invalid base64 is malformed input."""
        with pytest.raises(MalformedInputError):
            token_to_frame_bytes(token)

    def test_rejects_short_token(self) -> None:
        """Valid base64 that decodes to under 84 bytes is malformed."""
        token = base64.b64encode(bytes(83)).decode("ascii")
        with pytest.raises(MalformedInputError, match="too short"):
            token_to_frame_bytes(token)

    def test_is_enc0_token(self) -> None:
        """Shape check accepts ENC0 frames only."""
        assert is_enc0_token(frame_to_token(encode_frame(make_frame())))
        assert not is_enc0_token(base64.b64encode(b"XXXX" + bytes(96)).decode("ascii"))
        assert not is_enc0_token("invalid")
        assert not is_enc0_token("")
