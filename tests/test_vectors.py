"""Test vectors for notecrypt cross-implementation testing."""

PASSWORD = "correct horse"
WRONG_PASSWORD = "wrong horse"

# Fixed frame parameters for the known-vector scenario
CIPHER_SALT_HEX = "000102030405060708090a0b0c0d0e0f"
MAC_SALT_HEX = "101112131415161718191a1b1c1d1e1f"
IV_HEX = "202122232425262728292a2b2c2d2e2f"
KNOWN_PLAINTEXT = "secret"

# Test messages covering edge cases
TEST_MESSAGES = {
    "empty": "",
    "single_char": "X",
    "whitespace": "   \t\n   ",
    "block_sized": "A" * 16,
    "newlines": "Line 1\nLine 2\nLine 3",
    "emoji": "Hello 👋 World 🌍",
    "chinese": "你好世界 - Hello World",
    "arabic": "مرحبا بالعالم",
    "accents": "Café résumé naïve",
    "cyrillic": "Привет мир",
    "json": '{"key": "value", "num": 42}',
    "div_attrs": '<div class="test">Content',
    "url": "https://example.com/path?q=test&lang=en",
    "long_text": "The quick brown fox jumps over the lazy dog. " * 40,
}
