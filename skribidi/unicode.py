"""Codepoint classification and UTF-8 / UTF-32 conversion."""

from __future__ import annotations

from typing import Iterable, Iterator

LINE_FEED = 0x0A
VERTICAL_TAB = 0x0B
FORM_FEED = 0x0C
CARRIAGE_RETURN = 0x0D
NEXT_LINE = 0x85
LINE_SEPARATOR = 0x2028
PARAGRAPH_SEPARATOR = 0x2029

_PARAGRAPH_SEPARATORS = frozenset(
    {
        LINE_FEED,
        VERTICAL_TAB,
        FORM_FEED,
        CARRIAGE_RETURN,
        NEXT_LINE,
        LINE_SEPARATOR,
        PARAGRAPH_SEPARATOR,
    }
)

_UTF8_ACCEPT = 0
_UTF8_REJECT = 12

# Byte classes (first 256 entries) followed by the state transition table.
_UTF8D = (
    0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,  0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,
    0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,  0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,
    0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,  0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,
    0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,  0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,
    1,1,1,1,1,1,1,1,1,1,1,1,1,1,1,1,  9,9,9,9,9,9,9,9,9,9,9,9,9,9,9,9,
    7,7,7,7,7,7,7,7,7,7,7,7,7,7,7,7,  7,7,7,7,7,7,7,7,7,7,7,7,7,7,7,7,
    8,8,2,2,2,2,2,2,2,2,2,2,2,2,2,2,  2,2,2,2,2,2,2,2,2,2,2,2,2,2,2,2,
    10,3,3,3,3,3,3,3,3,3,3,3,3,4,3,3, 11,6,6,6,5,8,8,8,8,8,8,8,8,8,8,8,
    0,12,24,36,60,96,84,12,12,12,48,72, 12,12,12,12,12,12,12,12,12,12,12,12,
    12, 0,12,12,12,12,12, 0,12, 0,12,12, 12,24,12,12,12,12,12,24,12,24,12,12,
    12,12,12,12,12,12,12,24,12,12,12,12, 12,24,12,12,12,12,12,12,12,24,12,12,
    12,12,12,12,12,12,12,36,12,36,12,12, 12,36,12,12,12,12,12,36,12,36,12,12,
    12,36,12,12,12,12,12,12,12,12,12,12,
)  # fmt: skip

_UINT32_LIMIT = 1 << 32


def is_regional_indicator_symbol(codepoint: int) -> bool:
    """True for the regional indicator letters used by flag emoji."""
    return 0x1F1E6 <= codepoint <= 0x1F1FF


def is_emoji_modifier(codepoint: int) -> bool:
    """True for the skin tone modifiers."""
    return 0x1F3FB <= codepoint <= 0x1F3FF


def is_variation_selector(codepoint: int) -> bool:
    """True for VS1..VS16."""
    return 0xFE00 <= codepoint <= 0xFE0F


def is_keycap_base(codepoint: int) -> bool:
    """True for characters that can precede a combining enclosing keycap."""
    return ord("0") <= codepoint <= ord("9") or codepoint in (ord("#"), ord("*"))


def is_tag_spec_char(codepoint: int) -> bool:
    """True for the emoji tag specification characters."""
    return 0xE0020 <= codepoint <= 0xE007E


def is_paragraph_separator(codepoint: int) -> bool:
    """True for characters that end a paragraph."""
    return codepoint in _PARAGRAPH_SEPARATORS


def _decode(data: bytes) -> Iterator[tuple[int, int]]:
    """Yield (byte index of the last byte, codepoint) for each decoded codepoint.

    Decoding stops producing codepoints once an invalid sequence is met.
    """
    state = _UTF8_ACCEPT
    codep = 0
    for idx, byte in enumerate(data):
        kind = _UTF8D[byte]
        if state != _UTF8_ACCEPT:
            codep = ((byte & 0x3F) | (codep << 6)) & 0xFFFFFFFF
        else:
            codep = (0xFF >> kind) & byte
        state = _UTF8D[256 + state + kind]
        if state == _UTF8_ACCEPT:
            yield idx, codep


def utf8_to_utf32(data: bytes) -> list[int]:
    """Decode UTF-8 bytes into a list of codepoints."""
    return [cp for _, cp in _decode(bytes(data))]


def utf8_to_utf32_count(data: bytes) -> int:
    """Return how many codepoints the UTF-8 bytes decode to."""
    return sum(1 for _ in _decode(bytes(data)))


def utf8_codepoint_offset(data: bytes, codepoint_offset: int) -> int:
    """Return the byte offset where the codepoint at codepoint_offset starts.

    Offsets past the last codepoint give the offset just after it.
    """
    start_idx = 0
    for count, (idx, _) in enumerate(_decode(bytes(data))):
        if count == codepoint_offset:
            return start_idx
        start_idx = idx + 1
    return start_idx


def _check_codepoint(codepoint: int) -> int:
    if not 0 <= codepoint < _UINT32_LIMIT:
        raise ValueError(f"codepoint {codepoint} is not an unsigned 32-bit value")
    return codepoint


def utf8_num_units(codepoint: int) -> int:
    """Return how many UTF-8 bytes encode codepoint, or 0 if it cannot be encoded."""
    cp = _check_codepoint(codepoint)
    if cp < 0x80:
        return 1
    if cp < 0x800:
        return 2
    if cp < 0x10000:
        return 3
    if cp < 0x200000:
        return 4
    return 0


def utf8_encode(codepoint: int) -> bytes:
    """Encode one codepoint as UTF-8.

    Surrogates are encoded like any other value; codepoints at or above
    0x200000 cannot be encoded and give empty bytes.
    """
    cp = _check_codepoint(codepoint)
    if cp < 0x80:
        return bytes((cp,))
    if cp < 0x800:
        return bytes((0xC0 | (cp >> 6), 0x80 | (cp & 0x3F)))
    if cp < 0x10000:
        return bytes(
            (0xE0 | (cp >> 12), 0x80 | ((cp >> 6) & 0x3F), 0x80 | (cp & 0x3F))
        )
    if cp < 0x200000:
        return bytes(
            (
                0xF0 | (cp >> 18),
                0x80 | ((cp >> 12) & 0x3F),
                0x80 | ((cp >> 6) & 0x3F),
                0x80 | (cp & 0x3F),
            )
        )
    return b""


def utf32_to_utf8(codepoints: Iterable[int]) -> bytes:
    """Encode a sequence of codepoints as UTF-8, skipping unencodable ones."""
    return b"".join(utf8_encode(cp) for cp in codepoints)


def utf32_to_utf8_count(codepoints: Iterable[int]) -> int:
    """Return the number of UTF-8 bytes the codepoints encode to."""
    return sum(utf8_num_units(cp) for cp in codepoints)