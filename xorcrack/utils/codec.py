"""
Base-16 and base-64 text codecs

Table-driven encoders and strict decoders. Decoding never strips whitespace
or guesses at padding: anything outside the alphabet is a MalformedInputError.
"""

import string
from typing import Iterable

from xorcrack.error_handling import MalformedInputError


BASE16_ALPHABET = '0123456789abcdef'
BASE64_ALPHABET = string.ascii_uppercase + string.ascii_lowercase + string.digits + '+/'
BASE64_PAD = '='

_BASE16_VALUES = {c: i for i, c in enumerate(BASE16_ALPHABET)}
_BASE16_VALUES.update({c.upper(): i for c, i in list(_BASE16_VALUES.items())})
_BASE64_VALUES = {c: i for i, c in enumerate(BASE64_ALPHABET)}


def encode_base16(data: bytes) -> str:
    """Encode bytes as lowercase hex, two digits per byte"""
    return ''.join(BASE16_ALPHABET[b >> 4] + BASE16_ALPHABET[b & 0x0F] for b in data)


def decode_base16(text: str) -> bytes:
    """
    Decode hex text (either case) into bytes.

    Raises:
        MalformedInputError: odd length or a non-hex character
    """
    if len(text) % 2 != 0:
        raise MalformedInputError(
            f"Base-16 input has odd length {len(text)}",
            encoding='base16'
        )

    out = bytearray()
    for i in range(0, len(text), 2):
        hi = _BASE16_VALUES.get(text[i])
        lo = _BASE16_VALUES.get(text[i + 1])
        if hi is None or lo is None:
            bad = i if hi is None else i + 1
            raise MalformedInputError(
                f"Invalid base-16 character {text[bad]!r} at position {bad}",
                encoding='base16',
                position=bad
            )
        out.append(hi << 4 | lo)

    return bytes(out)


def encode_base64(data: bytes) -> str:
    """Encode bytes as standard base-64 with '=' padding"""
    out = []

    for i in range(0, len(data), 3):
        chunk = data[i:i + 3]
        b1 = chunk[0]
        b2 = chunk[1] if len(chunk) > 1 else 0
        b3 = chunk[2] if len(chunk) > 2 else 0

        out.append(BASE64_ALPHABET[b1 >> 2])
        out.append(BASE64_ALPHABET[(b1 & 0x03) << 4 | b2 >> 4])
        out.append(BASE64_ALPHABET[(b2 & 0x0F) << 2 | b3 >> 6] if len(chunk) > 1 else BASE64_PAD)
        out.append(BASE64_ALPHABET[b3 & 0x3F] if len(chunk) > 2 else BASE64_PAD)

    return ''.join(out)


def decode_base64(text: str) -> bytes:
    """
    Decode standard base-64 text into bytes.

    The final 4-character group may end in one or two '=' pads, yielding
    2 or 1 bytes for that group. A pad anywhere else is malformed.

    Raises:
        MalformedInputError: length not a multiple of 4, a character outside
            the alphabet, or a misplaced pad
    """
    if len(text) % 4 != 0:
        raise MalformedInputError(
            f"Base-64 input length {len(text)} is not a multiple of 4",
            encoding='base64'
        )

    out = bytearray()
    last_group = len(text) - 4

    for start in range(0, len(text), 4):
        group = text[start:start + 4]
        pads = len(group) - len(group.rstrip(BASE64_PAD))

        if pads and (start != last_group or pads > 2):
            position = start + 4 - pads
            raise MalformedInputError(
                f"Misplaced base-64 padding at position {position}",
                encoding='base64',
                position=position
            )

        values = []
        for offset, c in enumerate(group[:4 - pads]):
            value = _BASE64_VALUES.get(c)
            if value is None:
                position = start + offset
                raise MalformedInputError(
                    f"Invalid base-64 character {c!r} at position {position}",
                    encoding='base64',
                    position=position
                )
            values.append(value)

        values.extend([0] * pads)
        i1, i2, i3, i4 = values
        decoded = bytes([
            (i1 << 2 | i2 >> 4) & 0xFF,
            (i2 << 4 | i3 >> 2) & 0xFF,
            (i3 << 6 | i4) & 0xFF,
        ])
        out.extend(decoded[:3 - pads])

    return bytes(out)


def decode_base64_lines(lines: Iterable[str]) -> bytes:
    """Decode base-64 that has been wrapped over several lines"""
    return decode_base64(''.join(line.rstrip('\r\n') for line in lines))
