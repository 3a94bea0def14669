"""Infrastructure: byte/text conversion for the ``--encoding`` names.

The accepted names are the buffer encodings the command line has always
offered.  Most map onto a Python codec; ``base64``,
``base64url`` and ``hex`` instead render bytes *as* that text form on
read, and parse that text form back into bytes on write.

Rules
-----
* Undecodable input bytes are replaced, never fatal.
* Unknown names raise :class:`UnsupportedEncodingError`.
"""

from __future__ import annotations

import base64

from linewrap.exceptions import UnsupportedEncodingError

_CODECS: dict[str, str] = {
    "utf8": "utf-8",
    "utf-8": "utf-8",
    "utf16le": "utf-16-le",
    "ucs2": "utf-16-le",
    "ucs-2": "utf-16-le",
    "latin1": "latin-1",
    "binary": "latin-1",
    "ascii": "ascii",
}

_TEXT_FORMS: frozenset[str] = frozenset({"base64", "base64url", "hex"})

_HEX_DIGITS: frozenset[str] = frozenset("0123456789abcdefABCDEF")


def decode(data: bytes, name: str) -> str:
    """Convert raw input bytes to text."""
    if name == "base64":
        return base64.b64encode(data).decode("ascii")
    if name == "base64url":
        return base64.urlsafe_b64encode(data).decode("ascii").rstrip("=")
    if name == "hex":
        return data.hex()
    return data.decode(_codec(name), errors="replace")


def encode(text: str, name: str) -> bytes:
    """Convert output text to bytes."""
    if name in ("base64", "base64url"):
        return _parse_base64(text)
    if name == "hex":
        return _parse_hex(text)
    return text.encode(_codec(name), errors="replace")


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _codec(name: str) -> str:
    try:
        return _CODECS[name]
    except KeyError:
        raise UnsupportedEncodingError(
            f"Unsupported encoding: {name}",
            hint="Choose one of: " + ", ".join(sorted(set(_CODECS) | _TEXT_FORMS)),
        ) from None


def _parse_base64(text: str) -> bytes:
    """Decode standard or URL-safe base64, ignoring junk and missing padding."""
    cleaned = "".join(
        ch for ch in text.replace("-", "+").replace("_", "/")
        if ch.isascii() and (ch.isalnum() or ch in "+/")
    )
    if len(cleaned) % 4 == 1:
        # A lone trailing character carries no full byte.
        cleaned = cleaned[:-1]
    return base64.b64decode(cleaned + "=" * (-len(cleaned) % 4))


def _parse_hex(text: str) -> bytes:
    """Decode leading hex digit pairs, stopping at the first invalid pair."""
    out = bytearray()
    for i in range(0, len(text) - 1, 2):
        pair = text[i:i + 2]
        if not all(ch in _HEX_DIGITS for ch in pair):
            break
        out.append(int(pair, 16))
    return bytes(out)
