"""Reverse ``unit_name_escape``."""

import re

_HEX_PAIR = re.compile(r"[0-9a-fA-F]{2}")


def unit_name_unescape(text: str) -> str:
    """Undo systemd escaping: ``-`` becomes ``/`` and ``\\xHH`` becomes its byte.

    Raises:
        ValueError: On a malformed escape sequence or bytes that are not UTF-8
    """
    out = bytearray()
    i = 0
    while i < len(text):
        ch = text[i]
        if ch == "-":
            out += b"/"
            i += 1
        elif ch == "\\":
            hex_pair = text[i + 2:i + 4]
            if text[i + 1:i + 2] != "x" or not _HEX_PAIR.fullmatch(hex_pair):
                raise ValueError(f"Invalid escape sequence at offset {i} in {text!r}")
            out.append(int(hex_pair, 16))
            i += 4
        else:
            out += ch.encode("utf-8")
            i += 1
    try:
        return out.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ValueError(f"Escaped text {text!r} does not decode to UTF-8") from e
