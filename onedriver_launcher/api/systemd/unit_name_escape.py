"""Escape a string for use inside a systemd unit name (``systemd-escape``)."""

import string

# Characters systemd leaves untouched
_ALLOWED = frozenset(string.ascii_letters + string.digits + ":_.")


def _escape_char(ch: str) -> str:
    """C-style ``\\xHH`` escape of every UTF-8 byte of ``ch``."""
    return "".join(f"\\x{b:02x}" for b in ch.encode("utf-8"))


def unit_name_escape(text: str) -> str:
    """Escape ``text`` by systemd rules.

    Every ``/`` becomes ``-``, a leading ``.`` is escaped, and any other
    character outside ``[A-Za-z0-9:_.]`` is replaced by its ``\\xHH`` bytes.

    Examples:
        >>> unit_name_escape("/mnt/x")
        '-mnt-x'
        >>> unit_name_escape("my mount")
        'my\\\\x20mount'
    """
    out = []
    for i, ch in enumerate(text):
        if ch == "/":
            out.append("-")
        elif (i == 0 and ch == ".") or ch not in _ALLOWED:
            out.append(_escape_char(ch))
        else:
            out.append(ch)
    return "".join(out)
