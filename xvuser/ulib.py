"""Small C-style string and input helpers."""

import re

_DIGITS = re.compile(r"[0-9]*")


def _cbytes(s):
    """Bytes of s up to (not including) the first NUL."""
    if isinstance(s, str):
        s = s.encode("utf-8")
    return bytes(s).split(b"\0", 1)[0]


def atoi(s):
    """Value of the leading decimal digits of s; 0 if there are none."""
    if isinstance(s, (bytes, bytearray)):
        s = bytes(s).decode("latin-1")
    digits = _DIGITS.match(s).group()
    return int(digits) if digits else 0


def strcmp(p, q):
    """Compare two strings byte-wise; negative, zero or positive."""
    left = _cbytes(p) + b"\0"
    right = _cbytes(q) + b"\0"
    for a, b in zip(left, right):
        if a == 0 or a != b:
            return a - b
    return 0


def memcmp(a, b, n):
    """Compare the first n bytes of a and b as unsigned bytes."""
    if n < 0:
        raise ValueError(f"length must not be negative: {n}")
    a = bytes(a)
    b = bytes(b)
    if len(a) < n or len(b) < n:
        raise ValueError(f"both buffers must hold at least {n} bytes")
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def gets(stream, max):
    """Read at most max-1 characters, stopping after a newline or return."""
    empty = stream.read(0)
    pieces = []
    while len(pieces) + 1 < max:
        c = stream.read(1)
        if not c:
            break
        pieces.append(c)
        if c in ("\n", "\r", b"\n", b"\r"):
            break
    return empty.join(pieces)