"""Minimal printf-style formatting: %d, %u, %x (with l/ll), %p, %s and %%."""

import re

_DIGITS = "0123456789ABCDEF"
_UINT32_MASK = 0xFFFFFFFF
_UINT64_MASK = (1 << 64) - 1

_SPEC_PATTERN = re.compile(r"%(ll[dux]|l[dux]|[duxps%]|.)?|[^%]+", re.DOTALL)

_SIGNED = frozenset({"d", "ld", "lld"})
_UNSIGNED = frozenset({"u", "lu", "llu"})
_HEX = frozenset({"x", "lx", "llx"})


def _printint(value, base, signed):
    # The integer printer works on a 32-bit int whatever the length modifier.
    xx = int(value) & _UINT32_MASK
    if xx >= 0x80000000:
        xx -= 1 << 32
    negative = signed and xx < 0
    x = (-xx if negative else xx) & _UINT32_MASK
    digits = []
    while True:
        x, rem = divmod(x, base)
        digits.append(_DIGITS[rem])
        if x == 0:
            break
    if negative:
        digits.append("-")
    return "".join(reversed(digits))


def _printptr(value):
    return "0x" + format(int(value) & _UINT64_MASK, "016X")


def _cstring(value):
    if value is None:
        return "(null)"
    if isinstance(value, (bytes, bytearray)):
        value = bytes(value).decode("latin-1")
    return str(value).split("\0", 1)[0]


def format_string(fmt, *args):
    """Format args according to fmt and return the resulting text."""
    text = fmt.split("\0", 1)[0]
    remaining = iter(args)

    def take():
        try:
            return next(remaining)
        except StopIteration:
            raise ValueError(f"not enough arguments for format {fmt!r}") from None

    out = []
    for piece_match in _SPEC_PATTERN.finditer(text):
        piece = piece_match.group()
        if not piece.startswith("%"):
            out.append(piece)
            continue
        spec = piece_match.group(1)
        if spec is None:
            continue
        if spec in _SIGNED:
            out.append(_printint(take(), 10, True))
        elif spec in _UNSIGNED:
            out.append(_printint(take(), 10, False))
        elif spec in _HEX:
            out.append(_printint(take(), 16, False))
        elif spec == "p":
            out.append(_printptr(take()))
        elif spec == "s":
            out.append(_cstring(take()))
        elif spec == "%":
            out.append("%")
        else:
            out.append("%" + spec)
    return "".join(out)


def fprintf(stream, fmt, *args):
    """Format args according to fmt and write the text to stream."""
    stream.write(format_string(fmt, *args))