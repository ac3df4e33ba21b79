"""Count lines, words and characters."""

import sys
from dataclasses import dataclass

_CHUNK = 512
# The NUL character counts as a separator too.
_WHITESPACE = frozenset(" \r\t\n\v\0")


@dataclass(frozen=True)
class WordCount:
    """Line, word and character totals of a stream."""

    lines: int
    words: int
    chars: int


def count(stream):
    """Count lines, words and characters in a text or binary stream."""
    lines = words = chars = 0
    inword = False
    for chunk in iter(lambda: stream.read(_CHUNK), stream.read(0)):
        if isinstance(chunk, (bytes, bytearray)):
            chunk = bytes(chunk).decode("latin-1")
        for ch in chunk:
            chars += 1
            if ch == "\n":
                lines += 1
            if ch in _WHITESPACE:
                inword = False
            elif not inword:
                words += 1
                inword = True
    return WordCount(lines=lines, words=words, chars=chars)


def _report(stream, name):
    try:
        result = count(stream)
    except OSError:
        sys.stdout.write("wc: read error\n")
        return False
    sys.stdout.write(f"{result.lines} {result.words} {result.chars} {name}\n")
    return True


def main(argv=None):
    """Print counts for each file in argv, or for standard input."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        return 0 if _report(getattr(sys.stdin, "buffer", sys.stdin), "") else 1
    for name in args:
        try:
            stream = open(name, "rb")
        except OSError:
            sys.stdout.write(f"wc: cannot open {name}\n")
            return 1
        with stream:
            if not _report(stream, name):
                return 1
    return 0