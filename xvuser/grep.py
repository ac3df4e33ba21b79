"""Line filter with a tiny regular-expression matcher (^ . * $)."""

import sys

# Lines longer than this (newline included) stop the scan.
_BUFFER_LIMIT = 1023


def _match_here(re, text):
    if not re:
        return True
    if len(re) >= 2 and re[1] == "*":
        return _match_star(re[0], re[2:], text)
    if re == "$":
        return text == ""
    if text and (re[0] == "." or re[0] == text[0]):
        return _match_here(re[1:], text[1:])
    return False


def _match_star(c, re, text):
    pos = 0
    while True:
        if _match_here(re, text[pos:]):
            return True
        if pos < len(text) and (text[pos] == c or c == "."):
            pos += 1
        else:
            return False


def match(re, text):
    """True if the pattern re matches somewhere in text."""
    if re.startswith("^"):
        return _match_here(re[1:], text)
    return any(_match_here(re, text[start:]) for start in range(len(text) + 1))


def grep(pattern, stream, out):
    """Write to out every complete line of stream that matches pattern."""
    for line in stream:
        if not line.endswith("\n") or len(line) > _BUFFER_LIMIT:
            return
        if match(pattern, line[:-1].split("\0", 1)[0]):
            out.write(line)


def main(argv=None):
    """Run grep over the files named in argv, or standard input."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        sys.stderr.write("usage: grep pattern [file ...]\n")
        return 1
    pattern, *files = args
    if not files:
        grep(pattern, sys.stdin, sys.stdout)
        return 0
    for name in files:
        try:
            stream = open(name, encoding="latin-1", newline="")
        except OSError:
            sys.stdout.write(f"grep: cannot open {name}\n")
            return 1
        with stream:
            grep(pattern, stream, sys.stdout)
    return 0