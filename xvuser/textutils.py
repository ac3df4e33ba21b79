"""Concatenate files and echo arguments."""

import sys

_CHUNK = 512


def _binary(stream):
    return getattr(stream, "buffer", stream)


def cat(src, dst):
    """Copy src to dst in chunks and return the number of units copied."""
    total = 0
    while True:
        try:
            chunk = src.read(_CHUNK)
        except OSError as exc:
            raise OSError("cat: read error") from exc
        if not chunk:
            return total
        try:
            written = dst.write(chunk)
        except OSError as exc:
            raise OSError("cat: write error") from exc
        if written is not None and written != len(chunk):
            raise OSError("cat: write error")
        total += len(chunk)


def cat_main(argv=None):
    """Copy each named file, or standard input, to standard output."""
    args = sys.argv[1:] if argv is None else list(argv)
    sys.stdout.flush()
    out = _binary(sys.stdout)
    try:
        if not args:
            cat(_binary(sys.stdin), out)
            return 0
        for name in args:
            try:
                stream = open(name, "rb")
            except OSError:
                sys.stderr.write(f"cat: cannot open {name}\n")
                return 1
            with stream:
                cat(stream, out)
    except OSError as exc:
        sys.stderr.write(f"{exc}\n")
        return 1
    finally:
        out.flush()
    return 0


def echo_main(argv=None):
    """Write the arguments separated by spaces and ended by a newline."""
    args = sys.argv[1:] if argv is None else list(argv)
    if args:
        sys.stdout.write(" ".join(args) + "\n")
    return 0