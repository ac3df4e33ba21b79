"""Directory listing, file search, and link, mkdir and rm commands."""

import os
import stat as _stat_mod
import sys

from xvuser.fmt import format_string
from xvuser.stat import FileType, Stat

DIRSIZ = 14
_PATH_BUFFER = 512


def _args(argv):
    return sys.argv[1:] if argv is None else list(argv)


def _stat(path):
    st = os.stat(path)
    if _stat_mod.S_ISDIR(st.st_mode):
        ftype = FileType.DIR
    elif _stat_mod.S_ISREG(st.st_mode):
        ftype = FileType.FILE
    else:
        ftype = FileType.DEVICE
    return Stat(dev=st.st_dev, ino=st.st_ino, type=ftype, nlink=st.st_nlink, size=st.st_size)


def _too_long(path):
    return len(path) + 1 + DIRSIZ + 1 > _PATH_BUFFER


def fmtname(path):
    """Last path component, blank-padded to DIRSIZ characters."""
    name = path.rsplit("/", 1)[-1]
    if len(name) >= DIRSIZ:
        return name
    return name.ljust(DIRSIZ)


def list_dir(path):
    """List path as (entry path, Stat) pairs; Stat is None if it cannot be read.

    A file lists as itself; a directory lists ".", ".." and its entries.
    Raises OSError if path cannot be read and ValueError if it is too long.
    """
    st = _stat(path)
    if st.type != FileType.DIR:
        return [(path, st)]
    if _too_long(path):
        raise ValueError("path too long")
    entries = []
    for name in [".", ".."] + sorted(os.listdir(path)):
        entry = f"{path}/{name}"
        try:
            entries.append((entry, _stat(entry)))
        except OSError:
            entries.append((entry, None))
    return entries


def ls_main(argv=None):
    """Print name, type, inode number and size for each path."""
    args = _args(argv) or ["."]
    for path in args:
        try:
            entries = list_dir(path)
        except ValueError:
            sys.stdout.write("ls: path too long\n")
            continue
        except OSError:
            sys.stderr.write(f"ls: cannot open {path}\n")
            continue
        for entry, st in entries:
            if st is None:
                sys.stdout.write(f"ls: cannot stat {entry}\n")
                continue
            sys.stdout.write(
                format_string("%s %d %d %d\n", fmtname(entry), int(st.type), st.ino, st.size)
            )
    return 0


def find(path, name):
    """Yield every non-directory under path whose last component is name.

    Directories are descended into rather than reported.
    """
    st = _stat(path)
    if st.type != FileType.DIR:
        return
    if _too_long(path):
        raise ValueError("find: path too long")
    for entry in sorted(os.listdir(path)):
        child = f"{path}/{entry}"
        try:
            child_st = _stat(child)
        except OSError:
            sys.stderr.write(f"find: cannot stat {child}\n")
            continue
        if child_st.type == FileType.DIR and not os.path.islink(child):
            try:
                yield from find(child, name)
            except OSError:
                sys.stderr.write(f"find: cannot open '{child}'\n")
            except ValueError as exc:
                sys.stdout.write(str(exc))
        elif entry == name:
            yield child


def find_main(argv=None):
    """Print the paths of files with a given name under a directory."""
    args = _args(argv)
    if len(args) != 2:
        sys.stderr.write("find [path] [pattern]")
        return 1
    path, name = args
    try:
        for match in find(path, name):
            sys.stdout.write(f"{match}\n")
    except OSError:
        sys.stderr.write(f"find: cannot open '{path}'\n")
    except ValueError as exc:
        sys.stdout.write(str(exc))
    return 0


def ln_main(argv=None):
    """Create a hard link new for the file old."""
    args = _args(argv)
    if len(args) != 2:
        sys.stderr.write("Usage: ln old new\n")
        return 1
    old, new = args
    try:
        os.link(old, new)
    except OSError:
        sys.stderr.write(f"link {old} {new}: failed\n")
    return 0


def mkdir_main(argv=None):
    """Create each named directory, stopping at the first failure."""
    args = _args(argv)
    if not args:
        sys.stderr.write("Usage: mkdir files...\n")
        return 1
    for name in args:
        try:
            os.mkdir(name)
        except OSError:
            sys.stderr.write(f"mkdir: {name} failed to create\n")
            break
    return 0


def _unlink(name):
    if os.path.isdir(name) and not os.path.islink(name):
        os.rmdir(name)
    else:
        os.unlink(name)


def rm_main(argv=None):
    """Remove each named file or empty directory, stopping at the first failure."""
    args = _args(argv)
    if not args:
        sys.stderr.write("Usage: rm files...\n")
        return 1
    for name in args:
        try:
            _unlink(name)
        except OSError:
            sys.stderr.write(f"rm: {name} failed to delete\n")
            break
    return 0