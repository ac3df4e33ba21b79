# xvuser

A small collection of classic Unix-style user programs and the pieces
beneath them, in plain Python with no third-party dependencies:

- line-oriented tools: `cat`, `echo`, `grep` (with `^ . * $` only), `wc`
- file tools: `ls`, `find`, `ln`, `mkdir`, `rm`
- a prime sieve built as a chain of filtering stages
- a parser for a minimal shell syntax (`|`, `;`, `&`, `<`, `>`, `>>`, `( )`)
- a `printf` work-alike that understands `%d %u %x %p %s %%` and the `l`/`ll` forms
- a first-fit, coalescing free-list allocator over a simulated heap
- the Park–Miller "minimal standard" pseudo-random generator
- binary layouts for ELF headers, `stat` records and virtio block queues
- RISC-V Sv39 page-table and memory-layout helpers

## Installation

```
pip install xvuser
```

Python 3.10 or later is required.

## Commands

| Command     | What it does                                                        |
|-------------|---------------------------------------------------------------------|
| `xv-cat`    | copy files (or standard input) to standard output                   |
| `xv-echo`   | print its arguments separated by spaces                             |
| `xv-grep`   | print lines matching a simple pattern                               |
| `xv-wc`     | print line, word and character counts and the file name             |
| `xv-ls`     | list name, type, inode number and size; directories entry by entry  |
| `xv-find`   | print paths of non-directories with a given name under a directory  |
| `xv-ln`     | create a hard link                                                  |
| `xv-mkdir`  | create directories, stopping at the first failure                   |
| `xv-rm`     | remove files or empty directories, stopping at the first failure    |
| `xv-primes` | report each prime below 35 on standard error (`executing N`)        |

Examples:

```
xv-echo hello world
xv-grep '^def ' xvuser/grep.py
xv-wc README.md
xv-ls .
xv-find . README.md
xv-primes
```

In `xv-ls` output the type is `1` for a directory, `2` for a regular file
and `3` for anything else.

## Library use

Pattern matching (`xvuser.grep`):

```python
from xvuser.grep import match

match("^h.*o$", "hello")   # True
match("x", "hello")        # False
```

Formatting (`xvuser.fmt`); integers are printed as 32-bit values, hex in
upper case, `%p` as 16 hex digits:

```python
from xvuser.fmt import format_string

format_string("%d %x %s", -5, 255, "hi")   # "-5 FF hi"
```

Too few arguments raise `ValueError`. `fprintf(stream, fmt, *args)` writes
the result to a stream.

Shell parsing (`xvuser.shparse`) yields a tree of `ExecCmd`, `RedirCmd`,
`PipeCmd`, `ListCmd` and `BackCmd`:

```python
from xvuser.shparse import parse_command, PipeCmd

cmd = parse_command("ls | grep x > out\n")
isinstance(cmd, PipeCmd)   # True
```

Malformed input, or more than nine words in one command, raises
`ShellSyntaxError`.

Counting (`xvuser.wc`):

```python
import io
from xvuser.wc import count

count(io.StringIO("one two\nthree\n"))   # WordCount(lines=2, words=3, chars=14)
```

Memory allocation over a bounded heap (`xvuser.umalloc`):

```python
from xvuser.umalloc import Allocator, OutOfMemory

heap = Allocator(heap_limit=1 << 20)
addr = heap.malloc(100)
heap.free(addr)
heap.free_units()
```

When the heap cannot grow far enough, `malloc` raises `OutOfMemory`;
freeing an address that was not allocated raises `ValueError`.

Pseudo-random numbers (`xvuser.rand`):

```python
from xvuser.rand import Rand, do_rand

rng = Rand(1)
values = [rng.next() for _ in range(3)]
```

C-style helpers (`xvuser.ulib`): `atoi`, `strcmp`, `memcmp` and `gets`.

Page-table arithmetic (`xvuser.layout`):

```python
from xvuser.layout import pgroundup, pgrounddown, px

pgroundup(1)        # 4096
pgrounddown(4097)   # 4096
```

Binary records are dataclasses with a `pack()` method and can be read back
with `parse_elf_header`, `parse_program_header` (`xvuser.elf`),
`unpack_stat` (`xvuser.stat`), `unpack_desc`, `unpack_used` and
`unpack_block_request` (`xvuser.virtio`). A bad ELF magic or short input
raises `ElfFormatError`.

## What it does not do

The shell module only parses command lines; nothing runs the parsed
commands, and there is no interactive shell command. The layout, ELF and
virtio modules describe formats and addresses only: there is no loader,
disk driver or machine to run them on.

## Running the tests

```
pip install "xvuser[test]"
pytest
```