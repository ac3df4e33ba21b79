"""Parser for the shell's command language: words, < > >>, |, ;, & and ( )."""

from dataclasses import dataclass, field

from xvuser.stat import OpenFlags

MAXARGS = 10

WHITESPACE = " \t\r\n\v"
SYMBOLS = "<|>&;()"

_END = ""
_WORD = "a"
_APPEND = "+"


class ShellSyntaxError(ValueError):
    """Raised when a command line cannot be parsed."""


@dataclass
class ExecCmd:
    """Run a program with its arguments."""

    argv: list = field(default_factory=list)


@dataclass
class RedirCmd:
    """Run cmd with descriptor fd reopened on file with the given mode."""

    cmd: object
    file: str
    mode: OpenFlags
    fd: int


@dataclass
class PipeCmd:
    """Connect the output of left to the input of right."""

    left: object
    right: object


@dataclass
class ListCmd:
    """Run left, wait for it, then run right."""

    left: object
    right: object


@dataclass
class BackCmd:
    """Run cmd in the background."""

    cmd: object


class _Parser:
    def __init__(self, text):
        self.text = text
        self.pos = 0

    def skip_space(self):
        while self.pos < len(self.text) and self.text[self.pos] in WHITESPACE:
            self.pos += 1

    def at_end(self):
        return self.pos >= len(self.text)

    def peek(self, toks):
        self.skip_space()
        return not self.at_end() and self.text[self.pos] in toks

    def gettoken(self):
        """Return the next token kind and the text it covers."""
        self.skip_space()
        start = self.pos
        if self.at_end():
            kind = _END
        else:
            c = self.text[self.pos]
            if c in "|();&<":
                self.pos += 1
                kind = c
            elif c == ">":
                self.pos += 1
                if not self.at_end() and self.text[self.pos] == ">":
                    self.pos += 1
                    kind = _APPEND
                else:
                    kind = ">"
            else:
                while (
                    not self.at_end()
                    and self.text[self.pos] not in WHITESPACE
                    and self.text[self.pos] not in SYMBOLS
                ):
                    self.pos += 1
                kind = _WORD
        word = self.text[start:self.pos]
        self.skip_space()
        return kind, word

    def line(self):
        cmd = self.pipe()
        while self.peek("&"):
            self.gettoken()
            cmd = BackCmd(cmd)
        if self.peek(";"):
            self.gettoken()
            cmd = ListCmd(cmd, self.line())
        return cmd

    def pipe(self):
        cmd = self.exec()
        if self.peek("|"):
            self.gettoken()
            cmd = PipeCmd(cmd, self.pipe())
        return cmd

    def redirs(self, cmd):
        while self.peek("<>"):
            tok, _ = self.gettoken()
            kind, word = self.gettoken()
            if kind != _WORD:
                raise ShellSyntaxError("missing file for redirection")
            if tok == "<":
                cmd = RedirCmd(cmd, word, OpenFlags.RDONLY, 0)
            elif tok == ">":
                cmd = RedirCmd(
                    cmd, word, OpenFlags.WRONLY | OpenFlags.CREATE | OpenFlags.TRUNC, 1
                )
            else:
                cmd = RedirCmd(cmd, word, OpenFlags.WRONLY | OpenFlags.CREATE, 1)
        return cmd

    def block(self):
        if not self.peek("("):
            raise ShellSyntaxError("parseblock")
        self.gettoken()
        cmd = self.line()
        if not self.peek(")"):
            raise ShellSyntaxError("syntax - missing )")
        self.gettoken()
        return self.redirs(cmd)

    def exec(self):
        if self.peek("("):
            return self.block()
        ecmd = ExecCmd()
        ret = self.redirs(ecmd)
        while not self.peek("|)&;"):
            kind, word = self.gettoken()
            if kind == _END:
                break
            if kind != _WORD:
                raise ShellSyntaxError("syntax")
            ecmd.argv.append(word)
            if len(ecmd.argv) >= MAXARGS:
                raise ShellSyntaxError("too many args")
            ret = self.redirs(ret)
        return ret


def parse_command(s):
    """Parse one command line into a tree of command objects."""
    parser = _Parser(s.split("\0", 1)[0])
    cmd = parser.line()
    parser.skip_space()
    if not parser.at_end():
        raise ShellSyntaxError(f"syntax: leftovers: {parser.text[parser.pos:]}")
    return cmd