import pytest

from xvuser.shparse import (
    BackCmd,
    ExecCmd,
    ListCmd,
    PipeCmd,
    RedirCmd,
    ShellSyntaxError,
    parse_command,
)
from xvuser.stat import OpenFlags

TRUNC_MODE = OpenFlags.WRONLY | OpenFlags.CREATE | OpenFlags.TRUNC


def test_simple_command():
    assert parse_command("echo hello world\n") == ExecCmd(["echo", "hello", "world"])


def test_empty_line():
    assert parse_command("   \n") == ExecCmd([])


def test_input_and_output_redirection():
    cmd = parse_command("cat < in > out")
    inner = RedirCmd(ExecCmd(["cat"]), "in", OpenFlags.RDONLY, 0)
    assert cmd == RedirCmd(inner, "out", TRUNC_MODE, 1)


def test_append_redirection():
    cmd = parse_command("echo hi >> log")
    assert cmd == RedirCmd(
        ExecCmd(["echo", "hi"]), "log", OpenFlags.WRONLY | OpenFlags.CREATE, 1
    )


def test_words_stop_at_symbols():
    assert parse_command("echo>out") == RedirCmd(ExecCmd(["echo"]), "out", TRUNC_MODE, 1)


def test_arguments_after_redirection_go_to_program():
    cmd = parse_command("a b<c d")
    assert cmd == RedirCmd(ExecCmd(["a", "b", "d"]), "c", OpenFlags.RDONLY, 0)


def test_pipeline_is_right_nested():
    cmd = parse_command("a | b | c")
    assert cmd == PipeCmd(ExecCmd(["a"]), PipeCmd(ExecCmd(["b"]), ExecCmd(["c"])))


def test_list_and_background():
    cmd = parse_command("a ; b &")
    assert cmd == ListCmd(ExecCmd(["a"]), BackCmd(ExecCmd(["b"])))


def test_repeated_background():
    assert parse_command("a & &") == BackCmd(BackCmd(ExecCmd(["a"])))


def test_block_with_redirection():
    cmd = parse_command("(a ; b) > f")
    assert cmd == RedirCmd(ListCmd(ExecCmd(["a"]), ExecCmd(["b"])), "f", TRUNC_MODE, 1)


def test_pipe_with_empty_right_side():
    assert parse_command("a |") == PipeCmd(ExecCmd(["a"]), ExecCmd([]))


def test_nine_arguments_allowed():
    words = [f"w{i}" for i in range(9)]
    assert parse_command(" ".join(words)) == ExecCmd(words)


def test_ten_arguments_rejected():
    with pytest.raises(ShellSyntaxError, match="too many args"):
        parse_command(" ".join(f"w{i}" for i in range(10)))


@pytest.mark.parametrize("line", ["a )", ")", "a & b", "a (b)"])
def test_syntax_errors(line):
    with pytest.raises(ShellSyntaxError, match="syntax"):
        parse_command(line)


def test_missing_close_paren():
    with pytest.raises(ShellSyntaxError, match="missing \\)"):
        parse_command("(a ; b")


@pytest.mark.parametrize("line", ["a >", "a < |"])
def test_missing_redirection_file(line):
    with pytest.raises(ShellSyntaxError, match="missing file for redirection"):
        parse_command(line)