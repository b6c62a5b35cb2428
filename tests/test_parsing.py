import pytest

from minishell.commands import Command, Redirection, RedirectionKind
from minishell.environment import Environment
from minishell.parsing import parse
from minishell.syntax import ShellSyntaxError


@pytest.fixture
def env():
    return Environment.from_entries(["USER=alice", "HOME=/h"])


def test_simple_command(env):
    assert parse("echo hello", env) == [Command(["echo", "hello"])]


def test_pipeline_splits_commands(env):
    commands = parse("echo hello | cat", env)
    assert [c.args for c in commands] == [["echo", "hello"], ["cat"]]


def test_redirections_collected(env):
    (command,) = parse("cat < in.txt > out.txt >> log.txt", env)
    assert command.args == ["cat"]
    assert command.redirections == [
        Redirection("in.txt", RedirectionKind.IN),
        Redirection("out.txt", RedirectionKind.OUT),
        Redirection("log.txt", RedirectionKind.APPEND),
    ]


def test_variables_expanded(env):
    assert parse("echo $USER", env)[0].args == ["echo", "alice"]


def test_quotes_removed_and_single_quotes_literal(env):
    args = parse("echo \"$HOME\" '$HOME' 'a b'", env)[0].args
    assert args == ["echo", "/h", "$HOME", "a b"]


def test_last_status_expanded(env):
    assert parse("echo $?", env, 42)[0].args == ["echo", "42"]


def test_heredoc_delimiter_not_expanded(env):
    (command,) = parse("cat << $USER", env)
    assert command.redirections == [Redirection("$USER", RedirectionKind.HEREDOC)]


def test_blank_line_gives_nothing(env):
    assert parse("   \t ", env) == []
    assert parse("", env) == []


def test_surrounding_whitespace_trimmed(env):
    assert parse("  pwd  ", env) == [Command(["pwd"])]


@pytest.mark.parametrize("line", ["| ls", "ls |", "ls | | wc", "echo >", "cat < >", "echo 'x"])
def test_syntax_errors(env, line):
    with pytest.raises(ShellSyntaxError):
        parse(line, env)


def test_syntax_error_status(env):
    with pytest.raises(ShellSyntaxError) as info:
        parse("echo >", env)
    assert info.value.status == 2