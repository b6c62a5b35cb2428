from minishell.commands import Command, Redirection, RedirectionKind


def test_kinds_are_distinct():
    kinds = [
        RedirectionKind.APPEND,
        RedirectionKind.OUT,
        RedirectionKind.IN,
        RedirectionKind.HEREDOC,
    ]
    redirections = [Redirection("file", kind) for kind in kinds]
    assert [r.kind for r in redirections] == kinds
    assert len({r.kind for r in redirections}) == 4
    assert len(set(RedirectionKind)) == 4


def test_redirection_defaults_to_no_descriptor():
    redirection = Redirection("out.txt", RedirectionKind.OUT)
    assert redirection.target == "out.txt"
    assert redirection.kind is RedirectionKind.OUT
    assert redirection.fd is None


def test_redirection_equality():
    assert Redirection("a", RedirectionKind.IN) == Redirection("a", RedirectionKind.IN)
    assert Redirection("a", RedirectionKind.IN) != Redirection("a", RedirectionKind.OUT)


def test_command_defaults_to_no_redirections():
    command = Command(["ls", "-l"])
    assert command.args == ["ls", "-l"]
    assert command.redirections == []


def test_commands_do_not_share_redirection_lists():
    first = Command(["a"])
    second = Command(["b"])
    first.redirections.append(Redirection("x", RedirectionKind.APPEND))
    assert second.redirections == []
    assert len(first.redirections) == 1