import pytest

from minishell.environment import (
    Environment,
    is_valid_identifier,
    join_path,
    split_entry,
)


def test_split_entry_first_equals():
    assert split_entry("A=b=c") == ("A", "b=c")


def test_split_entry_without_equals():
    assert split_entry("A") == ("A", None)


def test_split_entry_empty_value():
    assert split_entry("A=") == ("A", "")


def test_from_entries_round_trip():
    entries = ["HOME=/home/user", "PATH=/bin:/usr/bin", "EMPTY="]
    env = Environment.from_entries(entries)
    assert env.to_strings() == entries
    assert len(env) == 3


def test_get_returns_value_or_none():
    env = Environment.from_entries(["HOME=/home/user"])
    assert env.get("HOME") == "/home/user"
    assert env.get("MISSING") is None


def test_bare_key_has_no_value_and_is_not_exported():
    env = Environment.from_entries(["A=1", "B"])
    assert "B" in env
    assert env.get("B") is None
    assert env.to_strings() == ["A=1"]


def test_update_existing_and_missing():
    env = Environment.from_entries(["PWD=/old"])
    env.update("PWD", "/new")
    env.update("OLDPWD", "/old")
    assert env.get("PWD") == "/new"
    assert "OLDPWD" not in env


def test_add_keeps_duplicates_first_wins():
    env = Environment.from_entries(["X=1"])
    env.add("X=2")
    assert len(env) == 2
    assert env.get("X") == "1"
    assert env.remove("X") is True
    assert env.get("X") == "2"


def test_remove_missing_returns_false():
    env = Environment.from_entries(["X=1"])
    assert env.remove("Y") is False
    assert env.to_strings() == ["X=1"]


def test_sort_orders_keys():
    env = Environment.from_entries(["b=2", "_u=3", "A=1", "a=0"])
    env.sort()
    keys = [key for key, _ in env]
    assert keys == sorted(keys)
    assert set(env.to_strings()) == {"b=2", "_u=3", "A=1", "a=0"}


@pytest.mark.parametrize("name", ["HOME", "_x", "a1", "VAR=value", "x=1 2"])
def test_valid_identifiers(name):
    assert is_valid_identifier(name) is True


@pytest.mark.parametrize("name", ["", "1abc", "=x", "a-b", "a b=c", None])
def test_invalid_identifiers(name):
    assert is_valid_identifier(name) is False


@pytest.mark.parametrize("directory", ["/bin", "/bin/"])
def test_join_path_single_slash(directory):
    assert join_path(directory, "ls") == "/bin/ls"