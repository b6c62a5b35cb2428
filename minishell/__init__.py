"""A small interactive shell with pipes, redirections, variable expansion and builtins."""

__version__ = "0.1.0"
__all__ = [
    "builtins",
    "commands",
    "environment",
    "executor",
    "expander",
    "output",
    "parsing",
    "shell",
    "strutil",
    "syntax",
    "tokens",
]