"""Resolving a command line to an executable through the PATH variable."""

import os

from pipex.textutils import split


class CommandNotFound(LookupError):
    """Raised when a command cannot be resolved to an executable file."""

    def __init__(self, command):
        super().__init__(f"command not found: {command}")
        self.command = command


def command_words(command):
    """Split a command line on spaces into its words, dropping empty ones."""
    return split(command, " ")


def search_path(env=None):
    """Return the value of PATH in ``env`` (the process environment by default), or ``None``."""
    environment = os.environ if env is None else env
    return environment.get("PATH")


def find_executable(command, env=None):
    """Return the first ``<dir>/<word>`` on PATH that exists and is executable.

    ``<word>`` is the first word of ``command``.  Directories are tried in the
    order PATH lists them; the command word is always joined to a PATH entry,
    even when it already contains a slash.  Raises ``CommandNotFound`` when
    PATH is unset, the command is blank, or no candidate is executable.
    """
    raw_path = search_path(env)
    if raw_path is None:
        raise CommandNotFound(command)
    words = command_words(command)
    if not words:
        raise CommandNotFound(command)
    for directory in split(raw_path, ":"):
        candidate = f"{directory}/{words[0]}"
        if os.access(candidate, os.F_OK | os.X_OK):
            return candidate
    raise CommandNotFound(command)