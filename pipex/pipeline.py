"""Run ``infile | cmd1 | cmd2 > outfile`` as two connected child processes."""

import os
import subprocess
import sys

from pipex.path import CommandNotFound, command_words, find_executable

EXIT_OPEN_FAILED = 254
EXIT_COMMAND_FAILED = 255

_USAGE_ERROR = -1


def _report(message):
    sys.stderr.write(f"zsh: {message}\n")
    sys.stderr.flush()


def _launch(command, stdin_fd, stdout_fd, env):
    """Start ``command`` wired to the given descriptors; return a process or an exit status."""
    try:
        executable = find_executable(command, env)
    except CommandNotFound:
        _report(f"command not found: {command}")
        return EXIT_COMMAND_FAILED
    try:
        return subprocess.Popen(
            command_words(command),
            executable=executable,
            stdin=stdin_fd,
            stdout=stdout_fd,
            env=env,
        )
    except OSError as exc:
        _report(exc.strerror or str(exc))
        return EXIT_COMMAND_FAILED


def _start_stage(filename, flags, command, wire, env):
    """Open ``filename``, then launch ``command`` with the descriptors ``wire`` picks."""
    try:
        file_fd = os.open(filename, flags, 0o644)
    except OSError as exc:
        _report(f"{exc.strerror}: {filename}")
        return EXIT_OPEN_FAILED
    try:
        stdin_fd, stdout_fd = wire(file_fd)
        return _launch(command, stdin_fd, stdout_fd, env)
    finally:
        os.close(file_fd)


def _wait(stage):
    if isinstance(stage, int):
        return stage
    return stage.wait()


def run(infile, cmd1, cmd2, outfile, env=None):
    """Feed ``infile`` through ``cmd1`` into ``cmd2`` and write the result to ``outfile``.

    ``outfile`` is created or truncated even when the first stage fails.
    Returns the exit statuses of both stages: ``EXIT_OPEN_FAILED`` when a
    stage's file cannot be opened, ``EXIT_COMMAND_FAILED`` when its command
    cannot be found or started, otherwise the command's own return code.
    """
    environment = dict(os.environ if env is None else env)
    read_fd, write_fd = os.pipe()
    try:
        first = _start_stage(
            infile,
            os.O_RDONLY,
            cmd1,
            lambda fd: (fd, write_fd),
            environment,
        )
        second = _start_stage(
            outfile,
            os.O_WRONLY | os.O_CREAT | os.O_TRUNC,
            cmd2,
            lambda fd: (read_fd, fd),
            environment,
        )
    finally:
        os.close(read_fd)
        os.close(write_fd)
    return _wait(first), _wait(second)


def main(argv=None):
    """Command entry point: ``pipex infile cmd1 cmd2 outfile``."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 4:
        return _USAGE_ERROR
    infile, cmd1, cmd2, outfile = args
    run(infile, cmd1, cmd2, outfile)
    return 0