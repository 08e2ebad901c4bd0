# pipex

`pipex` behaves like the shell pipeline

```sh
< infile cmd1 | cmd2 > outfile
```

It reads `infile`, feeds it to the first command, pipes that command's
output into the second command and writes the result to `outfile`. The
output file is created if it is missing and truncated otherwise (mode
`0644`). It is created or truncated even when the first stage fails.

## Installation

```sh
pip install .
```

## Command line

```sh
pipex infile "grep hello" "wc -l" outfile
```

Exactly four arguments are required. With any other number the command
does nothing and exits with a non-zero status, without printing a message.
Otherwise it exits with status 0, whatever the two commands returned.

Each command is split on spaces into a program name and its arguments (no
quoting is understood). The program name is looked up in the directories
listed in `PATH`, in order, and the first `<dir>/<name>` that exists and is
executable is used.

Errors are written to standard error:

- an input or output file that cannot be opened:
  `zsh: No such file or directory: infile`
- a command that cannot be found:
  `zsh: command not found: nosuchcmd`

## Library use

```python
from pipex.pipeline import run, EXIT_OPEN_FAILED, EXIT_COMMAND_FAILED

status1, status2 = run(
    "input.txt", "grep hello", "wc -l", "output.txt",
    env={"PATH": "/usr/bin:/bin"},
)
```

`run` returns the exit status of each stage: the command's own return code,
`EXIT_OPEN_FAILED` (254) when that stage's file could not be opened, or
`EXIT_COMMAND_FAILED` (255) when its command could not be found or started.
With `env` left out, the current process environment is used.

The path helpers used by the pipeline:

```python
from pipex.path import command_words, find_executable, search_path, CommandNotFound

command_words("ls  -l")            # ['ls', '-l']
search_path({"PATH": "/bin"})      # '/bin'
search_path({})                    # None
find_executable("ls -l", {"PATH": "/usr/bin:/bin"})   # e.g. '/usr/bin/ls'
```

`find_executable` raises `CommandNotFound` (a `LookupError`) when `PATH` is
unset, the command is blank, or no candidate is executable.

The package also carries small text, formatting and line-reading tools:

```python
from pipex.textutils import split, atoi, itoa, strtrim, substr, strnstr, strncmp
from pipex.printf import format_string, printf
from pipex.linereader import LineReader

split(",,a,,b,", ",")              # ['a', 'b']
atoi("  -42abc")                   # -42
strtrim(",,banana,,", ",")         # 'banana'
format_string("%d-%x", 42, 255)    # '42-ff'
printf("%s %c\n", "hi", "!")       # writes 'hi !\n' to stdout, returns 5

import os
fd = os.open("input.txt", os.O_RDONLY)
for line in LineReader(fd):        # yields bytes, newline included
    print(line.decode(), end="")
os.close(fd)
```

`format_string` understands `%c %s %p %d %i %u %x %X` and `%%`.

## What it does not do

- Only two commands are supported; there is no way to chain more stages.
- There is no here-document mode reading input from the terminal.
- A command is always looked up through `PATH`: a name that already holds a
  path, such as `/bin/ls` or `./script`, is still joined to each `PATH`
  directory rather than run directly.

## Running the tests

```sh
pip install ".[test]"
pytest
```