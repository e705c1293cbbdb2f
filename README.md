# pipex

`pipex` works like the shell construct

```sh
< file1 cmd1 | cmd2 > file2
```

It opens `file1` and passes it to the standard input of `cmd1`. The output of
`cmd1` goes to the standard input of `cmd2`, and the output of `cmd2` is
written to `file2`. `file2` is created with mode `0644` if it does not exist
and is truncated if it does.

## Installation

```sh
pip install .
```

## Usage

```sh
pipex infile "grep foo" "wc -l" outfile
```

- The command takes exactly four arguments. With any other number it prints
  `usage: ./pipex file1 cmd1 cmd2 file2` and exits with status 1.
- Each command is split on spaces. There is no shell quoting, globbing or
  variable expansion.
- A command name that starts with `/` is used as given if that path exists.
  Any other name is looked up in the directories of `PATH`, in order.
- If a command cannot be found, `<name> : command not found` is written to
  standard error. When this happens to the second command, the exit status
  is 127.
- If `file1` cannot be opened, or the first command cannot be found or
  started, the error is reported and the second command still runs with
  empty input.
- If `file2` cannot be opened, the program reports `permission denied` and
  exits with status 1.
- Otherwise the exit status is that of the second command. A command killed
  by a signal gives 128 plus the signal number.

The first command runs to completion before the second one starts. Its whole
output is held in memory and then given to the second command, so the two do
not run at the same time as they would with a real pipe.

## Library use

```python
import os
from pipex.pipeline import PipexConfig, run_pipeline, resolve_command

config = PipexConfig.from_argv(["in.txt", "cat", "wc -l", "out.txt"], dict(os.environ))
status = run_pipeline(config)

resolve_command("ls", dict(os.environ))   # e.g. "/bin/ls", or None if not found
```

`PipexConfig.from_argv` takes the four arguments without the program name and
raises `PipexError` if there are not exactly four. `run_pipeline` returns the
exit status of the second command. It raises `PipexError` when the output
file cannot be opened or the second command cannot be started, and
`CommandNotFound` (exit code 127) when the second command is not found.
`pipex.pipeline.main(argv=None)` is the command's entry point and returns the
exit status.

## Helper modules

- `pipex.text`: string routines `split`, `count_words`, `atoi`, `itoa`,
  `strtrim`, `strnstr`, `strcspn`, `strsep`, `substr`, `strncmp` and
  `join_three`.
- `pipex.linked`: `LinkedList`, a doubly linked list of `Node` objects, with
  `push_front`, `push_back`, `last`, `clear`, `for_each`, `map`, `len()` and
  iteration. It comes with a `Content` record that has the fields `nb`,
  `index` and `order`.
- `pipex.lines`: `LineReader`, which reads a file descriptor one line at a
  time as bytes, and `get_next_line(fd)`, which keeps leftover data for each
  descriptor between calls.
- `pipex.formatspec`: `parse_spec`, `FormatSpec` and `to_base`, which parse
  and convert a single printf conversion.
- `pipex.printf`: `render`, `printf` and `printf_fd`. They support the
  conversions `c s p d i u x X %`, the flags `- 0 + space #`, width,
  precision and `*`.

```python
from pipex.printf import render

render("%5d|%-4s|%#x", 42, "ab", 255)   # '   42|ab  |0xff'
```