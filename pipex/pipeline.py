"""Run ``< file1 cmd1 | cmd2 > file2`` the way a shell would."""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

from .printf import printf, printf_fd
from .text import join_three, split

USAGE = "usage: ./pipex file1 cmd1 cmd2 file2"


class PipexError(Exception):
    """A failure that ends the program with ``exit_code``."""

    def __init__(self, message: str, exit_code: int = 1, errno: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.exit_code = exit_code
        self.errno = errno

    def __str__(self) -> str:
        if self.errno:
            return f"{self.message}: {os.strerror(self.errno)}"
        return self.message


class CommandNotFound(PipexError):
    """The command could not be found on the search path."""

    def __init__(self, command: str) -> None:
        super().__init__(f"{command} : command not found", 127)
        self.command = command


@dataclass(frozen=True)
class PipexConfig:
    """The two files and two commands of one pipeline."""

    infile: str
    first_command: str
    second_command: str
    outfile: str
    env: Mapping[str, str] = field(default_factory=lambda: dict(os.environ))

    @classmethod
    def from_argv(cls, argv: Sequence[str], env: Mapping[str, str] | None = None) -> PipexConfig:
        """Build a config from ``file1 cmd1 cmd2 file2``."""
        args = list(argv)
        if len(args) != 4:
            raise PipexError(USAGE, 1)
        infile, first, second, outfile = args
        return cls(infile, first, second, outfile, dict(os.environ if env is None else env))


def resolve_command(command: str, env: Mapping[str, str]) -> str | None:
    """Locate ``command`` as an absolute path or in the directories of ``PATH``."""
    if not command:
        return None
    if command.startswith("/"):
        return command if os.path.exists(command) else None
    search_path = env.get("PATH")
    if search_path is None:
        return None
    for directory in split(search_path, ":"):
        candidate = join_three(directory, "/", command)
        if os.path.exists(candidate):
            return candidate
    return None


def _prepare(command: str, env: Mapping[str, str]) -> tuple[list[str], str]:
    args = split(command, " ")
    if not args:
        raise CommandNotFound("")
    path = resolve_command(args[0], env)
    if path is None:
        raise CommandNotFound(args[0])
    return args, path


def _report(error: PipexError) -> None:
    if isinstance(error, CommandNotFound):
        printf_fd(2, "%s : command not found\n", error.command)
        return
    printf("error_exit\n")
    sys.stderr.write(f"{error}\n")
    sys.stderr.flush()


def _run_first(config: PipexConfig) -> bytes:
    """Run the first command on the input file; failures are reported, not raised."""
    try:
        infd = os.open(config.infile, os.O_RDONLY)
    except OSError as exc:
        _report(PipexError("no such file or directory", 1, exc.errno))
        return b""
    try:
        args, path = _prepare(config.first_command, config.env)
        result = subprocess.run(
            args,
            executable=path,
            stdin=infd,
            stdout=subprocess.PIPE,
            env=dict(config.env),
            check=False,
        )
        return result.stdout
    except PipexError as err:
        _report(err)
    except OSError as exc:
        _report(PipexError("error executing command", 1, exc.errno))
    finally:
        os.close(infd)
    return b""


def run_pipeline(config: PipexConfig) -> int:
    """Run both commands and return the exit status of the second.

    Raises ``PipexError`` when the output file cannot be opened or the
    second command cannot be run, and ``CommandNotFound`` when it is
    not found.
    """
    data = _run_first(config)
    try:
        outfd = os.open(config.outfile, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o644)
    except OSError as exc:
        raise PipexError("permission denied", 1, exc.errno) from exc
    try:
        args, path = _prepare(config.second_command, config.env)
        try:
            result = subprocess.run(
                args,
                executable=path,
                input=data,
                stdout=outfd,
                env=dict(config.env),
                check=False,
            )
        except OSError as exc:
            raise PipexError("error executing command", 1, exc.errno) from exc
    finally:
        os.close(outfd)
    code = result.returncode
    return code if code >= 0 else 128 - code


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point: ``pipex file1 cmd1 cmd2 file2``."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        config = PipexConfig.from_argv(args)
        return run_pipeline(config)
    except PipexError as err:
        _report(err)
        return err.exit_code


if __name__ == "__main__":
    sys.exit(main())