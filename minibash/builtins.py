"""The shell's built-in commands: echo, cd, pwd, env, export, unset and exit."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Iterable, Mapping, Sequence
from typing import TextIO

from minibash.environment import Environment, Visibility, is_valid_identifier
from minibash.numbers import atoli, fits_long, is_numeric

__all__ = [
    "ShellExit",
    "Shell",
    "echo",
    "cd",
    "pwd",
    "env",
    "export",
    "unset",
    "exit_builtin",
    "is_builtin",
    "run_builtin",
]

_LONG_MIN_TEXT = "-9223372036854775808"
_LONG_MIN_PLUS_ONE_TEXT = "-9223372036854775807"
_NEGATIVE_EXIT_STATUS = 156


class ShellExit(SystemExit):
    """Raised when the shell terminates; ``status`` is the process exit code."""

    def __init__(self, status: int) -> None:
        super().__init__(status)
        self.status = status


class Shell:
    """State shared by the built-ins: variables, last exit status and output streams."""

    def __init__(
        self,
        environ: Environment | Mapping[str, str] | Iterable[str] | None = None,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
    ) -> None:
        if isinstance(environ, Environment):
            self.env = environ
        else:
            self.env = Environment(environ)
        self.stdout = stdout if stdout is not None else sys.stdout
        self.stderr = stderr if stderr is not None else sys.stderr
        self.exit_status = 0
        self.error_msg: str | None = None

    def _out(self, text: str) -> None:
        self.stdout.write(text)
        self.stdout.flush()

    def _err(self, text: str) -> None:
        self.stderr.write(text)
        self.stderr.flush()


def _end_program(shell: Shell) -> None:
    """Report any pending error message and terminate with the last status."""
    if shell.error_msg:
        shell._err(shell.error_msg)
    raise ShellExit(shell.exit_status & 0xFF)


def _exit_error(status: int, message: str, shell: Shell) -> None:
    """Write ``message`` and a newline to the error stream and terminate."""
    shell._err(message + "\n")
    raise ShellExit(status & 0xFF)


def _wrap_int(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value >> 31 else value


def echo(args: Sequence[str], shell: Shell) -> None:
    """Print the arguments separated by spaces; a leading ``-n`` drops the newline."""
    if not args:
        return
    if len(args) > 1 and args[1] == "-n":
        shell._out(" ".join(args[2:]))
    else:
        shell._out(" ".join(args[1:]) + "\n")


def _cd_error(shell: Shell, message: str) -> None:
    shell._err(message)
    shell.exit_status = 1


def _current_dir(shell: Shell) -> str | None:
    try:
        return os.getcwd()
    except OSError:
        shell._err("path too long\n")
        shell.exit_status = 1
        return None


def _cd_target(path: str | None, save_pwd: str | None, shell: Shell) -> str | None:
    """Resolve and validate the directory ``cd`` should move to."""
    if path is None or path == "~":
        home = shell.env.find("HOME")
        if home is None or home.visibility is not Visibility.EXPORTED:
            _cd_error(shell, "bash: cd: HOME not set\n")
            return None
        path = home.value or save_pwd
        if path is None:
            return None
    if not os.path.exists(path):
        _cd_error(shell, f"bash: cd: {path}: No such file or directory\n")
    elif not os.path.isdir(path):
        _cd_error(shell, f"bash: cd: {path}: Not a directory\n")
    elif not os.access(path, os.X_OK):
        _cd_error(shell, f"bash: cd: {path}: Permission denied\n")
    else:
        return path
    return None


def cd(args: Sequence[str], shell: Shell) -> None:
    """Change the working directory and refresh PWD and OLDPWD if they exist."""
    if len(args) > 2:
        _cd_error(shell, "bash: cd: too many arguments\n")
        return
    path = args[1] if len(args) > 1 else None
    save_pwd = _current_dir(shell)
    target = _cd_target(path, save_pwd, shell)
    if target is None:
        return
    try:
        os.chdir(target)
    except OSError:
        return
    if shell.env.find("PWD") is not None:
        current = _current_dir(shell)
        shell.env.set("PWD", current if current is not None else "")
    if shell.env.find("OLDPWD") is not None and save_pwd is not None:
        shell.env.set("OLDPWD", save_pwd)


def pwd(args: Sequence[str], shell: Shell) -> None:
    """Print the working directory."""
    try:
        current = os.getcwd()
    except OSError:
        shell._err("path too long\n")
        shell.exit_status = 1
        return
    shell._out(current + "\n")


def env(args: Sequence[str], shell: Shell) -> None:
    """Print every exported variable as ``KEY=VALUE``."""
    for entry in shell.env.to_envp():
        shell._out(entry + "\n")


def _invalid_identifier(command: str, name: str, shell: Shell) -> None:
    shell._err(f"bash: {command}: `{name}': not a valid identifier\n")
    shell.exit_status = 1


def export(args: Sequence[str], shell: Shell) -> None:
    """Set or declare variables; with no operands, list the declarations."""
    if not args:
        return
    if len(args) < 2:
        for line in shell.env.declarations():
            shell._out(line + "\n")
    for arg in args[1:]:
        if not is_valid_identifier(arg, True):
            _invalid_identifier("export", arg, shell)
            continue
        key, sep, value = arg.partition("=")
        if sep:
            shell.env.set(key, value)
        else:
            shell.env.declare(key)


def unset(args: Sequence[str], shell: Shell) -> None:
    """Remove the named variables."""
    if not args:
        return
    for arg in args[1:]:
        if is_valid_identifier(arg, False):
            shell.env.unset(arg)
        else:
            _invalid_identifier("unset", arg, shell)


def exit_builtin(args: Sequence[str], shell: Shell) -> None:
    """Terminate the shell with the given status or the last one.

    Raises :class:`ShellExit`; returns only when there are too many operands.
    """
    if len(args) > 2:
        shell._err("bash: exit: too many arguments\n")
        shell.exit_status = 1
        return
    if len(args) > 1:
        arg = args[1]
        if arg == _LONG_MIN_TEXT:
            shell.exit_status = 0
            _end_program(shell)
        if arg == _LONG_MIN_PLUS_ONE_TEXT:
            shell.exit_status = 1
            _end_program(shell)
        if not is_numeric(arg) or not fits_long(atoli(arg), arg):
            shell._err(f"bash: exit: {arg}: numeric argument required\n")
            shell.exit_status = 2
            _end_program(shell)
        status = atoli(arg)
        if status < 0:
            status = _NEGATIVE_EXIT_STATUS
        shell.exit_status = _wrap_int(status)
    _end_program(shell)


_BUILTINS: dict[str, Callable[[Sequence[str], Shell], None]] = {
    "echo": echo,
    "cd": cd,
    "env": env,
    "exit": exit_builtin,
    "pwd": pwd,
    "export": export,
    "unset": unset,
}


def is_builtin(args: Sequence[str] | None) -> bool:
    """True when the command name in ``args[0]`` is a built-in."""
    return bool(args) and args[0] in _BUILTINS


def run_builtin(args: Sequence[str], shell: Shell) -> int:
    """Run the built-in named by ``args[0]`` and return the shell's exit status."""
    if not is_builtin(args):
        name = args[0] if args else ""
        raise ValueError(f"not a built-in command: {name!r}")
    _BUILTINS[args[0]](args, shell)
    return shell.exit_status