"""The shell's variable table: exported, declared-only and hidden variables."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass

from minibash.strings import isalnum, isalpha

__all__ = ["Visibility", "Variable", "Environment", "is_valid_identifier"]


class Visibility(enum.IntEnum):
    """How a variable shows up in the environment and in ``export`` listings."""

    EXPORTED = 0
    DECLARED = 1
    HIDDEN = 2


@dataclass
class Variable:
    """One shell variable."""

    key: str
    value: str
    visibility: Visibility = Visibility.EXPORTED


def is_valid_identifier(name: str, allow_assignment: bool) -> bool:
    """Check a name given to ``export`` or ``unset``.

    With ``allow_assignment`` the check stops successfully at the first ``=``.
    The first character must be a letter unless the second is an underscore.
    """
    if not name:
        return False
    if not isalpha(name[0]) and name[1:2] != "_":
        return False
    for char in name:
        if char == "=" and allow_assignment:
            return True
        if not isalnum(char) and char != "_":
            return False
    return True


class Environment:
    """An ordered table of variables keyed by name."""

    def __init__(
        self,
        initial: Mapping[str, str] | Iterable[str] | None = None,
    ) -> None:
        self._variables: dict[str, Variable] = {}
        if initial is None:
            return
        if isinstance(initial, Mapping):
            for key, value in initial.items():
                self.set(key, value)
            return
        for entry in initial:
            key, sep, value = entry.partition("=")
            if sep:
                self.set(key, value)
            else:
                self.declare(key)

    def find(self, key: str) -> Variable | None:
        """Return the variable named ``key``, or ``None``."""
        return self._variables.get(key)

    def set(self, key: str, value: str) -> Variable:
        """Assign ``value`` to ``key`` and make it exported, keeping its position."""
        variable = self._variables.get(key)
        if variable is None:
            variable = Variable(key, value)
            self._variables[key] = variable
        else:
            variable.value = value
            variable.visibility = Visibility.EXPORTED
        return variable

    def declare(self, key: str) -> Variable:
        """Add ``key`` without a value unless it already exists."""
        variable = self._variables.get(key)
        if variable is None:
            variable = Variable(key, "", Visibility.DECLARED)
            self._variables[key] = variable
        return variable

    def unset(self, key: str) -> bool:
        """Remove ``key``; report whether it was present."""
        return self._variables.pop(key, None) is not None

    def to_envp(self) -> list[str]:
        """Return ``KEY=VALUE`` strings for every exported variable."""
        return [
            f"{variable.key}={variable.value}"
            for variable in self._variables.values()
            if variable.visibility is Visibility.EXPORTED
        ]

    def declarations(self) -> list[str]:
        """Return the lines ``export`` prints when called without arguments."""
        lines = []
        for variable in self._variables.values():
            if variable.visibility is Visibility.HIDDEN:
                continue
            if variable.visibility is Visibility.DECLARED:
                lines.append(f"declare -x {variable.key}")
            else:
                lines.append(f'declare -x {variable.key}="{variable.value}"')
        return lines

    def __iter__(self) -> Iterator[Variable]:
        return iter(list(self._variables.values()))

    def __len__(self) -> int:
        return len(self._variables)