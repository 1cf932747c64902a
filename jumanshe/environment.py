"""Shell environment variables and per-session shell state."""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from typing import Optional, Union

EnvSource = Union[Mapping[str, str], Iterable[str]]


class Environment:
    """Ordered store of variables; a value of None marks a name without a value."""

    def __init__(self, pairs: Iterable[tuple[str, Optional[str]]] = ()) -> None:
        self._vars: dict[str, Optional[str]] = {}
        for name, value in pairs:
            self.set(name, value)

    @classmethod
    def from_environ(cls, envp: Optional[EnvSource]) -> "Environment":
        """Build from ``NAME=value`` strings or a mapping.

        Strings without ``=`` are skipped; for repeated names the first wins.
        """
        env = cls()
        if envp is None:
            return env
        if isinstance(envp, Mapping):
            for name, value in envp.items():
                env.set(name, value)
            return env
        for entry in envp:
            name, sep, value = entry.partition("=")
            if sep and name not in env._vars:
                env._vars[name] = value
        return env

    def get(self, name: str) -> Optional[str]:
        """Return the value of ``name``, or None when it is unset or has no value."""
        return self._vars.get(name)

    def set(self, name: str, value: Optional[str]) -> None:
        """Assign ``value``; an existing name keeps its place in the order."""
        self._vars[name] = value

    def unset(self, name: str) -> None:
        """Remove ``name``; removing a missing name does nothing."""
        self._vars.pop(name, None)

    def to_envp(self) -> list[str]:
        """Return ``NAME=value`` strings for every variable that has a value."""
        return [f"{name}={value}" for name, value in self._vars.items() if value is not None]

    def __contains__(self, name: object) -> bool:
        return name in self._vars

    def __iter__(self) -> Iterator[tuple[str, Optional[str]]]:
        return iter(list(self._vars.items()))

    def __len__(self) -> int:
        return len(self._vars)


@dataclass
class Shell:
    """State carried through one shell session."""

    env: Environment = field(default_factory=Environment)
    last_exit_status: int = 0
    is_interactive: bool = False

    @classmethod
    def create(cls, envp: Optional[EnvSource] = None) -> "Shell":
        """Create a shell whose environment comes from ``envp`` (default: os.environ)."""
        source = os.environ if envp is None else envp
        return cls(env=Environment.from_environ(source))