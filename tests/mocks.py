"""Recording handlers for tests."""

from __future__ import annotations


class Recorder:
    """Handler that records every payload it receives."""

    def __init__(self, name: str = "", log: list | None = None) -> None:
        self.name = name
        self.calls: list[object] = []
        self._log = log

    def __call__(self, args: object) -> None:
        self.calls.append(args)
        if self._log is not None:
            self._log.append((self.name, args))
