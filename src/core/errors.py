"""Errors raised by the core driver."""

from __future__ import annotations

from core.domain.models import ToolCheck


class MissingToolError(RuntimeError):
    """One or more required executables are not resolvable on PATH."""

    def __init__(self, checks: list[ToolCheck]) -> None:
        self.checks = [c for c in checks if not c.found]
        names = ", ".join(c.name for c in self.checks)
        super().__init__(f"missing required tools: {names}")

    @property
    def missing(self) -> list[str]:
        return [c.name for c in self.checks]

    def messages(self) -> list[str]:
        return [c.missing_message() for c in self.checks]
