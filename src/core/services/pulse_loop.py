"""Driver loop: dependency check, then UDP + ARP pulses forever.

The driver owns sequencing only. Resolving executables, building argv and
spawning processes are delegated to adapters, and the CLI layer owns printing
and signal handling. Tests inject a fake runner, a fake sleep and a bounded
``max_iterations`` to observe the loop without sending packets.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable, Iterable

from adapters.commands import build_arp_command, build_udp_command
from adapters.process_runner import SubprocessRunner
from adapters.tool_resolver import check_tools
from core.config import AppSettings
from core.domain.models import PulseState, ToolCheck, ToolInvocation
from core.errors import MissingToolError
from core.interfaces.runner import CommandRunner
from core.logging_setup import get_logger

logger = get_logger(__name__)

Resolver = Callable[[Iterable[str]], list[ToolCheck]]


@dataclass
class PulseHooks:
    """Optional callbacks for UI layers (`run --verbose` echoes invocations)."""

    invocation: Callable[[ToolInvocation], None] | None = None
    iteration: Callable[[int], None] | None = None


@dataclass
class PulseResult:
    """Summary of a loop that ended without an interrupt."""

    state: PulseState
    iterations: int


class PulseDriver:
    """Sequences the two external tools at a fixed interval."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        runner: CommandRunner | None = None,
        sleep: Callable[[float], None] = time.sleep,
        resolver: Resolver = check_tools,
        hooks: PulseHooks | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._runner = runner or SubprocessRunner()
        self._sleep = sleep
        self._resolver = resolver
        self._hooks = hooks or PulseHooks()

        self._state = PulseState.CHECKING_DEPENDENCIES
        self._iterations = 0
        self._stop_requested = False

    @property
    def settings(self) -> AppSettings:
        return self._settings

    @property
    def state(self) -> PulseState:
        return self._state

    @property
    def iterations(self) -> int:
        return self._iterations

    def stop(self) -> None:
        """Ask the loop to end once the running command exits.

        A stop requested during the UDP command skips the ARP command of that
        iteration; the interrupted iteration is not counted.
        """

        logger.info("stop requested after %d iterations", self._iterations)
        self._stop_requested = True

    def check_dependencies(self) -> list[ToolCheck]:
        """Resolve every required tool; raise if any is missing.

        All tools are checked before raising so the caller can report each
        missing one.
        """

        self._state = PulseState.CHECKING_DEPENDENCIES
        checks = self._resolver(self._settings.required_tools)
        if not all(c.found for c in checks):
            self._state = PulseState.TERMINATED
            raise MissingToolError(checks)
        return checks

    def run_iteration(self) -> list[ToolInvocation]:
        """One pulse: UDP then ARP. Exit statuses are reported, never acted on."""

        udp = self._runner.run(self._settings.udp_tool, build_udp_command(self._settings))
        self._notify_invocation(udp)
        if self._stop_requested:
            return [udp]
        arp = self._runner.run(self._settings.arp_tool, build_arp_command(self._settings))
        self._notify_invocation(arp)
        return [udp, arp]

    def run(self, *, max_iterations: int | None = None) -> PulseResult:
        """Check dependencies then loop until stopped, interrupted or bounded."""

        self.check_dependencies()
        self._state = PulseState.LOOPING
        logger.info(
            "pulsing %s (udp port %d, iface %s) every %.2fs",
            self._settings.target_ip,
            self._settings.target_port,
            self._settings.interface,
            self._settings.interval_seconds,
        )

        try:
            while not self._stop_requested:
                if max_iterations is not None and self._iterations >= max_iterations:
                    break
                if len(self.run_iteration()) < 2:
                    break
                self._iterations += 1
                if self._hooks.iteration:
                    self._hooks.iteration(self._iterations)
                if self._stop_requested:
                    break
                self._sleep(self._settings.interval_seconds)
        finally:
            self._state = PulseState.TERMINATED

        return PulseResult(state=self._state, iterations=self._iterations)

    def _notify_invocation(self, invocation: ToolInvocation) -> None:
        if self._hooks.invocation:
            self._hooks.invocation(invocation)
