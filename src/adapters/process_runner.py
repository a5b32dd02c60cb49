"""Runner de procesos basado en `subprocess`.

Implementa `core.interfaces.runner.CommandRunner`. La salida de las
herramientas se hereda (stdout/stderr del terminal), igual que al lanzarlas a
mano.
"""

from __future__ import annotations

import subprocess
from datetime import datetime, timezone
from typing import Sequence

from core.domain.models import ToolInvocation
from core.interfaces.runner import CommandRunner
from core.logging_setup import get_logger

logger = get_logger(__name__)

# Convención de shell para "comando no ejecutable".
SPAWN_FAILURE_RETURNCODE = 127


class SubprocessRunner(CommandRunner):
    """Lanza cada comando y espera a que termine."""

    def run(self, tool: str, argv: Sequence[str]) -> ToolInvocation:
        started = datetime.now(timezone.utc)
        try:
            completed = subprocess.run(list(argv), check=False)
            returncode = completed.returncode
        except OSError as exc:
            logger.warning("could not start %s: %s", tool, exc)
            returncode = SPAWN_FAILURE_RETURNCODE

        invocation = ToolInvocation(
            tool=tool,
            argv=list(argv),
            returncode=returncode,
            started_at=started,
            finished_at=datetime.now(timezone.utc),
        )
        if invocation.succeeded:
            logger.debug("%s exited 0", invocation.command_line)
        else:
            logger.warning("%s exited with status %d", invocation.command_line, returncode)
        return invocation
