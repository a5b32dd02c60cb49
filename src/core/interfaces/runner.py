"""Contratos de ejecución de comandos.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Permite sustituir `subprocess` por un runner falso en tests sin tocar el
  bucle del Core.
"""

from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable

from core.domain.models import ToolInvocation


@runtime_checkable
class CommandRunner(Protocol):
    """Contrato mínimo para lanzar una herramienta externa.

    Reglas de diseño:
    - `run` es bloqueante: vuelve cuando el proceso ha terminado.
    - Nunca lanza por un código de salida distinto de cero.
    """

    def run(self, tool: str, argv: Sequence[str]) -> ToolInvocation:
        """Ejecuta `argv` y devuelve la invocación normalizada."""

        ...
