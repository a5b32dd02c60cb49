"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta y documentación autocontenida (Field) sin acoplar
  el Core a `subprocess` ni a la CLI.

Nota:
- Estos modelos describen *qué* ocurrió (herramienta resuelta, proceso
  lanzado), no *cómo* se ejecutó.
"""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, Field


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class PulseState(str, Enum):
    """Estados del driver."""

    CHECKING_DEPENDENCIES = "checking-dependencies"
    LOOPING = "looping"
    TERMINATED = "terminated"


class ToolCheck(BaseModel):
    """Resultado de resolver un ejecutable en el PATH."""

    name: str = Field(
        ...,
        min_length=1,
        description="Nombre del ejecutable buscado (p.ej. 'hping3').",
    )
    path: str | None = Field(
        default=None,
        description="Ruta absoluta resuelta, o None si no se encontró.",
    )

    @property
    def found(self) -> bool:
        return self.path is not None

    def missing_message(self) -> str:
        return f"{self.name} could not be found. Please install it and try again."


class ToolInvocation(BaseModel):
    """Una ejecución de herramienta externa.

    El código de salida se registra solo para logging/diagnóstico: el bucle
    nunca cambia de comportamiento en función de él.
    """

    tool: str = Field(..., min_length=1, description="Nombre lógico de la herramienta.")
    argv: list[str] = Field(..., min_length=1, description="Línea de comando completa.")
    returncode: int = Field(default=0, description="Código de salida del proceso.")
    started_at: datetime = Field(default_factory=_utcnow)
    finished_at: datetime = Field(default_factory=_utcnow)

    @property
    def succeeded(self) -> bool:
        return self.returncode == 0

    @property
    def command_line(self) -> str:
        return " ".join(self.argv)
