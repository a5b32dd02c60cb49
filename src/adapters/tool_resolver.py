"""Resolución de ejecutables externos en el PATH.

Por qué un adaptador:
- `shutil.which` es I/O sobre el sistema de ficheros; el Core solo recibe
  `ToolCheck` ya normalizados.
"""

from __future__ import annotations

import os
import shutil
from typing import Iterable

from core.domain.models import ToolCheck
from core.logging_setup import get_logger

logger = get_logger(__name__)


def resolve_tool(name: str, *, path: str | None = None) -> ToolCheck:
    """Busca `name` en el PATH (o en `path` si se indica)."""

    resolved = shutil.which(name, path=path)
    if resolved:
        logger.debug("resolved %s -> %s", name, resolved)
    else:
        logger.debug("%s not found on PATH", name)
    return ToolCheck(name=name, path=resolved)


def check_tools(names: Iterable[str], *, path: str | None = None) -> list[ToolCheck]:
    """Comprueba todas las herramientas, sin cortar en el primer fallo."""

    return [resolve_tool(name, path=path) for name in names]


def has_root_privileges() -> bool:
    """True si el proceso corre como root (POSIX)."""

    geteuid = getattr(os, "geteuid", None)
    return bool(geteuid and geteuid() == 0)
