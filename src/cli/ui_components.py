"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en `doctor` y `show-config`.
"""

from __future__ import annotations

from typing import Any

import typer
from pydantic import ValidationError
from rich.align import Align
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from adapters.commands import build_arp_command, build_udp_command
from core.config import AppSettings
from core.domain.models import ToolCheck

_err_console = Console(stderr=True)


def load_settings(**overrides: Any) -> AppSettings:
    """Construye `AppSettings` o termina con código 2 si la config es inválida.

    Los overrides a `None` se ignoran (flags no indicados en la CLI).
    """

    values = {k: v for k, v in overrides.items() if v is not None}
    try:
        return AppSettings(**values)
    except ValidationError as exc:
        _err_console.print(f"[red]Invalid configuration:[/red]\n{escape(str(exc))}")
        raise typer.Exit(code=2) from exc


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida.

    Solo lo usan los comandos interactivos; el bucle de envío no imprime nada
    propio para no ensuciar la salida de hping3/arping.
    """

    title = Text("netpulse", style="bold cyan")
    subtitle = Text("UDP + ARP keepalive pulses • hping3 • arping", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_tools_table(checks: list[ToolCheck]) -> Table:
    """Tabla con la resolución de cada herramienta en el PATH."""

    table = Table(title="External tools")
    table.add_column("Tool", style="cyan", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Path", style="magenta")
    for check in checks:
        status = "[green]OK[/green]" if check.found else "[red]MISSING[/red]"
        table.add_row(check.name, status, check.path or "-")
    return table


def build_settings_table(settings: AppSettings) -> Table:
    """Configuración efectiva y las dos líneas de comando resultantes."""

    table = Table(title="Effective configuration")
    table.add_column("Setting", style="bright_green", no_wrap=True)
    table.add_column("Value", style="white")

    table.add_row("target_ip", str(settings.target_ip))
    table.add_row("target_port", str(settings.target_port))
    table.add_row("target_mac", f"{settings.target_mac} [dim](unused)[/dim]")
    table.add_row("interface", settings.interface)
    table.add_row("interval_seconds", f"{settings.interval_seconds:g}")
    table.add_row("use_sudo", "yes" if settings.use_sudo else "no")
    table.add_row("udp command", " ".join(build_udp_command(settings)))
    table.add_row("arp command", " ".join(build_arp_command(settings)))
    return table
