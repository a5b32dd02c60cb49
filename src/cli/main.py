"""CLI principal (Typer).

Por qué Typer:
- Subcomandos (`run`, `doctor`, `show-config`) con ayuda autogenerada.
- Sin argumentos ejecuta el bucle con la configuración por defecto.
"""

from __future__ import annotations

import signal
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from cli import doctor
from cli.ui_components import build_settings_table, load_settings
from core.config import AppSettings
from core.domain.models import ToolInvocation
from core.errors import MissingToolError
from core.logging_setup import configure_logging
from core.services.pulse_loop import PulseDriver, PulseHooks

app = typer.Typer(
    help="Send a UDP packet (hping3) and an ARP request (arping) to a target once per interval.",
    add_completion=False,
)
app.add_typer(doctor.app, name="doctor")

_console = Console()


def _echo_invocation(invocation: ToolInvocation) -> None:
    style = "green" if invocation.succeeded else "red"
    _console.print(f"[dim]$ {escape(invocation.command_line)}[/dim] -> [{style}]exit {invocation.returncode}[/{style}]")


def _start_loop(settings: AppSettings, *, verbose: bool = False, iterations: int | None = None) -> None:
    configure_logging("DEBUG" if verbose else settings.log_level)
    hooks = PulseHooks(invocation=_echo_invocation) if verbose else None
    driver = PulseDriver(settings, hooks=hooks)

    previous = signal.signal(signal.SIGTERM, lambda _signum, _frame: driver.stop())
    try:
        driver.run(max_iterations=iterations)
    except MissingToolError as exc:
        for message in exc.messages():
            _console.print(message)
        # Missing tools are reported, not treated as a failure status.
        raise typer.Exit(code=0) from exc
    except KeyboardInterrupt:
        _console.print(f"\n[yellow]Stopped after {driver.iterations} iterations.[/yellow]")
        return
    finally:
        signal.signal(signal.SIGTERM, previous)

    _console.print(f"[yellow]Stopped after {driver.iterations} iterations.[/yellow]")


@app.callback(invoke_without_command=True)
def main(ctx: typer.Context) -> None:
    """Without a subcommand, runs the pulse loop with the configured settings."""

    if ctx.invoked_subcommand is None:
        _start_loop(load_settings())


@app.command()
def run(
    target_ip: Optional[str] = typer.Option(None, "--target-ip", help="Destination IP address."),
    target_port: Optional[int] = typer.Option(None, "--target-port", help="Destination UDP port."),
    interface: Optional[str] = typer.Option(None, "--interface", "-i", help="Interface for arping."),
    interval: Optional[float] = typer.Option(None, "--interval", help="Seconds to sleep between pulses."),
    no_sudo: bool = typer.Option(False, "--no-sudo", help="Do not prefix commands with sudo."),
    iterations: Optional[int] = typer.Option(
        None, "--iterations", "-n", min=1, help="Stop after N pulses (default: run until interrupted)."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Echo every invocation and its exit status."),
) -> None:
    """Check hping3/arping are installed, then pulse the target until interrupted."""

    settings = load_settings(
        target_ip=target_ip,
        target_port=target_port,
        interface=interface,
        interval_seconds=interval,
        use_sudo=False if no_sudo else None,
    )
    _start_loop(settings, verbose=verbose, iterations=iterations)


@app.command(name="show-config")
def show_config() -> None:
    """Print the effective settings and the commands that would run."""

    _console.print(build_settings_table(load_settings()))


def run_app() -> None:
    app()
