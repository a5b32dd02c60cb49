"""Doctor command for environment diagnostics."""

from __future__ import annotations

import ipaddress

import typer
from rich.console import Console
from rich.table import Table

from adapters.tool_resolver import check_tools, has_root_privileges, resolve_tool
from cli.ui_components import build_settings_table, build_tools_table, load_settings, print_banner
from core.config import AppSettings, write_user_env_vars

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


def _privilege_row(settings: AppSettings) -> tuple[str, str]:
    if has_root_privileges():
        return "OK", "running as root"
    if not settings.use_sudo:
        return "FAIL", "not root and sudo disabled -> raw packets will be refused"
    if resolve_tool("sudo").found:
        return "OK", "commands are prefixed with sudo"
    return "FAIL", "sudo not found on PATH"


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = load_settings()
    print_banner(_console)

    checks = check_tools(settings.required_tools)
    _console.print(build_tools_table(checks))

    table = Table(title="netpulse Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    status, detail = _privilege_row(settings)
    table.add_row("Privileges", status, detail)
    table.add_row("Target", "OK", f"{settings.target_ip}:{settings.target_port} via {settings.interface}")
    _console.print(table)
    _console.print(build_settings_table(settings))

    missing = [c for c in checks if not c.found]
    if missing:
        _console.print(
            "\n[yellow]Note:[/yellow] the pulse loop refuses to start until every tool above resolves."
        )
        for check in missing:
            _console.print(f"- {check.missing_message()}")


@app.command(name="setup-target")
def setup_target() -> None:
    """Interactive target setup (stores config in the user config .env)."""

    current = load_settings()

    target_ip = typer.prompt("Target IP", default=str(current.target_ip), show_default=True).strip()
    target_port = typer.prompt("Target UDP port", default=current.target_port, type=int, show_default=True)
    interface = typer.prompt("Network interface", default=current.interface, show_default=True).strip()

    try:
        ipaddress.ip_address(target_ip)
    except ValueError as exc:
        raise typer.BadParameter(f"invalid IP address: {target_ip}") from exc
    if not 1 <= target_port <= 65535:
        raise typer.BadParameter("port must be between 1 and 65535")
    if not interface:
        raise typer.BadParameter("interface is required")

    env_path = write_user_env_vars(
        {
            "NETPULSE_TARGET_IP": target_ip,
            "NETPULSE_TARGET_PORT": str(target_port),
            "NETPULSE_INTERFACE": interface,
        }
    )

    _console.print(f"[green]Saved target config to:[/green] {env_path}")
