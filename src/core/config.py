"""Configuración del Core.

Por qué aquí:
- Centraliza el objetivo (IP/puerto/interfaz) y las herramientas externas
  (pydantic-settings) sin contaminar la CLI.
- Los valores por defecto son el objetivo de laboratorio (192.168.1.1:12345 vía
  eth0); sin env vars ni flags no hace falta configurar nada.
"""

from __future__ import annotations

import ipaddress
import os
import re
import sys
from pathlib import Path
from typing import Any

from pydantic import Field, IPvAnyAddress, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

APP_NAME = "netpulse"

_MAC_RE = re.compile(r"^[0-9a-fA-F]{2}(:[0-9a-fA-F]{2}){5}$")


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / APP_NAME
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / APP_NAME

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / APP_NAME
    return Path.home() / ".config" / APP_NAME


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key:
            data[key] = value
    return data


def write_user_env_vars(values: dict[str, str]) -> Path:
    """Escribe/actualiza variables en el .env global del usuario."""

    env_path = get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = [f"# {APP_NAME} user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) antes de lanzar procesos.
    - Un único contrato de configuración para CLI/adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="NETPULSE_",
        extra="ignore",
        case_sensitive=False,
        env_file_encoding="utf-8",
    )

    target_ip: IPvAnyAddress = Field(
        default=ipaddress.ip_address("192.168.1.1"),
        description="Dirección IP destino para UDP y ARP.",
    )
    target_port: int = Field(
        default=12345,
        ge=1,
        le=65535,
        description="Puerto destino de los paquetes UDP.",
    )
    # Sin uso en ninguna invocación; se conserva como valor de configuración.
    target_mac: str = Field(
        default="ff:ff:ff:ff:ff:ff",
        description="Dirección MAC destino (no se pasa a ninguna herramienta).",
    )
    interface: str = Field(
        default="eth0",
        min_length=1,
        description="Interfaz de red usada por la herramienta ARP.",
    )
    interval_seconds: float = Field(
        default=1.0,
        gt=0,
        description="Pausa entre iteraciones del bucle (segundos).",
    )

    udp_tool: str = Field(
        default="hping3",
        min_length=1,
        description="Ejecutable que envía el paquete UDP.",
    )
    arp_tool: str = Field(
        default="arping",
        min_length=1,
        description="Ejecutable que envía la petición ARP.",
    )
    use_sudo: bool = Field(
        default=True,
        description="Anteponer `sudo` a cada invocación (los paquetes raw requieren privilegios).",
    )

    log_level: str = Field(
        default="WARNING",
        description="Nivel de logging (DEBUG, INFO, WARNING, ERROR).",
    )

    def __init__(self, **values: Any) -> None:
        # Orden: .env del proyecto, luego el del usuario (el último gana).
        # La ruta de usuario se resuelve en cada instancia, no al importar.
        values.setdefault("_env_file", (".env", get_user_env_file()))
        super().__init__(**values)

    @field_validator("target_mac")
    @classmethod
    def _check_mac(cls, value: str) -> str:
        if not _MAC_RE.match(value):
            raise ValueError(f"invalid MAC address: {value!r}")
        return value.lower()

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"invalid log level: {value!r}")
        return level

    @property
    def required_tools(self) -> tuple[str, str]:
        """Herramientas que deben resolverse en el PATH antes del bucle."""

        return (self.udp_tool, self.arp_tool)
