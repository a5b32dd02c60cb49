"""Construcción de líneas de comando para las herramientas externas.

Funciones puras: reciben `AppSettings` y devuelven `argv`. No ejecutan nada,
lo que permite mostrarlas en `show-config` y testearlas sin privilegios.
"""

from __future__ import annotations

from core.config import AppSettings

PACKET_COUNT = 1


def _with_privileges(argv: list[str], settings: AppSettings) -> list[str]:
    if settings.use_sudo:
        return ["sudo", *argv]
    return argv


def build_udp_command(settings: AppSettings) -> list[str]:
    """`hping3 --udp -p <port> -c 1 <address>`"""

    argv = [
        settings.udp_tool,
        "--udp",
        "-p",
        str(settings.target_port),
        "-c",
        str(PACKET_COUNT),
        str(settings.target_ip),
    ]
    return _with_privileges(argv, settings)


def build_arp_command(settings: AppSettings) -> list[str]:
    """`arping -c 1 -I <interface> <address>`"""

    argv = [
        settings.arp_tool,
        "-c",
        str(PACKET_COUNT),
        "-I",
        settings.interface,
        str(settings.target_ip),
    ]
    return _with_privileges(argv, settings)
