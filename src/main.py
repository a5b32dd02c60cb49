"""Script de ejecución.

Por qué existe:
- Permite ejecutar la CLI con `python src/main.py` durante desarrollo.
- Mantiene un entrypoint simple además del script `netpulse` instalado.
"""

from __future__ import annotations

from cli.main import run_app


def main() -> None:
    run_app()


if __name__ == "__main__":
    main()
