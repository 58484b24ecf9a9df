"""Lanza la CLI `empresas` desde `src/` (`python -m main login ...`).

Equivale al script `empresas` instalado por el paquete.
"""

from __future__ import annotations

import sys

from cli.main import run


def main() -> None:
    # Nombres de inversores y mensajes pt-BR llevan acentos; en Windows la
    # consola por defecto (cp1252) no siempre los codifica.
    if sys.platform == "win32":
        sys.stdout.reconfigure(encoding="utf-8")
        sys.stderr.reconfigure(encoding="utf-8")
    run()


if __name__ == "__main__":
    main()
