"""Ejecuta la CLI de `tfe-remote-ops` con `python -m main` desde `src/`.

Equivale al script de consola `tfe-remote-ops` declarado en pyproject.
"""

from __future__ import annotations

import sys

# Las rutas de proyectos y los mensajes de rich pueden traer caracteres no
# ASCII; las consolas de Windows usan cp1252 por defecto.
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stderr.reconfigure(encoding="utf-8")

from cli.main import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
