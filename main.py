"""Lanzador desde un checkout de `tfe-remote-ops`.

Uso, desde la raíz del repo y sin `pip install -e .`:
- `python -m main check ./infra/prod -w prod`

Los paquetes `core`, `adapters` y `cli` viven bajo `src/`, por eso se añade
esa carpeta a `sys.path` antes de importar la CLI.
"""

from __future__ import annotations

import sys
from pathlib import Path


def main() -> None:
    src = Path(__file__).resolve().parent / "src"
    if str(src) not in sys.path:
        sys.path.insert(0, str(src))

    from cli.main import run  # noqa: PLC0415

    run()


if __name__ == "__main__":
    main()
