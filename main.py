"""Lanzador de la CLI `promptly` desde el checkout, sin `pip install -e .`.

Uso: `python main.py doctor run --tenant-id my-site`
"""

from __future__ import annotations

import sys
from pathlib import Path

SRC_DIR = Path(__file__).resolve().parent / "src"


if __name__ == "__main__":
    if str(SRC_DIR) not in sys.path:
        sys.path.insert(0, str(SRC_DIR))

    from promptly.cli.main import run  # noqa: E402

    run()
