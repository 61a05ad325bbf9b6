"""Entry point: python -m ts_codegen

Loads an OpenAPI document and writes the TypeScript client tree.
"""

from __future__ import annotations

from .cli import main

if __name__ == "__main__":
    main()
