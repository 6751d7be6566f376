from __future__ import annotations

from .cli_app import main


if __name__ == "__main__":
    raise SystemExit(main())
