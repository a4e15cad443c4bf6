from __future__ import annotations

from connect4_tui.main import main

if __name__ == "__main__":
    raise SystemExit(main())
