from __future__ import annotations

from rasterpad_core.cli import main


if __name__ == "__main__":
    main()
