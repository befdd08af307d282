from __future__ import annotations
from pathlib import Path

APP_NAME = "notedesk"
LOG_DIR = Path.home() / f".{APP_NAME}" / "logs"
LOG_PATH = LOG_DIR / f"{APP_NAME}.log"

FRONTEND_INDEX = Path(__file__).resolve().parent / "web" / "index.html"
BRIDGE_OBJECT_NAME = "notedesk"
