from __future__ import annotations

import argparse
import sys
from pathlib import Path

from notedesk.settings import APP_NAME, FRONTEND_INDEX
from notedesk.logging_setup import install_global_exception_hooks, log, set_console_level, SESSION_ID
from notedesk.bridge.commands import build_dispatcher


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog=APP_NAME, description="Markdown notes desktop app")
    p.add_argument(
        "--frontend",
        type=Path,
        default=FRONTEND_INDEX,
        help="Path to the front-end entry HTML page",
    )
    p.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Console log level (the log file always gets DEBUG)",
    )
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    set_console_level(args.log_level)
    install_global_exception_hooks()

    if not args.frontend.is_file():
        log.error("Front-end page not found: %s", args.frontend)
        return 2

    # Qt imports stay here so parse_args() works without a display.
    from PySide6.QtWidgets import QApplication
    from notedesk.ui.main_window import MainWindow

    app = QApplication(sys.argv[:1])
    win = MainWindow(dispatcher=build_dispatcher(), frontend_index=args.frontend)
    win.resize(1100, 700)
    win.show()
    log.info("Application started, SID=%s", SESSION_ID)
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
