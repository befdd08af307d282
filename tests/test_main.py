import sys
import os
from pathlib import Path

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from notedesk.main import main, parse_args
from notedesk.settings import FRONTEND_INDEX


def test_defaults():
    args = parse_args([])
    assert args.frontend == FRONTEND_INDEX
    assert args.log_level == "INFO"


def test_bundled_frontend_exists():
    assert FRONTEND_INDEX.is_file()


def test_missing_frontend(tmp_path):
    assert main(["--frontend", str(tmp_path / "nope.html"), "--log-level", "ERROR"]) == 2
