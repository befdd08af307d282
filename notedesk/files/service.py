from __future__ import annotations

import os
from pathlib import Path, PurePath

NOTE_SUFFIX = ".md"


class NoteError(Exception):
    """A failed file operation; str(err) is the message shown to the front end."""


def is_note_name(name: str) -> bool:
    # exact and case-sensitive: "a.md" yes, "b.MD" / "c.markdown" / ".md" no
    return PurePath(name).suffix == NOTE_SUFFIX


class FileService:
    """
    Save / read / list over markdown files on local disk.

    Stateless: every call is one filesystem operation, content is never
    interpreted, failures are raised as NoteError carrying the OS message.
    """

    def save_note(self, path: str, content: str) -> None:
        try:
            with open(path, "w", encoding="utf-8", newline="") as f:
                f.write(content)
        except (OSError, ValueError) as e:
            raise NoteError(str(e)) from e

    def read_note(self, path: str) -> str:
        try:
            with open(path, "r", encoding="utf-8", newline="") as f:
                return f.read()
        except (OSError, ValueError) as e:
            raise NoteError(str(e)) from e

    def list_notes(self, dir: str) -> list[str]:
        # existence only, not is_dir(): a regular file fails below at scandir
        try:
            exists = Path(dir).exists()
        except OSError as e:
            raise NoteError(str(e)) from e
        if not exists:
            raise NoteError("Directory does not exist")

        notes: list[str] = []
        try:
            with os.scandir(dir) as entries:
                for entry in entries:
                    if is_note_name(entry.name):
                        notes.append(_lossy(entry.path))
        except OSError as e:
            raise NoteError(str(e)) from e
        return notes


def _lossy(path: str) -> str:
    # undecodable bytes in names come back from os as surrogates; show them as U+FFFD
    return path.encode("utf-8", "surrogateescape").decode("utf-8", "replace")
