from .files.service import FileService, NoteError

__all__ = ["FileService", "NoteError"]
