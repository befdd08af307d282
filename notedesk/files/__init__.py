from .service import FileService, NoteError, is_note_name

__all__ = ["FileService", "NoteError", "is_note_name"]
