from __future__ import annotations

import json

from PySide6.QtCore import QObject, Slot

from notedesk.bridge.commands import CommandDispatcher, CommandResult


class NoteBridge(QObject):
    """
    QWebChannel object: the front end calls invoke(command, argsJson) and
    gets back a JSON envelope, {"ok": true, "value": ...} or
    {"ok": false, "error": "..."}. Never raises into Qt.
    """

    def __init__(self, dispatcher: CommandDispatcher, parent: QObject | None = None):
        super().__init__(parent)
        self._dispatcher = dispatcher

    @Slot(str, str, result=str)
    def invoke(self, command: str, args_json: str) -> str:
        try:
            args = json.loads(args_json) if args_json else {}
        except json.JSONDecodeError as e:
            return _dump(CommandResult.failure(f"invalid args payload: {e}"))
        if not isinstance(args, dict):
            return _dump(CommandResult.failure("invalid args payload: expected a JSON object"))
        return _dump(self._dispatcher.invoke(command, args))

    @Slot(result=str)
    def commands(self) -> str:
        return json.dumps(self._dispatcher.commands())


def _dump(result: CommandResult) -> str:
    return json.dumps(result.to_payload(), ensure_ascii=False)
