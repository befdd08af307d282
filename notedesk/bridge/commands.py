from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from notedesk.files.service import FileService, NoteError
from notedesk.logging_setup import get_logger

log = get_logger("bridge")


@dataclass(frozen=True)
class CommandResult:
    ok: bool
    value: Any = None
    error: str | None = None

    @classmethod
    def success(cls, value: Any = None) -> "CommandResult":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: str) -> "CommandResult":
        return cls(ok=False, error=error)

    def to_payload(self) -> dict:
        if self.ok:
            return {"ok": True, "value": self.value}
        return {"ok": False, "error": self.error}


@dataclass(frozen=True)
class _Command:
    handler: Callable[..., Any]
    params: tuple[str, ...]


class CommandDispatcher:
    """
    Named string-in / string-out commands for the front end.

    Every failure comes back as CommandResult.failure(<message>);
    nothing is retried.
    """

    def __init__(self):
        self._commands: dict[str, _Command] = {}

    def register(self, name: str, handler: Callable[..., Any], *params: str) -> None:
        if name in self._commands:
            raise ValueError(f"Command already registered: {name}")
        self._commands[name] = _Command(handler=handler, params=tuple(params))

    def commands(self) -> list[str]:
        return sorted(self._commands)

    def invoke(self, name: str, args: dict[str, Any] | None = None) -> CommandResult:
        cmd = self._commands.get(name)
        if cmd is None:
            log.warning("Unknown command: %s", name)
            return CommandResult.failure(f"Unknown command: {name}")

        args = args or {}
        kwargs: dict[str, str] = {}
        for param in cmd.params:
            if param not in args:
                return self._fail(name, _invalid_args(name, param, f"missing required key {param}"))
            value = args[param]
            if not isinstance(value, str):
                return self._fail(
                    name,
                    _invalid_args(name, param, f"expected a string, got {type(value).__name__}"),
                )
            kwargs[param] = value

        log.debug("invoke %s args=%s", name, sorted(kwargs))
        try:
            value = cmd.handler(**kwargs)
        except NoteError as e:
            return self._fail(name, str(e))
        except Exception as e:
            log.exception("Command %s raised", name)
            return CommandResult.failure(str(e) or type(e).__name__)
        return CommandResult.success(value)

    @staticmethod
    def _fail(name: str, error: str) -> CommandResult:
        log.warning("Command %s failed: %s", name, error)
        return CommandResult.failure(error)


def _invalid_args(command: str, param: str, reason: str) -> str:
    return f"invalid args `{param}` for command `{command}`: {reason}"


def build_dispatcher(service: FileService | None = None) -> CommandDispatcher:
    service = service or FileService()
    dispatcher = CommandDispatcher()
    dispatcher.register("save_note", service.save_note, "path", "content")
    dispatcher.register("read_note", service.read_note, "path")
    dispatcher.register("list_notes", service.list_notes, "dir")
    return dispatcher
