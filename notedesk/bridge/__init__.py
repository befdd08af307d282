from .commands import CommandDispatcher, CommandResult, build_dispatcher

__all__ = ["CommandDispatcher", "CommandResult", "build_dispatcher"]
