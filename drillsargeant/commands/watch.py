from __future__ import annotations

from drillsargeant.services.watch_service import WatchService

from .base import Command, NoArgs, PathArgs


class WatchDirectoryCommand(Command):
    args_model = PathArgs

    def __init__(self, service: WatchService):
        self.service = service

    def name(self) -> str:
        return "watch_directory"

    def run(self, args: PathArgs) -> str:
        return self.service.watch(args.path)


class UnwatchDirectoryCommand(Command):
    args_model = PathArgs

    def __init__(self, service: WatchService):
        self.service = service

    def name(self) -> str:
        return "unwatch_directory"

    def run(self, args: PathArgs) -> str:
        return self.service.unwatch(args.path)


class ListWatchedCommand(Command):
    def __init__(self, service: WatchService):
        self.service = service

    def name(self) -> str:
        return "list_watched"

    def run(self, args: NoArgs) -> list[str]:
        return self.service.list()
