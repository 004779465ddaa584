from __future__ import annotations

from drillsargeant.services.system_service import SystemService

from .base import Command, NoArgs


class GetSystemInfoCommand(Command):
    def name(self) -> str:
        return "get_system_info"

    def run(self, args: NoArgs) -> str:
        return SystemService.get_system_info()
