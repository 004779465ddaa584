from __future__ import annotations

from drillsargeant.commands.analysis import AnalyzeDirectoryCommand, ExportReportCommand
from drillsargeant.commands.registry import CommandRegistry
from drillsargeant.commands.system import GetSystemInfoCommand
from drillsargeant.commands.watch import ListWatchedCommand, UnwatchDirectoryCommand, WatchDirectoryCommand
from drillsargeant.services.analysis_service import AnalysisService
from drillsargeant.services.report_service import ReportService
from drillsargeant.services.watch_service import WatchService

# Shared by the command registry and the /api/watch routes
watch_service = WatchService()


def build_command_registry(watch: WatchService | None = None) -> CommandRegistry:
    """Register every command the front-end can invoke.

    To add a new command:
    1. Subclass ``Command`` in ``drillsargeant/commands/``
    2. Add an instance to the list below
    """
    watch = watch or watch_service
    analysis = AnalysisService()
    reports = ReportService()

    return CommandRegistry(
        [
            AnalyzeDirectoryCommand(analysis),
            GetSystemInfoCommand(),
            WatchDirectoryCommand(watch),
            UnwatchDirectoryCommand(watch),
            ListWatchedCommand(watch),
            ExportReportCommand(reports),
        ]
    )
