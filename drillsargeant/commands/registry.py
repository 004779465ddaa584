from __future__ import annotations

import logging
from typing import Any, Iterable

from drillsargeant.domain.models import CommandResult

from .base import Command

logger = logging.getLogger(__name__)


class UnknownCommandError(KeyError):
    def __init__(self, name: str, available: list[str]):
        super().__init__(name)
        self.name = name
        self.available = available

    def __str__(self) -> str:
        return f"Unknown command '{self.name}'. Available: {', '.join(self.available)}"


class CommandRegistry:
    def __init__(self, commands: Iterable[Command]):
        self._by_name = {c.name(): c for c in commands}

    def list(self) -> list[str]:
        return sorted(self._by_name.keys())

    def get(self, name: str) -> Command:
        try:
            return self._by_name[name]
        except KeyError:
            raise UnknownCommandError(name, self.list()) from None

    def invoke(self, name: str, args: dict[str, Any] | None = None) -> CommandResult:
        """Run a command by name.

        Argument validation errors (``pydantic.ValidationError``) and
        unknown names propagate to the caller. Anything raised by the
        command itself is reported through the failure branch.
        """
        command = self.get(name)
        parsed = command.args_model.model_validate(args or {})

        logger.info("Invoking %s", name, extra={"command": name})
        try:
            value = command.run(parsed)
        except Exception as e:
            logger.exception("Command %s failed", name, extra={"command": name})
            return CommandResult.failure(str(e))
        return CommandResult.success(value)
