from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any

from pydantic import BaseModel


class NoArgs(BaseModel):
    pass


class PathArgs(BaseModel):
    path: str


class Command(ABC):
    args_model: type[BaseModel] = NoArgs

    @abstractmethod
    def name(self) -> str: ...

    @abstractmethod
    def run(self, args: BaseModel) -> Any: ...
