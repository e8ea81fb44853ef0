from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date


class ClockPort(ABC):
    @abstractmethod
    def today(self) -> date:
        raise NotImplementedError
