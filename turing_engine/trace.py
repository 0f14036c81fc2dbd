from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, List, Optional

if TYPE_CHECKING:  # pragma: no cover
    from .machine import TransitionRecord

Observer = Callable[["TransitionRecord"], None]


class LoggingObserver:
    """Envía cada transición al sistema de logging."""

    def __init__(self, logger: Optional[logging.Logger] = None, level: int = logging.DEBUG) -> None:
        self.logger = logger if logger is not None else logging.getLogger(__name__)
        self.level = level

    def __call__(self, record: TransitionRecord) -> None:
        if self.logger.isEnabledFor(self.level):
            self.logger.log(self.level, record.format())


class RecordingObserver:
    """Guarda las transiciones en memoria, en orden de ejecución."""

    def __init__(self) -> None:
        self.records: List[TransitionRecord] = []

    def __call__(self, record: TransitionRecord) -> None:
        self.records.append(record)

    def __len__(self) -> int:
        return len(self.records)

    def lines(self) -> List[str]:
        return [record.format() for record in self.records]


def null_observer(record: TransitionRecord) -> None:
    return None
