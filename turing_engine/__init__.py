from .config_loader import EngineSettings, load_settings, settings_from_mapping
from .machine import (
    MachineDefinitionError,
    Movement,
    Tape,
    TransitionRecord,
    TuringMachine,
    UnreachableConfiguration,
    transition_table,
)
from .trace import LoggingObserver, RecordingObserver, null_observer

__all__ = [
    "EngineSettings",
    "load_settings",
    "settings_from_mapping",
    "MachineDefinitionError",
    "Movement",
    "Tape",
    "TransitionRecord",
    "TuringMachine",
    "UnreachableConfiguration",
    "transition_table",
    "LoggingObserver",
    "RecordingObserver",
    "null_observer",
]
