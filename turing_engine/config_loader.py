from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

import yaml

from .trace import LoggingObserver, Observer, null_observer

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


@dataclass(frozen=True)
class EngineSettings:
    """Ajustes de ejecución: traza y presentación de la cinta."""

    trace_enabled: bool = True
    trace_level: str = "DEBUG"
    logger_name: str = "turing_engine.trace"
    tape_radius: int = 10

    def __post_init__(self) -> None:
        trace_level = str(self.trace_level).upper()
        if trace_level not in _LEVELS:
            raise ValueError(f"Nivel de traza inválido: {trace_level!r}. Valores permitidos: {tuple(_LEVELS)}.")
        object.__setattr__(self, "trace_level", trace_level)

    @property
    def level(self) -> int:
        return _LEVELS[self.trace_level]

    def build_observer(self) -> Observer:
        """Devuelve el observador que corresponde a estos ajustes."""

        if not self.trace_enabled:
            return null_observer
        return LoggingObserver(logging.getLogger(self.logger_name), self.level)


def _normalize_config(data: Dict) -> Dict:
    """Acepta configuraciones con o sin el nodo 'engine'."""

    if "engine" in data and isinstance(data["engine"], dict):
        return data["engine"]
    return data


def settings_from_mapping(data: Dict[str, Any]) -> EngineSettings:
    """Valida un diccionario y construye los ajustes."""

    if not isinstance(data, dict):
        raise ValueError("La configuración debe describir un objeto mapeo.")

    config = _normalize_config(data)
    defaults = EngineSettings()

    unknown = set(config) - {"trace_enabled", "trace_level", "logger_name", "tape_radius"}
    if unknown:
        raise ValueError(f"Claves desconocidas en la configuración: {sorted(unknown)}.")

    trace_enabled = config.get("trace_enabled", defaults.trace_enabled)
    if not isinstance(trace_enabled, bool):
        raise ValueError("'trace_enabled' debe ser booleano.")

    trace_level = config.get("trace_level", defaults.trace_level)

    logger_name = config.get("logger_name", defaults.logger_name)
    if not isinstance(logger_name, str) or not logger_name:
        raise ValueError("'logger_name' debe ser una cadena no vacía.")

    tape_radius = config.get("tape_radius", defaults.tape_radius)
    if isinstance(tape_radius, bool) or not isinstance(tape_radius, int) or tape_radius < 0:
        raise ValueError("'tape_radius' debe ser un entero no negativo.")

    return EngineSettings(
        trace_enabled=trace_enabled,
        trace_level=trace_level,
        logger_name=logger_name,
        tape_radius=tape_radius,
    )


def load_settings(path: str | Path) -> EngineSettings:
    """Carga y valida el archivo YAML con los ajustes."""

    with Path(path).open("r", encoding="utf-8") as handle:
        raw_data = yaml.safe_load(handle)

    if raw_data is None:
        return EngineSettings()
    return settings_from_mapping(raw_data)
