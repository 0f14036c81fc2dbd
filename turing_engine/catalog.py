from __future__ import annotations

from typing import Callable, Dict, Optional

from .machine import Movement, TuringMachine, transition_table
from .trace import Observer

L = Movement.LEFT
R = Movement.RIGHT


def busy_beaver_2(observer: Optional[Observer] = None) -> TuringMachine:
    """Castor afanoso de 2 estados y 2 símbolos; termina con la cinta 011."""

    transition = transition_table(
        {
            ("0", "A"): ("1", R, "B"),
            ("1", "A"): ("1", L, "H"),
            ("0", "B"): ("1", L, "A"),
            ("1", "B"): ("1", R, "B"),
        }
    )
    return TuringMachine(
        {"A", "B", "H"},
        {"0", "1"},
        "0",
        "A",
        {"H"},
        transition,
        ["0"],
        observer=observer,
    )


def busy_beaver_3(observer: Optional[Observer] = None) -> TuringMachine:
    """Castor afanoso de 3 estados y 2 símbolos."""

    transition = transition_table(
        {
            ("0", "A"): ("1", R, "B"),
            ("0", "B"): ("1", L, "A"),
            ("0", "C"): ("1", L, "B"),
            ("1", "A"): ("1", L, "C"),
            ("1", "B"): ("1", R, "B"),
            ("1", "C"): ("1", R, "H"),
        }
    )
    return TuringMachine(
        {"A", "B", "C", "H"},
        {"0", "1"},
        "0",
        "A",
        {"H"},
        transition,
        ["0"],
        observer=observer,
    )


MACHINES: Dict[str, Callable[..., TuringMachine]] = {
    "busy-beaver-2": busy_beaver_2,
    "busy-beaver-3": busy_beaver_3,
}
