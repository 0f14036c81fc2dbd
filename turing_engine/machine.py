from __future__ import annotations

import enum
import logging
from collections import deque
from dataclasses import dataclass
from typing import (
    Callable,
    Deque,
    Dict,
    FrozenSet,
    Generic,
    Hashable,
    Iterable,
    Iterator,
    List,
    Optional,
    Tuple,
    TypeVar,
)

from .trace import LoggingObserver, Observer

logger = logging.getLogger(__name__)

SymbolT = TypeVar("SymbolT", bound=Hashable)
StateT = TypeVar("StateT", bound=Hashable)


class Movement(enum.Enum):
    """Desplazamiento de la cabeza tras escribir un símbolo."""

    LEFT = "L"
    RIGHT = "R"

    def __str__(self) -> str:
        return self.name.title()


Transition = Callable[[SymbolT, StateT], Tuple[SymbolT, Movement, StateT]]


class MachineDefinitionError(ValueError):
    """La descripción de la MT no satisface las condiciones mínimas."""


class UnreachableConfiguration(LookupError):
    """La tabla de transiciones no contempla el par (símbolo, estado)."""


@dataclass(frozen=True)
class TransitionRecord:
    """Traza de una transición ejecutada por la MT.

    ``head`` es la celda leída y reescrita, antes de mover la cabeza.
    """

    step: int
    old_state: Hashable
    old_symbol: Hashable
    new_state: Hashable
    new_symbol: Hashable
    movement: Movement
    head: int

    def format(self) -> str:
        return (
            f"Paso {self.step:04d}: {self.old_state!r} {self.old_symbol!r} => "
            f"{self.new_state!r} {self.new_symbol!r} {self.movement}"
        )


class Tape(Generic[SymbolT]):
    """Cinta infinita hacia ambos lados que crece solo cuando la cabeza la visita."""

    def __init__(self, blank_symbol: SymbolT, initial_contents: Iterable[SymbolT] = ()) -> None:
        self.blank_symbol = blank_symbol
        self.cells: Deque[SymbolT] = deque(initial_contents)
        if not self.cells:
            self.cells.append(blank_symbol)

    def __len__(self) -> int:
        return len(self.cells)

    def read(self, position: int) -> SymbolT:
        return self.cells[position]

    def write(self, position: int, symbol: SymbolT) -> None:
        self.cells[position] = symbol

    def extend_left(self) -> None:
        self.cells.appendleft(self.blank_symbol)

    def extend_right(self) -> None:
        self.cells.append(self.blank_symbol)

    def snapshot(self) -> List[SymbolT]:
        return list(self.cells)

    def view(self, head_position: int, radius: int = 10) -> str:
        start = max(0, head_position - radius)
        end = min(len(self.cells), head_position + radius + 1)
        cells = []
        for index in range(start, end):
            symbol = str(self.cells[index])
            if index == head_position:
                cells.append(f"[{symbol}]")
            else:
                cells.append(symbol)
        return "".join(cells)


class TuringMachine(Generic[SymbolT, StateT]):
    """Máquina de Turing determinista de una cinta (Hopcroft & Ullman).

    La regla de transición la aporta quien construye la máquina: recibe el
    símbolo bajo la cabeza y el estado actual, y devuelve el símbolo a
    escribir, el movimiento y el estado siguiente. La máquina se detiene
    cuando el estado actual pertenece a ``final_state_set``; si nunca llega
    a uno, ``run`` no termina.
    """

    def __init__(
        self,
        state_set: Iterable[StateT],
        symbol_set: Iterable[SymbolT],
        blank_symbol: SymbolT,
        initial_state: StateT,
        final_state_set: Iterable[StateT],
        transition: Transition,
        initial_tape: Iterable[SymbolT] = (),
        *,
        observer: Optional[Observer] = None,
    ) -> None:
        self.state_set: FrozenSet[StateT] = frozenset(state_set)
        self.symbol_set: FrozenSet[SymbolT] = frozenset(symbol_set)

        if not self.state_set:
            raise MachineDefinitionError("Debe existir al menos un estado en 'state_set'.")
        if initial_state not in self.state_set:
            raise MachineDefinitionError(
                f"El estado inicial {initial_state!r} debe pertenecer a 'state_set'."
            )
        if not self.symbol_set:
            raise MachineDefinitionError("'symbol_set' debe contener al menos un símbolo.")
        if blank_symbol not in self.symbol_set:
            raise MachineDefinitionError(
                f"El símbolo en blanco {blank_symbol!r} debe pertenecer a 'symbol_set'."
            )

        self.blank_symbol = blank_symbol
        self.initial_state = initial_state
        self.final_state_set: FrozenSet[StateT] = frozenset(final_state_set)
        self.transition = transition
        self.observer: Observer = observer if observer is not None else LoggingObserver()

        self._tape: Tape[SymbolT] = Tape(blank_symbol, initial_tape)
        self._head = 0
        self._current_state = initial_state
        self._steps = 0

        logger.debug(
            "MT creada: %d estados, %d símbolos, inicial=%r, finales=%r, cinta=%r",
            len(self.state_set),
            len(self.symbol_set),
            initial_state,
            sorted(map(repr, self.final_state_set)),
            self._tape.snapshot(),
        )

    @property
    def current_state(self) -> StateT:
        return self._current_state

    @property
    def head(self) -> int:
        return self._head

    @property
    def tape(self) -> List[SymbolT]:
        return self._tape.snapshot()

    @property
    def steps(self) -> int:
        return self._steps

    @property
    def halted(self) -> bool:
        return self._current_state in self.final_state_set

    def view(self, radius: int = 10) -> str:
        return self._tape.view(self._head, radius)

    def _advance(self) -> Optional[TransitionRecord]:
        """Aplica una transición; devuelve None si la MT ya está detenida."""

        if self.halted:
            return None

        old_state = self._current_state
        old_symbol = self._tape.read(self._head)
        new_symbol, movement, new_state = self.transition(old_symbol, old_state)
        if not isinstance(movement, Movement):
            raise TypeError(f"Movimiento inválido devuelto por la transición: {movement!r}.")

        record = TransitionRecord(
            step=self._steps + 1,
            old_state=old_state,
            old_symbol=old_symbol,
            new_state=new_state,
            new_symbol=new_symbol,
            movement=movement,
            head=self._head,
        )
        self.observer(record)

        self._current_state = new_state
        self._tape.write(self._head, new_symbol)

        if movement is Movement.LEFT:
            if self._head == 0:
                # la celda nueva ocupa el índice 0 y la cabeza se queda ahí
                self._tape.extend_left()
            else:
                self._head -= 1
        else:
            self._head += 1
            if self._head == len(self._tape):
                self._tape.extend_right()

        self._steps += 1
        return record

    def step(self) -> bool:
        """Ejecuta una transición. Devuelve False si el estado actual es final."""

        return self._advance() is not None

    def iter_steps(self) -> Iterator[TransitionRecord]:
        """Genera una traza por transición hasta que la MT se detiene."""

        while True:
            record = self._advance()
            if record is None:
                return
            yield record

    def run(self) -> List[SymbolT]:
        """Ejecuta la MT hasta alcanzar un estado final y devuelve la cinta."""

        while self.step():
            pass
        logger.debug(
            "MT detenida en %r tras %d pasos (cabeza=%d)",
            self._current_state,
            self._steps,
            self._head,
        )
        return self._tape.snapshot()


def transition_table(mapping: Dict[Tuple[SymbolT, StateT], Tuple[SymbolT, Movement, StateT]]) -> Transition:
    """Construye una regla de transición a partir de un diccionario."""

    table = dict(mapping)

    def transition(symbol: SymbolT, state: StateT) -> Tuple[SymbolT, Movement, StateT]:
        try:
            return table[(symbol, state)]
        except KeyError:
            raise UnreachableConfiguration(
                f"No existe transición definida para ({symbol!r}, {state!r})."
            ) from None

    return transition
