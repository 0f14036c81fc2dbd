from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import List

from .catalog import MACHINES
from .config_loader import EngineSettings, load_settings
from .trace import null_observer


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Intérprete de Máquinas de Turing de una cinta",
    )
    parser.add_argument("machine", choices=sorted(MACHINES), help="Máquina de ejemplo que se desea ejecutar")
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        help="Ruta al archivo YAML con los ajustes de ejecución",
    )
    parser.add_argument(
        "--no-trace",
        dest="trace",
        action="store_false",
        help="Desactiva la traza de transiciones",
    )
    parser.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Devuelve la salida en formato JSON para facilitar el post-procesamiento",
    )
    return parser


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = load_settings(args.config) if args.config is not None else EngineSettings()
    trace = args.trace and settings.trace_enabled
    logging.basicConfig(level=settings.level if trace else logging.WARNING, format="%(message)s")

    observer = settings.build_observer() if trace else null_observer
    machine = MACHINES[args.machine](observer=observer)
    tape = machine.run()

    if args.json_output:
        payload = {
            "machine": args.machine,
            "state": machine.current_state,
            "head": machine.head,
            "steps": machine.steps,
            "tape": tape,
        }
        print(json.dumps(payload, indent=2, ensure_ascii=False))
        return 0

    header = f"Máquina '{args.machine}'"
    print("=" * len(header))
    print(header)
    print("=" * len(header))
    print(f"Estado final: {machine.current_state}")
    print(f"Pasos ejecutados: {machine.steps}")
    print(f"Cabeza: {machine.head}")
    print(f"Cinta: {machine.view(settings.tape_radius)}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
