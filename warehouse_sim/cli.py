"""Command-line entry point for the warehouse simulation."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from .simulation import Simulation, SimulationError


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the simulation described by the input file named in ``argv``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("Erro: Nenhum arquivo de entrada especificado.", file=sys.stderr)
        print("Uso: warehouse-sim <arquivo_de_entrada>", file=sys.stderr)
        return 1

    try:
        Simulation.from_file(args[0]).run()
    except SimulationError as error:
        print(error, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())