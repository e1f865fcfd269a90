"""Command-line entry point of the dining philosophers simulation."""

from __future__ import annotations

import sys
from typing import Sequence

from philosim.arguments import parse_arguments
from philosim.errors import PhiloError, Status, report_error
from philosim.simulation import Simulation


def main(argv: Sequence[str] | None = None) -> int:
    """Run the simulation described by ``argv`` and return the exit status.

    Usage: number_of_philosophers time_to_die time_to_eat time_to_sleep
    [number_of_times_each_philosopher_must_eat]
    """
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        params = parse_arguments(args)
        Simulation(params).run()
    except PhiloError as exc:
        return report_error(exc)
    except MemoryError as exc:
        return report_error(exc)
    return int(Status.SUCCESS)


if __name__ == "__main__":
    sys.exit(main())