"""Command-line shot solver.

Examples:
    bankshot-solve --cue 300 1000 --object 500 500 --pocket bottom_right
    bankshot-solve --demo --max-cushions 1 --json
"""

import argparse
import json
import logging
import sys
from typing import Optional, TextIO

from bankshot.config import Config, ConfigurationError, setup_logging
from bankshot.core import (
    ShotCandidate,
    ShotSolver,
    TableGeometry,
    create_synthetic_rack,
    top_shots,
)
from bankshot.core.rack import find_ball

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID_INPUT = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bankshot-solve",
        description="Find direct and bank shots that pot an object ball",
    )
    parser.add_argument(
        "--cue", type=float, nargs=2, metavar=("X", "Y"), help="Cue ball position (mm)"
    )
    parser.add_argument(
        "--object",
        type=float,
        nargs=2,
        metavar=("X", "Y"),
        help="Object ball position (mm)",
    )
    parser.add_argument(
        "--pocket", default=None, help="Target pocket (default: all six pockets)"
    )
    parser.add_argument(
        "--max-cushions",
        type=int,
        default=None,
        help="0 = direct only, 1 = single cushion, 2 = double cushion",
    )
    parser.add_argument(
        "--limit", type=int, default=None, help="Maximum number of shots to print"
    )
    parser.add_argument("--json", action="store_true", help="Print JSON output")
    parser.add_argument(
        "--config",
        default="config.json",
        help="Path to configuration file (default: ./config.json)",
    )
    parser.add_argument(
        "--demo",
        action="store_true",
        help="Use the cue ball and 1-ball of a freshly racked table",
    )
    return parser


def format_shot(index: int, shot: ShotCandidate) -> str:
    """One-line text summary of a shot."""
    rails = "+".join(rail.value for rail in shot.rails_used) or "direct"
    return (
        f"{index:>2}. {shot.difficulty.label:<9} {shot.difficulty_score:.3f}  "
        f"{shot.pocket_name:<12} {rails:<13} "
        f"aim=({shot.aim_point[0]:.1f}, {shot.aim_point[1]:.1f})  "
        f"distance={shot.total_distance:.1f} mm"
    )


def write_text(shots: list[ShotCandidate], total: int, out: TextIO) -> None:
    if not shots:
        out.write("No feasible shot. Try more cushions or another pocket.\n")
        return
    for i, shot in enumerate(shots, start=1):
        out.write(format_shot(i, shot) + "\n")
    if total > len(shots):
        out.write(f"... {total - len(shots)} more\n")


def write_json(shots: list[ShotCandidate], total: int, out: TextIO) -> None:
    payload = {
        "count": len(shots),
        "total_found": total,
        "shots": [shot.to_dict() for shot in shots],
    }
    json.dump(payload, out, indent=2)
    out.write("\n")


def main(argv: Optional[list[str]] = None, out: TextIO = sys.stdout) -> int:
    """Run the solver from the command line.

    Returns:
        Process exit code
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = Config.set_config_file(args.config).settings()
    except ConfigurationError as e:
        parser.error(str(e))

    setup_logging(settings.logging)
    table = TableGeometry.from_settings(settings.table)

    if args.demo:
        rack = create_synthetic_rack(table)
        cue = args.cue or find_ball(rack, 0).position
        obj = args.object or find_ball(rack, 1).position
    else:
        if args.cue is None or args.object is None:
            parser.error("--cue and --object are required unless --demo is given")
        cue, obj = args.cue, args.object

    max_cushions = (
        args.max_cushions
        if args.max_cushions is not None
        else settings.solver.default_max_cushions
    )
    limit = args.limit if args.limit is not None else settings.solver.max_display_shots

    solver = ShotSolver(table)
    try:
        shots = solver.solve(cue, obj, args.pocket, max_cushions)
        shown = top_shots(shots, limit)
    except ValueError as e:
        logger.error(f"Invalid request: {e}")
        return EXIT_INVALID_INPUT

    if args.json:
        write_json(shown, len(shots), out)
    else:
        write_text(shown, len(shots), out)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
