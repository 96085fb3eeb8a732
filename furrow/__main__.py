"""Entry point for ``python -m furrow``.

Loads the default YAML config (or a saved farm file), builds a farming
session, and runs the text command loop or opens a Pygame window.
"""

from __future__ import annotations

import argparse
import logging
import pathlib

from furrow.errors import LoadFormatError
from furrow.files.farm_file import load_grid
from furrow.simulation.config import FarmConfig
from furrow.simulation.session import HELP_TEXT, FarmingSession

_DEFAULT_CONFIG = (
    pathlib.Path(__file__).resolve().parent.parent / "config" / "default.yaml"
)


def build_parser() -> argparse.ArgumentParser:
    """Return the command-line parser."""
    parser = argparse.ArgumentParser(
        prog="furrow",
        description="Furrow - grid farm simulator",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=pathlib.Path,
        default=_DEFAULT_CONFIG,
        help="Path to YAML config file (default: config/default.yaml)",
    )
    parser.add_argument(
        "--load",
        type=pathlib.Path,
        default=None,
        help="Start from a saved farm file instead of an empty grid",
    )
    parser.add_argument(
        "--farm-type",
        choices=("plant", "animal"),
        default=None,
        help="Override the configured farm type",
    )
    parser.add_argument("--rows", type=int, default=None, help="Override grid rows")
    parser.add_argument(
        "--columns",
        type=int,
        default=None,
        help="Override grid columns",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for harvest quality draws",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        help="Logging verbosity (default: WARNING)",
    )
    parser.add_argument(
        "--gui",
        action="store_true",
        help="Open a Pygame window instead of the text loop",
    )
    parser.add_argument(
        "--cell-size",
        type=int,
        default=48,
        help="Pixel size per grid cell in the window (default: 48)",
    )
    return parser


def load_config(args: argparse.Namespace) -> FarmConfig:
    """Read the config file and apply command-line overrides."""
    config = FarmConfig.from_yaml(args.config) if args.config.exists() else FarmConfig()
    if args.farm_type is not None:
        config.farm_type = args.farm_type
    if args.rows is not None:
        config.rows = args.rows
    if args.columns is not None:
        config.columns = args.columns
    if args.seed is not None:
        config.seed = args.seed
    return config


def main() -> None:
    """Parse CLI args, build the farm, launch the chosen front end."""
    parser = build_parser()
    args = parser.parse_args()
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )

    config = load_config(args)
    if args.load is not None:
        try:
            grid = load_grid(
                args.load,
                qualities=config.build_qualities(),
                farm_type=args.farm_type,
            )
        except (OSError, LoadFormatError) as exc:
            parser.error(f"cannot load {args.load}: {exc}")
    else:
        grid = config.build_grid()
    session = FarmingSession(grid=grid, save_path=config.save_path)

    if args.gui:
        from furrow.ui.pygame_client import PygameRenderer

        PygameRenderer(session=session, cell_size=args.cell_size).run()
    else:
        print(HELP_TEXT)
        session.run()


if __name__ == "__main__":
    main()
