"""FarmingSession — the text command interpreter for farming mode.

Each input line is one command.  The session turns it into farm grid
operations, collects harvested products, and returns the text to show.
Grid failures are reported by message and never end the session.

Saving is only allowed at the start of a day: once anything has been
removed, fed, or harvested, the farm must be advanced with ``end-day``
before it can be saved again.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import ClassVar

from furrow.errors import FarmError
from furrow.files.farm_file import load_grid, save_grid
from furrow.items.registry import SYMBOLS_BY_NAME
from furrow.produce.product import Product
from furrow.world.farm import FarmGrid

logger = logging.getLogger(__name__)

HELP_TEXT = """\
Commands:
  place <berry|coffee|wheat|chicken|cow|sheep> <row> <col>
  remove <row> <col>
  feed <row> <col>
  harvest <row> <col>
  end-day
  stats | display | stock
  save [file] | load <file>
  help | q"""


class _Usage(Exception):
    """Raised when a command's arguments are malformed."""


@dataclass
class FarmingSession:
    """Interactive farming state wrapped around a farm grid.

    Attributes:
        grid: The farm being worked.
        save_path: File used by ``save`` when none is given.
        harvested: Products collected this session, oldest first.
        day: Current day number, starting at 1.
        can_save: Whether the farm is still at the start of a day.
        running: False once the farmer has quit.
        last_message: Text produced by the most recent command.
    """

    grid: FarmGrid
    save_path: str = "farm.txt"
    harvested: list[Product] = field(default_factory=list)
    day: int = 1
    can_save: bool = True
    running: bool = True
    last_message: str = ""

    _USAGE: ClassVar[dict[str, str]] = {
        "place": "Did you remember to specify the type?",
        "remove": "Usage: remove <row> <col>",
        "feed": "Usage: feed <row> <col>",
        "harvest": "Usage: harvest <row> <col>",
        "load": "You forgot the file name to load!",
    }

    def handle(self, line: str) -> str:
        """Run one command line and return the text to display."""
        tokens = line.split()
        if not tokens:
            return ""
        command, args = tokens[0].lower(), tokens[1:]
        logger.debug("day %d command %r", self.day, line)

        handler = self._handlers().get(command)
        if handler is None:
            message = f"Unknown command: {command}"
        else:
            try:
                message = handler(args)
            except _Usage:
                message = self._USAGE[command]
            except FarmError as exc:
                message = str(exc)
        self.last_message = message
        return message

    def run(
        self,
        prompt: Callable[[str], str] = input,
        show: Callable[[str], None] = print,
    ) -> None:
        """Read commands until the farmer quits or input runs out."""
        show(self.grid.farm_display())
        while self.running:
            try:
                line = prompt("farm> ")
            except EOFError:
                break
            message = self.handle(line)
            if message:
                show(message)
            if self.running:
                show(self.grid.farm_display())

    # -- Commands -------------------------------------------------------------

    def _handlers(self) -> dict[str, Callable[[list[str]], str]]:
        return {
            "place": self._place,
            "remove": self._remove,
            "feed": self._feed,
            "harvest": self._harvest,
            "end-day": self._end_day,
            "stats": self._stats,
            "display": lambda _: self.grid.farm_display(),
            "stock": self._stock,
            "save": self._save,
            "load": self._load,
            "help": lambda _: HELP_TEXT,
            "q": self._quit,
            "quit": self._quit,
        }

    def _place(self, args: list[str]) -> str:
        if len(args) != 3:
            raise _Usage
        name = args[0].lower()
        row, column = _coords(args[1:])
        symbol = SYMBOLS_BY_NAME.get(name)
        if symbol is None:
            return "Invalid object to place."
        if not self.grid.place(row, column, symbol):
            return f"{name} could not be placed!"
        return ""

    def _remove(self, args: list[str]) -> str:
        row, column = _coords(args)
        self.can_save = False
        self.grid.interact("remove", row, column)
        return ""

    def _feed(self, args: list[str]) -> str:
        row, column = _coords(args)
        self.grid.interact("feed", row, column)
        self.can_save = False
        return ""

    def _harvest(self, args: list[str]) -> str:
        row, column = _coords(args)
        self.can_save = False
        product = self.grid.harvest(row, column)
        self.harvested.append(product)
        return f"Harvested {product}"

    def _end_day(self, _: list[str]) -> str:
        self.grid.interact("end-day", 0, 0)
        self.day += 1
        self.can_save = True
        return f"Day {self.day} begins."

    def _stats(self, _: list[str]) -> str:
        return format_stats(self.grid)

    def _stock(self, _: list[str]) -> str:
        if not self.harvested:
            return "Nothing harvested yet."
        counts = Counter(str(product) for product in self.harvested)
        return "\n".join(f"{count} x {label}" for label, count in counts.items())

    def _save(self, args: list[str]) -> str:
        if not self.can_save:
            return "You can only save at the start of the day!"
        path = args[0] if args else self.save_path
        try:
            save_grid(path, self.grid)
        except OSError as exc:
            return f"There was an error saving your file: {exc}"
        return f"Farm saved to {path}"

    def _load(self, args: list[str]) -> str:
        if not args:
            raise _Usage
        try:
            self.grid = load_grid(args[0], qualities=self.grid.qualities)
        except OSError as exc:
            return f"There was an error loading your file: {exc}"
        self.can_save = True
        return f"Loaded {self.grid.farm_type.value} farm from {args[0]}"

    def _quit(self, _: list[str]) -> str:
        self.running = False
        return ""


def _coords(args: list[str]) -> tuple[int, int]:
    if len(args) != 2:
        raise _Usage
    try:
        return int(args[0]), int(args[1])
    except ValueError:
        raise _Usage from None


def format_stats(grid: FarmGrid) -> str:
    """Render stats records with one grid row per line."""
    stats = grid.get_stats()
    lines = []
    for row in range(grid.rows):
        start = grid.index(row, 0)
        records = stats[start : start + grid.columns]
        lines.append(" ".join("[" + ", ".join(record) + "]" for record in records))
    return "\n".join(lines)
