"""
cli.py - console menu for the keyboard autocompleter
Features:
- Numbered menu: pass in training data, pass in a fragment, train from a file, stats, quit
- Lowercases input before it reaches the index (configurable)
- Times every train/lookup and shows averages under "stats"
- Uses Rich for prompts, tables and formatting
"""

from __future__ import annotations
import argparse
import sys
import time
from typing import Callable, List, Optional, Sequence

from rich.console import Console
from rich.table import Table
from rich.text import Text
from rich.prompt import Prompt
from rich import box
from rich.markup import escape

from keyboard_autocompleter.core.autocompleter import AutoCompleter
from keyboard_autocompleter.core.protocols import AutoCompleteProvider, CandidateLike
from keyboard_autocompleter.context.normalizer import normalize_text
from keyboard_autocompleter.context.tokenizer import iter_passages
from keyboard_autocompleter.utils.config_manager import Config, ConfigError
from keyboard_autocompleter.utils.logger_utils import Log
from keyboard_autocompleter.utils.metrics_tracker import Metrics

MENU = (
    "\nOptions\n"
    "1 - Pass in training data\n"
    "2 - Pass in a fragment\n"
    "3 - Train from a text file\n"
    "4 - Show statistics\n"
    "5 - Show or change settings\n"
    "0 - Quit"
)


class CLI:
    """Menu loop over an AutoCompleteProvider. Input comes from `input_fn` (Rich prompt by default)."""

    def __init__(
        self,
        completer: Optional[AutoCompleteProvider] = None,
        cfg: Optional[Config] = None,
        log: Optional[Log] = None,
        console: Optional[Console] = None,
        input_fn: Optional[Callable[[str], str]] = None,
        as_table: bool = False,
    ):
        self.log = log or Log.quiet()
        self.cfg = cfg or Config(log=self.log)
        self.completer = completer if completer is not None else AutoCompleter(log=self.log)
        self.console = console or Console()
        self.input_fn = input_fn or self._prompt
        self.as_table = as_table
        self.metrics = Metrics()
        self.running = True

    def _prompt(self, msg: str) -> str:
        return Prompt.ask(msg, console=self.console, default="", show_default=False)

    def run(self) -> None:
        """Show the menu until the user quits (0, EOF or Ctrl-C)."""
        self.console.rule("[bold magenta]Keyboard Autocompleter[/bold magenta]")
        while self.running:
            try:
                self.console.print(MENU, markup=False, highlight=False)
                choice = self.input_fn("").strip()
                self.handle(choice)
            except (EOFError, KeyboardInterrupt):
                self.console.print("\nbye.")
                self.running = False
        self.log.info("session closed")

    def handle(self, choice: str) -> None:
        if choice == "0":
            self.running = False
        elif choice == "1":
            self.train_passage(self.input_fn("\nEnter training data"))
        elif choice == "2":
            self.suggest(self.input_fn("\nEnter a fragment to get auto-complete suggestions"))
        elif choice == "3":
            self.train_file(self.input_fn("\nPath to a text file").strip())
        elif choice == "4":
            self.show_stats()
        elif choice == "5":
            self.settings(self.input_fn("\nSetting to change as 'key value' (Enter to just list)").strip())
        else:
            self.console.print("\nPlease enter an available option")

    # TRAINING -----------------------------------------------------------------
    def _norm(self, s: str) -> str:
        return normalize_text(s, lowercase=self.cfg.get("lowercase"))

    def train_passage(self, passage: str) -> None:
        t0 = time.perf_counter()
        self.completer.train(self._norm(passage))
        self.metrics.record("train_time", time.perf_counter() - t0)

    def train_file(self, path: str) -> int:
        """Train on every non-blank line of `path`. Returns the number of lines used (0 on error)."""
        try:
            with open(path, "r", encoding="utf8") as f:
                lines = [self._norm(ln) for ln in iter_passages(f)]
        except (OSError, UnicodeDecodeError) as e:
            self.log.error(f"train_file {path}: {e}")
            self.console.print(f"[red]Could not read[/red] {escape(path)}: {escape(str(e))}")
            return 0

        with self.log.time_block(f"train_file {path}") as timer:
            for ln in lines:
                self.completer.train(ln)
        dt = timer.elapsed
        self.metrics.record("train_file_time", dt)
        self.console.print(f"trained on {len(lines)} lines in {dt:.2f}s")
        return len(lines)

    # SUGGESTIONS -----------------------------------------------------------------
    def suggest(self, fragment: str) -> List[CandidateLike]:
        t0 = time.perf_counter()
        found = list(self.completer.get_words(self._norm(fragment)))
        self.metrics.record("suggest_time", time.perf_counter() - t0)

        limit = self.cfg.get("max_suggestions")
        shown = found[:limit] if limit else found
        self.console.print("\nSuggestions:")
        if self.as_table:
            self.console.print(self._table(shown))
        else:
            self.console.print(self._line(shown))
        return shown

    def _line(self, cands: Sequence[CandidateLike]) -> Text:
        if self.cfg.get("show_confidence"):
            parts = [f"{c.word}({c.confidence})" for c in cands]
        else:
            parts = [c.word for c in cands]
        # Text keeps user words from being parsed as Rich markup
        return Text(" ".join(parts))

    def _table(self, cands: Sequence[CandidateLike]) -> Table:
        table = Table(title="Suggestions", box=box.SIMPLE, show_edge=False)
        table.add_column("#", justify="right", style="cyan")
        table.add_column("Word", style="bold")
        if self.cfg.get("show_confidence"):
            table.add_column("Confidence", justify="right", style="magenta")
        for i, c in enumerate(cands, 1):
            row = [str(i), Text(c.word)]
            if self.cfg.get("show_confidence"):
                row.append(str(c.confidence))
            table.add_row(*row)
        return table

    # STATS --------------------------------------------------------------------
    def show_stats(self) -> None:
        t = Table(title="Statistics", box=box.MINIMAL)
        t.add_column("Metric", style="cyan")
        t.add_column("Value", style="white")
        stats = getattr(self.completer, "stats", None)
        if callable(stats):
            for k, v in stats().items():
                t.add_row(k, str(v))
        for k, v in self.metrics.summary().items():
            t.add_row(f"{k} (avg ms)", f"{v['avg'] * 1000:.3f}")
            t.add_row(f"{k} (calls)", str(v["count"]))
        self.console.print(t)

    # SETTINGS -----------------------------------------------------------------
    def settings(self, line: str) -> None:
        """Empty line lists the options; "key value" changes one (and saves if there's a config file)."""
        if line:
            key, _, val = line.partition(" ")
            try:
                self.cfg.set(key, val.strip())
            except ConfigError as e:
                self.console.print(f"[red]{escape(str(e))}[/red]")
                return
            # the running logger follows log settings without a restart
            if key == "log_level":
                self.log.level = self.cfg.get(key)
            elif key == "log_file":
                self.log.path = self.cfg.get(key) or None
            self.log.info(f"config {key} -> {self.cfg.get(key)}")
        for row in self.cfg.show():
            self.console.print(row, markup=False, highlight=False)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="keyboard-autocompleter",
        description="Train on text, then get frequency-ranked word completions.",
    )
    p.add_argument("--config", help="JSON config file; settings changed from the menu are saved back to it")
    p.add_argument("--train", action="append", default=[], metavar="FILE",
                   help="text file to train on before the menu starts (repeatable)")
    p.add_argument("--table", action="store_true", help="print suggestions as a table")
    p.add_argument("--tui", action="store_true", help="start the live-typing terminal UI")
    p.add_argument("--verbose", action="store_true", help="debug logging to the console")
    return p


def make_log(cfg: Config, verbose: bool = False) -> Log:
    """Console logging goes to stderr so it never mixes with the menu on stdout."""
    path = cfg.get("log_file") or None
    if verbose:
        return Log(path=path, level="DEBUG", console=True, stream=sys.stderr)
    return Log(path=path, level=cfg.get("log_level"), console=True, use_color=False, stream=sys.stderr)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    cfg = Config(args.config)
    log = make_log(cfg, args.verbose)
    cfg.log = log
    log.debug(f"config: {cfg.as_dict()}")

    completer = AutoCompleter(log=log)
    cli = CLI(completer=completer, cfg=cfg, log=log, as_table=args.table)
    for path in args.train:
        cli.train_file(path)

    if args.tui:
        from keyboard_autocompleter.tui_app import TUIAutocompleter
        TUIAutocompleter(completer=completer, cfg=cfg, log=log).run()
    else:
        cli.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
