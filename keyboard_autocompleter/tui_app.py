# tui_app.py - Keyboard Autocompleter TUI
# -------------------------------------------------------
# Live-typing front end for the autocompleter.
#  - Suggestions for the word being typed refresh on every keystroke
#  - TAB completes the current word with the top suggestion
#  - ENTER trains on the whole line and clears the box
#  - Latency and index size shown along the bottom
# -------------------------------------------------------

from __future__ import annotations
import time
from typing import List, Optional

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal
from textual.reactive import reactive
from textual.widgets import Footer, Header, Input, Static
from rich.markup import escape

from keyboard_autocompleter.core.autocompleter import AutoCompleter
from keyboard_autocompleter.core.candidate import Candidate
from keyboard_autocompleter.context.normalizer import normalize_text
from keyboard_autocompleter.context.tokenizer import last_token
from keyboard_autocompleter.utils.config_manager import Config
from keyboard_autocompleter.utils.logger_utils import Log
from keyboard_autocompleter.utils.metrics_tracker import Metrics


class SuggestionPanel(Static):
    """
    Right-side suggestion panel: rank, word and confidence.
    The top entry is highlighted since TAB takes it.
    """
    def update_predictions(self, predictions: List[Candidate], show_confidence: bool = True):
        self.update(format_predictions(predictions, show_confidence))


class TypingLatency(Static):
    """Bottom-left readout of how long the last lookup took."""
    def set_latency(self, seconds: float):
        self.update(f"[dim]Latency:[/dim] {seconds * 1000:.2f}ms")


def format_predictions(predictions: List[Candidate], show_confidence: bool = True) -> str:
    """Markup for the suggestion panel; words are escaped so "[" or a trailing "\\" show literally."""
    if not predictions:
        return "[dim]No suggestions[/dim]"
    lines = []
    for i, c in enumerate(predictions, 1):
        color = "green" if i == 1 else "cyan"
        conf = f"  [dim]{c.confidence}[/dim]" if show_confidence else ""
        lines.append(f"[b]{i}[/b] • [{color}]{escape(c.word)}[/{color}]{conf}")
    return "\n".join(lines)


class TUIAutocompleter(App):
    """
    Event flow:
     - Input.Changed -> lookup on the last token -> `suggestions`
     - watcher on `suggestions` -> SuggestionPanel
     - Input.Submitted -> train on the line
    """
    CSS = """
    #left { width: 2fr; }
    #right { width: 1fr; border-left: solid $accent; padding: 0 1; }
    #bottom { height: 1; }
    #status { padding-left: 2; }
    """

    # priority so TAB isn't swallowed by focus navigation
    BINDINGS = [
        Binding("tab", "accept_top", "Accept top suggestion", priority=True),
        Binding("ctrl+q", "quit", "Quit"),
    ]

    suggestions = reactive(list, always_update=True, init=False)
    latency = reactive(0.0, init=False)

    def __init__(
        self,
        completer: Optional[AutoCompleter] = None,
        cfg: Optional[Config] = None,
        log: Optional[Log] = None,
    ):
        super().__init__()
        self.logger = log or Log.quiet()
        self.cfg = cfg or Config(log=self.logger)
        self.completer = completer if completer is not None else AutoCompleter(log=self.logger)
        self.metrics = Metrics()

    # UI --------------------------------------------------------------------
    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal():
            with Container(id="left"):
                yield Input(placeholder="Start typing…  (Enter trains the line)", id="text_input")
            with Container(id="right"):
                yield SuggestionPanel(id="predictions")
        with Horizontal(id="bottom"):
            yield TypingLatency(id="latency")
            yield Static(id="status")
        yield Footer()

    def on_mount(self) -> None:
        self._refresh_status()
        self.query_one(Input).focus()

    def on_input_changed(self, event: Input.Changed) -> None:
        """Re-run the lookup every time the text changes."""
        fragment = normalize_text(last_token(event.value), lowercase=self.cfg.get("lowercase"))
        if not fragment:
            self.suggestions = []
            return

        start = time.perf_counter()
        found = self.completer.get_words(fragment)
        self.latency = time.perf_counter() - start
        self.metrics.record("suggest_time", self.latency)

        limit = self.cfg.get("max_suggestions")
        self.suggestions = found[:limit] if limit else found

    def on_input_submitted(self, event: Input.Submitted) -> None:
        line = event.value
        if not line:
            return
        self.completer.train(normalize_text(line, lowercase=self.cfg.get("lowercase")))
        self.logger.info(f"tui trained: {line!r}")
        event.input.value = ""
        self._refresh_status("[green]Learned[/green]")

    # watchers ---------------------------------------------------------------
    def watch_suggestions(self, suggestions: List[Candidate]) -> None:
        self.query_one(SuggestionPanel).update_predictions(
            suggestions, show_confidence=self.cfg.get("show_confidence"))

    def watch_latency(self, latency: float) -> None:
        self.query_one(TypingLatency).set_latency(latency)

    # actions ----------------------------------------------------------------
    def action_accept_top(self) -> None:
        """TAB = replace the word being typed with the top suggestion."""
        if not self.suggestions:
            return
        box = self.query_one(Input)
        head, sep, _ = box.value.rpartition(" ")
        box.value = f"{head}{sep}{self.suggestions[0].word}"
        box.cursor_position = len(box.value)

    def _refresh_status(self, note: str = "") -> None:
        s = self.completer.stats()
        text = f"[dim]words:[/dim] {s['words']}  [dim]passages:[/dim] {s['passages']}"
        self.query_one("#status", Static).update(f"{text}  {note}".rstrip())


if __name__ == "__main__":
    TUIAutocompleter().run()
