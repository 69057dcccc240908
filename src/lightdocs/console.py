"""Search Console - a TUI for trying queries against the documentation corpus."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from textual import work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Vertical, VerticalScroll
from textual.message import Message
from textual.widgets import (
    DataTable,
    Footer,
    Header,
    Input,
    Label,
    Log,
    Markdown,
    Rule,
    Select,
    Static,
)

from lightdocs.models import SearchOutcome
from lightdocs.search import CONTENT_FILTERS, DocsSearchEngine, format_outcome


@dataclass
class CorpusStats:
    """Counts shown in the side panel once the corpus is loaded."""

    status: str = "idle"
    documents: int = 0
    rpc_methods: int = 0
    overviews: int = 0
    sections: int = 0
    load_seconds: float = 0.0


class StatsPanel(Static):
    """Corpus statistics display."""

    def compose(self) -> ComposeResult:
        yield Static(id="stats-content")

    def on_mount(self) -> None:
        self.update_display(CorpusStats())

    def update_display(self, stats: CorpusStats) -> None:
        content = self.query_one("#stats-content", Static)
        status_color = {
            "idle": "dim",
            "loading": "yellow",
            "ready": "green",
            "error": "red",
        }.get(stats.status, "white")

        content.update(f"""[b]STATUS[/b]  [{status_color}]{stats.status.upper()}[/]

[b]CORPUS[/b]
  Documents   [cyan]{stats.documents:,}[/]
  RPC methods [green]{stats.rpc_methods:,}[/]
  Overviews   [magenta]{stats.overviews:,}[/]
  Sections    [blue]{stats.sections:,}[/]

[b]LOAD[/b]    {stats.load_seconds:.2f}s""")


class ResultTable(DataTable):
    """Ranked hits for the last query."""

    def on_mount(self) -> None:
        self.add_columns("#", "Title", "Section", "Relevance")
        self.cursor_type = "row"

    def show(self, outcome: SearchOutcome) -> None:
        self.clear()
        for i, result in enumerate(outcome.results, 1):
            title = result.document.title
            if len(title) > 40:
                title = title[:37] + "..."
            self.add_row(str(i), title, result.document.section, f"{result.relevance}%")


class SearchConsole(App):
    """The lightdocs Search Console."""

    class CorpusLoaded(Message):
        def __init__(self, stats: CorpusStats) -> None:
            self.stats = stats
            super().__init__()

    class LogMessage(Message):
        def __init__(self, message: str) -> None:
            self.message = message
            super().__init__()

    CSS = """
    #main-container {
        layout: horizontal;
        height: 100%;
    }

    #left-panel {
        width: 35;
        background: $surface-darken-1;
        border-right: solid $primary-darken-2;
        padding: 1;
    }

    #center-panel {
        width: 1fr;
        padding: 1;
    }

    StatsPanel {
        height: auto;
        padding: 1;
        background: $surface-darken-2;
        border: round $primary;
        margin-bottom: 1;
    }

    ResultTable {
        height: 10;
        border: round $primary-darken-1;
    }

    #excerpt-panel {
        height: 1fr;
        border: round $accent;
    }

    #log-panel {
        height: 8;
        border: round $primary-darken-2;
        background: $surface-darken-2;
    }

    .section-title {
        text-style: bold;
        margin-bottom: 1;
    }
    """

    BINDINGS = [
        Binding("r", "reload", "Reload", show=True),
        Binding("q", "quit", "Quit", show=True),
    ]

    TITLE = "lightdocs Search Console"
    SUB_TITLE = "Query Testing Console"

    def __init__(self, docs_root: Path) -> None:
        super().__init__()
        self.docs_root = docs_root
        self.engine = DocsSearchEngine(docs_root)

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        with Container(id="main-container"):
            with Vertical(id="left-panel"):
                yield Label("CORPUS", classes="section-title")
                yield StatsPanel()
                yield Rule()
                yield Label("Content filter")
                yield Select(
                    [(name, name) for name in CONTENT_FILTERS],
                    value="all",
                    allow_blank=False,
                    id="filter-select",
                )

            with Vertical(id="center-panel"):
                yield Input(placeholder="Search the docs and press Enter...", id="query-input")
                yield ResultTable(id="results")
                with VerticalScroll(id="excerpt-panel"):
                    yield Markdown(id="excerpt")
                yield Label("SYSTEM LOG", classes="section-title")
                yield Log(id="log-panel", highlight=True, auto_scroll=True)

        yield Footer()

    def on_mount(self) -> None:
        self._log(f"Corpus: {self.docs_root}")
        self.load_corpus()

    def _log(self, message: str) -> None:
        timestamp = datetime.now().strftime("%H:%M:%S")
        self.query_one("#log-panel", Log).write_line(f"[{timestamp}] {message}")

    def on_search_console_corpus_loaded(self, event: CorpusLoaded) -> None:
        self.query_one(StatsPanel).update_display(event.stats)

    def on_search_console_log_message(self, event: LogMessage) -> None:
        self._log(event.message)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        query = event.value.strip()
        if not query:
            return
        content_filter = str(self.query_one("#filter-select", Select).value)
        self.run_search(query, content_filter)

    def action_reload(self) -> None:
        self.engine = DocsSearchEngine(self.docs_root)
        self.load_corpus()

    @work(exclusive=True, thread=True)
    def load_corpus(self) -> None:
        """Load and index the corpus in a background thread."""
        self.post_message(self.CorpusLoaded(CorpusStats(status="loading")))
        start = datetime.now()
        try:
            self.engine.load()
        except Exception as e:
            self.post_message(self.CorpusLoaded(CorpusStats(status="error")))
            self.post_message(self.LogMessage(f"ERROR: {e}"))
            return

        documents = self.engine.documents
        stats = CorpusStats(
            status="ready",
            documents=len(documents),
            rpc_methods=sum(1 for d in documents if d.is_rpc_method),
            overviews=sum(1 for d in documents if d.is_comprehensive_doc),
            sections=len({d.section for d in documents}),
            load_seconds=(datetime.now() - start).total_seconds(),
        )
        self.post_message(self.CorpusLoaded(stats))
        self.post_message(self.LogMessage(f"Indexed {stats.documents} documents"))

    @work(exclusive=True, thread=True, group="search")
    def run_search(self, query: str, content_filter: str) -> None:
        """Run a query off the UI thread."""
        outcome = self.engine.run_query(query, limit=20, content_filter=content_filter)
        if outcome is None:
            self.post_message(self.LogMessage("Index not ready yet"))
            return
        self.call_from_thread(self._show_outcome, outcome)

    def _show_outcome(self, outcome: SearchOutcome) -> None:
        self.query_one("#results", ResultTable).show(outcome)
        self.query_one("#excerpt", Markdown).update(format_outcome(outcome))
        kind = "comprehensive" if outcome.used_comprehensive else outcome.mode
        self._log(f"{outcome.query!r}: {len(outcome.results)} results ({kind})")


def main(docs_root: Path) -> None:
    """Run the Search Console TUI."""
    app = SearchConsole(docs_root)
    app.run()
