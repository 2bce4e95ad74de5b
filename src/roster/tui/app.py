"""Interactive project table."""

import logging
from functools import partial
from typing import Callable, Optional, Sequence

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import DataTable, Footer, Header, Static

from roster.config import RosterConfig
from roster.models import Project
from roster.opener import open_in_file_manager
from roster.sorting import KEYMAP, Action, OpenPath, Quit, SessionState, update


logger = logging.getLogger(__name__)

HELP_LINE = " ←/→: Sort | Enter: Open | S: Order | Q: Quit"

ACTION_LABELS = {
    Action.QUIT: "Quit",
    Action.PREV_COLUMN: "Prev Column",
    Action.NEXT_COLUMN: "Next Column",
    Action.TOGGLE_DIRECTION: "Order",
    Action.ACTIVATE: "Open",
}

FOOTER_KEYS = {"q", "left", "right", "s", "enter"}

SORT_ACTIONS = (Action.PREV_COLUMN, Action.NEXT_COLUMN, Action.TOGGLE_DIRECTION)


class RosterApp(App):
    """Sortable table of scanned projects.

    The app owns a ``SessionState`` and replaces it on every key press;
    the table widget is rebuilt from that state after each sort change.
    """

    TITLE = "Roster"

    CSS = """
    #project-table {
        height: 1fr;
        border: solid $primary-darken-2;
    }

    #help-line {
        height: 1;
        color: $text-muted;
    }
    """

    # Priority bindings so the focused table does not swallow these keys
    BINDINGS = [
        Binding(key, action.value, ACTION_LABELS[action], show=key in FOOTER_KEYS, priority=True)
        for key, action in KEYMAP.items()
    ]

    def __init__(
        self,
        projects: Sequence[Project],
        root: Optional[str] = None,
        sort_column: int = 0,
        ascending: bool = True,
        opener: Optional[Callable[[str], bool]] = None,
        config: Optional[RosterConfig] = None,
    ):
        super().__init__()
        self._config = config if config is not None else RosterConfig.load()
        if self._config.theme in self.available_themes:
            self.theme = self._config.theme
        self.session = SessionState.create(projects, sort_column, ascending)

        if opener is None:
            opener = partial(open_in_file_manager, override=self._config.file_manager)
        self._opener = opener
        self._root = root

    def compose(self) -> ComposeResult:
        yield Header()
        yield DataTable(id="project-table", cursor_type="row", zebra_stripes=True)
        yield Static(HELP_LINE, id="help-line")
        yield Footer()

    def on_mount(self) -> None:
        count = len(self.session.projects)
        suffix = "project" if count == 1 else "projects"
        self.sub_title = f"{count} {suffix} in {self._root}" if self._root else f"{count} {suffix}"
        self.render_table()
        self.query_one("#project-table", DataTable).focus()

    def render_table(self) -> None:
        """Rebuild columns and rows from the session state, keeping the cursor row."""
        table = self.query_one("#project-table", DataTable)
        cursor = table.cursor_row
        table.clear(columns=True)
        for title, width in self.session.columns():
            table.add_column(title, width=width)
        for project, row in zip(self.session.projects, self.session.rows()):
            table.add_row(*row, key=project.path)
        if self.session.projects:
            table.move_cursor(row=min(max(cursor, 0), len(self.session.projects) - 1))

    def on_data_table_row_highlighted(self, event: DataTable.RowHighlighted) -> None:
        self.session = self.session.with_cursor(event.cursor_row)

    def perform(self, action: Action) -> None:
        """Fold one action into the session and carry out its effect."""
        table = self.query_one("#project-table", DataTable)
        self.session, effect = update(self.session.with_cursor(table.cursor_row), action)

        if isinstance(effect, Quit):
            self.exit()
        elif isinstance(effect, OpenPath):
            self._open(effect.path)
        elif action in SORT_ACTIONS:
            self.render_table()

    def _open(self, path: str) -> None:
        logger.debug("Opening %s in file manager", path)
        if self._opener(path):
            self.notify(f"Opening {path}")
        else:
            self.notify(f"Could not open {path}", severity="warning")

    def action_quit(self) -> None:
        """Quit the application."""
        self.perform(Action.QUIT)

    def action_prev_column(self) -> None:
        self.perform(Action.PREV_COLUMN)

    def action_next_column(self) -> None:
        self.perform(Action.NEXT_COLUMN)

    def action_toggle_direction(self) -> None:
        self.perform(Action.TOGGLE_DIRECTION)

    def action_activate(self) -> None:
        """Open the highlighted project in the file manager."""
        self.perform(Action.ACTIVATE)
