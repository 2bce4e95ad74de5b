"""Sort and presentation model for the project table.

The interactive session is a single immutable ``SessionState`` value.
Key presses are turned into ``Action`` values and folded into the state by
``update``, which also returns the side effect (if any) for the caller to
perform.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable, Optional, Sequence, Union

from roster.models import Project, format_size


HEADERS = ["Project", "Type", "Size", "Files", "Git Status"]
WIDTHS = [25, 8, 10, 8, 15]
COLUMN_COUNT = len(HEADERS)

ASCENDING_ARROW = " 🔼"
DESCENDING_ARROW = " 🔽"

# Names accepted by ``roster list --sort``
COLUMN_NAMES = ["name", "type", "size", "files", "status"]

_SORT_KEYS: list[Callable[[Project], object]] = [
    lambda p: p.name.lower(),
    lambda p: p.marker,
    lambda p: p.size,
    lambda p: p.file_count,
    lambda p: p.status.label,
]


def reorder(projects: Sequence[Project], column: int, ascending: bool) -> list[Project]:
    """Return ``projects`` sorted by the given column.

    The sort is stable in both directions: projects with equal keys keep
    their current relative order.
    """
    key = _SORT_KEYS[column]
    return sorted(projects, key=key, reverse=not ascending)


def render_columns(column: int, ascending: bool) -> list[tuple[str, int]]:
    """Build (title, width) pairs, marking the active sort column."""
    columns = []
    for index, (header, width) in enumerate(zip(HEADERS, WIDTHS)):
        title = header
        if index == column:
            title += ASCENDING_ARROW if ascending else DESCENDING_ARROW
        columns.append((title, width))
    return columns


def render_row(project: Project) -> tuple[str, str, str, str, str]:
    return (
        project.name,
        project.marker,
        format_size(project.size),
        str(project.file_count),
        project.status.label,
    )


def render_rows(projects: Sequence[Project]) -> list[tuple[str, str, str, str, str]]:
    return [render_row(project) for project in projects]


class Action(str, Enum):
    """Discrete inputs the session reacts to."""

    QUIT = "quit"
    PREV_COLUMN = "prev_column"
    NEXT_COLUMN = "next_column"
    TOGGLE_DIRECTION = "toggle_direction"
    ACTIVATE = "activate"


KEYMAP: dict[str, Action] = {
    "escape": Action.QUIT,
    "q": Action.QUIT,
    "ctrl+c": Action.QUIT,
    "left": Action.PREV_COLUMN,
    "h": Action.PREV_COLUMN,
    "right": Action.NEXT_COLUMN,
    "l": Action.NEXT_COLUMN,
    "s": Action.TOGGLE_DIRECTION,
    "enter": Action.ACTIVATE,
}


@dataclass(frozen=True)
class Quit:
    """End the session."""


@dataclass(frozen=True)
class OpenPath:
    """Open ``path`` in the system file manager."""

    path: str


Effect = Union[Quit, OpenPath]


@dataclass(frozen=True)
class SessionState:
    """Everything the table session knows.

    ``projects`` is always held in the current display order.
    """

    projects: tuple[Project, ...]
    sort_column: int = 0
    ascending: bool = True
    cursor: int = 0

    @classmethod
    def create(
        cls,
        projects: Sequence[Project],
        sort_column: int = 0,
        ascending: bool = True,
    ) -> "SessionState":
        """Start a session with the projects already in sorted order."""
        sort_column = sort_column % COLUMN_COUNT
        ordered = reorder(projects, sort_column, ascending)
        return cls(projects=tuple(ordered), sort_column=sort_column, ascending=ascending)

    def columns(self) -> list[tuple[str, int]]:
        return render_columns(self.sort_column, self.ascending)

    def rows(self) -> list[tuple[str, str, str, str, str]]:
        return render_rows(self.projects)

    def selected(self) -> Optional[Project]:
        if 0 <= self.cursor < len(self.projects):
            return self.projects[self.cursor]
        return None

    def with_cursor(self, cursor: int) -> "SessionState":
        return replace(self, cursor=cursor)

    def resorted(self, sort_column: int, ascending: bool) -> "SessionState":
        ordered = reorder(self.projects, sort_column, ascending)
        return replace(
            self,
            projects=tuple(ordered),
            sort_column=sort_column,
            ascending=ascending,
        )


def update(state: SessionState, action: Action) -> tuple[SessionState, Optional[Effect]]:
    """Apply one input to the session.

    Returns the new state and the effect to perform, if any.
    """
    if action is Action.QUIT:
        return state, Quit()
    if action is Action.PREV_COLUMN:
        column = (state.sort_column - 1 + COLUMN_COUNT) % COLUMN_COUNT
        return state.resorted(column, state.ascending), None
    if action is Action.NEXT_COLUMN:
        column = (state.sort_column + 1) % COLUMN_COUNT
        return state.resorted(column, state.ascending), None
    if action is Action.TOGGLE_DIRECTION:
        return state.resorted(state.sort_column, not state.ascending), None
    if action is Action.ACTIVATE:
        project = state.selected()
        if project is None:
            return state, None
        return state, OpenPath(project.path)
    raise ValueError(f"Unknown action: {action!r}")
