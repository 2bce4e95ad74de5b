"""Tests for the sort/presentation model and session updates."""

import pytest

from roster.models import GitStatus, Project, format_size
from roster.sorting import (
    ASCENDING_ARROW,
    COLUMN_COUNT,
    DESCENDING_ARROW,
    HEADERS,
    KEYMAP,
    Action,
    OpenPath,
    Quit,
    SessionState,
    render_columns,
    render_rows,
    reorder,
    update,
)


def make_project(name: str, marker: str = "Go", size: int = 0, file_count: int = 0,
                 status: GitStatus = GitStatus.NOT_VERSIONED) -> Project:
    return Project(name=name, marker=marker, path=f"/src/{name}", size=size,
                   file_count=file_count, status=status)


@pytest.fixture
def projects() -> list[Project]:
    return [
        make_project("beta", "JS", size=300, file_count=3, status=GitStatus.SYNCED),
        make_project("Alpha", "Py", size=100, file_count=9, status=GitStatus.NO_REMOTE),
        make_project("gamma", "Go", size=200, file_count=1, status=GitStatus.UNCOMMITTED),
        make_project("delta", "Rust", size=200, file_count=5, status=GitStatus.NO_COMMITS),
    ]


def names(projects: list[Project]) -> list[str]:
    return [p.name for p in projects]


class TestReorder:
    """Tests for sorting by column."""

    def test_name_case_insensitive(self, projects: list[Project]) -> None:
        assert names(reorder(projects, 0, True)) == ["Alpha", "beta", "delta", "gamma"]

    def test_marker(self, projects: list[Project]) -> None:
        assert [p.marker for p in reorder(projects, 1, True)] == ["Go", "JS", "Py", "Rust"]

    def test_size_numeric(self, projects: list[Project]) -> None:
        assert [p.size for p in reorder(projects, 2, True)] == [100, 200, 200, 300]

    def test_file_count_numeric(self, projects: list[Project]) -> None:
        assert [p.file_count for p in reorder(projects, 3, True)] == [1, 3, 5, 9]

    def test_status_by_label(self, projects: list[Project]) -> None:
        ordered = reorder(projects, 4, True)
        labels = [p.status.label for p in ordered]
        assert labels == sorted(labels)

    def test_descending(self, projects: list[Project]) -> None:
        assert [p.size for p in reorder(projects, 2, False)] == [300, 200, 200, 100]

    def test_ties_keep_prior_order(self, projects: list[Project]) -> None:
        """gamma and delta share a size; their input order is preserved both ways."""
        assert names(reorder(projects, 2, True))[1:3] == ["gamma", "delta"]
        assert names(reorder(projects, 2, False))[1:3] == ["gamma", "delta"]

    @pytest.mark.parametrize("column", range(COLUMN_COUNT))
    @pytest.mark.parametrize("ascending", [True, False])
    def test_idempotent(self, projects: list[Project], column: int, ascending: bool) -> None:
        once = reorder(projects, column, ascending)
        assert reorder(once, column, ascending) == once

    @pytest.mark.parametrize("column", [0, 1, 3])
    def test_toggle_reverses_distinct_keys(self, projects: list[Project], column: int) -> None:
        assert reorder(projects, column, False) == list(reversed(reorder(projects, column, True)))

    def test_does_not_mutate_input(self, projects: list[Project]) -> None:
        before = list(projects)
        reorder(projects, 2, True)
        assert projects == before


class TestRenderColumns:
    """Tests for header rendering."""

    @pytest.mark.parametrize("column", range(COLUMN_COUNT))
    @pytest.mark.parametrize("ascending", [True, False])
    def test_exactly_one_indicator(self, column: int, ascending: bool) -> None:
        titles = [title for title, _ in render_columns(column, ascending)]
        marked = [i for i, title in enumerate(titles) if title.endswith((ASCENDING_ARROW, DESCENDING_ARROW))]
        assert marked == [column]

    def test_direction_glyphs(self) -> None:
        assert render_columns(2, True)[2][0] == "Size" + ASCENDING_ARROW
        assert render_columns(2, False)[2][0] == "Size" + DESCENDING_ARROW

    def test_all_headers_present(self) -> None:
        columns = render_columns(0, True)
        assert [title for title, _ in columns[1:]] == HEADERS[1:]
        assert [width for _, width in columns] == [25, 8, 10, 8, 15]


class TestRenderRows:
    """Tests for row rendering."""

    def test_row_cells(self) -> None:
        project = make_project("api", "Go", size=2048, file_count=12, status=GitStatus.SYNCED)
        assert render_rows([project]) == [("api", "Go", "2.0 KB", "12", "Synced")]

    def test_not_versioned_label(self) -> None:
        assert render_rows([make_project("x")])[0][4] == "—"


class TestFormatSize:
    """Tests for byte formatting."""

    @pytest.mark.parametrize(
        "size,expected",
        [
            (0, "0 B"),
            (1023, "1023 B"),
            (1024, "1.0 KB"),
            (1536, "1.5 KB"),
            (1024 * 1024, "1.0 MB"),
            (5 * 1024 ** 3, "5.0 GB"),
        ],
    )
    def test_format(self, size: int, expected: str) -> None:
        assert format_size(size) == expected


class TestSessionUpdate:
    """Tests for the session state machine."""

    def test_create_sorts(self, projects: list[Project]) -> None:
        state = SessionState.create(projects)
        assert names(list(state.projects)) == ["Alpha", "beta", "delta", "gamma"]
        assert state.sort_column == 0
        assert state.ascending

    def test_next_column_wraps(self, projects: list[Project]) -> None:
        state = SessionState.create(projects, sort_column=4)
        state, effect = update(state, Action.NEXT_COLUMN)
        assert state.sort_column == 0
        assert effect is None

    def test_prev_column_wraps(self, projects: list[Project]) -> None:
        state = SessionState.create(projects, sort_column=0)
        state, _ = update(state, Action.PREV_COLUMN)
        assert state.sort_column == 4

    def test_column_change_resorts(self, projects: list[Project]) -> None:
        state = SessionState.create(projects)
        state, _ = update(state, Action.NEXT_COLUMN)
        state, _ = update(state, Action.NEXT_COLUMN)
        assert state.sort_column == 2
        assert [p.size for p in state.projects] == [100, 200, 200, 300]

    def test_toggle_direction(self, projects: list[Project]) -> None:
        state = SessionState.create(projects, sort_column=2)
        ascending = list(state.projects)

        state, effect = update(state, Action.TOGGLE_DIRECTION)

        assert not state.ascending
        assert effect is None
        assert sorted(p.name for p in state.projects) == sorted(p.name for p in ascending)
        assert [p.size for p in state.projects] == [300, 200, 200, 100]
        assert state.columns()[2][0] == "Size" + DESCENDING_ARROW

    def test_quit(self, projects: list[Project]) -> None:
        state = SessionState.create(projects)
        new_state, effect = update(state, Action.QUIT)
        assert effect == Quit()
        assert new_state == state

    def test_activate_uses_current_order(self, projects: list[Project]) -> None:
        state = SessionState.create(projects, sort_column=2, ascending=False).with_cursor(0)
        new_state, effect = update(state, Action.ACTIVATE)
        assert effect == OpenPath("/src/beta")
        assert new_state == state

    def test_activate_out_of_range(self, projects: list[Project]) -> None:
        state = SessionState.create(projects).with_cursor(99)
        _, effect = update(state, Action.ACTIVATE)
        assert effect is None

    def test_activate_empty(self) -> None:
        _, effect = update(SessionState.create([]), Action.ACTIVATE)
        assert effect is None

    def test_sort_keeps_cursor_index(self, projects: list[Project]) -> None:
        state = SessionState.create(projects).with_cursor(2)
        state, _ = update(state, Action.NEXT_COLUMN)
        assert state.cursor == 2

    def test_state_is_immutable(self, projects: list[Project]) -> None:
        state = SessionState.create(projects)
        update(state, Action.TOGGLE_DIRECTION)
        assert state.ascending


class TestKeymap:
    """Tests for key to action mapping."""

    @pytest.mark.parametrize(
        "key,action",
        [
            ("escape", Action.QUIT),
            ("q", Action.QUIT),
            ("ctrl+c", Action.QUIT),
            ("left", Action.PREV_COLUMN),
            ("h", Action.PREV_COLUMN),
            ("right", Action.NEXT_COLUMN),
            ("l", Action.NEXT_COLUMN),
            ("s", Action.TOGGLE_DIRECTION),
            ("enter", Action.ACTIVATE),
        ],
    )
    def test_bindings(self, key: str, action: Action) -> None:
        assert KEYMAP[key] is action

    def test_other_keys_unbound(self) -> None:
        for key in ["up", "down", "pageup", "j", "k"]:
            assert key not in KEYMAP
