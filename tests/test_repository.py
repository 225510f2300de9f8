"""
Tests for the SQLite OrderedStore: ranks, cursors, atomic swaps, failures.
"""

import pytest

from kanban_tui.core.constants import DEFAULT_COLUMNS
from kanban_tui.core.exceptions import (
    ColumnNotFoundError,
    StoreError,
    TaskNotFoundError,
)
from kanban_tui.core.repository import OrderedStore


def column_ids(store):
    return [column.id for column in store.load_columns()]


def test_new_store_has_default_columns(store):
    columns = store.load_columns()

    assert [c.name for c in columns] == list(DEFAULT_COLUMNS)
    assert all(c.tasks == [] for c in columns)
    assert all(c.selected_task_idx is None for c in columns)
    assert store.get_active_column() == 0


def test_open_creates_database_file(tmp_path):
    db_path = tmp_path / "nested" / "kanban.db"

    with OrderedStore.open(db_path) as store:
        store.create_task("T1", "D1", 1)

    assert db_path.exists()
    with OrderedStore.open(db_path) as store:
        assert [t.title for t in store.load_columns()[0].tasks] == ["T1"]


def test_open_unusable_path_raises_store_error(tmp_path):
    # A directory can't be opened as a database file
    with pytest.raises(StoreError):
        OrderedStore.open(tmp_path)


def test_created_tasks_load_in_creation_order(store):
    todo = column_ids(store)[0]
    created = [store.create_task(f"T{i}", f"D{i}", todo) for i in range(1, 5)]

    loaded = store.load_columns()[0].tasks

    assert [t.id for t in loaded] == [t.id for t in created]
    assert loaded[2].description == "D3"


def test_task_ids_are_never_reused(store):
    todo = column_ids(store)[0]
    first = store.create_task("T1", "", todo)
    store.delete_task(first.id)

    second = store.create_task("T2", "", todo)

    assert second.id > first.id


def test_create_task_in_missing_column_fails(store):
    with pytest.raises(StoreError):
        store.create_task("T1", "", 999)


def test_update_task_text(store):
    task = store.create_task("T1", "D1", 1)

    store.update_task_text(task.id, "New title", "multi\nline")

    fetched = store.get_task(task.id)
    assert fetched.title == "New title"
    assert fetched.description == "multi\nline"


def test_writes_to_missing_task_raise(store):
    with pytest.raises(TaskNotFoundError):
        store.delete_task(42)
    with pytest.raises(TaskNotFoundError):
        store.update_task_text(42, "t", "d")
    with pytest.raises(TaskNotFoundError):
        store.relocate_task(42, 1)

    task = store.create_task("T1", "", 1)
    with pytest.raises(TaskNotFoundError):
        store.swap_ranks(task.id, 42)


def test_swap_ranks_exchanges_only_the_two_tasks(store):
    tasks = [store.create_task(f"T{i}", "", 1) for i in range(1, 5)]
    ranks = {t.id: store.get_task_rank(t.id) for t in tasks}

    store.swap_ranks(tasks[1].id, tasks[2].id)

    assert store.get_task_rank(tasks[1].id) == ranks[tasks[2].id]
    assert store.get_task_rank(tasks[2].id) == ranks[tasks[1].id]
    assert store.get_task_rank(tasks[0].id) == ranks[tasks[0].id]
    assert store.get_task_rank(tasks[3].id) == ranks[tasks[3].id]
    assert [t.title for t in store.load_columns()[0].tasks] == ["T1", "T3", "T2", "T4"]


def test_swap_ranks_is_all_or_nothing(store):
    a = store.create_task("A", "", 1)
    b = store.create_task("B", "", 1)
    rank_a, rank_b = store.get_task_rank(a.id), store.get_task_rank(b.id)

    # Make the second write of the swap fail
    store.conn.execute(
        f"""
        CREATE TRIGGER fail_rank_write BEFORE UPDATE OF sort_order ON task
        WHEN NEW.id = {b.id}
        BEGIN
            SELECT RAISE(ABORT, 'simulated failure');
        END
        """
    )
    store.conn.commit()

    with pytest.raises(StoreError) as excinfo:
        store.swap_ranks(a.id, b.id)

    assert excinfo.value.operation == "swap_ranks"
    assert store.get_task_rank(a.id) == rank_a
    assert store.get_task_rank(b.id) == rank_b


def test_relocate_task_places_it_last(store):
    todo, doing = column_ids(store)[:2]
    moving = store.create_task("Moving", "", todo)
    store.create_task("D1", "", doing)
    store.create_task("D2", "", doing)

    store.relocate_task(moving.id, doing)

    columns = store.load_columns()
    assert columns[0].tasks == []
    assert [t.title for t in columns[1].tasks] == ["D1", "D2", "Moving"]


def test_relocate_to_missing_column_raises(store):
    task = store.create_task("T1", "", 1)

    with pytest.raises(ColumnNotFoundError):
        store.relocate_task(task.id, 999)


def test_column_selection_round_trip(store):
    for i in range(3):
        store.create_task(f"T{i}", "", 1)

    store.set_column_selection(1, 2)
    assert store.load_columns()[0].selected_task_idx == 2

    store.set_column_selection(1, None)
    # No stored cursor on a non-empty column falls back to the first task
    assert store.load_columns()[0].selected_task_idx == 0


def test_stale_selection_is_clamped_on_load(store):
    store.create_task("T1", "", 1)
    store.create_task("T2", "", 1)
    store.set_column_selection(1, 7)
    store.set_column_selection(2, 3)

    columns = store.load_columns()

    assert columns[0].selected_task_idx == 1
    assert columns[1].selected_task_idx is None


def test_malformed_selection_raises(store):
    store.conn.execute("UPDATE kb_column SET selected_task = 'oops' WHERE id = 1")
    store.conn.commit()

    with pytest.raises(StoreError):
        store.load_columns()


def test_active_column_round_trip(store):
    store.set_active_column(3)
    assert store.get_active_column() == 3


def test_missing_active_column_defaults_to_zero(store):
    store.conn.execute("DELETE FROM app_state")
    store.conn.commit()

    assert store.get_active_column() == 0


def test_malformed_active_column_raises(store):
    store.conn.execute("UPDATE app_state SET value = 'left' WHERE key = 'selected_column'")
    store.conn.commit()

    with pytest.raises(StoreError):
        store.get_active_column()


def test_set_selection_for_missing_column_raises(store):
    with pytest.raises(ColumnNotFoundError):
        store.set_column_selection(999, 0)


def test_malformed_rank_raises(store):
    task = store.create_task("T1", "", 1)
    store.conn.execute("UPDATE task SET sort_order = 'first' WHERE id = ?", (task.id,))
    store.conn.commit()

    with pytest.raises(StoreError):
        store.load_columns()
