# tests/test_app.py

from __future__ import annotations

import pytest
from textual.widgets import Input, ListView

from mylists.services.screen_state import EditListSheet
from mylists.services.store import TaskStore
from mylists.ui.app import MyListsApp
from mylists.ui.modals.add_task_list import AddTaskListScreen
from mylists.ui.screens.filtered_tasks import FilteredTasksScreen
from mylists.ui.screens.task_list_detail import TaskListDetailScreen
from mylists.ui.screens.task_lists_screen import TaskListsScreen
from mylists.ui.widgets import HelpModal, TaskListCellView, TaskListView, TaskStatsView

SIZE = (100, 50)


def counters(screen: TaskListsScreen) -> dict[str, int]:
    return {widget.id: widget.count for widget in screen.query(TaskStatsView)}


@pytest.mark.asyncio
async def test_counters_and_lists_render(seeded_store: TaskStore) -> None:
    app = MyListsApp(seeded_store)
    async with app.run_test(size=SIZE) as pilot:
        await pilot.pause()
        screen = app.screen

        assert isinstance(screen, TaskListsScreen)
        assert counters(screen) == {
            "stats-today": 1,
            "stats-scheduled": 1,
            "stats-all": 2,
            "stats-completed": 1,
        }
        assert len(screen.query_one("#task-lists", ListView).children) == 2


@pytest.mark.asyncio
async def test_search_overlay_follows_query(seeded_store: TaskStore) -> None:
    app = MyListsApp(seeded_store)
    async with app.run_test(size=SIZE) as pilot:
        await pilot.pause()
        screen = app.screen
        overlay = screen.query_one("#search-overlay", TaskListView)

        screen.query_one("#search", Input).value = "MILK"
        await pilot.pause()

        assert overlay.display
        assert not screen.query_one("#lists-content").display
        assert [task.title for task in overlay.tasks] == ["Buy milk"]

        screen.query_one("#search", Input).value = ""
        await pilot.pause()

        assert not overlay.display
        assert screen.model.search_results is None


@pytest.mark.asyncio
async def test_new_list_sheet_creates_list(seeded_store: TaskStore) -> None:
    app = MyListsApp(seeded_store)
    async with app.run_test(size=SIZE) as pilot:
        await pilot.pause()
        screen = app.screen

        await pilot.press("n")
        await pilot.pause()

        assert isinstance(app.screen, AddTaskListScreen)
        assert screen.model.active_sheet is not None

        await pilot.press("w", "o", "r", "k", "enter")
        await pilot.pause()

        assert app.screen is screen
        assert screen.model.active_sheet is None
        assert [item.name for item in seeded_store.task_lists] == ["Home", "Archive", "work"]


@pytest.mark.asyncio
async def test_cancelled_sheet_changes_nothing(seeded_store: TaskStore) -> None:
    app = MyListsApp(seeded_store)
    async with app.run_test(size=SIZE) as pilot:
        await pilot.pause()
        screen = app.screen

        await pilot.press("n")
        await pilot.pause()
        await pilot.press("escape")
        await pilot.pause()

        assert app.screen is screen
        assert screen.model.active_sheet is None
        assert len(seeded_store.task_lists) == 2


@pytest.mark.asyncio
async def test_delete_list_updates_counters(seeded_store: TaskStore) -> None:
    app = MyListsApp(seeded_store)
    async with app.run_test(size=SIZE) as pilot:
        await pilot.pause()
        screen = app.screen
        screen.query_one("#task-lists", ListView).index = 1

        await pilot.press("d")
        await pilot.pause()
        await pilot.pause()

        assert [item.name for item in seeded_store.task_lists] == ["Home"]
        assert counters(screen)["stats-completed"] == 0
        assert len(screen.query_one("#task-lists", ListView).children) == 1


@pytest.mark.asyncio
async def test_stats_tile_opens_filtered_tasks(seeded_store: TaskStore) -> None:
    app = MyListsApp(seeded_store)
    async with app.run_test(size=SIZE) as pilot:
        await pilot.pause()
        screen = app.screen
        screen.query_one("#stats-today", TaskStatsView).focus()

        await pilot.press("enter")
        await pilot.pause()

        assert isinstance(app.screen, FilteredTasksScreen)
        assert [task.title for task in app.screen.filtered_tasks] == ["Pay bills"]

        await pilot.press("escape")
        await pilot.pause()

        assert app.screen is screen
        assert screen.model.active_stats is None


@pytest.mark.asyncio
async def test_detail_screen_adds_task(seeded_store: TaskStore) -> None:
    app = MyListsApp(seeded_store)
    async with app.run_test(size=SIZE) as pilot:
        await pilot.pause()
        screen = app.screen
        home = seeded_store.task_lists[0]
        screen.query_one("#task-lists", ListView).index = 0

        await pilot.press("enter")
        await pilot.pause()

        assert isinstance(app.screen, TaskListDetailScreen)
        assert screen.model.selected_list == home

        await pilot.press("a")
        await pilot.pause()
        await pilot.press("d", "i", "s", "h", "e", "s", "enter")
        await pilot.pause()

        assert [task.title for task in seeded_store.tasks_in(home)] == ["Buy milk", "Pay bills", "dishes"]
        assert [task.title for task in app.screen.query_one("#detail-tasks", TaskListView).tasks][-1] == "dishes"


@pytest.mark.asyncio
async def test_help_modal_toggles(seeded_store: TaskStore) -> None:
    app = MyListsApp(seeded_store)
    async with app.run_test(size=SIZE) as pilot:
        await pilot.pause()
        screen = app.screen

        await pilot.press("question_mark")
        await pilot.pause()
        assert isinstance(app.screen, HelpModal)

        await pilot.press("escape")
        await pilot.pause()
        assert app.screen is screen


@pytest.mark.asyncio
async def test_edit_sheet_renames_highlighted_list(seeded_store: TaskStore) -> None:
    app = MyListsApp(seeded_store)
    async with app.run_test(size=SIZE) as pilot:
        await pilot.pause()
        screen = app.screen
        home = seeded_store.task_lists[0]
        screen.query_one("#task-lists", ListView).index = 0

        await pilot.press("e")
        await pilot.pause()

        assert isinstance(app.screen, AddTaskListScreen)
        assert screen.model.active_sheet == EditListSheet(home)
        name_input = app.screen.query_one("#list-name", Input)
        assert name_input.value == "Home"

        name_input.value = "House"
        name_input.focus()
        await pilot.pause()
        await pilot.press("enter")
        await pilot.pause()
        await pilot.pause()

        assert app.screen is screen
        assert screen.model.active_sheet is None
        assert [item.name for item in seeded_store.task_lists] == ["House", "Archive"]
        assert seeded_store.get_list(home.id).color == home.color
        rows = list(screen.query(TaskListCellView))
        assert rows[0].task_list.name == "House"
        assert "House" in rows[0].render_label().plain


async def open_home_detail(pilot, screen: TaskListsScreen) -> None:
    screen.query_one("#task-lists", ListView).index = 0
    await pilot.press("enter")
    await pilot.pause()


@pytest.mark.asyncio
async def test_detail_screen_toggles_task(seeded_store: TaskStore) -> None:
    app = MyListsApp(seeded_store)
    async with app.run_test(size=SIZE) as pilot:
        await pilot.pause()
        screen = app.screen
        await open_home_detail(pilot, screen)
        table = app.screen.query_one("#detail-tasks", TaskListView)

        await pilot.press("space")
        await pilot.pause()

        buy_milk = next(task for task in seeded_store.tasks if task.title == "Buy milk")
        assert buy_milk.is_completed
        assert table.tasks[0].is_completed

        await pilot.press("escape")
        await pilot.pause()
        await pilot.pause()

        assert app.screen is screen
        assert screen.model.selected_list is None
        assert counters(screen)["stats-all"] == 1
        assert counters(screen)["stats-completed"] == 2


@pytest.mark.asyncio
async def test_detail_screen_deletes_task(seeded_store: TaskStore) -> None:
    app = MyListsApp(seeded_store)
    async with app.run_test(size=SIZE) as pilot:
        await pilot.pause()
        screen = app.screen
        await open_home_detail(pilot, screen)
        table = app.screen.query_one("#detail-tasks", TaskListView)

        await pilot.press("d")
        await pilot.pause()

        assert [task.title for task in seeded_store.tasks] == ["Pay bills", "Old"]
        assert [task.title for task in table.tasks] == ["Pay bills"]

        await pilot.press("escape")
        await pilot.pause()
        await pilot.pause()

        assert app.screen is screen
        assert counters(screen) == {
            "stats-today": 1,
            "stats-scheduled": 1,
            "stats-all": 1,
            "stats-completed": 1,
        }
