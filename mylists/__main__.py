# mylists/__main__.py
"""Command-line entry point: ``python -m mylists`` or ``mylists``."""

import argparse
from pathlib import Path

from rich.markup import escape

from mylists import __version__
from mylists.core.config import load_config
from mylists.helpers._logger import setup_logging
from mylists.helpers._rich import Table, console
from mylists.services.filters import count_by_type
from mylists.services.sample_data import seed_sample_data
from mylists.services.store import StoreLoadError, TaskStore
from mylists.ui.app import MyListsApp


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="mylists", description="Terminal task lists with summary counters and search.")
    parser.add_argument("--data-file", type=Path, default=None, help="JSON data file (overrides MYLISTS_STORAGE_* settings).")
    parser.add_argument("--seed", action="store_true", help="Fill an empty store with sample lists and tasks.")
    parser.add_argument("--summary", action="store_true", help="Print the counters and lists instead of starting the UI.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser.parse_args(argv)


def print_summary(store: TaskStore) -> None:
    counts = count_by_type(store.tasks)
    table = Table(title="My Lists", header_style="table.header")
    table.add_column("Counter")
    table.add_column("Tasks", justify="right")
    for stats_type, count in counts.items():
        table.add_row(f"{stats_type.icon} {stats_type.title}", str(count))
    console.print(table)
    for task_list in store.task_lists:
        console.print(f"[{task_list.color.value}]{task_list.icon}[/] {escape(task_list.name)} [subtle]({len(store.tasks_in(task_list))})[/]")


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    config = load_config(data_file=args.data_file)
    setup_logging(log_level=config.logging.level, log_dir=config.log_dir)

    store = TaskStore(config.storage.data_file, autosave=config.storage.autosave)
    try:
        store.load()
    except StoreLoadError as e:
        console.print(f"[error]Cannot open data file:[/] {e}")
        return 1

    if args.seed and seed_sample_data(store):
        console.print(f"[success]Added sample data to[/] {config.storage.data_file}")

    if args.summary:
        print_summary(store)
        return 0

    MyListsApp(store).run()
    if not config.storage.autosave:
        store.save()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
