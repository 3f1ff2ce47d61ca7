"""tododash CLI - task dashboard views."""

import json
import logging
import sys
from dataclasses import asdict
from datetime import date

import click

from .config import load_config
from .core.deadline import classify_deadline
from .core.tree import ancestors, index_tasks
from .ports.config_repo import CompletionStatsConfig, TaskPanelConfig
from .ports.errors import TododashError
from .scheduler import create_scheduler
from .workflows import (
    DashboardData,
    build_dashboard,
    complete_task,
    fetch_completion_stats,
    fetch_dated_goals,
    fetch_goal_rate,
    fetch_remaining_work,
    fetch_task_trees,
    get_config_store,
    get_task_repository,
    load_completion_stats_config,
    load_task_panel_config,
    update_completion_stats_config,
    update_task_panel_config,
)


def _fail(e: Exception) -> None:
    click.echo(f"Error: {e}", err=True)
    sys.exit(1)


def _echo_json(data) -> None:
    click.echo(json.dumps(data, indent=2, default=str, ensure_ascii=False))


@click.group()
@click.version_option(package_name="tododash")
@click.option("--debug", is_flag=True, help="Enable debug logging")
def main(debug: bool):
    """tododash - Todoist dashboard views."""
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )


@main.command()
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def goals(as_json: bool):
    """Show the non-milestone goal rate."""
    config = load_config()
    try:
        rate = fetch_goal_rate(get_task_repository(config), config.goal_filter)
    except TododashError as e:
        _fail(e)

    if as_json:
        _echo_json(asdict(rate))
        return

    click.echo(f"Goal rate: {rate.percentage}% ({rate.non_milestone_count}/{rate.goal_count} non-milestone)")


@main.command("dated-goals")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def dated_goals(as_json: bool):
    """List goals with a deadline, earliest first."""
    config = load_config()
    try:
        goals_list = fetch_dated_goals(get_task_repository(config), config.dated_goal_filter)
    except TododashError as e:
        _fail(e)

    today = date.today()
    if as_json:
        rows = []
        for g in goals_list:
            display = classify_deadline(g.deadline, today)
            rows.append(
                {
                    **asdict(g),
                    "label": display.label,
                    "urgency": display.urgency.name.lower(),
                    "color": display.urgency.color,
                }
            )
        _echo_json(rows)
        return

    if not goals_list:
        click.echo("No dated goals.")
        return

    for goal in goals_list:
        display = classify_deadline(goal.deadline, today)
        click.echo(f"{goal.deadline}  {display.label:>12}  {goal.summary}")


@main.command()
@click.option("--exclude", "-x", multiple=True, help="Extra label to exclude (repeatable)")
def remaining(exclude: tuple[str, ...]):
    """Count remaining work tasks."""
    config = load_config()
    store = get_config_store()
    try:
        excluded = list(exclude) or load_completion_stats_config(store).excluded_labels
        count = fetch_remaining_work(get_task_repository(config), excluded, config.work_filter)
    except TododashError as e:
        _fail(e)

    click.echo(f"Remaining work: {count}")


@main.command()
@click.option("--days", type=click.IntRange(min=1), default=None, help="Window size in days")
@click.option("--span", type=click.IntRange(min=1), default=None, help="Moving-average span in days")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def stats(days: int | None, span: int | None, as_json: bool):
    """Show daily completion counts with a moving average."""
    config = load_config()
    try:
        stats_config = load_completion_stats_config(get_config_store())
        result = fetch_completion_stats(
            get_task_repository(config),
            stats_config.excluded_labels,
            days=days or stats_config.window_days,
            span=span or stats_config.moving_average_days,
        )
    except TododashError as e:
        _fail(e)

    if as_json:
        _echo_json(asdict(result))
        return

    for day in result.daily:
        click.echo(f"{day.date}  {day.count:3d}  avg {day.moving_average:5.2f}")
    summary = result.summary
    click.echo(
        f"\nTotal: {summary.total}  Today: {summary.latest_count}  "
        f"Recent: {summary.recent_total} (avg {summary.recent_average:.2f}/day)"
    )


@main.command()
@click.option("--filter", "filter_query", default=None, help="Todoist filter query (default: saved filter)")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def tree(filter_query: str | None, as_json: bool):
    """List tasks with their ancestor breadcrumbs."""
    config = load_config()
    try:
        if filter_query is None:
            filter_query = load_task_panel_config(get_config_store()).filter
        nodes = fetch_task_trees(get_task_repository(config), filter_query)
    except TododashError as e:
        _fail(e)

    if as_json:
        _echo_json([asdict(n) for n in nodes])
        return

    if not nodes:
        click.echo("No tasks.")
        return

    for node in nodes:
        crumbs = []
        parent = node.parent
        while parent is not None:
            crumbs.append(parent.summary)
            parent = parent.parent
        breadcrumb = " > ".join(reversed(crumbs))
        prefix = f"{breadcrumb} > " if breadcrumb else ""
        click.echo(f"[p{node.priority}] {prefix}{node.summary}")


@main.command()
@click.argument("task_id")
@click.option("--show-path", is_flag=True, help="Print the task's ancestors before closing it")
def complete(task_id: str, show_path: bool):
    """Complete a task by id."""
    config = load_config()
    repo = get_task_repository(config)
    try:
        if show_path:
            all_tasks = repo.get_all("")
            index = index_tasks(all_tasks)
            if task_id in index:
                crumbs = [p.summary for p in ancestors(index[task_id], index)]
                click.echo(" > ".join([*crumbs, index[task_id].summary]))
        complete_task(repo, task_id)
    except TododashError as e:
        _fail(e)

    click.echo(f"✓ Completed {task_id}")


@main.group("config")
def config_group():
    """Show or change saved view settings."""
    pass


@config_group.command("show")
def config_show():
    """Print saved view settings."""
    store = get_config_store()
    _echo_json(
        {
            "task_panel": asdict(load_task_panel_config(store)),
            "completion_stats": asdict(load_completion_stats_config(store)),
        }
    )


@config_group.command("set-filter")
@click.argument("query", default="")
def config_set_filter(query: str):
    """Save the task tree filter query."""
    try:
        update_task_panel_config(get_config_store(), TaskPanelConfig(filter=query))
    except TododashError as e:
        _fail(e)
    click.echo(f"Filter set to {query!r}")


@config_group.command("set-stats")
@click.option("--exclude", "-x", multiple=True, help="Label to exclude (repeatable)")
@click.option("--days", type=click.IntRange(min=1), default=None, help="Window size in days")
@click.option("--span", type=click.IntRange(min=1), default=None, help="Moving-average span in days")
def config_set_stats(exclude: tuple[str, ...], days: int | None, span: int | None):
    """Save completion stats settings."""
    store = get_config_store()
    current = load_completion_stats_config(store)
    updated = CompletionStatsConfig(
        excluded_labels=list(exclude) if exclude else current.excluded_labels,
        window_days=days or current.window_days,
        moving_average_days=span or current.moving_average_days,
    )
    try:
        update_completion_stats_config(store, updated)
    except TododashError as e:
        _fail(e)
    _echo_json(asdict(load_completion_stats_config(store)))


def _print_dashboard(data: DashboardData) -> None:
    rate = data.goal_rate
    summary = data.completion_stats.summary
    click.echo(f"=== {data.generated_at:%Y-%m-%d %H:%M} ===")
    click.echo(f"Goal rate:      {rate.percentage}% ({rate.non_milestone_count}/{rate.goal_count})")
    click.echo(f"Remaining work: {data.remaining_work}")
    click.echo(f"Completed:      {summary.latest_count} today, {summary.recent_average:.2f}/day recently")
    for goal in data.dated_goals[:5]:
        click.echo(f"  {classify_deadline(goal.deadline).label:>12}  {goal.summary}")
    click.echo()


@main.command()
@click.option("--interval", type=click.IntRange(min=1), default=None, help="Refresh interval in minutes")
def watch(interval: int | None):
    """Refresh the dashboard periodically."""
    config = load_config()
    repo = get_task_repository(config)
    store = get_config_store()

    scheduler = create_scheduler(
        config,
        refresh=lambda: build_dashboard(config, repo, repo, store),
        on_update=_print_dashboard,
        on_error=lambda e: click.echo(f"Error: {e}", err=True),
        interval_minutes=interval,
    )
    click.echo("Press Ctrl+C to stop")
    try:
        scheduler.start()
    except KeyboardInterrupt:
        click.echo("\nStopped.")


@main.command("task-debug")
@click.option("--filter", "filter_query", default="", help="Todoist filter query")
def task_debug(filter_query: str):
    """Dump raw Todoist task payloads for debugging."""
    config = load_config()
    try:
        raw = get_task_repository(config).fetch_all_raw(filter_query)
    except TododashError as e:
        _fail(e)

    _echo_json(raw)


if __name__ == "__main__":
    main()
