"""Todoist API adapter - HTTP client for task and completion fetching."""

import logging
from datetime import datetime, timedelta

import requests

from tododash.config import Config, load_config
from tododash.core.tasks import CompletedTask, Task
from tododash.ports.errors import RepositoryError, RequestError

logger = logging.getLogger(__name__)

PAGE_LIMIT = 100
# The completed-by-date endpoint rejects long ranges, so fetch in chunks.
MAX_RANGE_DAYS = 30


class TodoistAdapter:
    """
    Todoist API adapter.

    Implements TaskRepository and CompletionStatsRepository protocols.
    Handles auth headers, pagination and error mapping. No business logic -
    just I/O.
    """

    def __init__(self, config: Config | None = None, session: requests.Session | None = None):
        self.config = config or load_config()
        self._session = session or requests.Session()

    def _headers(self) -> dict[str, str]:
        if not self.config.todoist_api_token:
            raise RequestError("No API token. Set TODOIST_API_TOKEN in tododash.conf.")
        return {"Authorization": f"Bearer {self.config.todoist_api_token}"}

    def _request(self, method: str, endpoint: str, params: dict | None = None) -> dict | list | None:
        """Make an authenticated API request, mapping failures to RequestError."""
        headers = self._headers()
        url = f"{self.config.api_base}{endpoint}"
        logger.debug(f"{method} {url} params={params}")
        try:
            resp = self._session.request(
                method,
                url,
                headers=headers,
                params=params,
                timeout=self.config.request_timeout,
            )
            resp.raise_for_status()
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            logger.warning(f"Todoist request failed: {method} {endpoint} -> {status}")
            raise RequestError(f"Todoist request failed: {method} {endpoint}", status) from e
        except requests.RequestException as e:
            logger.warning(f"Todoist unreachable: {e}")
            raise RequestError(f"Todoist unreachable: {e}") from e

        if resp.status_code == 204 or not resp.content:
            return None
        try:
            return resp.json()
        except ValueError as e:
            raise RequestError(f"Invalid JSON from {endpoint}", resp.status_code) from e

    def _paginate(self, endpoint: str, params: dict, items_key: str) -> list[dict]:
        """Follow next_cursor until exhausted."""
        items: list[dict] = []
        cursor = None
        while True:
            page_params = {**params, "limit": PAGE_LIMIT}
            if cursor:
                page_params["cursor"] = cursor
            data = self._request("GET", endpoint, page_params) or {}
            # Older endpoints answer with a bare list
            if isinstance(data, list):
                items.extend(data)
                break
            items.extend(data.get(items_key, []))
            cursor = data.get("next_cursor")
            if not cursor:
                break
        return items

    def fetch_all_raw(self, filter_query: str = "") -> list[dict]:
        """Raw task payloads for a filter query (debugging aid)."""
        query = filter_query.strip()
        if query:
            return self._paginate("/tasks/filter", {"query": query}, "results")
        return self._paginate("/tasks", {}, "results")

    def get_all(self, filter_query: str) -> list[Task]:
        """Fetch every task matching a filter query ("" for all tasks)."""
        tasks = [Task.from_api(t) for t in self.fetch_all_raw(filter_query)]
        logger.debug(f"Fetched {len(tasks)} tasks for filter {filter_query!r}")
        return tasks

    def complete(self, task_id: str) -> None:
        """Close a task."""
        if not task_id or not task_id.strip():
            raise RequestError("Invalid task id")
        self._request("POST", f"/tasks/{task_id}/close")
        logger.info(f"Completed task {task_id}")

    def fetch_completed_tasks(self, since: datetime, until: datetime) -> list[CompletedTask]:
        """
        Fetch completions in [since, until), chunked by MAX_RANGE_DAYS.

        Items are deduplicated by id across chunk boundaries.
        """
        deduped: dict[str, CompletedTask] = {}
        range_start = since
        while range_start < until:
            range_end = min(range_start + timedelta(days=MAX_RANGE_DAYS), until)
            params = {"since": range_start.isoformat(), "until": range_end.isoformat()}
            try:
                items = self._paginate("/tasks/completed/by_completion_date", params, "items")
            except RequestError as e:
                raise RepositoryError(e.message, e.status_code) from e

            for item in items:
                try:
                    task = CompletedTask.from_api(item)
                except (KeyError, ValueError) as e:
                    raise RepositoryError(f"Malformed completed task: {item.get('id')}") from e
                deduped[task.id] = task
            range_start = range_end

        return list(deduped.values())
