# taskflow/task/task_service.py

from __future__ import annotations

from datetime import datetime, timezone
from typing import List, Optional

from taskflow.schemas.task_schema import TaskProjectRef, TaskRead, TaskUpdate


class TaskNotFoundError(Exception):
    pass


def _matches_search(task: TaskRead, search: str) -> bool:
    needle = search.lower()
    if needle in task.title.lower():
        return True
    return bool(task.description) and needle in task.description.lower()


def filter_tasks(
    tasks: List[TaskRead],
    search: Optional[str] = None,
    priority: Optional[str] = None,
    status: Optional[str] = None,
    project: Optional[str] = None,
) -> List[TaskRead]:
    """Apply every non-empty filter; search is a case-insensitive substring
    of title or description, the others are exact matches."""
    result = []
    for task in tasks:
        if search and not _matches_search(task, search):
            continue
        if priority and task.priority.value != priority:
            continue
        if status and task.status.value != status:
            continue
        if project and task.project_id != project:
            continue
        result.append(task)
    return result


def distinct_projects(tasks: List[TaskRead]) -> List[TaskProjectRef]:
    seen = {}
    for task in tasks:
        if task.project_id not in seen:
            seen[task.project_id] = TaskProjectRef(id=task.project_id, name=task.project_name)
    return list(seen.values())


def update_task(tasks: List[TaskRead], task_id: str, data: TaskUpdate) -> TaskRead:
    """Return a copy of the task with the new priority/status applied."""
    task = next((t for t in tasks if t.id == task_id), None)
    if task is None:
        raise TaskNotFoundError(task_id)

    changes = data.model_dump(exclude_none=True)
    changes["updated_at"] = datetime.now(timezone.utc)
    return task.model_copy(update=changes, deep=True)
