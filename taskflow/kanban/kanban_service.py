# taskflow/kanban/kanban_service.py

from __future__ import annotations

import logging
from typing import Optional

from taskflow.schemas.kanban_schema import Board, Column

logger = logging.getLogger("taskflow.kanban")


def _find_column(board: Board, column_id: str) -> Optional[Column]:
    return next((c for c in board.columns if c.id == column_id), None)


def move_task(board: Board, task_id: str, from_column_id: str, to_column_id: str) -> Board:
    """Move a task to the end of another column.

    Returns a new board; ``board`` itself is left untouched. Unknown column or
    task ids leave the board as it was.
    """
    if from_column_id == to_column_id:
        return board

    moved = board.model_copy(deep=True)
    source = _find_column(moved, from_column_id)
    target = _find_column(moved, to_column_id)
    if source is None or target is None:
        logger.debug(
            "kanban_move_ignored",
            extra={"reason": "column_not_found", "from": from_column_id, "to": to_column_id},
        )
        return board

    index = next((i for i, t in enumerate(source.tasks) if t.id == task_id), None)
    if index is None:
        logger.debug(
            "kanban_move_ignored",
            extra={"reason": "task_not_found", "task_id": task_id, "from": from_column_id},
        )
        return board

    task = source.tasks.pop(index)
    task.status = target.name
    task.position = len(target.tasks)
    target.tasks.append(task)

    logger.info(
        "kanban_task_moved",
        extra={"task_id": task_id, "from": from_column_id, "to": to_column_id},
    )
    return moved
