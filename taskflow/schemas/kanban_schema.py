# taskflow/schemas/kanban_schema.py

from typing import List, Optional
from datetime import date

from pydantic import BaseModel

from taskflow.schemas.task_schema import Assignee


class BoardTask(BaseModel):
    id: str
    title: str
    description: Optional[str] = None
    priority: str
    # free text: the owning column's name
    status: str
    position: int = 0
    due_date: Optional[date] = None
    assignees: List[Assignee] = []


class Column(BaseModel):
    id: str
    name: str
    position: int
    color: str
    tasks: List[BoardTask] = []


class Board(BaseModel):
    id: str
    name: str
    columns: List[Column] = []


class MoveTaskRequest(BaseModel):
    task_id: str
    from_column_id: str
    to_column_id: str
    # client-side board state; the fixture board is used when omitted
    board: Optional[Board] = None
