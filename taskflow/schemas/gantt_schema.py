# taskflow/schemas/gantt_schema.py

from enum import Enum
from typing import List, Optional
from datetime import date

from pydantic import BaseModel


class TimeScale(str, Enum):
    DAY = "day"
    WEEK = "week"
    MONTH = "month"


class GanttTask(BaseModel):
    id: str
    name: str
    start: date
    end: date
    progress: int = 0
    dependencies: List[str] = []
    assignees: List[str] = []
    color: Optional[str] = None


class GanttProject(BaseModel):
    id: str
    name: str
    tasks: List[GanttTask] = []


class GanttBar(BaseModel):
    task_id: str
    name: str
    left: int
    width: int
    top: int
    progress: int
    color: str


class DependencyEdge(BaseModel):
    from_task: str
    to_task: str
    from_x: int
    from_y: float
    to_x: int
    to_y: float
    path: str


class TimelineTick(BaseModel):
    day: date
    label: str


class GanttLayout(BaseModel):
    scale: TimeScale
    origin: date
    extent: date
    total_days: int
    day_width: int
    row_height: int
    width: int
    height: int
    header: List[TimelineTick]
    bars: List[GanttBar]
    dependencies: List[DependencyEdge]


class GanttView(BaseModel):
    project: GanttProject
    layout: GanttLayout
