# taskflow/gantt/gantt_layout.py

"""Timeline layout for the Gantt chart.

Turns a list of dated tasks into pixel geometry: a shared origin and extent,
one bar per task row, Bézier paths for dependency arrows and the header ticks
for the selected time scale.
"""
from __future__ import annotations

import calendar
import logging
import math
from datetime import date, timedelta
from typing import List, Optional, Tuple

from taskflow.schemas.gantt_schema import (
    DependencyEdge,
    GanttBar,
    GanttLayout,
    GanttTask,
    TimelineTick,
    TimeScale,
)

logger = logging.getLogger("taskflow.gantt")

MARGIN_DAYS = 2
ROW_HEIGHT = 50
DEFAULT_COLOR = "#4F46E5"

DAY_WIDTHS = {
    TimeScale.DAY: 40,
    TimeScale.WEEK: 20,
    TimeScale.MONTH: 10,
}

MONTH_ABBREVIATIONS = [
    "janv.", "févr.", "mars", "avr.", "mai", "juin",
    "juil.", "août", "sept.", "oct.", "nov.", "déc.",
]


class GanttLayoutError(Exception):
    pass


def _fmt(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else str(value)


def _add_month(day: date) -> date:
    year = day.year + day.month // 12
    month = day.month % 12 + 1
    last = calendar.monthrange(year, month)[1]
    return day.replace(year=year, month=month, day=min(day.day, last))


def _find_task(tasks: List[GanttTask], task_id: str) -> Optional[Tuple[int, GanttTask]]:
    for index, task in enumerate(tasks):
        if task.id == task_id:
            return index, task
    return None


def format_tick(day: date, scale: TimeScale) -> str:
    if scale == TimeScale.DAY:
        return f"{day.day} {MONTH_ABBREVIATIONS[day.month - 1]}"
    if scale == TimeScale.WEEK:
        # weekday of the 1st with Sunday = 0
        first_weekday = (day.replace(day=1).weekday() + 1) % 7
        return f"S{math.ceil((day.day + first_weekday) / 7)}"
    return f"{MONTH_ABBREVIATIONS[day.month - 1]} {day.year}"


def timeline_header(origin: date, extent: date, scale: TimeScale) -> List[TimelineTick]:
    ticks = []
    current = origin
    while current <= extent:
        ticks.append(TimelineTick(day=current, label=format_tick(current, scale)))
        if scale == TimeScale.DAY:
            current += timedelta(days=1)
        elif scale == TimeScale.WEEK:
            current += timedelta(days=7)
        else:
            current = _add_month(current)
    return ticks


def timeline_bounds(tasks: List[GanttTask]) -> Tuple[date, date]:
    if not tasks:
        raise GanttLayoutError("Cannot lay out an empty task list")

    origin = min(t.start for t in tasks) - timedelta(days=MARGIN_DAYS)
    extent = max(t.end for t in tasks) + timedelta(days=MARGIN_DAYS)
    return origin, extent


def dependency_edges(
    tasks: List[GanttTask],
    origin: date,
    day_width: int,
    row_height: int = ROW_HEIGHT,
) -> List[DependencyEdge]:
    edges = []
    for task in tasks:
        for dep_id in task.dependencies:
            found_from = _find_task(tasks, dep_id)
            found_to = _find_task(tasks, task.id)
            if found_from is None or found_to is None:
                logger.debug("gantt_dependency_skipped", extra={"task_id": task.id, "dependency": dep_id})
                continue

            from_index, predecessor = found_from
            to_index, successor = found_to

            from_x = (predecessor.end - origin).days * day_width
            to_x = (successor.start - origin).days * day_width
            from_y = from_index * row_height + row_height / 2
            to_y = to_index * row_height + row_height / 2
            mid_x = (from_x + to_x) / 2

            path = (
                f"M {_fmt(from_x)} {_fmt(from_y)} "
                f"C {_fmt(mid_x)} {_fmt(from_y)}, {_fmt(mid_x)} {_fmt(to_y)}, "
                f"{_fmt(to_x)} {_fmt(to_y)}"
            )
            edges.append(
                DependencyEdge(
                    from_task=predecessor.id,
                    to_task=successor.id,
                    from_x=from_x,
                    from_y=from_y,
                    to_x=to_x,
                    to_y=to_y,
                    path=path,
                )
            )
    return edges


def compute_layout(tasks: List[GanttTask], scale: TimeScale = TimeScale.DAY) -> GanttLayout:
    origin, extent = timeline_bounds(tasks)
    day_width = DAY_WIDTHS[scale]
    total_days = (extent - origin).days

    bars = [
        GanttBar(
            task_id=task.id,
            name=task.name,
            left=(task.start - origin).days * day_width,
            width=(task.end - task.start).days * day_width,
            top=index * ROW_HEIGHT,
            progress=task.progress,
            color=task.color or DEFAULT_COLOR,
        )
        for index, task in enumerate(tasks)
    ]

    return GanttLayout(
        scale=scale,
        origin=origin,
        extent=extent,
        total_days=total_days,
        day_width=day_width,
        row_height=ROW_HEIGHT,
        width=total_days * day_width,
        height=len(tasks) * ROW_HEIGHT,
        header=timeline_header(origin, extent, scale),
        bars=bars,
        dependencies=dependency_edges(tasks, origin, day_width),
    )
