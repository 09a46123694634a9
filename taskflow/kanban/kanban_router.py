# taskflow/kanban/kanban_router.py

from fastapi import APIRouter, Depends

from taskflow.auth.session import require_user_id
from taskflow.fixtures import get_board
from taskflow.kanban.kanban_service import move_task
from taskflow.schemas.kanban_schema import Board, MoveTaskRequest

router = APIRouter(
    prefix="/dashboard/kanban",
    tags=["kanban"],
    dependencies=[Depends(require_user_id)],
)


@router.get("", response_model=Board)
def get_kanban_board():
    return get_board()


@router.post("/move", response_model=Board)
def move_kanban_task(data: MoveTaskRequest):
    # nothing is written back: the caller keeps the returned board
    board = data.board if data.board is not None else get_board()
    return move_task(board, data.task_id, data.from_column_id, data.to_column_id)
