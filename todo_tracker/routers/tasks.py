import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from .. import store
from ..database import get_db
from ..schemas.task import TaskCreate, TaskDeleted, TaskRead, TaskUpdate

logger = logging.getLogger(__name__)

router = APIRouter()


def _get_update_data(task_update: TaskUpdate) -> dict:
    return task_update.model_dump(exclude_unset=True)


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Task not found")


def _failed(message: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=message)


@router.get("", response_model=List[TaskRead])
@router.get("/", response_model=List[TaskRead], include_in_schema=False)
def get_tasks(db: Session = Depends(get_db)):
    """Return every task."""
    try:
        return store.find_all(db)
    except Exception:
        logger.exception("Error fetching tasks")
        raise _failed("Failed to fetch tasks")


@router.post("", response_model=TaskRead, status_code=status.HTTP_201_CREATED)
@router.post("/", response_model=TaskRead, status_code=status.HTTP_201_CREATED, include_in_schema=False)
def create_task(task: TaskCreate, db: Session = Depends(get_db)):
    """Create a task; ``isCompleted`` defaults to false."""
    try:
        return store.create_task(
            db,
            name=task.name,
            description=task.description,
            is_completed=False if task.is_completed is None else task.is_completed,
        )
    except Exception:
        logger.exception("Error creating task")
        raise _failed("Failed to create task")


@router.get("/{task_id}", response_model=TaskRead)
def get_task(task_id: str, db: Session = Depends(get_db)):
    try:
        task = store.find_by_id(db, task_id)
    except Exception:
        logger.exception("Error fetching task %s", task_id)
        raise _failed("Failed to fetch task")

    if task is None:
        raise _not_found()
    return task


@router.patch("/{task_id}", response_model=TaskRead)
def update_task(task_id: str, task_update: TaskUpdate, db: Session = Depends(get_db)):
    """Update any subset of name, description and completion flag."""
    try:
        task = store.update_by_id(db, task_id, _get_update_data(task_update))
    except Exception:
        logger.exception("Error updating task %s", task_id)
        raise _failed("Failed to update task")

    if task is None:
        raise _not_found()
    return task


@router.put("/{task_id}", response_model=TaskRead)
def replace_task(task_id: str, task_update: TaskUpdate, db: Session = Depends(get_db)):
    return update_task(task_id=task_id, task_update=task_update, db=db)


@router.delete("/{task_id}", response_model=TaskDeleted)
def delete_task(task_id: str, db: Session = Depends(get_db)):
    try:
        deleted = store.delete_by_id(db, task_id)
    except Exception:
        logger.exception("Error deleting task %s", task_id)
        raise _failed("Failed to delete task")

    if not deleted:
        raise _not_found()
    return TaskDeleted()
