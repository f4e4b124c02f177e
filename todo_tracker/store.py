"""Task store operations.

Every function takes an open session and touches at most one row, so the
only atomicity on offer is the database's per-statement guarantee.
"""
import logging
from typing import Any, List, Mapping, Optional

from sqlalchemy.orm import Session

from .models import Task
from .models.task import utcnow
from .validation import validate_task

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("name", "description", "is_completed")


class TaskValidationError(ValueError):
    """Raised when a task would be written without its required fields."""

    def __init__(self, errors: List[str]):
        super().__init__("; ".join(errors))
        self.errors = errors


def _check(fields: Mapping[str, Any]) -> None:
    result = validate_task(fields)
    if not result.ok:
        raise TaskValidationError(result.errors)


def create_task(
    db: Session,
    name: Optional[str],
    description: Optional[str] = None,
    is_completed: bool = False,
) -> Task:
    fields = {"name": name, "description": description or "", "is_completed": is_completed}
    _check(fields)

    task = Task(**fields)
    db.add(task)
    db.commit()
    db.refresh(task)
    logger.debug("Created task %s", task.id)
    return task


def find_all(db: Session) -> List[Task]:
    """Return every task in insertion order."""
    return db.query(Task).order_by(Task.created_at).all()


def find_by_id(db: Session, task_id: str) -> Optional[Task]:
    return db.get(Task, task_id)


def update_by_id(db: Session, task_id: str, fields: Mapping[str, Any]) -> Optional[Task]:
    """Replace whichever updatable fields are present in ``fields``.

    Returns None when no task has ``task_id``. The merged record is validated
    before anything is written.
    """
    task = find_by_id(db, task_id)
    if task is None:
        return None

    changes = {key: value for key, value in fields.items() if key in UPDATABLE_FIELDS}
    if "description" in changes and changes["description"] is None:
        changes["description"] = ""

    merged = {key: getattr(task, key) for key in UPDATABLE_FIELDS}
    merged.update(changes)
    _check(merged)

    for key, value in changes.items():
        setattr(task, key, value)
    task.updated_at = utcnow()

    db.commit()
    db.refresh(task)
    logger.debug("Updated task %s: %s", task_id, sorted(changes))
    return task


def delete_by_id(db: Session, task_id: str) -> bool:
    task = find_by_id(db, task_id)
    if task is None:
        return False

    db.delete(task)
    db.commit()
    logger.debug("Deleted task %s", task_id)
    return True
