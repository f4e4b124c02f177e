"""Client-side view state.

``TodoState`` is immutable; the only way to get a new one is ``reduce``,
which maps ``(state, action)`` to the next state without side effects.
"""
from enum import Enum
from typing import Any, Callable, Dict, NamedTuple, Optional, Tuple

from pydantic import BaseModel

from ..schemas.task import TaskRead

MIN_NAME_LENGTH = 4


class ActionType(str, Enum):
    FETCH_STARTED = "fetch-started"
    FETCH_SUCCEEDED = "fetch-succeeded"
    FETCH_FAILED = "fetch-failed"
    TASK_ADDED = "task-added"
    TASK_UPDATED = "task-updated"
    TASK_DELETED = "task-deleted"
    EDIT_STARTED = "edit-started"
    FILTER_TOGGLED = "filter-toggled"
    INPUTS_CHANGED = "inputs-changed"
    FORM_RESET = "form-reset"
    REQUEST_FAILED = "request-failed"
    ERROR_CLEARED = "error-cleared"
    COMPLETION_TOGGLED = "completion-toggled"
    TASKS_RESTORED = "tasks-restored"


class Action(NamedTuple):
    type: ActionType
    payload: Any = None


class TodoState(BaseModel):
    name_input: str = ""
    description_input: str = ""
    editing_id: Optional[str] = None
    tasks: Tuple[TaskRead, ...] = ()
    is_loading: bool = True
    error: Optional[str] = None
    show_finished: bool = True

    class Config:
        frozen = True

    @property
    def is_editing(self) -> bool:
        return self.editing_id is not None

    def find(self, task_id: str) -> Optional[TaskRead]:
        return next((task for task in self.tasks if task.id == task_id), None)


def _replace_task(tasks: Tuple[TaskRead, ...], updated: TaskRead) -> Tuple[TaskRead, ...]:
    return tuple(updated if task.id == updated.id else task for task in tasks)


def _fetch_started(state: TodoState, payload: Any) -> TodoState:
    return state.model_copy(update={"is_loading": True, "error": None})


def _fetch_succeeded(state: TodoState, payload: Any) -> TodoState:
    return state.model_copy(update={"is_loading": False, "tasks": tuple(payload)})


def _fetch_failed(state: TodoState, payload: Any) -> TodoState:
    return state.model_copy(update={"is_loading": False, "tasks": (), "error": payload})


def _task_added(state: TodoState, payload: TaskRead) -> TodoState:
    return state.model_copy(update={"tasks": state.tasks + (payload,)})


def _task_updated(state: TodoState, payload: TaskRead) -> TodoState:
    return state.model_copy(update={"tasks": _replace_task(state.tasks, payload)})


def _form_reset(state: TodoState, payload: Any) -> TodoState:
    return state.model_copy(update={"name_input": "", "description_input": "", "editing_id": None})


def _task_deleted(state: TodoState, payload: str) -> TodoState:
    return state.model_copy(update={"tasks": tuple(t for t in state.tasks if t.id != payload)})


def _edit_started(state: TodoState, payload: str) -> TodoState:
    task = state.find(payload)
    if task is None:
        return state
    return state.model_copy(update={
        "name_input": task.name,
        "description_input": task.description,
        "editing_id": task.id,
    })


def _filter_toggled(state: TodoState, payload: Any) -> TodoState:
    return state.model_copy(update={"show_finished": not state.show_finished})


def _inputs_changed(state: TodoState, payload: Dict[str, str]) -> TodoState:
    update = {}
    if payload.get("name") is not None:
        update["name_input"] = payload["name"]
    if payload.get("description") is not None:
        update["description_input"] = payload["description"]
    return state.model_copy(update=update)


def _request_failed(state: TodoState, payload: str) -> TodoState:
    return state.model_copy(update={"error": payload})


def _error_cleared(state: TodoState, payload: Any) -> TodoState:
    return state.model_copy(update={"error": None})


def _completion_toggled(state: TodoState, payload: str) -> TodoState:
    task = state.find(payload)
    if task is None:
        return state
    flipped = task.model_copy(update={"is_completed": not task.is_completed})
    return state.model_copy(update={"tasks": _replace_task(state.tasks, flipped)})


def _tasks_restored(state: TodoState, payload: Tuple[TaskRead, ...]) -> TodoState:
    return state.model_copy(update={"tasks": tuple(payload)})


_REDUCERS: Dict[ActionType, Callable[[TodoState, Any], TodoState]] = {
    ActionType.FETCH_STARTED: _fetch_started,
    ActionType.FETCH_SUCCEEDED: _fetch_succeeded,
    ActionType.FETCH_FAILED: _fetch_failed,
    ActionType.TASK_ADDED: _task_added,
    ActionType.TASK_UPDATED: _task_updated,
    ActionType.TASK_DELETED: _task_deleted,
    ActionType.EDIT_STARTED: _edit_started,
    ActionType.FILTER_TOGGLED: _filter_toggled,
    ActionType.INPUTS_CHANGED: _inputs_changed,
    ActionType.FORM_RESET: _form_reset,
    ActionType.REQUEST_FAILED: _request_failed,
    ActionType.ERROR_CLEARED: _error_cleared,
    ActionType.COMPLETION_TOGGLED: _completion_toggled,
    ActionType.TASKS_RESTORED: _tasks_restored,
}


def reduce(state: TodoState, action: Action) -> TodoState:
    return _REDUCERS[action.type](state, action.payload)


def visible_tasks(state: TodoState) -> Tuple[TaskRead, ...]:
    """Tasks the list shows: all of them, or only open ones when finished are hidden."""
    return tuple(t for t in state.tasks if state.show_finished or not t.is_completed)


def can_submit(state: TodoState) -> bool:
    return len(state.name_input.strip()) >= MIN_NAME_LENGTH
