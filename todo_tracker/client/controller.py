import logging
from typing import Callable, Optional

import requests

from ..schemas.task import TaskRead
from .api import TaskApiClient
from .state import Action, ActionType, TodoState, can_submit, reduce, visible_tasks

logger = logging.getLogger(__name__)

# Failures a call site must turn into a visible message.
REQUEST_ERRORS = (requests.RequestException, ValueError)


class TodoController:
    """Turns user actions into API calls and state transitions.

    Each action fires at most one request and only touches the state once
    that request has finished, except for the completion toggle which
    applies a tentative change first and rolls it back on failure.
    """

    def __init__(self, api: TaskApiClient, state: Optional[TodoState] = None):
        self.api = api
        self.state = state or TodoState()

    def dispatch(self, action_type: ActionType, payload=None) -> TodoState:
        self.state = reduce(self.state, Action(action_type, payload))
        return self.state

    def _fail(self, message: str, exc: Exception) -> None:
        logger.error("%s %s", message, exc)
        self.dispatch(ActionType.REQUEST_FAILED, message)

    def visible_tasks(self):
        return visible_tasks(self.state)

    def can_submit(self) -> bool:
        return can_submit(self.state)

    def load(self) -> None:
        """Fetch the full task list once."""
        self.dispatch(ActionType.FETCH_STARTED)
        try:
            tasks = self.api.list_tasks()
        except REQUEST_ERRORS as exc:
            logger.error("Error fetching tasks: %s", exc)
            self.dispatch(ActionType.FETCH_FAILED, "Failed to load tasks.")
            return
        self.dispatch(ActionType.FETCH_SUCCEEDED, tasks)

    def set_inputs(self, name: Optional[str] = None, description: Optional[str] = None) -> None:
        self.dispatch(ActionType.INPUTS_CHANGED, {"name": name, "description": description})

    def submit(self) -> bool:
        """Create a task, or update the one being edited.

        Returns False without sending anything when the name is too short.
        """
        self.dispatch(ActionType.ERROR_CLEARED)
        if not self.can_submit():
            return False

        state = self.state
        try:
            if state.is_editing:
                task = self.api.update_task(
                    state.editing_id,
                    {"name": state.name_input, "description": state.description_input},
                )
            else:
                task = self.api.create_task(state.name_input, state.description_input)
        except REQUEST_ERRORS as exc:
            self._fail("Error saving task.", exc)
            return False

        self.dispatch(ActionType.TASK_UPDATED if state.is_editing else ActionType.TASK_ADDED, task)
        self.dispatch(ActionType.FORM_RESET)
        return True

    def start_edit(self, task_id: str) -> None:
        self.dispatch(ActionType.EDIT_STARTED, task_id)

    def _optimistic(
        self,
        action_type: ActionType,
        payload,
        request: Callable[[], TaskRead],
        error_message: str,
    ) -> bool:
        """Apply ``action_type`` tentatively, then confirm or roll back.

        The cached list is snapshotted before the tentative change. On
        success the server's record replaces the tentative one; on failure
        the snapshot comes back.
        """
        snapshot = self.state.tasks
        self.dispatch(action_type, payload)
        try:
            task = request()
        except REQUEST_ERRORS as exc:
            self.dispatch(ActionType.TASKS_RESTORED, snapshot)
            self._fail(error_message, exc)
            return False
        self.dispatch(ActionType.TASK_UPDATED, task)
        return True

    def toggle_completion(self, task_id: str) -> bool:
        task = self.state.find(task_id)
        if task is None:
            return False
        return self._optimistic(
            ActionType.COMPLETION_TOGGLED,
            task_id,
            lambda: self.api.update_task(task_id, {"isCompleted": not task.is_completed}),
            "Error toggling task completion.",
        )

    def delete(self, task_id: str) -> bool:
        self.dispatch(ActionType.ERROR_CLEARED)
        try:
            self.api.delete_task(task_id)
        except REQUEST_ERRORS as exc:
            self._fail("Error deleting task.", exc)
            return False
        self.dispatch(ActionType.TASK_DELETED, task_id)
        return True

    def toggle_filter(self) -> None:
        self.dispatch(ActionType.FILTER_TOGGLED)
