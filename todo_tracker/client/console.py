"""Interactive text front end for the task list."""
import argparse
import logging
from typing import Callable, Optional

from .api import API_URL, TaskApiClient
from .controller import TodoController
from .render import render

logger = logging.getLogger(__name__)

HELP = """Commands:
  name <text>    set the task name
  desc <text>    set the task description
  save           add the task, or update the one being edited
  edit <n>       load row n into the form
  toggle <n>     mark row n done / not done
  delete <n>     delete row n
  filter         show or hide finished tasks
  help           show this text
  quit           exit"""


def _row_id(controller: TodoController, arg: str) -> Optional[str]:
    rows = controller.visible_tasks()
    try:
        index = int(arg) - 1
    except ValueError:
        return None
    if 0 <= index < len(rows):
        return rows[index].id
    return None


def handle_command(controller: TodoController, line: str) -> bool:
    """Apply one console command. Returns False when the user asked to quit."""
    command, _, arg = line.strip().partition(" ")
    command = command.lower()

    if command in ("quit", "exit"):
        return False
    if command == "name":
        controller.set_inputs(name=arg)
    elif command == "desc":
        controller.set_inputs(description=arg)
    elif command == "save":
        if not controller.submit() and not controller.state.error:
            print("Name must be at least 4 characters.")
    elif command == "filter":
        controller.toggle_filter()
    elif command in ("edit", "toggle", "delete"):
        task_id = _row_id(controller, arg)
        if task_id is None:
            print(f"No row {arg!r}.")
        elif command == "edit":
            controller.start_edit(task_id)
        elif command == "toggle":
            controller.toggle_completion(task_id)
        else:
            controller.delete(task_id)
    elif command in ("help", ""):
        print(HELP)
    else:
        print(f"Unknown command {command!r}; type 'help'.")
    return True


def run(controller: TodoController, read: Callable[[str], str] = input) -> None:
    controller.load()
    print(render(controller.state))
    while True:
        try:
            line = read("> ")
        except EOFError:
            break
        if not handle_command(controller, line):
            break
        print(render(controller.state))


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(description="Todo Tracker console client")
    parser.add_argument("--url", default=API_URL, help="base URL of the tasks API")
    args = parser.parse_args(argv)

    logger.info("Using API at %s", args.url)
    run(TodoController(TaskApiClient(args.url)))
