from .state import TodoState, can_submit, visible_tasks


def _checkbox(checked: bool) -> str:
    return "[x]" if checked else "[ ]"


def render(state: TodoState) -> str:
    """Render the whole page as plain text.

    Visible rows are numbered from 1; those numbers are what the console
    commands refer to.
    """
    lines = ["Your TODO", ""]

    lines.append("Edit Todo" if state.is_editing else "Add a Todo")
    lines.append(f"  Name:        {state.name_input}")
    lines.append(f"  Description: {state.description_input}")
    button = "Update" if state.is_editing else "Save"
    lines.append(f"  <{button}>" if can_submit(state) else f"  <{button}> (disabled)")
    lines.append("")

    lines.append(f"{_checkbox(state.show_finished)} Show Finished")
    lines.append("")
    lines.append("Your Todos")

    if state.error:
        lines.append(f"! {state.error}")

    if state.is_loading:
        lines.append("  Loading...")
        return "\n".join(lines)

    if not state.tasks:
        lines.append("  No Todos to display")

    for number, task in enumerate(visible_tasks(state), start=1):
        name = task.name or "Unnamed Task"
        lines.append(f"  {number}. {_checkbox(task.is_completed)} {name}: {task.description}")

    return "\n".join(lines)
