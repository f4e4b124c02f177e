import pytest

from todo_tracker import store
from todo_tracker.models import Task
from todo_tracker.store import TaskValidationError


def test_create_defaults(db):
    task = store.create_task(db, name="Buy milk")

    assert task.id
    assert task.name == "Buy milk"
    assert task.description == ""
    assert task.is_completed is False


def test_created_task_is_listed(db):
    task = store.create_task(db, name="Buy milk", description="2%")

    listed = store.find_all(db)
    assert [t.id for t in listed] == [task.id]
    assert listed[0].is_completed is False


def test_create_with_completion_flag(db):
    task = store.create_task(db, name="Already done", is_completed=True)
    assert store.find_by_id(db, task.id).is_completed is True


@pytest.mark.parametrize("name", [None, ""])
def test_create_without_name_fails_and_persists_nothing(db, name):
    with pytest.raises(TaskValidationError):
        store.create_task(db, name=name, description="orphan")

    assert store.find_all(db) == []


def test_find_all_keeps_insertion_order(db):
    names = ["first task", "second task", "third task"]
    for name in names:
        store.create_task(db, name=name)

    assert [t.name for t in store.find_all(db)] == names


def test_find_by_id_unknown(db):
    assert store.find_by_id(db, "does-not-exist") is None


def test_partial_update_changes_only_the_flag(db):
    task = store.create_task(db, name="Buy milk", description="2%")

    updated = store.update_by_id(db, task.id, {"is_completed": True})

    assert updated.is_completed is True
    assert updated.name == "Buy milk"
    assert updated.description == "2%"


def test_full_update(db):
    task = store.create_task(db, name="Buy milk", description="2%")

    updated = store.update_by_id(db, task.id, {"name": "Buy oat milk", "description": "barista"})

    assert (updated.name, updated.description, updated.is_completed) == ("Buy oat milk", "barista", False)


def test_update_ignores_unknown_fields(db):
    task = store.create_task(db, name="Buy milk")

    updated = store.update_by_id(db, task.id, {"id": "hijacked", "colour": "red"})

    assert updated.id == task.id


def test_update_revalidates_name(db):
    task = store.create_task(db, name="Buy milk")

    with pytest.raises(TaskValidationError):
        store.update_by_id(db, task.id, {"name": ""})

    db.expire_all()
    assert store.find_by_id(db, task.id).name == "Buy milk"


def test_update_unknown_id_leaves_collection_alone(db):
    task = store.create_task(db, name="Buy milk")

    assert store.update_by_id(db, "missing", {"name": "Other"}) is None
    assert [(t.id, t.name) for t in store.find_all(db)] == [(task.id, "Buy milk")]


def test_delete_then_not_found(db):
    task = store.create_task(db, name="Buy milk")

    assert store.delete_by_id(db, task.id) is True
    assert store.find_by_id(db, task.id) is None


def test_delete_unknown_id(db):
    store.create_task(db, name="Buy milk")

    assert store.delete_by_id(db, "missing") is False
    assert len(store.find_all(db)) == 1


def test_timestamps_are_timezone_aware():
    task = Task(name="Buy milk")
    assert task.created_at.tzinfo is not None
    assert task.updated_at.tzinfo is not None


def test_update_keeps_listing_order(db):
    first = store.create_task(db, name="first task")
    store.create_task(db, name="second task")

    store.update_by_id(db, first.id, {"is_completed": True})

    assert [t.name for t in store.find_all(db)] == ["first task", "second task"]
