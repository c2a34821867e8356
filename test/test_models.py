import pytest
from pydantic import ValidationError

from models import IdGenerator, Priority, PRIORITY_LABELS, Task

def test_task_defaults():
    task = Task(id=1, task="Buy milk", date="2024-01-01")
    assert task.model_dump(mode="json") == {
        "id": 1, "task": "Buy milk", "date": "2024-01-01", "importance": "normal", "completed": False,
    }

@pytest.mark.parametrize("fields", [
    {"task": "", "date": "2024-01-01"},
    {"task": "x", "date": "01/02/2024"},
    {"task": "x", "date": "2024-13-45"},
    {"task": "x", "date": "2024-02-30"},
    {"task": "x", "date": "2024-01-01", "importance": "urgent"},
])
def test_task_rejects_bad_values(fields):
    with pytest.raises(ValidationError):
        Task(id=1, **fields)

def test_every_priority_has_a_label():
    assert set(PRIORITY_LABELS) == set(Priority)

def test_ids_are_unique_within_the_same_millisecond():
    ids = IdGenerator(clock=lambda: 1000)
    assert [ids.next_id() for _ in range(3)] == [1000, 1001, 1002]

def test_ids_follow_the_clock():
    now = iter([1000, 5000])
    ids = IdGenerator(clock=lambda: next(now))
    assert ids.next_id() == 1000
    assert ids.next_id() == 5000

def test_ids_skip_past_existing_ids():
    ids = IdGenerator(clock=lambda: 1000)
    assert ids.next_id([5, 7000, 12]) == 7001

def test_leap_day_is_a_valid_date():
    assert Task(id=1, task="x", date="2024-02-29").date == "2024-02-29"
