import pytest

from perpustakaan.containers import Queue, Stack
from perpustakaan.linked import DataType


@pytest.fixture
def str_queue():
    queue = Queue(DataType.STRING)
    for name in ["ani", "budi", "citra"]:
        queue.enqueue(name)
    return queue


def test_queue_starts_empty():
    queue = Queue(DataType.INT)
    assert queue.is_empty()
    assert len(queue) == 0


def test_queue_fifo_order(str_queue):
    assert [str_queue.dequeue() for _ in range(3)] == ["ani", "budi", "citra"]
    assert str_queue.is_empty()


def test_queue_iterates_front_to_rear(str_queue):
    assert list(str_queue) == ["ani", "budi", "citra"]
    assert len(str_queue) == 3


def test_queue_front_and_rear(str_queue):
    assert str_queue.front() == "ani"
    assert str_queue.rear() == "citra"
    assert len(str_queue) == 3


def test_queue_front_rear_empty_return_none():
    queue = Queue(DataType.INT)
    assert queue.front() is None
    assert queue.rear() is None


def test_queue_int_values():
    queue = Queue(DataType.INT)
    queue.enqueue(5)
    queue.enqueue(7)
    assert queue.front() == 5
    assert queue.rear() == 7
    assert queue.dequeue() == 5
    assert list(queue) == [7]


def test_queue_dequeue_empty_raises():
    queue = Queue(DataType.STRING)
    with pytest.raises(IndexError):
        queue.dequeue()


def test_queue_rejects_wrong_type():
    queue = Queue(DataType.INT)
    with pytest.raises(TypeError):
        queue.enqueue("x")
    assert queue.is_empty()


def test_queue_clear(str_queue):
    str_queue.clear()
    assert str_queue.is_empty()
    assert len(str_queue) == 0


def test_queue_format_empty():
    assert Queue(DataType.STRING).format() == "List Kosong\n"


def test_queue_format_strings(str_queue):
    assert str_queue.format() == "ani, budi, citra\n\n"


def test_queue_format_ints():
    queue = Queue(DataType.INT)
    queue.enqueue(1)
    queue.enqueue(2)
    assert queue.format() == "1, 2\n"


def test_queue_data_type():
    assert Queue(DataType.STRING).data_type is DataType.STRING


def test_stack_lifo_order():
    stack = Stack(DataType.STRING)
    for entry in ["a", "b", "c"]:
        stack.push(entry)
    assert [stack.pop() for _ in range(3)] == ["c", "b", "a"]
    assert stack.is_empty()


def test_stack_iterates_top_to_bottom():
    stack = Stack(DataType.INT)
    for value in [1, 2, 3]:
        stack.push(value)
    assert list(stack) == [3, 2, 1]
    assert len(stack) == 3


def test_stack_top_does_not_remove():
    stack = Stack(DataType.INT)
    stack.push(10)
    stack.push(20)
    assert stack.top() == 20
    assert len(stack) == 2


def test_stack_top_empty_returns_none():
    assert Stack(DataType.STRING).top() is None


def test_stack_pop_empty_raises():
    with pytest.raises(IndexError):
        Stack(DataType.INT).pop()


def test_stack_rejects_wrong_type():
    stack = Stack(DataType.STRING)
    with pytest.raises(TypeError):
        stack.push(3)
    assert stack.is_empty()


def test_stack_clear():
    stack = Stack(DataType.INT)
    stack.push(1)
    stack.push(2)
    stack.clear()
    assert stack.is_empty()
    assert stack.top() is None


def test_stack_format():
    stack = Stack(DataType.STRING)
    assert stack.format() == "List Kosong\n"
    stack.push("x")
    stack.push("y")
    assert stack.format() == "y, x\n\n"


def test_stack_push_pop_round_trip():
    stack = Stack(DataType.STRING)
    stack.push("tambah|ani|buku|0")
    assert stack.pop() == "tambah|ani|buku|0"
    assert stack.is_empty()