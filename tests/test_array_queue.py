import pytest

from structkit.array_queue import ArrayQueue, QueueOverflowError, QueueUnderflowError


def filled(values, capacity=10):
    queue = ArrayQueue(capacity)
    for value in values:
        queue.enqueue(value)
    return queue


def test_fifo_order():
    values = [5, 6, 7]
    queue = filled(values)
    assert [queue.dequeue() for _ in values] == values
    assert queue.is_empty()


def test_peek_does_not_remove():
    queue = filled([11, 12])
    assert queue.peek() == 11
    assert list(queue) == [11, 12]
    assert len(queue) == 2


def test_default_capacity_is_ten():
    queue = filled(range(10), capacity=10)
    assert ArrayQueue().capacity == 10
    assert queue.is_full()


def test_overflow():
    queue = filled(range(3), capacity=3)
    with pytest.raises(QueueOverflowError):
        queue.enqueue(99)
    assert list(queue) == [0, 1, 2]


def test_freed_front_slots_not_reused_until_empty():
    queue = filled(range(3), capacity=3)
    assert queue.dequeue() == 0
    assert queue.is_full()
    with pytest.raises(QueueOverflowError):
        queue.enqueue(99)


def test_emptying_resets_slots():
    queue = filled(range(3), capacity=3)
    for _ in range(3):
        queue.dequeue()
    assert queue.is_empty()
    assert not queue.is_full()
    queue.enqueue(4)
    assert list(queue) == [4]


def test_dequeue_empty_raises():
    with pytest.raises(QueueUnderflowError):
        ArrayQueue().dequeue()


def test_peek_empty_raises():
    with pytest.raises(QueueUnderflowError):
        ArrayQueue().peek()


def test_underflow_is_index_error():
    with pytest.raises(IndexError):
        ArrayQueue().dequeue()


def test_is_empty_and_not_full_initially():
    queue = ArrayQueue(4)
    assert queue.is_empty()
    assert not queue.is_full()


@pytest.mark.parametrize("capacity", [0, -1])
def test_bad_capacity(capacity):
    with pytest.raises(ValueError):
        ArrayQueue(capacity)


def test_display_values():
    queue = filled([5, 7])
    assert queue.display() == "\n5 \t\n7 \t"


def test_display_empty():
    assert ArrayQueue().display() == "\n queue is empty"