import pytest

from bintreekit.linkedqueue import Queue


def test_new_queue_is_empty():
    queue = Queue()
    assert queue.is_empty()
    assert len(queue) == 0


def test_fifo_order():
    queue = Queue()
    for n in (10, 20, 30, 40):
        queue.enqueue(n)
    assert [queue.dequeue() for _ in range(4)] == [10, 20, 30, 40]
    assert queue.is_empty()


def test_dequeue_empty_raises():
    with pytest.raises(IndexError):
        Queue().dequeue()


def test_reuse_after_draining():
    queue = Queue()
    queue.enqueue(1)
    queue.dequeue()
    queue.enqueue(2)
    assert list(queue) == [2]


def test_clear_then_enqueue():
    queue = Queue()
    queue.enqueue(10)
    queue.enqueue(20)
    queue.clear()
    assert queue.is_empty()
    queue.enqueue(100)
    assert list(queue) == [100]
    assert len(queue) == 1


def test_render_empty():
    assert Queue().render() == "Queue Empty!"


def test_render_indexes_from_front():
    queue = Queue()
    queue.enqueue(10)
    queue.enqueue(20)
    assert queue.render().splitlines() == ["[0] 10", "[1] 20"]