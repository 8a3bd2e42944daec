from bintree.core.queue import WorkQueue
import pytest


def test_work_queue_fifo():
    queue = WorkQueue()
    assert queue.is_empty() is True
    queue.offer(1).offer(2)
    queue.offer(3)
    assert len(queue) == 3
    assert queue.peek() == 1
    assert [queue.poll(), queue.poll(), queue.poll()] == [1, 2, 3]
    assert queue.is_empty() is True


def test_work_queue_initial_items():
    queue = WorkQueue(["a", "b"])
    assert len(queue) == 2
    assert queue.poll() == "a"
    queue.clear()
    assert queue.is_empty() is True


def test_work_queue_poll_empty():
    queue = WorkQueue()
    with pytest.raises(IndexError):
        queue.poll()
    with pytest.raises(IndexError):
        queue.peek()


def test_work_queue_falsy_items():
    """None and other falsy values are still work items"""
    queue = WorkQueue()
    queue.offer(None)
    queue.offer(0)
    assert queue.is_empty() is False
    assert queue.poll() is None
    assert queue.poll() == 0
