import pytest

from nodekit.queue import MAX_QUEUE, Queue, QueueEmptyError, QueueFullError


@pytest.fixture
def filled():
    queue = Queue()
    for value in (10, 20, 30, 40):
        queue.enqueue(value)
    return queue


def test_initial_state_is_empty():
    queue = Queue()
    assert queue.is_empty()
    assert str(queue) == "Queue is empty"


def test_enqueue_shows_oldest_first():
    queue = Queue()
    queue.enqueue(10)
    assert str(queue) == "[10]"
    queue.enqueue(20)
    assert str(queue) == "[10]->[20]"
    queue.enqueue(30)
    assert str(queue) == "[10]->[20]->[30]"
    queue.enqueue(40)
    assert str(queue) == "[10]->[20]->[30]->[40]"


def test_dequeue_in_arrival_order(filled):
    assert filled.dequeue() == 10
    assert str(filled) == "[20]->[30]->[40]"
    assert filled.dequeue() == 20
    assert str(filled) == "[30]->[40]"
    assert filled.dequeue() == 30
    assert str(filled) == "[40]"
    assert filled.dequeue() == 40
    assert str(filled) == "Queue is empty"


def test_dequeue_empty_raises(filled):
    for _ in range(4):
        filled.dequeue()
    with pytest.raises(QueueEmptyError):
        filled.dequeue()


def test_default_capacity_and_full():
    queue = Queue()
    assert queue.capacity == MAX_QUEUE
    for value in range(MAX_QUEUE):
        assert not queue.is_full()
        queue.enqueue(value)
    assert queue.is_full()
    with pytest.raises(QueueFullError):
        queue.enqueue(999)
    assert len(queue) == MAX_QUEUE
    assert list(queue) == list(range(MAX_QUEUE))


def test_full_queue_accepts_after_dequeue():
    queue = Queue(capacity=2)
    queue.enqueue(1)
    queue.enqueue(2)
    assert queue.dequeue() == 1
    queue.enqueue(3)
    assert list(queue) == [2, 3]


def test_invalid_capacity():
    with pytest.raises(ValueError):
        Queue(capacity=0)


def test_length_and_iteration(filled):
    assert len(filled) == 4
    assert list(filled) == [10, 20, 30, 40]