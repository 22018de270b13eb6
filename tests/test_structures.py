import pytest

from algokit.structures import (
    QUEUE_SIZE,
    BoundedQueue,
    ListNode,
    QueueOverflowError,
    demonstrate_linked_list,
)


def test_demonstrate_linked_list_output(capsys):
    head = demonstrate_linked_list()
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "Linked list demonstration:",
        "Node 1: 100",
        "Node 2: 200",
    ]
    assert head.item == 100
    assert head.next.item == 200
    assert head.next.next is None


def test_list_node_links():
    tail = ListNode(2)
    head = ListNode(1, tail)
    assert head.next is tail
    assert tail.next is None


def test_queue_is_fifo():
    q = BoundedQueue()
    items = [5, 3, 8, 1]
    for x in items:
        q.enqueue(x)
    assert len(q) == len(items)
    assert [q.dequeue() for _ in items] == items
    assert q.is_empty()


def test_head_does_not_remove():
    q = BoundedQueue()
    q.enqueue("a")
    q.enqueue("b")
    assert q.head() == "a"
    assert len(q) == 2


def test_iteration_and_format():
    q = BoundedQueue()
    for x in (1, 2, 3):
        q.enqueue(x)
    assert list(q) == [1, 2, 3]
    assert q.format() == "1 2 3"


def test_default_capacity_overflow():
    q = BoundedQueue()
    for x in range(QUEUE_SIZE):
        q.enqueue(x)
    with pytest.raises(QueueOverflowError):
        q.enqueue(-1)
    assert len(q) == QUEUE_SIZE


def test_capacity_reusable_after_dequeue():
    q = BoundedQueue(2)
    q.enqueue(1)
    q.enqueue(2)
    assert q.dequeue() == 1
    q.enqueue(3)
    assert list(q) == [2, 3]


def test_empty_queue_errors():
    q = BoundedQueue()
    with pytest.raises(IndexError):
        q.dequeue()
    with pytest.raises(IndexError):
        q.head()


def test_invalid_capacity():
    with pytest.raises(ValueError):
        BoundedQueue(0)