import pytest

from aclib.structures.linked_list import LinkedList


def test_stack_operation():
    stack = LinkedList()
    assert len(stack) == 0
    with pytest.raises(IndexError):
        stack.pop()
    with pytest.raises(IndexError):
        stack.peek_head()
    with pytest.raises(IndexError):
        stack.peek_tail()
    stack.push(5)
    assert len(stack) == 1
    assert stack.peek_head() == 5
    assert stack.peek_tail() == 5
    assert stack.pop() == 5
    assert len(stack) == 0
    stack.push(2)
    stack.push(3)
    tail1 = stack.peek_tail()
    stack.push(4)
    tail2 = stack.peek_tail()
    assert tail1 == tail2
    assert stack.peek_head() == 4
    assert stack.peek_tail() == 2
    assert stack.pop() == 4
    assert stack.pop() == 3
    assert stack.pop() == 2
    with pytest.raises(IndexError):
        stack.pop()
    with pytest.raises(IndexError):
        stack.peek_head()
    stack.push(10)
    assert stack.peek_head() == 10
    assert stack.peek_tail() == 10
    assert stack.pop() == 10


def test_queue_operation():
    queue = LinkedList()
    assert len(queue) == 0
    with pytest.raises(IndexError):
        queue.dequeue()
    with pytest.raises(IndexError):
        queue.peek_tail()
    queue.enqueue("Rust")
    assert len(queue) == 1
    assert queue.peek_tail() == "Rust"
    assert queue.dequeue() == "Rust"
    assert len(queue) == 0
    for word in ["The", "Programing", "Language", "Rust"]:
        queue.enqueue(word)
    assert queue.peek_tail() == "Rust"
    assert queue.dequeue() == "The"
    assert queue.dequeue() == "Programing"
    assert queue.dequeue() == "Language"
    assert queue.dequeue() == "Rust"
    with pytest.raises(IndexError):
        queue.dequeue()
    with pytest.raises(IndexError):
        queue.peek_tail()
    queue.enqueue("a")
    assert queue.peek_head() == "a"
    assert queue.peek_tail() == "a"
    assert queue.dequeue() == "a"


def test_is_empty():
    ll = LinkedList()
    assert ll.is_empty() is True
    ll.push(1)
    assert ll.is_empty() is False
    ll.pop()
    assert ll.is_empty() is True


def test_extend():
    ll = LinkedList()
    ll.push("r")
    ll.extend(["u", "s", "t"])
    assert list(ll) == ["r", "u", "s", "t"]
    assert ll.dequeue() == "r"
    assert ll.dequeue() == "u"
    assert ll.dequeue() == "s"
    assert ll.dequeue() == "t"
    with pytest.raises(IndexError):
        ll.dequeue()


def test_iter_order_after_push():
    ll = LinkedList()
    for c in "rust":
        ll.push(c)
    assert list(ll) == ["t", "s", "u", "r"]
    assert len(ll) == 4


def test_append1():
    ll1 = LinkedList()
    ll1.enqueue(1)
    ll1.enqueue(2)
    ll2 = LinkedList()
    ll2.enqueue(3)
    ll2.enqueue(4)
    assert len(ll1) == 2
    assert len(ll2) == 2
    ll1.append(ll2)
    with pytest.raises(IndexError):
        ll2.dequeue()
    assert len(ll2) == 0
    assert ll1.peek_tail() == 4
    assert len(ll1) == 4
    assert list(ll1) == [1, 2, 3, 4]
    assert ll1.dequeue() == 1
    assert ll1.dequeue() == 2
    assert ll1.dequeue() == 3
    assert ll1.dequeue() == 4
    with pytest.raises(IndexError):
        ll1.dequeue()


def test_append_empty_other():
    ll1 = LinkedList()
    ll1.enqueue(1)
    ll1.enqueue(2)
    ll2 = LinkedList()
    ll1.append(ll2)
    with pytest.raises(IndexError):
        ll2.dequeue()
    assert len(ll1) == 2
    assert len(ll2) == 0
    assert ll1.dequeue() == 1
    assert ll1.dequeue() == 2
    with pytest.raises(IndexError):
        ll1.dequeue()


def test_append_to_empty():
    ll1 = LinkedList()
    ll2 = LinkedList()
    ll2.enqueue(3)
    ll2.enqueue(4)
    ll1.append(ll2)
    with pytest.raises(IndexError):
        ll2.dequeue()
    assert len(ll1) == 2
    assert len(ll2) == 0
    assert ll1.dequeue() == 3
    assert ll1.dequeue() == 4
    with pytest.raises(IndexError):
        ll1.dequeue()


def test_append_both_empty():
    ll1 = LinkedList()
    ll2 = LinkedList()
    ll1.append(ll2)
    assert len(ll1) == 0
    assert len(ll2) == 0
    with pytest.raises(IndexError):
        ll1.dequeue()
    with pytest.raises(IndexError):
        ll2.dequeue()


def test_enqueue_after_append_goes_to_end():
    ll1 = LinkedList()
    ll1.enqueue(1)
    ll2 = LinkedList()
    ll2.enqueue(2)
    ll1.append(ll2)
    ll1.enqueue(3)
    ll2.enqueue(9)
    assert list(ll1) == [1, 2, 3]
    assert list(ll2) == [9]