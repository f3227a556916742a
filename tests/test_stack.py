import io

import pytest

from ftkit.stack import (
    Stack,
    StackNode,
    abort_with_error,
    is_error_duplicate,
    is_error_syntax,
)


def _walk(stack):
    node = stack.head
    nodes = []
    while node is not None:
        nodes.append(node)
        node = node.next
    return nodes


def test_append_keeps_order():
    stack = Stack()
    for value in [4, 3, 2, 1]:
        stack.append(value)
    assert list(stack) == [4, 3, 2, 1]
    assert len(stack) == 4


def test_links_are_consistent():
    stack = Stack([5, -1, 9])
    nodes = _walk(stack)
    assert nodes[0].prev is None
    assert stack.tail is nodes[-1]
    for earlier, later in zip(nodes, nodes[1:]):
        assert later.prev is earlier


def test_append_returns_node():
    stack = Stack()
    node = stack.append(7)
    assert isinstance(node, StackNode)
    assert node.value == 7
    assert stack.head is node


def test_contains():
    stack = Stack([1, 2, 3])
    assert stack.contains(2)
    assert not stack.contains(4)


def test_clear_empties_and_zeroes():
    stack = Stack([10, 20])
    nodes = _walk(stack)
    stack.clear()
    assert len(stack) == 0
    assert list(stack) == []
    assert [node.value for node in nodes] == [0, 0]


def test_empty_stack_length():
    assert len(Stack()) == 0


@pytest.mark.parametrize("text", ["0", "42", "-5", "+17", "007"])
def test_valid_syntax(text):
    assert is_error_syntax(text) is False


@pytest.mark.parametrize("text", ["", "+", "-", "--1", "+-2", "1a", "a1", " 1", "1.5", "-"])
def test_invalid_syntax(text):
    assert is_error_syntax(text) is True


def test_duplicate_in_none_stack():
    assert is_error_duplicate(None, 3) is False


def test_duplicate_detected():
    stack = Stack([3, 8])
    assert is_error_duplicate(stack, 8) is True
    assert is_error_duplicate(stack, 9) is False


def test_abort_with_error():
    stack = Stack([1, 2])
    out = io.StringIO()
    with pytest.raises(SystemExit) as excinfo:
        abort_with_error(stack, out)
    assert excinfo.value.code == 1
    assert out.getvalue() == "Error\n"
    assert len(stack) == 0


def test_abort_with_no_stack():
    out = io.StringIO()
    with pytest.raises(SystemExit) as excinfo:
        abort_with_error(None, out)
    assert excinfo.value.code == 1
    assert out.getvalue() == "Error\n"