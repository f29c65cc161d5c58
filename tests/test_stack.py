import io

import pytest

from menudrills.stack import Stack, main


def test_new_stack_is_empty():
    stack = Stack(3)
    assert stack.is_empty()
    assert not stack.is_full()
    assert len(stack) == 0


def test_push_pop_is_lifo():
    stack = Stack(5)
    for value in (1, 2, 3):
        stack.push(value)
    assert [stack.pop(), stack.pop(), stack.pop()] == [3, 2, 1]
    assert stack.is_empty()


def test_push_beyond_capacity_raises():
    stack = Stack(2)
    stack.push(1)
    stack.push(2)
    assert stack.is_full()
    with pytest.raises(OverflowError, match="full"):
        stack.push(3)
    assert len(stack) == 2


def test_pop_empty_raises():
    with pytest.raises(IndexError, match="empty"):
        Stack(1).pop()


def test_render_top_first():
    stack = Stack(5)
    stack.push(10)
    stack.push(20)
    assert stack.render() == "|20|\n|10|"


def test_render_empty():
    assert Stack(5).render() == "Stack is empty..."


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        Stack(-1)


def test_main_session(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n7\n1\n8\n5\n2\n3\n0\n"))
    assert main() == 0
    out = capsys.readouterr().out
    assert "|8|\n|7|" in out
    assert "Element is successfully popped" in out
    assert "Stack is not empty..." in out
    assert "Thank you for using the stack.." in out


def test_main_reports_underflow(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n0\n"))
    assert main() == 0
    assert "Stack is empty or underflown..." in capsys.readouterr().out