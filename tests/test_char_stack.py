import numpy as np
import pytest

from stackkit.core import char_stack as cs
from stackkit.core.char_stack import CharStack, default_char_stack, reverse_string
from stackkit.messages.result import CharStackResult
from stackkit.utils.stack_util import CHAR_STACK_MAX_SIZE

OK = CharStackResult.CHAR_STACK_SUCCESS
INVALID = CharStackResult.CHAR_STACK_ERROR_INVALID_INPUT
OVERFLOW = CharStackResult.CHAR_STACK_ERROR_OVERFLOW
UNDERFLOW = CharStackResult.CHAR_STACK_ERROR_UNDERFLOW


@pytest.fixture(autouse=True)
def _reset_shared_stack():
    cs.char_stack_clear()
    yield
    cs.char_stack_clear()


def test_new_stack_state():
    stack = CharStack()
    assert stack.is_empty()
    assert not stack.is_full()
    assert stack.size() == 0
    assert stack.capacity() == CHAR_STACK_MAX_SIZE == 256


def test_push_pop_lifo():
    stack = CharStack()
    assert stack.push("a") == OK
    assert stack.push("b") == OK
    assert stack.pop() == (OK, "b")
    assert stack.pop() == (OK, "a")
    assert stack.pop() == (UNDERFLOW, "")
    assert stack.size() == 0


def test_peek_is_stable():
    stack = CharStack()
    stack.push("x")
    assert stack.peek() == (OK, "x")
    assert stack.peek() == (OK, "x")
    assert stack.size() == 1


def test_peek_empty():
    assert CharStack().peek() == (UNDERFLOW, "")


@pytest.mark.parametrize("c", [" ", "\t", "~", "A", "0", "!"])
def test_push_accepts_printable(c):
    assert CharStack().push(c) == OK


@pytest.mark.parametrize("c", ["\n", "\x00", "\x7f", "é", "ab", "", None, 65])
def test_push_rejects_invalid(c):
    stack = CharStack()
    assert stack.push(c) == INVALID
    assert stack.size() == 0


def test_invalid_checked_before_capacity():
    stack = CharStack()
    for _ in range(CHAR_STACK_MAX_SIZE):
        assert stack.push("z") == OK
    assert stack.is_full()
    assert stack.push("\n") == INVALID
    assert stack.push("z") == OVERFLOW
    assert stack.size() == CHAR_STACK_MAX_SIZE


def test_pop_and_clear_zero_storage():
    stack = CharStack()
    stack.push("q")
    stack.push("r")
    stack.pop()
    assert stack._elements[1] == 0
    assert stack.clear() == OK
    assert not np.any(stack._elements)
    assert stack.is_empty()


def test_instances_are_independent():
    a = CharStack()
    b = CharStack()
    a.push("a")
    b.reverse_string("hello", 256)
    assert a.peek() == (OK, "a")


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Hello", "olleH"),
        ("", ""),
        ("racecar", "racecar"),
        ("123!@#", "#@!321"),
        ("a\tb c", "c b\ta"),
    ],
)
def test_reverse_string(text, expected):
    assert reverse_string(text, 256) == (OK, expected)
    assert cs.char_stack_is_empty()
    assert cs.char_stack_size() == 0


def test_reverse_output_too_small():
    assert reverse_string("Hello", 3) == (INVALID, "")
    # 5 chars need 6 slots
    assert reverse_string("Hello", 5) == (INVALID, "")
    assert reverse_string("Hello", 6) == (OK, "olleH")


def test_reverse_missing_arguments():
    assert reverse_string(None, 256) == (INVALID, "")
    assert reverse_string("Hello", None) == (INVALID, "")
    assert reverse_string("Hello", 0) == (INVALID, "")


def test_reverse_longer_than_stack_is_overflow():
    text = "x" * (CHAR_STACK_MAX_SIZE + 1)
    assert reverse_string(text, 1024) == (OVERFLOW, "")
    assert cs.char_stack_is_empty()


def test_reverse_full_capacity():
    text = "ab" * (CHAR_STACK_MAX_SIZE // 2)
    result, output = reverse_string(text, CHAR_STACK_MAX_SIZE + 1)
    assert result == OK
    assert output == text[::-1]


def test_reverse_invalid_character_clears_stack():
    assert reverse_string("ab\ncd", 256) == (INVALID, "")
    assert cs.char_stack_is_empty()


def test_reverse_bad_arguments_still_clear_shared_stack():
    cs.char_stack_push("z")
    assert reverse_string(None, 256) == (INVALID, "")
    assert cs.char_stack_size() == 0

    cs.char_stack_push("z")
    assert reverse_string("abc", 0) == (INVALID, "")
    assert cs.char_stack_is_empty()


def test_reverse_clears_prior_contents_of_shared_stack():
    cs.char_stack_push("z")
    assert reverse_string("abc", 256) == (OK, "cba")
    assert cs.char_stack_size() == 0


@pytest.mark.parametrize("text", ["Hello, World!", "The quick brown fox", "A", "12345", "~ \t~"])
def test_reverse_round_trip(text):
    _, once = reverse_string(text, 256)
    _, twice = reverse_string(once, 256)
    assert twice == text


def test_reverse_with_explicit_stack_leaves_shared_alone():
    cs.char_stack_push("k")
    own = CharStack()
    assert reverse_string("xy", 256, stack=own) == (OK, "yx")
    assert cs.char_stack_peek() == (OK, "k")
    assert own.is_empty()


def test_module_functions_use_default_instance():
    assert cs.char_stack_push("m") == OK
    assert default_char_stack().size() == 1
    assert cs.char_stack_peek() == (OK, "m")
    assert not cs.char_stack_is_full()
    assert cs.char_stack_capacity() == CHAR_STACK_MAX_SIZE
    assert cs.char_stack_pop() == (OK, "m")
    assert cs.char_stack_clear() == OK
    assert cs.char_stack_is_empty()
