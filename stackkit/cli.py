from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from stackkit.core import char_stack as char_stack_mod
from stackkit.core import int_stack as int_stack_mod
from stackkit.core.char_stack import CharStack
from stackkit.core.int_stack import IntStack
from stackkit.messages.result import (
    CharStackResult,
    StackError,
    StackResult,
    char_stack_error_string,
    check,
    stack_error_string,
)
from stackkit.utils.log_util import attach_main_logger, setup_main_logger
from stackkit.utils.stack_util import CHAR_STACK_MAX_SIZE

DEMO_STACK_CAPACITY = 10
DEMO_VALUES = (25, 50, 75, 100, 125)
OUTPUT_BUFFER_SIZE = 512
REVERSE_TEST_CASES = (
    "Hello",
    "World!",
    "12345",
    "A man a plan a canal Panama",
    "racecar",
    "The quick brown fox",
)
COMMANDS = "push, pop, peek, size, clear, quit"

logger = logging.getLogger(__name__)


def _yes_no(flag: bool) -> str:
    return "Yes" if flag else "No"


def _print_int_status(stack: IntStack) -> None:
    print("Stack status:")
    print(f"  Size: {stack.size()}/{stack.capacity()}")
    print(f"  Empty: {_yes_no(stack.is_empty())}")
    print(f"  Full: {_yes_no(stack.is_full())}")


def run_demo(capacity: int) -> int:
    """Push the demo values, show status, then pop everything."""
    result, stack = IntStack.create(capacity)
    if stack is None:
        print(f"Error: {stack_error_string(result)}", file=sys.stderr)
        return 1

    print("=== Basic Stack Operations Demo ===")
    print("Pushing values onto the stack:")
    for value in DEMO_VALUES:
        result = stack.push(value)
        if result == StackResult.STACK_SUCCESS:
            print(f"  Pushed: {value} (Stack size: {stack.size()})")
        else:
            print(f"  Failed to push {value}: {stack_error_string(result)}")

    _print_int_status(stack)
    result, value = stack.peek()
    if result == StackResult.STACK_SUCCESS:
        print(f"  Top value (peek): {value}")

    print("Popping values from the stack:")
    while not stack.is_empty():
        result, value = stack.pop()
        if result != StackResult.STACK_SUCCESS:
            print(f"  Failed to pop: {stack_error_string(result)}")
            break
        print(f"  Popped: {value} (Stack size: {stack.size()})")

    stack.destroy()
    return 0


def _handle_command(stack: IntStack, line: str) -> bool:
    """Run one interactive command; False means quit."""
    parts = line.split()
    if not parts:
        return True
    command, args = parts[0], parts[1:]

    try:
        if command == "push":
            try:
                value = int(args[0])
            except (IndexError, ValueError):
                print("Usage: push <integer_value>")
                return True
            check(stack.push(value))
            print(f"Pushed {value}. Stack size: {stack.size()}")
        elif command == "pop":
            result, value = stack.pop()
            check(result)
            print(f"Popped {value}. Stack size: {stack.size()}")
        elif command == "peek":
            result, value = stack.peek()
            check(result)
            print(f"Top value: {value}")
        elif command == "size":
            print(f"Stack size: {stack.size()}/{stack.capacity()}")
        elif command == "clear":
            check(stack.clear())
            print("Stack cleared.")
        elif command == "quit":
            return False
        else:
            print(f"Unknown command. Available: {COMMANDS}")
    except StackError as exc:
        print(f"Error: {stack_error_string(exc.result)}")
    return True


def run_interactive(capacity: int) -> int:
    result, stack = IntStack.create(capacity)
    if stack is None:
        print(f"Error: {stack_error_string(result)}", file=sys.stderr)
        return 1

    print("=== Interactive Stack Operations ===")
    print(f"Commands: push <value>, {COMMANDS.replace('push, ', '')}")
    try:
        for line in sys.stdin:
            if not _handle_command(stack, line):
                break
    finally:
        stack.destroy()
    return 0


def run_reverse(text: str | None) -> int:
    if text is None:
        line = sys.stdin.readline()
        text = line.rstrip("\n")
    if not text:
        print("No input provided. Exiting.")
        return 0

    result, reversed_text = char_stack_mod.reverse_string(text, OUTPUT_BUFFER_SIZE)
    if result != CharStackResult.CHAR_STACK_SUCCESS:
        print(f"Error: {char_stack_error_string(result)}")
        return 1
    print(f'Original: "{text}"')
    print(f'Reversed: "{reversed_text}"')
    return 0


def _print_char_stack_info(stack: CharStack) -> None:
    print(f"  Stack size: {stack.size()}/{stack.capacity()}")
    print(f"  Empty: {_yes_no(stack.is_empty())}  Full: {_yes_no(stack.is_full())}")
    result, top = stack.peek()
    if result == CharStackResult.CHAR_STACK_SUCCESS:
        print(f"  Top character: '{top}'")


def _manual_reversal(stack: CharStack, text: str) -> None:
    print(f'Manual reversal of "{text}":')
    stack.clear()
    for c in text:
        result = stack.push(c)
        if result != CharStackResult.CHAR_STACK_SUCCESS:
            print(f"  Failed to push '{c}': {char_stack_error_string(result)}")
            stack.clear()
            return
    _print_char_stack_info(stack)

    popped = []
    while not stack.is_empty():
        _, c = stack.pop()
        popped.append(c)
    print(f'  Result: "{"".join(popped)}"')


def _validate_reverse_input(text: str, stack: CharStack) -> bool:
    if not text:
        print("Error: Empty string provided.")
        return False
    if len(text) > stack.capacity():
        print(f"Error: String too long (max {stack.capacity()} characters).")
        return False
    return True


def run_reverse_interactive() -> int:
    """Reverse stdin lines on the shared stack until 'quit' or EOF."""
    stack = char_stack_mod.default_char_stack()
    print("=== Interactive String Reversal Mode ===")
    print("Enter strings to reverse (type 'quit' to exit)")

    for line in sys.stdin:
        text = line.rstrip("\n")
        if text == "quit":
            break
        if not _validate_reverse_input(text, stack):
            continue

        result, reversed_text = char_stack_mod.reverse_string(text, OUTPUT_BUFFER_SIZE)
        if result == CharStackResult.CHAR_STACK_SUCCESS:
            print(f'Original: "{text}"')
            print(f'Reversed: "{reversed_text}"')
        else:
            print(f"Error: {char_stack_error_string(result)}")
        _print_char_stack_info(stack)
    return 0


def run_reverse_demo() -> int:
    """Manual push/pop walkthrough followed by the predefined cases."""
    stack = CharStack()
    print("=== String Reversal Demo ===")
    _manual_reversal(stack, REVERSE_TEST_CASES[0])

    print("Test cases:")
    failures = 0
    for text in REVERSE_TEST_CASES:
        result, reversed_text = stack.reverse_string(text, CHAR_STACK_MAX_SIZE)
        if result == CharStackResult.CHAR_STACK_SUCCESS:
            print(f'  "{text}" -> "{reversed_text}"')
        else:
            failures += 1
            print(f'  "{text}" -> Error: {char_stack_error_string(result)}')
    return 1 if failures else 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="stackkit", add_help=True)
    parser.add_argument("--log-level", default="WARNING", help="Logging level for the 'main' logger")
    sub = parser.add_subparsers(dest="command", required=True)

    demo = sub.add_parser("demo", help="Push/peek/pop walkthrough on an integer stack")
    demo.add_argument("--capacity", type=int, default=DEMO_STACK_CAPACITY)

    interactive = sub.add_parser("interactive", help="Integer stack command loop on stdin")
    interactive.add_argument("--capacity", type=int, default=DEMO_STACK_CAPACITY)

    reverse = sub.add_parser("reverse", help="Reverse a string (reads stdin when TEXT is omitted)")
    reverse.add_argument("text", nargs="?")

    sub.add_parser("reverse-interactive", help="Reverse stdin lines until 'quit'")
    sub.add_parser("reverse-demo", help="Character stack walkthrough and test cases")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(list(argv) if argv is not None else None)

    setup_main_logger(getattr(logging, str(args.log_level).upper(), logging.WARNING))
    attach_main_logger(logger, int_stack_mod.int_stack_logger, char_stack_mod.char_stack_logger)
    logger.debug(f"command={args.command}")

    if args.command == "demo":
        return run_demo(args.capacity)
    if args.command == "interactive":
        return run_interactive(args.capacity)
    if args.command == "reverse":
        return run_reverse(args.text)
    if args.command == "reverse-interactive":
        return run_reverse_interactive()
    if args.command == "reverse-demo":
        return run_reverse_demo()

    raise AssertionError(f"Unhandled command: {args.command}")


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main(sys.argv[1:]))
