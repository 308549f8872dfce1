# stackkit/__init__.py
from .core.int_stack import IntStack
from .core.char_stack import CharStack, default_char_stack, reverse_string
from .messages.result import (
    CharStackResult,
    StackError,
    StackResult,
    char_stack_error_string,
    check,
    stack_error_string,
)

__version__ = "1.0.0"
__all__ = [
    "IntStack",
    "CharStack",
    "default_char_stack",
    "reverse_string",
    "StackResult",
    "CharStackResult",
    "StackError",
    "check",
    "stack_error_string",
    "char_stack_error_string",
]
