# -*- coding: utf-8 -*-
# 在 stackkit/messages/result.py 中
from enum import IntEnum


class StackResult(IntEnum):
    """整数栈操作结果码"""
    STACK_SUCCESS = 0
    STACK_ERROR_NULL_POINTER = 1
    STACK_ERROR_MEMORY_ALLOCATION = 2
    STACK_ERROR_OVERFLOW = 3
    STACK_ERROR_UNDERFLOW = 4
    STACK_ERROR_INVALID_CAPACITY = 5
    STACK_ERROR_INVALID_VALUE = 6

    @property
    def ok(self) -> bool:
        return self == StackResult.STACK_SUCCESS

    def __str__(self):
        return stack_error_string(self)


class CharStackResult(IntEnum):
    """字符栈操作结果码"""
    CHAR_STACK_SUCCESS = 0
    CHAR_STACK_ERROR_OVERFLOW = 1
    CHAR_STACK_ERROR_UNDERFLOW = 2
    CHAR_STACK_ERROR_INVALID_INPUT = 3

    @property
    def ok(self) -> bool:
        return self == CharStackResult.CHAR_STACK_SUCCESS

    def __str__(self):
        return char_stack_error_string(self)


# 结果码 -> 描述，仅用于诊断显示
_STACK_MESSAGES = {
    StackResult.STACK_SUCCESS: "Operation completed successfully",
    StackResult.STACK_ERROR_NULL_POINTER: "Null pointer provided",
    StackResult.STACK_ERROR_MEMORY_ALLOCATION: "Memory allocation failed",
    StackResult.STACK_ERROR_OVERFLOW: "Stack overflow - cannot push to full stack",
    StackResult.STACK_ERROR_UNDERFLOW: "Stack underflow - cannot pop from empty stack",
    StackResult.STACK_ERROR_INVALID_CAPACITY: "Invalid capacity specified",
    StackResult.STACK_ERROR_INVALID_VALUE: "Value out of integer range",
}

_CHAR_STACK_MESSAGES = {
    CharStackResult.CHAR_STACK_SUCCESS: "Operation completed successfully",
    CharStackResult.CHAR_STACK_ERROR_OVERFLOW: "Stack overflow - cannot push to full stack",
    CharStackResult.CHAR_STACK_ERROR_UNDERFLOW: "Stack underflow - cannot pop from empty stack",
    CharStackResult.CHAR_STACK_ERROR_INVALID_INPUT: "Invalid input parameter",
}

UNKNOWN_ERROR = "Unknown error"


def stack_error_string(result) -> str:
    """整数栈结果码转描述"""
    try:
        return _STACK_MESSAGES[StackResult(result)]
    except (ValueError, TypeError):
        return UNKNOWN_ERROR


def char_stack_error_string(result) -> str:
    """字符栈结果码转描述"""
    try:
        return _CHAR_STACK_MESSAGES[CharStackResult(result)]
    except (ValueError, TypeError):
        return UNKNOWN_ERROR


class StackError(Exception):
    """把结果码转成异常，供希望走异常流程的调用方使用（如命令行）"""

    def __init__(self, result):
        self.result = result
        if isinstance(result, CharStackResult):
            message = char_stack_error_string(result)
        else:
            message = stack_error_string(result)
        super().__init__(f'{result.__class__.__name__}.{getattr(result, "name", result)}: {message}')


def check(result):
    """非成功结果码则抛出 StackError，否则原样返回"""
    if result != 0:
        raise StackError(result)
    return result
