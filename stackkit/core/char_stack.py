# -*- coding: utf-8 -*-

'''
定长字符栈，主要用于字符串反转：
  * 容量固定 256
  * 只接受可打印 ASCII、空格、tab
  * 弹出/清空时旧槽清零

每个 CharStack 实例独立持有自己的缓冲区，需要隔离的调用方各自构造即可。
char_stack_* 模块函数保留旧的"进程内单一实例"用法，作用于 default_char_stack()。
共享实例上的 reverse_string 会清空该实例，不要与其它对共享实例的操作交错使用。
'''
from typing import Optional, Tuple
import logging

import numpy as np

from stackkit.messages.result import CharStackResult
from stackkit.utils.stack_util import (
    CHAR_DTYPE,
    CHAR_STACK_EMPTY_CHAR,
    CHAR_STACK_MAX_SIZE,
    is_valid_character,
    secure_zero,
)

char_stack_logger = logging.getLogger(__name__)


class CharStack:
    """容量 CHAR_STACK_MAX_SIZE 的字符栈"""

    __slots__ = ['_elements', '_size']

    def __init__(self):
        self._elements = np.zeros(CHAR_STACK_MAX_SIZE, dtype=CHAR_DTYPE)
        self._size = 0

    def is_empty(self) -> bool:
        return self._size == 0

    def is_full(self) -> bool:
        return self._size >= CHAR_STACK_MAX_SIZE

    def size(self) -> int:
        return self._size

    def capacity(self) -> int:
        return CHAR_STACK_MAX_SIZE

    def push(self, c) -> CharStackResult:
        """先校验字符，再检查容量；非法字符即使有空位也拒绝"""
        if not is_valid_character(c):
            char_stack_logger.debug(f'push c={c!r} invalid')
            return CharStackResult.CHAR_STACK_ERROR_INVALID_INPUT
        if self.is_full():
            char_stack_logger.debug(f'push c={c!r} overflow')
            return CharStackResult.CHAR_STACK_ERROR_OVERFLOW

        self._elements[self._size] = ord(c)
        self._size += 1
        return CharStackResult.CHAR_STACK_SUCCESS

    def pop(self) -> Tuple[CharStackResult, str]:
        """弹栈；空栈返回 (UNDERFLOW, '')"""
        if self._size == 0:
            return CharStackResult.CHAR_STACK_ERROR_UNDERFLOW, CHAR_STACK_EMPTY_CHAR

        assert 0 < self._size <= CHAR_STACK_MAX_SIZE, f'size={self._size} corrupt'
        self._size -= 1
        c = chr(self._elements[self._size])
        secure_zero(self._elements, self._size, self._size + 1)
        return CharStackResult.CHAR_STACK_SUCCESS, c

    def peek(self) -> Tuple[CharStackResult, str]:
        if self._size == 0:
            return CharStackResult.CHAR_STACK_ERROR_UNDERFLOW, CHAR_STACK_EMPTY_CHAR
        return CharStackResult.CHAR_STACK_SUCCESS, chr(self._elements[self._size - 1])

    def clear(self) -> CharStackResult:
        secure_zero(self._elements)
        self._size = 0
        return CharStackResult.CHAR_STACK_SUCCESS

    def reverse_string(self, text: Optional[str], max_output_length: Optional[int]) -> Tuple[CharStackResult, str]:
        """
        借助本栈反转字符串，返回 (结果码, 反转结果)。
        max_output_length 模拟输出缓冲区长度，需容纳 len(text) + 结束符；
        None 表示没有输出缓冲区。无论成功失败，返回时栈为空。
        """
        # 参数非法也先清空，保证任何返回路径上栈都为空
        self.clear()

        if not isinstance(text, str) or not max_output_length:
            return CharStackResult.CHAR_STACK_ERROR_INVALID_INPUT, CHAR_STACK_EMPTY_CHAR

        length = len(text)
        if length >= max_output_length:
            char_stack_logger.debug(f'reverse len={length} does not fit output={max_output_length}')
            return CharStackResult.CHAR_STACK_ERROR_INVALID_INPUT, CHAR_STACK_EMPTY_CHAR
        if length > CHAR_STACK_MAX_SIZE:
            char_stack_logger.debug(f'reverse len={length} exceeds stack capacity')
            return CharStackResult.CHAR_STACK_ERROR_OVERFLOW, CHAR_STACK_EMPTY_CHAR

        for c in text:
            result = self.push(c)
            if result != CharStackResult.CHAR_STACK_SUCCESS:
                self.clear()
                return result, CHAR_STACK_EMPTY_CHAR

        output = []
        while not self.is_empty() and len(output) < max_output_length - 1:
            result, c = self.pop()
            if result != CharStackResult.CHAR_STACK_SUCCESS:
                self.clear()
                return result, CHAR_STACK_EMPTY_CHAR
            output.append(c)

        self.clear()
        return CharStackResult.CHAR_STACK_SUCCESS, ''.join(output)

    def __len__(self):
        return self._size

    def __bool__(self):
        return self._size > 0

    def __repr__(self):
        return f'{self.__class__.__name__}(size={self._size}, capacity={CHAR_STACK_MAX_SIZE})'


#### 进程内共享实例

_default_char_stack = CharStack()


def default_char_stack() -> CharStack:
    return _default_char_stack


def char_stack_push(c) -> CharStackResult:
    return _default_char_stack.push(c)


def char_stack_pop() -> Tuple[CharStackResult, str]:
    return _default_char_stack.pop()


def char_stack_peek() -> Tuple[CharStackResult, str]:
    return _default_char_stack.peek()


def char_stack_is_empty() -> bool:
    return _default_char_stack.is_empty()


def char_stack_is_full() -> bool:
    return _default_char_stack.is_full()


def char_stack_size() -> int:
    return _default_char_stack.size()


def char_stack_capacity() -> int:
    return _default_char_stack.capacity()


def char_stack_clear() -> CharStackResult:
    return _default_char_stack.clear()


def reverse_string(text: Optional[str], max_output_length: Optional[int] = CHAR_STACK_MAX_SIZE,
                   stack: Optional[CharStack] = None) -> Tuple[CharStackResult, str]:
    """反转字符串；不传 stack 时使用共享实例"""
    if stack is None:
        stack = _default_char_stack
    return stack.reverse_string(text, max_output_length)
