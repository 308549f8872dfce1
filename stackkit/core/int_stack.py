# -*- coding: utf-8 -*-

'''
有界整数栈：
  * 容量在创建时确定，范围 [1, 1000000]，不扩容
  * 缓冲区由栈独占，numpy int32 连续存储
  * 弹出、清空、销毁时都把旧内容清零
  * 所有失败以 StackResult 返回，不抛异常

句柄形式的函数(stack_push 等)允许传入 None，对应"无实例"：
查询类返回 0/空，修改类返回 STACK_ERROR_NULL_POINTER。
已销毁的实例与 None 等价。
'''
from typing import Optional, Tuple
import logging

import numpy as np

from stackkit.messages.result import StackResult
from stackkit.utils.stack_util import (
    INT_DTYPE,
    STACK_DEFAULT_CAPACITY,
    is_valid_capacity,
    is_valid_value,
    secure_zero,
)

int_stack_logger = logging.getLogger(__name__)


class IntStack:
    """容量固定的 LIFO 整数栈"""

    __slots__ = ['_elements', '_capacity', '_size']

    def __init__(self, capacity: int = STACK_DEFAULT_CAPACITY):
        # 直接构造时容量非法按异常处理；需要结果码请用 create()
        if not is_valid_capacity(capacity):
            raise ValueError(f'capacity={capacity!r} out of range')
        self._elements = np.zeros(int(capacity), dtype=INT_DTYPE)
        self._capacity = int(capacity)
        self._size = 0

    @classmethod
    def create(cls, capacity: int = STACK_DEFAULT_CAPACITY) -> Tuple[StackResult, Optional['IntStack']]:
        """校验容量并分配缓冲区，返回 (结果码, 栈)；失败时栈为 None"""
        if not is_valid_capacity(capacity):
            int_stack_logger.debug(f'create capacity={capacity!r} invalid')
            return StackResult.STACK_ERROR_INVALID_CAPACITY, None
        try:
            stack = cls(capacity)
        except MemoryError:
            int_stack_logger.error(f'create capacity={capacity} allocation failed!')
            return StackResult.STACK_ERROR_MEMORY_ALLOCATION, None
        return StackResult.STACK_SUCCESS, stack

    @property
    def alive(self) -> bool:
        return self._elements is not None

    def is_empty(self) -> bool:
        return self._size == 0

    def is_full(self) -> bool:
        return self.alive and self._size >= self._capacity

    def size(self) -> int:
        return self._size

    def capacity(self) -> int:
        return self._capacity

    def push(self, value) -> StackResult:
        """压栈，满则 OVERFLOW，size 不变"""
        if not self.alive:
            return StackResult.STACK_ERROR_NULL_POINTER
        if not is_valid_value(value):
            int_stack_logger.debug(f'push value={value!r} invalid')
            return StackResult.STACK_ERROR_INVALID_VALUE
        if self.is_full():
            int_stack_logger.debug(f'push value={value} overflow, size={self._size}')
            return StackResult.STACK_ERROR_OVERFLOW

        self._elements[self._size] = value
        self._size += 1
        return StackResult.STACK_SUCCESS

    def pop(self) -> Tuple[StackResult, int]:
        """弹栈，返回 (结果码, 值)；空栈返回 (UNDERFLOW, 0)"""
        if not self.alive:
            return StackResult.STACK_ERROR_NULL_POINTER, 0
        if self._size == 0:
            int_stack_logger.debug('pop underflow')
            return StackResult.STACK_ERROR_UNDERFLOW, 0

        assert 0 < self._size <= self._capacity, f'size={self._size}/capacity={self._capacity} corrupt'
        self._size -= 1
        value = int(self._elements[self._size])
        secure_zero(self._elements, self._size, self._size + 1)
        return StackResult.STACK_SUCCESS, value

    def peek(self) -> Tuple[StackResult, int]:
        """查看栈顶元素，不改变 size"""
        if not self.alive:
            return StackResult.STACK_ERROR_NULL_POINTER, 0
        if self._size == 0:
            int_stack_logger.debug('peek underflow')
            return StackResult.STACK_ERROR_UNDERFLOW, 0
        assert self._size <= self._capacity, f'size={self._size}/capacity={self._capacity} corrupt'
        return StackResult.STACK_SUCCESS, int(self._elements[self._size - 1])

    def clear(self) -> StackResult:
        """清空栈，容量不变"""
        if not self.alive:
            return StackResult.STACK_ERROR_NULL_POINTER
        secure_zero(self._elements)
        self._size = 0
        return StackResult.STACK_SUCCESS

    def destroy(self):
        """清零后释放缓冲区；重复调用无副作用"""
        if not self.alive:
            return
        secure_zero(self._elements)
        self._elements = None
        self._capacity = 0
        self._size = 0

    def __len__(self):
        return self._size

    def __bool__(self):
        """支持 if stack: 语法，非空为真"""
        return self._size > 0

    def __repr__(self):
        if not self.alive:
            return f'{self.__class__.__name__}(destroyed)'
        return f'{self.__class__.__name__}(size={self._size}, capacity={self._capacity})'


#### 句柄形式接口，stack 可以是 None

def _live(stack) -> bool:
    return stack is not None and stack.alive


def stack_create(capacity: int = STACK_DEFAULT_CAPACITY) -> Tuple[StackResult, Optional[IntStack]]:
    return IntStack.create(capacity)


def stack_destroy(stack: Optional[IntStack]):
    if stack is not None:
        stack.destroy()


def stack_push(stack: Optional[IntStack], value) -> StackResult:
    if not _live(stack):
        return StackResult.STACK_ERROR_NULL_POINTER
    return stack.push(value)


def stack_pop(stack: Optional[IntStack]) -> Tuple[StackResult, int]:
    if not _live(stack):
        return StackResult.STACK_ERROR_NULL_POINTER, 0
    return stack.pop()


def stack_peek(stack: Optional[IntStack]) -> Tuple[StackResult, int]:
    if not _live(stack):
        return StackResult.STACK_ERROR_NULL_POINTER, 0
    return stack.peek()


def stack_is_empty(stack: Optional[IntStack]) -> bool:
    return not _live(stack) or stack.is_empty()


def stack_is_full(stack: Optional[IntStack]) -> bool:
    return _live(stack) and stack.is_full()


def stack_size(stack: Optional[IntStack]) -> int:
    return stack.size() if _live(stack) else 0


def stack_capacity(stack: Optional[IntStack]) -> int:
    return stack.capacity() if _live(stack) else 0


def stack_clear(stack: Optional[IntStack]) -> StackResult:
    if not _live(stack):
        return StackResult.STACK_ERROR_NULL_POINTER
    return stack.clear()
