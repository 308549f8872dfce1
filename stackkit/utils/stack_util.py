# -*- coding: utf-8 -*-

import numpy as np

#### 整数栈容量范围
STACK_DEFAULT_CAPACITY = 100
STACK_MIN_CAPACITY = 1
STACK_MAX_CAPACITY = 1000000

#### 整数栈元素类型：C int，32b 有符号
INT_DTYPE = np.int32
INT_MIN = int(np.iinfo(INT_DTYPE).min)
INT_MAX = int(np.iinfo(INT_DTYPE).max)

#### 字符栈
CHAR_STACK_MAX_SIZE = 256
CHAR_STACK_EMPTY_CHAR = ''
CHAR_DTYPE = np.uint8   # 存字符码，0 表示空槽

# ASCII 可打印范围（C locale 下的 isprint）
PRINTABLE_LOW = 0x20
PRINTABLE_HIGH = 0x7e


def is_valid_capacity(capacity) -> bool:
    """容量必须是整数且在 [MIN, MAX] 内；bool 不算"""
    if isinstance(capacity, bool) or not isinstance(capacity, (int, np.integer)):
        return False
    return STACK_MIN_CAPACITY <= capacity <= STACK_MAX_CAPACITY


def is_valid_value(value) -> bool:
    """元素必须能无损放进 int32"""
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        return False
    return INT_MIN <= value <= INT_MAX


def is_valid_character(c) -> bool:
    """可打印字符、空格、tab"""
    if not isinstance(c, str) or len(c) != 1:
        return False
    code = ord(c)
    return PRINTABLE_LOW <= code <= PRINTABLE_HIGH or c == ' ' or c == '\t'


def secure_zero(buffer, start=0, stop=None):
    """把缓冲区 [start, stop) 清零，弹出/清空/释放前都要调用"""
    if buffer is None:
        return
    if stop is None:
        stop = len(buffer)
    buffer[start:stop] = 0
