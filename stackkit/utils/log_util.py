# -*- coding: utf-8 -*-

import logging

LOG_FORMAT = '%(asctime)s %(name)s %(levelname)s: %(message)s'


def setup_main_logger(level=logging.WARNING):
    """配置 'main' 日志，重复调用不会叠加 handler"""
    g_logger = logging.getLogger('main')
    g_logger.setLevel(level)
    if not g_logger.handlers:
        h = logging.StreamHandler()
        h.setFormatter(logging.Formatter(LOG_FORMAT))
        g_logger.addHandler(h)
    return g_logger


def attach_main_logger(*loggers):
    """模块日志沿用 'main' 的级别与 handler"""
    g_logger = logging.getLogger('main')
    for logger in loggers:
        logger.setLevel(g_logger.getEffectiveLevel())
        for h in g_logger.handlers:
            if h not in logger.handlers:
                logger.addHandler(h)
