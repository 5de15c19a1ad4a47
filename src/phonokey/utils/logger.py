"""
日誌與計時工具

所有 logger 都掛在 "phonokey" 命名空間之下，預設不輸出任何訊息，
讓使用者可以透過標準 logging 控制:

    import logging
    logging.getLogger("phonokey").setLevel(logging.DEBUG)

或使用便捷函數:

    from phonokey import enable_debug_logging
    enable_debug_logging()
"""

import logging
import time
from functools import wraps
from typing import Callable, Optional

ROOT_LOGGER_NAME = "phonokey"

_DEFAULT_FORMAT = "[%(levelname)s] %(name)s - %(message)s"

_root_logger = logging.getLogger(ROOT_LOGGER_NAME)
_root_logger.addHandler(logging.NullHandler())


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    取得 phonokey 命名空間下的 logger

    Args:
        name: 子 logger 名稱（如 "encoder.metaphone3"），None 時返回根 logger

    Returns:
        logging.Logger
    """
    if not name:
        return _root_logger
    if name.startswith(ROOT_LOGGER_NAME + ".") or name == ROOT_LOGGER_NAME:
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def setup_logger(level: int = logging.INFO, fmt: str = _DEFAULT_FORMAT) -> logging.Logger:
    """
    為根 logger 加上 StreamHandler 並設定等級

    重複呼叫不會重複加入 handler。

    Args:
        level: 日誌等級
        fmt: 輸出格式

    Returns:
        logging.Logger: 根 logger
    """
    has_stream = any(
        isinstance(h, logging.StreamHandler) and not isinstance(h, logging.NullHandler)
        for h in _root_logger.handlers
    )
    if not has_stream:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(fmt))
        _root_logger.addHandler(handler)

    _root_logger.setLevel(level)
    return _root_logger


def enable_debug_logging() -> logging.Logger:
    """開啟 DEBUG 等級日誌"""
    return setup_logger(level=logging.DEBUG)


def enable_timing_logging() -> logging.Logger:
    """開啟計時日誌（計時訊息以 DEBUG 等級輸出）"""
    logger = setup_logger(level=logging.DEBUG)
    get_logger("timing").setLevel(logging.DEBUG)
    return logger


class TimingContext:
    """
    計時上下文管理器

    使用範例:
        with TimingContext("Metaphone3.encode", logger, logging.DEBUG):
            encoder.encode()
    """

    def __init__(
        self,
        operation: str,
        logger: Optional[logging.Logger] = None,
        level: int = logging.DEBUG,
        callback: Optional[Callable[[str, float], None]] = None,
    ):
        self.operation = operation
        self.logger = logger or get_logger("timing")
        self.level = level
        self.callback = callback
        self.elapsed = 0.0
        self._start = 0.0

    def __enter__(self) -> "TimingContext":
        self._start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        self.elapsed = time.perf_counter() - self._start
        if self.logger.isEnabledFor(self.level):
            self.logger.log(self.level, f"[Timing] {self.operation}: {self.elapsed * 1000:.3f} ms")
        if self.callback is not None:
            self.callback(self.operation, self.elapsed)
        return False


def log_timing(operation: Optional[str] = None, level: int = logging.DEBUG):
    """
    計時裝飾器

    Args:
        operation: 操作名稱，預設為函數的 qualname
        level: 日誌等級
    """

    def decorator(func: Callable) -> Callable:
        name = operation or func.__qualname__

        @wraps(func)
        def wrapper(*args, **kwargs):
            with TimingContext(name, level=level):
                return func(*args, **kwargs)

        return wrapper

    return decorator
