"""
編碼器抽象基類

定義所有語音編碼器共用的日誌與計時設定，以及必須實作的介面。
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Callable, Optional, Tuple

from phonokey.utils.logger import TimingContext, get_logger, setup_logger


class PhoneticEncoder(ABC):
    """
    語音編碼器抽象基類 (Abstract Base Class)

    職責:
    - 持有待編碼的字與編碼配置
    - 產生主鍵與副鍵
    - 提供日誌與計時功能

    生命週期:
    - 同一個實例可以重複 set_word() + encode()
    - 一個實例同一時間只服務一個字，不提供內部鎖
    """

    _encoder_name: str = "base"

    def _init_logger(
        self,
        verbose: bool = False,
        on_timing: Optional[Callable[[str, float], None]] = None,
    ) -> None:
        self._verbose = verbose
        self._timing_callback = on_timing

        if verbose:
            setup_logger(level=logging.DEBUG)

        self._logger = get_logger(f"encoder.{self._encoder_name}")

    def _log_timing(self, operation: str) -> TimingContext:
        return TimingContext(
            operation=operation,
            logger=self._logger,
            level=logging.DEBUG,
            callback=self._timing_callback,
        )

    @abstractmethod
    def set_word(self, word: str) -> None:
        pass

    @abstractmethod
    def encode(self) -> Tuple[str, str]:
        pass

    @abstractmethod
    def get_primary_key(self) -> str:
        pass

    @abstractmethod
    def get_alternate_key(self) -> str:
        pass
