"""
全域配置模組

提供 Metaphone3 編碼器的配置類別，控制母音編碼、清濁音區分、鍵長與日誌行為。

使用方式:
    from phonokey import EncoderConfig, Metaphone3

    # 預設: 只編碼字首母音、清濁音合併、鍵長 8
    encoder = Metaphone3(config=EncoderConfig())

    # 進階: 編碼所有母音並保留清濁音差異
    encoder = Metaphone3(config=EncoderConfig(encode_vowels=True, encode_exact=True))

    # 使用標準 logging 控制
    import logging
    logging.getLogger("phonokey").setLevel(logging.DEBUG)
"""

import logging
from dataclasses import dataclass

from .utils.logger import get_logger, setup_logger

# 鍵值儲存上限（超過時截斷並回報失敗）
MAX_KEY_LENGTH = 32

# 預設鍵長
DEFAULT_KEY_LENGTH = 8

_logger = get_logger("config")


def configure_logging(verbose: bool = False) -> None:
    """
    根據 verbose 設定配置 logging

    Args:
        verbose: 是否開啟詳細日誌
    """
    if verbose:
        setup_logger(level=logging.DEBUG)
    else:
        # 不主動設定，讓使用者可以透過標準 logging 控制
        pass


@dataclass
class EncoderConfig:
    """
    編碼器配置類別

    屬性:
        encode_vowels: True 時非字首母音（含雙母音）折疊成單一 'A'；
                       False 時只有字首母音會被編碼
        encode_exact: True 時保留 B/P、D/T、G/K、V/F 清濁音差異
        key_length: 輸出鍵的最大長度，限制在 [1, MAX_KEY_LENGTH]
        verbose: 是否開啟詳細日誌

    使用範例:
        config = EncoderConfig(key_length=4)
        ok = config.set_key_length(40)   # False，實際鍵長為 32
    """

    encode_vowels: bool = False
    encode_exact: bool = False
    key_length: int = DEFAULT_KEY_LENGTH
    verbose: bool = False

    def __post_init__(self):
        """初始化後校正鍵長並設定 logger"""
        self.set_key_length(self.key_length)
        configure_logging(self.verbose)

    def set_key_length(self, key_length: int) -> bool:
        """
        設定鍵長

        小於 1 的值視為 1（仍回傳 True）；大於 MAX_KEY_LENGTH 時
        截斷為 MAX_KEY_LENGTH 並回傳 False。

        Args:
            key_length: 欲設定的鍵長

        Returns:
            bool: 是否以請求的值（或下限 1）套用
        """
        key = int(key_length)
        if key < 1:
            key = 1

        if key > MAX_KEY_LENGTH:
            _logger.warning(
                f"key_length={key_length} 超過上限，截斷為 {MAX_KEY_LENGTH}"
            )
            self.key_length = MAX_KEY_LENGTH
            return False

        self.key_length = key
        return True


# 預設配置實例 (靜默模式)
DEFAULT_CONFIG = EncoderConfig()
