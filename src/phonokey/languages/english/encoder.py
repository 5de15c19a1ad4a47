"""
Metaphone3 編碼器

將英文（以及常見外來語、姓名）拼寫轉換為一或兩個語音鍵：
主鍵為美式英語最可能的讀法，副鍵為另一種同樣合理的讀法（沒有時為空字串）。

使用方式:
    from phonokey import Metaphone3, EncoderConfig

    encoder = Metaphone3("Witz")
    encoder.encode()
    encoder.get_primary_key()    # "TS"
    encoder.get_alternate_key()  # "FX"

    # 函數式 API（含快取）
    encode_metaphone3("iron")    # ("ARN", "")

效能優化:
- cached_metaphone3: 以 functools.lru_cache 快取 (字, 配置) -> 鍵
- clear_metaphone3_cache / get_metaphone3_cache_stats: 快取管理
"""

from dataclasses import replace
from functools import lru_cache
from typing import Callable, Optional, Tuple

from phonokey.config import DEFAULT_CONFIG, DEFAULT_KEY_LENGTH, MAX_KEY_LENGTH, EncoderConfig
from phonokey.core.encoder_interface import PhoneticEncoder

from .metaphone3 import Metaphone3Pass


class Metaphone3(PhoneticEncoder):
    """
    Metaphone3 編碼器

    持有待編碼的字與配置，可重複使用：
    set_word() 換字、set_encode_vowels() 等方法換配置，再呼叫 encode()。
    每次 encode() 都從乾淨的狀態開始，同樣的輸入必得同樣的鍵。
    """

    _encoder_name = "metaphone3"

    def __init__(
        self,
        word: Optional[str] = None,
        *,
        config: Optional[EncoderConfig] = None,
        verbose: bool = False,
        on_timing: Optional[Callable[[str, float], None]] = None,
    ):
        """
        初始化編碼器

        Args:
            word: 待編碼的字，可稍後以 set_word() 設定
            config: 編碼配置，預設使用 DEFAULT_CONFIG 的複本
            verbose: 是否開啟詳細日誌
            on_timing: 計時回呼 (operation, elapsed_seconds)
        """
        self._init_logger(verbose=verbose, on_timing=on_timing)

        # 複製一份，避免 setter 改到共用的配置
        self._config = replace(config or DEFAULT_CONFIG)

        self._word = ""
        self._primary = ""
        self._secondary = ""

        if word is not None:
            self.set_word(word)

    # =========================================================================
    # 輸入字
    # =========================================================================

    def set_word(self, word: str) -> None:
        """設定待編碼的字（轉為大寫保存），不會自動編碼"""
        self._word = word.upper()

    def get_word(self) -> str:
        return self._word

    # =========================================================================
    # 配置
    # =========================================================================

    @property
    def config(self) -> EncoderConfig:
        return self._config

    def set_encode_vowels(self, encode_vowels: bool) -> None:
        self._config.encode_vowels = encode_vowels

    def get_encode_vowels(self) -> bool:
        return self._config.encode_vowels

    def set_encode_exact(self, encode_exact: bool) -> None:
        self._config.encode_exact = encode_exact

    def get_encode_exact(self) -> bool:
        return self._config.encode_exact

    def set_key_length(self, key_length: int) -> bool:
        """
        設定鍵長

        Returns:
            bool: 超過上限被截斷時為 False
        """
        return self._config.set_key_length(key_length)

    def get_key_length(self) -> int:
        return self._config.key_length

    def get_maximum_key_length(self) -> int:
        return MAX_KEY_LENGTH

    # =========================================================================
    # 編碼
    # =========================================================================

    def encode(self) -> Tuple[str, str]:
        """
        執行編碼

        Returns:
            (主鍵, 副鍵)；副鍵與主鍵相同時為空字串
        """
        with self._log_timing("Metaphone3.encode"):
            encoding_pass = Metaphone3Pass(
                self._word,
                encode_vowels=self._config.encode_vowels,
                encode_exact=self._config.encode_exact,
                key_length=self._config.key_length,
            )
            self._primary, self._secondary = encoding_pass.run()

        self._logger.debug(f"  [Metaphone3] {self._word} -> {self._primary} / {self._secondary}")
        return self._primary, self._secondary

    def get_primary_key(self) -> str:
        return self._primary

    def get_alternate_key(self) -> str:
        return self._secondary


# =============================================================================
# 函數式 API 與快取 (Performance Critical)
# =============================================================================

@lru_cache(maxsize=50000)
def cached_metaphone3(
    word: str,
    encode_vowels: bool = False,
    encode_exact: bool = False,
    key_length: int = DEFAULT_KEY_LENGTH,
) -> Tuple[str, str]:
    """
    快取版 Metaphone3 編碼

    key_length 會被限制在 [1, MAX_KEY_LENGTH]。
    """
    key_length = max(1, min(int(key_length), MAX_KEY_LENGTH))
    return Metaphone3Pass(
        word.upper(),
        encode_vowels=encode_vowels,
        encode_exact=encode_exact,
        key_length=key_length,
    ).run()


def encode_metaphone3(word: str, config: Optional[EncoderConfig] = None) -> Tuple[str, str]:
    """
    依配置編碼一個字

    Args:
        word: 待編碼的字
        config: 編碼配置，預設 DEFAULT_CONFIG

    Returns:
        (主鍵, 副鍵)
    """
    config = config or DEFAULT_CONFIG
    return cached_metaphone3(word, config.encode_vowels, config.encode_exact, config.key_length)


def clear_metaphone3_cache():
    """清除編碼快取"""
    cached_metaphone3.cache_clear()


def get_metaphone3_cache_stats():
    """取得編碼快取統計"""
    return cached_metaphone3.cache_info()
