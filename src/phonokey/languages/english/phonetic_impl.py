"""
英文發音系統實作模組

以 Metaphone3 鍵作為發音表示，提供相似度比對：
- 任一鍵（主鍵或副鍵）完全相同視為同音
- 否則以 Levenshtein 編輯距離比較鍵值，依鍵長動態決定容錯率

效能優化:
- 編碼結果經由 cached_metaphone3 (functools.lru_cache) 快取
"""

from typing import Optional, Tuple

import Levenshtein

from phonokey.config import DEFAULT_CONFIG, EncoderConfig
from phonokey.core.phonetic_interface import PhoneticSystem
from phonokey.utils.logger import get_logger

from .encoder import encode_metaphone3

_logger = get_logger("phonetic.english")


class Metaphone3PhoneticSystem(PhoneticSystem):
    """
    Metaphone3 發音系統

    功能:
    - 將英文字轉為 Metaphone3 主鍵
    - 計算兩個鍵之間的編輯距離以判斷相似度
    - 同時考慮主鍵與副鍵，判斷兩個字是否可能同音

    使用方式:
        phonetic = Metaphone3PhoneticSystem()
        phonetic.to_phonetic("Iron")             # "ARN"
        phonetic.are_words_similar("Smith", "Smyth")
    """

    def __init__(self, config: Optional[EncoderConfig] = None):
        """
        初始化發音系統

        Args:
            config: 編碼配置，預設 DEFAULT_CONFIG
        """
        self._config = config or DEFAULT_CONFIG

    @property
    def config(self) -> EncoderConfig:
        return self._config

    def get_keys(self, text: str) -> Tuple[str, str]:
        """取得 (主鍵, 副鍵)"""
        return encode_metaphone3(text, self._config)

    def to_phonetic(self, text: str) -> str:
        """
        將英文文字轉換為 Metaphone3 主鍵

        Args:
            text: 輸入英文文字

        Returns:
            str: 主鍵
        """
        primary, _ = self.get_keys(text)
        return primary

    def are_fuzzy_similar(self, phonetic1: str, phonetic2: str) -> bool:
        """
        判斷兩個鍵是否模糊相似

        Args:
            phonetic1: 第一個鍵
            phonetic2: 第二個鍵

        Returns:
            bool: 若 (編輯距離 / 最大長度) <= 容錯率，則返回 True
        """
        _, is_match = self.calculate_similarity_score(phonetic1, phonetic2)
        return is_match

    def calculate_similarity_score(self, phonetic1: str, phonetic2: str) -> Tuple[float, bool]:
        """
        計算鍵的相似度分數

        Returns:
            (error_ratio, is_fuzzy_match)
            error_ratio: 0.0 ~ 1.0 (越低越相似)
            is_fuzzy_match: 是否通過模糊匹配閾值
        """
        max_len = max(len(phonetic1), len(phonetic2))
        min_len = min(len(phonetic1), len(phonetic2))
        if max_len == 0:
            return 0.0, True

        # 一邊為空、或長度差異過大，直接排除
        if min_len == 0 or (max_len - min_len) / min_len > 0.8:
            return 1.0, False

        error_ratio = Levenshtein.distance(phonetic1, phonetic2) / max_len
        return error_ratio, error_ratio <= self.get_tolerance(max_len)

    def are_words_similar(self, word1: str, word2: str) -> bool:
        """
        判斷兩個字是否可能同音

        主鍵、副鍵交叉比對，任一組完全相同即為同音；
        否則退回主鍵的模糊比對。
        """
        keys1 = [k for k in self.get_keys(word1) if k]
        keys2 = [k for k in self.get_keys(word2) if k]

        if not keys1 and not keys2:
            return True

        if set(keys1) & set(keys2):
            _logger.debug(f"  [Match] {word1} ~ {word2} (key)")
            return True

        if not keys1 or not keys2:
            return False

        error_ratio, is_match = self.calculate_similarity_score(keys1[0], keys2[0])
        _logger.debug(f"  [Fuzzy] {word1}={keys1[0]} {word2}={keys2[0]} ratio={error_ratio:.2f}")
        return is_match

    def get_tolerance(self, length: int) -> float:
        """
        根據鍵長動態調整容錯率

        Args:
            length: 鍵長

        Returns:
            float: 容錯率閾值
        """
        if length <= 3:
            return 0.15  # 短鍵必須完全相同
        if length <= 5:
            return 0.25  # 容許一個符號差異
        if length <= 8:
            return 0.35
        return 0.40
