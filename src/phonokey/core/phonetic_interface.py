"""
發音系統抽象介面

定義「文字 → 發音表示 → 相似度判斷」所需的最小介面，
讓上層（分群、比對）不必知道底層使用哪一種編碼。
"""

from abc import ABC, abstractmethod


class PhoneticSystem(ABC):
    """
    發音系統抽象基類

    實作類別需提供:
    - to_phonetic(): 文字轉發音表示
    - are_fuzzy_similar(): 兩個發音表示是否模糊相似
    - get_tolerance(): 依長度決定容錯率
    """

    @abstractmethod
    def to_phonetic(self, text: str) -> str:
        """
        將文字轉換為發音表示

        Args:
            text: 輸入文字

        Returns:
            str: 發音表示字串
        """
        pass

    @abstractmethod
    def are_fuzzy_similar(self, phonetic1: str, phonetic2: str) -> bool:
        """
        判斷兩個發音表示是否模糊相似

        Args:
            phonetic1: 第一個發音表示
            phonetic2: 第二個發音表示

        Returns:
            bool: 是否相似
        """
        pass

    @abstractmethod
    def get_tolerance(self, length: int) -> float:
        """
        根據長度取得容錯率

        Args:
            length: 發音表示長度

        Returns:
            float: 容錯率 (0.0 ~ 1.0)
        """
        pass
