"""
Metaphone3 發音系統測試

以語音鍵判斷相似度：鍵值相同視為同音，否則以編輯距離比對。
"""

import pytest

from phonokey import EncoderConfig, Metaphone3PhoneticSystem
from phonokey.core import PhoneticSystem


class TestMetaphone3PhoneticSystem:
    """發音系統基本功能"""

    def setup_method(self):
        self.phonetic = Metaphone3PhoneticSystem()

    def test_is_phonetic_system(self):
        """測試實作抽象介面"""
        assert isinstance(self.phonetic, PhoneticSystem)

    def test_to_phonetic(self):
        """測試轉換為主鍵"""
        assert self.phonetic.to_phonetic("Iron") == "ARN"
        assert self.phonetic.to_phonetic("witz") == "TS"

    def test_get_keys(self):
        """測試取得主副鍵"""
        assert self.phonetic.get_keys("witz") == ("TS", "FX")
        assert self.phonetic.get_keys("often") == ("AFN", "AFTN")

    def test_custom_config(self):
        """測試自訂配置"""
        phonetic = Metaphone3PhoneticSystem(config=EncoderConfig(encode_vowels=True))
        assert phonetic.to_phonetic("viva") == "FAFA"

    def test_identical_keys(self):
        """測試相同鍵的分數"""
        assert self.phonetic.calculate_similarity_score("ARN", "ARN") == (0.0, True)
        assert self.phonetic.are_fuzzy_similar("ARN", "ARN") is True

    def test_one_symbol_difference(self):
        """測試四個符號中差一個"""
        ratio, is_match = self.phonetic.calculate_similarity_score("ARN", "ARNK")
        assert ratio == pytest.approx(0.25)
        assert is_match is True

    def test_different_keys(self):
        """測試完全不同的鍵"""
        ratio, is_match = self.phonetic.calculate_similarity_score("TS", "FX")
        assert ratio == pytest.approx(1.0)
        assert is_match is False

    def test_empty_keys(self):
        """測試空鍵"""
        assert self.phonetic.calculate_similarity_score("", "") == (0.0, True)
        assert self.phonetic.calculate_similarity_score("ARN", "") == (1.0, False)

    def test_length_gap(self):
        """測試長度差異過大直接排除"""
        assert self.phonetic.calculate_similarity_score("AR", "ARNKTS") == (1.0, False)

    @pytest.mark.parametrize(
        "length, expected",
        [(1, 0.15), (3, 0.15), (4, 0.25), (5, 0.25), (8, 0.35), (12, 0.40)],
    )
    def test_tolerance(self, length, expected):
        """測試容錯率隨鍵長調整"""
        assert self.phonetic.get_tolerance(length) == expected


class TestWordSimilarity:
    """字與字的同音判斷"""

    def setup_method(self):
        self.phonetic = Metaphone3PhoneticSystem()

    def test_same_word_different_case(self):
        """測試大小寫不同的同一個字"""
        assert self.phonetic.are_words_similar("iron", "IRON") is True

    def test_alternate_key_match(self):
        """測試透過副鍵對上：'often' 的主鍵等於 'offen'"""
        assert self.phonetic.are_words_similar("often", "offen") is True

    def test_dissimilar_words(self):
        """測試讀音不同的字"""
        assert self.phonetic.are_words_similar("knot", "iron") is False

    def test_empty_words(self):
        """測試空字串"""
        assert self.phonetic.are_words_similar("", "") is True
        assert self.phonetic.are_words_similar("iron", "") is False
