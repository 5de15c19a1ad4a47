"""
Metaphone3 編碼器測試

涵蓋公開 API、預設配置下的典型輸入，以及母音/清濁音/鍵長配置的影響。
"""

import pytest

from phonokey import DEFAULT_CONFIG, MAX_KEY_LENGTH, EncoderConfig, Metaphone3


class TestMetaphone3Basic:
    """預設配置 (encode_vowels=False, encode_exact=False, key_length=8)"""

    def setup_method(self):
        self.encoder = Metaphone3()

    def _encode(self, word):
        self.encoder.set_word(word)
        return self.encoder.encode()

    def test_empty_word(self):
        """測試空字串得到兩個空鍵"""
        assert self._encode("") == ("", "")
        assert self.encoder.get_primary_key() == ""
        assert self.encoder.get_alternate_key() == ""

    def test_encode_without_word(self):
        """測試未設定字時編碼不會出錯"""
        assert self.encoder.encode() == ("", "")

    def test_iron(self):
        """測試 'iron'：字首母音編為 A，非字首母音不編碼"""
        assert self._encode("IRON") == ("ARN", "")
        assert self.encoder.get_primary_key() == "ARN"
        assert self.encoder.get_alternate_key() == ""

    def test_witz(self):
        """測試波蘭姓氏字尾 '-witz' 產生不同的主副鍵"""
        assert self._encode("WITZ") == ("TS", "FX")
        assert self.encoder.get_primary_key() == "TS"
        assert self.encoder.get_alternate_key() == "FX"

    def test_lowercase_input(self):
        """測試小寫輸入會先轉大寫"""
        assert self._encode("iron") == ("ARN", "")
        assert self.encoder.get_word() == "IRON"

    def test_silent_initial_k(self):
        """測試字首 'KN-' 的 'K' 不發音"""
        assert self._encode("knot") == ("NT", "")

    def test_often_has_alternate(self):
        """測試 'often' 的 'T' 有讀與不讀兩種"""
        assert self._encode("often") == ("AFN", "AFTN")

    def test_approximate_consonants(self):
        """測試預設配置下 B 與 P 合併"""
        assert self._encode("bob") == ("PP", "")

    def test_direct_mapped_letters(self):
        """測試直接對應的帶符號字母"""
        assert self._encode("ñ") == ("N", "")
        assert self._encode("þ") == ("0", "")

    def test_non_letters_are_skipped(self):
        """測試數字與標點不產生符號"""
        assert self._encode("123 !?") == ("", "")

    def test_single_vowel(self):
        """測試單一母音"""
        assert self._encode("a") == ("A", "")

    def test_encode_is_repeatable(self):
        """測試重複編碼結果相同"""
        self.encoder.set_word("often")
        first = self.encoder.encode()
        second = self.encoder.encode()
        assert first == second
        assert self.encoder.get_alternate_key() == "AFTN"

    def test_encoder_is_reusable(self):
        """測試同一個編碼器可以換字重複使用"""
        assert self._encode("witz") == ("TS", "FX")
        assert self._encode("iron") == ("ARN", "")
        assert self.encoder.get_alternate_key() == ""

    def test_constructor_word(self):
        """測試建構時直接給字"""
        encoder = Metaphone3("witz")
        assert encoder.get_word() == "WITZ"
        assert encoder.get_primary_key() == ""
        encoder.encode()
        assert encoder.get_primary_key() == "TS"


class TestMetaphone3Options:
    """母音與清濁音配置"""

    def test_encode_vowels(self):
        """測試開啟母音編碼"""
        encoder = Metaphone3("viva")
        encoder.set_encode_vowels(True)
        assert encoder.get_encode_vowels() is True
        assert encoder.encode() == ("FAFA", "")

    def test_encode_vowels_silent_o_in_iron(self):
        """測試 'iron' 的 'O' 即使開啟母音編碼也不發音"""
        encoder = Metaphone3("iron", config=EncoderConfig(encode_vowels=True))
        assert encoder.encode() == ("ARN", "")

    def test_encode_vowels_witz(self):
        """測試開啟母音編碼時 '-witz' 的符號"""
        encoder = Metaphone3("witz", config=EncoderConfig(encode_vowels=True))
        assert encoder.encode() == ("ATS", "FAX")

    def test_encode_exact(self):
        """測試開啟清濁音區分"""
        encoder = Metaphone3("bob")
        encoder.set_encode_exact(True)
        assert encoder.get_encode_exact() is True
        assert encoder.encode() == ("BB", "")

    def test_encode_exact_and_vowels(self):
        """測試同時開啟母音編碼與清濁音區分"""
        encoder = Metaphone3("viva", config=EncoderConfig(encode_vowels=True, encode_exact=True))
        assert encoder.encode() == ("VAVA", "")

    def test_defaults(self):
        """測試預設配置"""
        encoder = Metaphone3()
        assert encoder.get_encode_vowels() is False
        assert encoder.get_encode_exact() is False
        assert encoder.get_key_length() == 8
        assert encoder.get_maximum_key_length() == MAX_KEY_LENGTH == 32

    def test_setters_do_not_touch_shared_config(self):
        """測試修改編碼器配置不影響共用配置"""
        config = EncoderConfig()
        encoder = Metaphone3(config=config)
        encoder.set_encode_vowels(True)
        encoder.set_key_length(4)

        assert config.encode_vowels is False
        assert config.key_length == 8
        assert DEFAULT_CONFIG.encode_vowels is False
        assert DEFAULT_CONFIG.key_length == 8


class TestMetaphone3KeyLength:
    """鍵長限制"""

    def test_key_length_above_maximum(self):
        """測試超過上限時截斷為 32 並回傳 False"""
        encoder = Metaphone3()
        assert encoder.set_key_length(40) is False
        assert encoder.get_key_length() == 32

    def test_key_length_below_minimum(self):
        """測試小於 1 時視為 1 且回傳 True"""
        encoder = Metaphone3()
        assert encoder.set_key_length(0) is True
        assert encoder.get_key_length() == 1

    @pytest.mark.parametrize("length", [1, 8, 16, 32])
    def test_key_length_in_range(self, length):
        """測試範圍內的鍵長原樣套用"""
        encoder = Metaphone3()
        assert encoder.set_key_length(length) is True
        assert encoder.get_key_length() == length

    def test_key_length_one_truncates(self):
        """測試鍵長 1 只留下第一個符號"""
        encoder = Metaphone3("knot")
        encoder.set_key_length(0)
        assert encoder.encode() == ("N", "")

    def test_truncation_clears_equal_alternate(self):
        """測試截斷後主副鍵相同時清空副鍵"""
        encoder = Metaphone3("often")
        encoder.set_key_length(2)
        # AFN / AFTN 截斷後都是 AF
        assert encoder.encode() == ("AF", "")

    def test_key_length_applies_after_clamp(self):
        """測試截斷後的上限實際生效"""
        encoder = Metaphone3("iron " * 20)
        encoder.set_key_length(40)
        primary, alternate = encoder.encode()
        assert len(primary) <= 32
        assert len(alternate) <= 32
