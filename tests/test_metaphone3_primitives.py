"""
Metaphone3 比對原語測試

string_at / char_at 的邊界行為、母音判定、母音串跳過與符號合併。
"""

import pytest

from phonokey.languages.english.metaphone3 import EncodingPass
from phonokey.languages.english.metaphone3._base import NUL


class TestStringAt:
    """有界子字串比對"""

    def setup_method(self):
        self.state = EncodingPass("WITZ")

    def test_match(self):
        """測試完全在範圍內的比對"""
        assert self.state.string_at(0, 4, "WITZ") is True
        assert self.state.string_at(1, 2, "XX", "IT") is True

    def test_no_match(self):
        """測試沒有候選字串相符"""
        assert self.state.string_at(0, 2, "WA", "WE") is False

    def test_negative_offset_fails_closed(self):
        """測試負的起點一律回傳 False"""
        assert self.state.string_at(-1, 2, "ZW") is False
        assert self.state.string_at(-3, 1, "W") is False

    def test_past_end_fails_closed(self):
        """測試超出字尾一律回傳 False"""
        assert self.state.string_at(3, 2, "Z") is False
        assert self.state.string_at(4, 1, "Z") is False
        assert self.state.string_at(2, 3, "TZ") is False

    def test_candidate_length_must_match(self):
        """測試候選字串長度不同時不會誤判"""
        assert self.state.string_at(0, 2, "W") is False

    def test_empty_word(self):
        """測試空字串"""
        state = EncodingPass("")
        assert state.string_at(0, 1, "A") is False
        assert state.char_at(0) == NUL


class TestCharAt:
    """越界字元讀取"""

    def test_char_at(self):
        """測試範圍內與範圍外的字元"""
        state = EncodingPass("IRON")
        assert state.char_at(0) == "I"
        assert state.char_at(3) == "N"
        assert state.char_at(4) == NUL
        assert state.char_at(-1) == NUL


class TestVowels:
    """母音判定"""

    def setup_method(self):
        self.state = EncodingPass("CITYÉW")

    def test_is_vowel(self):
        """測試基本母音與帶重音母音"""
        assert self.state.is_vowel(0) is False
        assert self.state.is_vowel(1) is True
        assert self.state.is_vowel(3) is True
        assert self.state.is_vowel(4) is True

    def test_w_is_not_a_vowel(self):
        """測試 'W' 不算母音"""
        assert self.state.is_vowel(5) is False

    def test_out_of_range_is_not_vowel(self):
        """測試越界位置不是母音"""
        assert self.state.is_vowel(-1) is False
        assert self.state.is_vowel(6) is False

    @pytest.mark.parametrize("ch", list("AEIOUYÀÁÂÃÄÅÆÈÉÊËÌÍÎÏÒÓÔÕÖØÙÚÛÜÝ"))
    def test_vowel_set(self, ch):
        """測試母音集合"""
        assert EncodingPass.is_vowel_char(ch) is True

    @pytest.mark.parametrize("ch", ["B", "W", "Ñ", "Ç", " ", NUL])
    def test_non_vowels(self, ch):
        """測試非母音字元"""
        assert EncodingPass.is_vowel_char(ch) is False

    def test_front_vowel(self):
        """測試前母音 E、I、Y"""
        assert self.state.front_vowel(1) is True
        assert self.state.front_vowel(3) is True
        assert self.state.front_vowel(0) is False
        assert self.state.front_vowel(10) is False


class TestSkipVowels:
    """母音串跳過"""

    def test_skip_run(self):
        """測試跳過一整串母音"""
        assert EncodingPass("AEIB").skip_vowels(0) == 3

    def test_skip_to_end(self):
        """測試母音一路到字尾"""
        assert EncodingPass("AEIOU").skip_vowels(0) == 5

    def test_out_of_range(self):
        """測試越界起點"""
        state = EncodingPass("AB")
        assert state.skip_vowels(-1) == 0
        assert state.skip_vowels(5) == 2

    def test_stops_before_polish_suffix(self):
        """測試遇到 '-OWSKI' 停在 'W' 之前"""
        assert EncodingPass("KOWSKI").skip_vowels(1) == 2

    def test_skips_wh(self):
        """測試 'WH' 的 'H' 一併跳過"""
        assert EncodingPass("AWHB").skip_vowels(0) == 3

    def test_respects_wh_root(self):
        """測試 'W' 後接 "HOLE" 等詞根時停在 'H'"""
        assert EncodingPass("AWHOLE").skip_vowels(0) == 2


class TestAdd:
    """符號輸出"""

    def setup_method(self):
        self.state = EncodingPass("X")

    def test_add_to_both(self):
        """測試單一參數時兩條緩衝相同"""
        self.state.add("K")
        assert self.state.primary == "K"
        assert self.state.secondary == "K"

    def test_add_alternate(self):
        """測試主副緩衝分別輸出"""
        self.state.add("TS", "FX")
        assert self.state.primary == "TS"
        assert self.state.secondary == "FX"

    def test_empty_alternate(self):
        """測試副緩衝為空字串時不輸出"""
        self.state.add("K", "")
        assert self.state.primary == "K"
        assert self.state.secondary == ""

    def test_vowel_marker_collapses(self):
        """測試同一緩衝中相鄰的 'A' 會合併"""
        self.state.add("A")
        self.state.add("A")
        assert self.state.primary == "A"
        assert self.state.secondary == "A"

    def test_vowel_marker_checked_per_buffer(self):
        """測試 'A' 的合併在兩條緩衝中分別判斷"""
        self.state.add("A")
        self.state.add("K", "")
        self.state.add("A")
        assert self.state.primary == "AKA"
        assert self.state.secondary == "A"

    def test_add_exact_approx(self):
        """測試精確/近似符號選擇"""
        approx = EncodingPass("B")
        approx.add_exact_approx("B", "P")
        assert approx.primary == "P"

        exact = EncodingPass("B", encode_exact=True)
        exact.add_exact_approx("B", "P")
        assert exact.primary == "B"

    def test_add_exact_approx_pair(self):
        """測試精確/近似符號對選擇"""
        approx = EncodingPass("W")
        approx.add_exact_approx_pair("A", "VA", "A", "FA")
        assert (approx.primary, approx.secondary) == ("A", "FA")

        exact = EncodingPass("W", encode_exact=True)
        exact.add_exact_approx_pair("A", "VA", "A", "FA")
        assert (exact.primary, exact.secondary) == ("A", "VA")

    def test_advance_counter(self):
        """測試游標前進量依母音編碼配置而定"""
        state = EncodingPass("ABCD")
        state.advance_counter(3, 1)
        assert state.current == 3

        state = EncodingPass("ABCD", encode_vowels=True)
        state.advance_counter(3, 1)
        assert state.current == 1


class TestWordHeuristics:
    """字形判斷"""

    @pytest.mark.parametrize(
        "word, root, expected",
        [
            ("ACHE", "ACHE", True),
            ("ACHES", "ACHE", True),
            ("ACHED", "ACHE", True),
            ("ACHING", "ACHE", True),
            ("ACHINGLY", "ACHE", True),
            ("ACHY", "ACHE", True),
            ("ACHER", "ACHE", False),
            ("WALKED", "WALK", True),
            ("WALKES", "WALK", True),
            ("WALKING", "WALK", True),
            ("WALKER", "WALK", False),
        ],
    )
    def test_root_or_inflections(self, word, root, expected):
        """測試字根與規則屈折形式"""
        assert EncodingPass.root_or_inflections(word, root) is expected

    @pytest.mark.parametrize(
        "word, expected",
        [
            ("SCHMIDT", True),
            ("SWANSON", True),
            ("JONES", True),
            ("WAGNER", True),
            ("SMITH", False),
        ],
    )
    def test_slavo_germanic(self, word, expected):
        """測試德語/斯拉夫語字形判斷"""
        assert EncodingPass(word).slavo_germanic() is expected
