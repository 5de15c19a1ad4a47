"""
Metaphone3 規則串輸出測試

每組規則挑幾個代表字，鎖定它們在預設配置下的主鍵與副鍵，
確保規則或例外詞表被改動時能立即發現。
"""

import pytest

from phonokey import EncoderConfig, Metaphone3, encode_metaphone3
from phonokey.languages.english.metaphone3 import Metaphone3Pass


def _encode(word, **options):
    encoder = Metaphone3(word, config=EncoderConfig(**options))
    return encoder.encode()


class TestRuleCascades:
    """預設配置 (encode_vowels=False, encode_exact=False, key_length=8)"""

    @pytest.mark.parametrize(
        "word, expected",
        [
            ("yacht", ("AT", "")),
            ("loch", ("LK", "LX")),
            ("ache", ("AK", "AX")),
            ("chorus", ("KRS", "XRS")),
        ],
    )
    def test_ch(self, word, expected):
        """測試 'CH' 的 X / K / 不發音分流"""
        assert _encode(word) == expected

    @pytest.mark.parametrize(
        "word, expected",
        [
            ("laugh", ("LF", "")),
            ("cough", ("KF", "")),
            ("hiccough", ("HKP", "")),
            ("lough", ("LK", "")),
            ("ghost", ("KST", "")),
        ],
    )
    def test_gh(self, word, expected):
        """測試 'GH' 讀作 F、K、P 或不發音"""
        assert _encode(word) == expected

    @pytest.mark.parametrize(
        "word, expected",
        [
            ("nation", ("NXN", "")),
            ("rooseveltian", ("RSFLTN", "")),
        ],
    )
    def test_ti(self, word, expected):
        """測試 "-TIO-" 顎化，以及組合詞中分開發音的 'T'"""
        assert _encode(word) == expected

    @pytest.mark.parametrize(
        "word, expected",
        [
            ("bjork", ("PRK", "")),
            ("castle", ("KSL", "")),
            ("mission", ("MXN", "")),
            ("science", ("SNTS", "")),
        ],
    )
    def test_s_and_scandinavian_j(self, word, expected):
        """測試 "-STLE"、"-SSIO-"、"SC" 與北歐語 'J'"""
        assert _encode(word) == expected

    @pytest.mark.parametrize(
        "word, expected",
        [
            ("knesset", ("KNST", "")),
            ("knight", ("NT", "")),
            ("gnome", ("NM", "")),
            ("pneumonia", ("NMN", "")),
            ("psychology", ("SKLJ", "SXLK")),
            ("pterodactyl", ("TRTKTL", "")),
            ("pfister", ("FSTR", "")),
            ("wright", ("RT", "")),
            ("mnemonic", ("NMNK", "")),
        ],
    )
    def test_silent_onsets(self, word, expected):
        """測試字首不發音的子音叢，及 'knesset' 等例外"""
        assert _encode(word) == expected

    @pytest.mark.parametrize(
        "word, expected",
        [
            ("lewandowski", ("LNTSK", "LNTFSK")),
            ("filipowicz", ("FLPTS", "FLPFX")),
        ],
    )
    def test_polish_names(self, word, expected):
        """測試 "-LEWA-" 游標規則與波蘭姓氏字尾"""
        assert _encode(word) == expected

    def test_functional_api_agrees(self):
        """測試函數式 API 得到相同結果"""
        assert encode_metaphone3("hiccough") == ("HKP", "")
        assert encode_metaphone3("castle") == ("KSL", "")


class TestRuleCascadesWithOptions:
    """母音編碼與清濁音區分下的規則輸出"""

    @pytest.mark.parametrize(
        "word, expected",
        [
            ("knot", ("NAT", "")),
            ("bob", ("PAP", "")),
            ("witz", ("ATS", "FAX")),
            ("iron", ("ARN", "")),
        ],
    )
    def test_encode_vowels(self, word, expected):
        """測試開啟母音編碼"""
        assert _encode(word, encode_vowels=True) == expected

    @pytest.mark.parametrize(
        "word, expected",
        [
            ("bob", ("BB", "")),
            ("viva", ("VV", "")),
        ],
    )
    def test_encode_exact(self, word, expected):
        """測試開啟清濁音區分"""
        assert _encode(word, encode_exact=True) == expected

    @pytest.mark.parametrize(
        "word, expected",
        [
            ("bob", ("BAB", "")),
            ("viva", ("VAVA", "")),
        ],
    )
    def test_encode_exact_and_vowels(self, word, expected):
        """測試同時開啟兩者"""
        assert _encode(word, encode_vowels=True, encode_exact=True) == expected


class TestDispatch:
    """主迴圈的字母分派"""

    def test_letter_handlers_resolve(self):
        """測試每個分派字母都對應到規則串方法"""
        encoding_pass = Metaphone3Pass("X")
        for letter, name in Metaphone3Pass._LETTER_HANDLERS.items():
            assert name == f"encode_{letter.lower()}"
            assert callable(getattr(encoding_pass, name))

    def test_handler_table_is_shared(self):
        """測試分派表為類別層級，不隨每次編碼重建"""
        first = Metaphone3Pass("BOB")
        second = Metaphone3Pass("KNOT")
        first.run()
        second.run()
        assert first._LETTER_HANDLERS is second._LETTER_HANDLERS is Metaphone3Pass._LETTER_HANDLERS
