"""
Metaphone3 不變量測試

對一批涵蓋各語源規則的字，在不同配置下檢查輸出鍵的性質：
- 鍵長不超過 key_length
- 不會出現連續的 'A'
- 主副鍵相同時副鍵為空
- 編碼結果只取決於 (字, 配置)
"""

import itertools

import pytest

from phonokey import EncoderConfig, Metaphone3, encode_metaphone3

WORDS = [
    "",
    "a",
    "iron",
    "irony",
    "ironic",
    "witz",
    "filipowicz",
    "Guillermo",
    "VILLASENOR",
    "GUILLERMINA",
    "PADILLA",
    "BJORK",
    "belle",
    "ERICH",
    "CROCE",
    "GLOWACKI",
    "qing",
    "tsing",
    "knight",
    "laugh",
    "hiccough",
    "yacht",
    "chorus",
    "rooseveltian",
    "nation",
    "castle",
    "mission",
    "science",
    "psychology",
    "pneumonia",
    "wright",
    "mnemonic",
    "gnome",
    "schmidt",
    "Brzezinski",
    "Yastrzemski",
    "thomas",
    "smith",
    "xavier",
    "pizza",
    "Nietzsche",
    "boulevard",
    "cabernet",
    "Witter",
    "zhao",
    "JOSE",
    "Campbell",
    "debt",
    "often",
    "Smørrebrød",
    "Müller",
    "façade",
    "peña",
    "o'brien",
    "mary-ann",
    "the quick brown fox",
]

CONFIGS = [
    EncoderConfig(encode_vowels=vowels, encode_exact=exact, key_length=length)
    for vowels, exact, length in itertools.product([False, True], [False, True], [1, 4, 8, 32])
]


def _config_id(config):
    return f"v{int(config.encode_vowels)}-e{int(config.encode_exact)}-k{config.key_length}"


@pytest.mark.parametrize("config", CONFIGS, ids=_config_id)
class TestKeyInvariants:
    """輸出鍵的不變量"""

    def test_key_length_bound(self, config):
        """測試鍵長不超過 key_length"""
        for word in WORDS:
            primary, alternate = encode_metaphone3(word, config)
            assert len(primary) <= config.key_length, word
            assert len(alternate) <= config.key_length, word

    def test_no_adjacent_vowel_markers(self, config):
        """測試不會出現連續的 'A'"""
        for word in WORDS:
            primary, alternate = encode_metaphone3(word, config)
            assert "AA" not in primary, word
            assert "AA" not in alternate, word

    def test_alternate_cleared_when_equal(self, config):
        """測試副鍵不會與主鍵相同"""
        for word in WORDS:
            primary, alternate = encode_metaphone3(word, config)
            assert alternate == "" or alternate != primary, word

    def test_empty_word(self, config):
        """測試空字串在任何配置下都得到兩個空鍵"""
        primary, alternate = encode_metaphone3("", config)
        assert (primary, alternate) == ("", "")

    def test_encoder_matches_functional_api(self, config):
        """測試編碼器與函數式 API 結果一致"""
        encoder = Metaphone3(config=config)
        for word in WORDS:
            encoder.set_word(word)
            assert encoder.encode() == encode_metaphone3(word, config), word

    def test_encode_is_idempotent(self, config):
        """測試同一實例重複編碼結果相同"""
        encoder = Metaphone3(config=config)
        for word in WORDS:
            encoder.set_word(word)
            first = encoder.encode()
            assert encoder.encode() == first, word
            assert (encoder.get_primary_key(), encoder.get_alternate_key()) == first


class TestDemoWords:
    """示範字在精確 + 母音模式下可正常編碼"""

    @pytest.mark.parametrize(
        "word",
        [
            "Guillermo",
            "VILLASENOR",
            "GUILLERMINA",
            "PADILLA",
            "BJORK",
            "belle",
            "ERICH",
            "CROCE",
            "GLOWACKI",
            "qing",
            "tsing",
        ],
    )
    def test_demo_word(self, word):
        """測試示範字產生非空主鍵"""
        encoder = Metaphone3(word, config=EncoderConfig(encode_vowels=True, encode_exact=True))
        primary, alternate = encoder.encode()
        assert primary
        assert primary != alternate
