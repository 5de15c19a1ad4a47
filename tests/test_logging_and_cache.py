"""
日誌、計時與快取測試
"""

import logging

from phonokey import (
    EncoderConfig,
    Metaphone3,
    clear_metaphone3_cache,
    encode_metaphone3,
    get_logger,
    get_metaphone3_cache_stats,
)
from phonokey.config import configure_logging
from phonokey.utils import TimingContext, log_timing


class TestLogger:
    """logger 命名空間"""

    def test_child_logger_name(self):
        """測試子 logger 掛在 phonokey 之下"""
        assert get_logger("encoder.metaphone3").name == "phonokey.encoder.metaphone3"

    def test_root_logger(self):
        """測試不給名稱時返回根 logger"""
        assert get_logger().name == "phonokey"

    def test_full_name_not_prefixed_twice(self):
        """測試已含前綴的名稱不重複加上"""
        assert get_logger("phonokey.config").name == "phonokey.config"

    def test_encode_logs_keys(self, caplog):
        """測試編碼時以 DEBUG 記錄結果"""
        caplog.set_level(logging.DEBUG, logger="phonokey")
        encoder = Metaphone3("witz")
        encoder.encode()
        assert "WITZ -> TS / FX" in caplog.text

    def test_key_length_warning(self, caplog):
        """測試鍵長超過上限時記錄警告"""
        caplog.set_level(logging.WARNING, logger="phonokey")
        config = EncoderConfig()
        assert config.set_key_length(99) is False
        assert "key_length=99" in caplog.text

    def test_configure_logging_verbose(self):
        """測試 verbose 開啟 DEBUG 等級"""
        root = get_logger()
        previous = root.level
        try:
            configure_logging(verbose=True)
            assert root.level == logging.DEBUG
        finally:
            root.setLevel(previous)


class TestTiming:
    """計時工具"""

    def test_timing_context_callback(self):
        """測試計時回呼收到操作名稱與耗時"""
        records = []
        with TimingContext("work", callback=lambda op, elapsed: records.append((op, elapsed))) as ctx:
            sum(range(100))

        assert len(records) == 1
        assert records[0][0] == "work"
        assert records[0][1] >= 0.0
        assert ctx.elapsed == records[0][1]

    def test_encoder_on_timing(self):
        """測試編碼器的計時回呼"""
        records = []
        encoder = Metaphone3("iron", on_timing=lambda op, elapsed: records.append(op))
        encoder.encode()
        assert records == ["Metaphone3.encode"]

    def test_log_timing_decorator(self):
        """測試計時裝飾器不改變回傳值"""

        @log_timing("double")
        def double(x):
            return x * 2

        assert double(21) == 42
        assert double.__name__ == "double"


class TestCache:
    """編碼快取"""

    def setup_method(self):
        clear_metaphone3_cache()

    def test_cache_hits(self):
        """測試重複編碼命中快取"""
        for _ in range(5):
            assert encode_metaphone3("iron") == ("ARN", "")

        stats = get_metaphone3_cache_stats()
        assert stats.misses == 1
        assert stats.hits == 4
        assert stats.currsize == 1

    def test_cache_keyed_by_config(self):
        """測試不同配置分開快取"""
        assert encode_metaphone3("viva") == ("FF", "")
        assert encode_metaphone3("viva", EncoderConfig(encode_vowels=True)) == ("FAFA", "")
        assert get_metaphone3_cache_stats().currsize == 2

    def test_clear_cache(self):
        """測試清除快取"""
        encode_metaphone3("iron")
        clear_metaphone3_cache()
        assert get_metaphone3_cache_stats().currsize == 0
