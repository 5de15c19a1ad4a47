"""
phonokey - Metaphone3 語音鍵編碼器 (Phonetic Key Encoder)

核心概念：
- 把拼寫轉換為近似美式英語讀音的短鍵（主鍵 + 副鍵）
- 拼法不同但聽起來相同的字會得到相同的鍵，可用於分群或模糊比對
- 規則涵蓋法、德、西、義、波蘭、希臘、希伯來、荷蘭、北歐等外來語與姓名

官方入口（穩定 API）：
- `phonokey.Metaphone3`
- `phonokey.encode_metaphone3`
"""

# =============================================================================
# 編碼器（官方入口）
# =============================================================================
from phonokey.languages.english.encoder import (
    Metaphone3,
    cached_metaphone3,
    clear_metaphone3_cache,
    encode_metaphone3,
    get_metaphone3_cache_stats,
)
from phonokey.languages.english.phonetic_impl import Metaphone3PhoneticSystem

# =============================================================================
# 配置
# =============================================================================
from phonokey.config import DEFAULT_CONFIG, DEFAULT_KEY_LENGTH, MAX_KEY_LENGTH, EncoderConfig

# =============================================================================
# 日誌工具
# =============================================================================
from phonokey.utils.logger import enable_debug_logging, enable_timing_logging, get_logger

__all__ = [
    # Encoder
    "Metaphone3",
    "encode_metaphone3",
    "cached_metaphone3",
    "clear_metaphone3_cache",
    "get_metaphone3_cache_stats",
    "Metaphone3PhoneticSystem",
    # Config
    "EncoderConfig",
    "DEFAULT_CONFIG",
    "DEFAULT_KEY_LENGTH",
    "MAX_KEY_LENGTH",
    # Logging
    "get_logger",
    "enable_debug_logging",
    "enable_timing_logging",
]

__version__ = "0.1.0"
