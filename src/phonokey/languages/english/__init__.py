"""
英文語音編碼模組

提供 Metaphone3 語音鍵編碼，以及基於語音鍵的相似度比對。

主要類別:
- Metaphone3: 可重複使用的編碼器
- Metaphone3PhoneticSystem: 基於 Metaphone3 鍵的發音系統
- EnglishPhoneticConfig: 字元集與姓名詞表

效能優化:
- encode_metaphone3: 函數式編碼入口 (快取)
- cached_metaphone3: 快取版編碼
- clear_metaphone3_cache: 清除快取
- get_metaphone3_cache_stats: 取得快取統計
"""

from __future__ import annotations

import importlib
from typing import Any

_LAZY_IMPORTS = {
    "Metaphone3": (".encoder", "Metaphone3"),
    "encode_metaphone3": (".encoder", "encode_metaphone3"),
    "cached_metaphone3": (".encoder", "cached_metaphone3"),
    "clear_metaphone3_cache": (".encoder", "clear_metaphone3_cache"),
    "get_metaphone3_cache_stats": (".encoder", "get_metaphone3_cache_stats"),
    "Metaphone3PhoneticSystem": (".phonetic_impl", "Metaphone3PhoneticSystem"),
    "EnglishPhoneticConfig": (".config", "EnglishPhoneticConfig"),
}

__all__ = [
    "Metaphone3",
    "Metaphone3PhoneticSystem",
    "EnglishPhoneticConfig",
    "encode_metaphone3",
    "cached_metaphone3",
    "clear_metaphone3_cache",
    "get_metaphone3_cache_stats",
]


def __getattr__(name: str) -> Any:
    if name not in _LAZY_IMPORTS:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    module_path, attr_name = _LAZY_IMPORTS[name]
    module = importlib.import_module(module_path, __name__)
    value = getattr(module, attr_name)
    globals()[name] = value
    return value


def __dir__() -> list[str]:
    return sorted(set(list(globals().keys()) + list(_LAZY_IMPORTS.keys())))
