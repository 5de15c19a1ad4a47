"""
Metaphone3 轉換器

規則依字母分散在各個 mixin 中，由 Metaphone3Pass 組合並執行主迴圈。
"""

from ._base import EncodingPass
from .transducer import Metaphone3Pass

__all__ = [
    "EncodingPass",
    "Metaphone3Pass",
]
