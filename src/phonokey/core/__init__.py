"""
核心抽象層

定義與具體編碼演算法無關的接口和抽象基類。
"""

from .encoder_interface import PhoneticEncoder
from .phonetic_interface import PhoneticSystem

__all__ = [
    "PhoneticEncoder",
    "PhoneticSystem",
]
