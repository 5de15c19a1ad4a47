"""
語言模組

目前支援:
- english: Metaphone3 語音鍵
"""
