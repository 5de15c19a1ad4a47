"""
Metaphone3 範例

展示編碼器的基本用法、母音/清濁音配置、鍵長限制，
以及以語音鍵判斷兩個拼寫是否同音。
"""

from phonokey import (
    EncoderConfig,
    Metaphone3,
    Metaphone3PhoneticSystem,
    encode_metaphone3,
)


def example_1_default():
    """範例 1: 預設配置（只編碼字首母音、清濁音合併、鍵長 8）"""
    print("=" * 60)
    print("範例 1: 預設配置")
    print("=" * 60)

    encoder = Metaphone3()
    for word in ["iron", "witz", ""]:
        encoder.set_word(word)
        encoder.encode()
        print(f"{word!r:12} 主鍵: {encoder.get_primary_key():10} 副鍵: {encoder.get_alternate_key()}")
    print()


def example_2_exact_and_vowels():
    """範例 2: 開啟母音編碼與清濁音區分"""
    print("=" * 60)
    print("範例 2: encode_vowels=True, encode_exact=True")
    print("=" * 60)

    encoder = Metaphone3(config=EncoderConfig(encode_vowels=True, encode_exact=True))

    test_words = [
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
    ]

    for word in test_words:
        encoder.set_word(word)
        primary, alternate = encoder.encode()
        print(f"{word:12} 主鍵: {primary:10} 副鍵: {alternate}")
    print()


def example_3_key_length():
    """範例 3: 鍵長限制"""
    print("=" * 60)
    print("範例 3: 鍵長限制")
    print("=" * 60)

    encoder = Metaphone3("knot")

    ok = encoder.set_key_length(40)
    print(f"set_key_length(40) -> {ok}，實際鍵長 {encoder.get_key_length()}")

    ok = encoder.set_key_length(0)
    print(f"set_key_length(0)  -> {ok}，實際鍵長 {encoder.get_key_length()}")
    print(f"knot 主鍵: {encoder.encode()[0]}")
    print()


def example_4_similarity():
    """範例 4: 以語音鍵判斷同音"""
    print("=" * 60)
    print("範例 4: 同音判斷")
    print("=" * 60)

    phonetic = Metaphone3PhoneticSystem()
    pairs = [
        ("often", "offen"),
        ("Witz", "Vitz"),
        ("knot", "iron"),
    ]

    for word1, word2 in pairs:
        keys1 = encode_metaphone3(word1)
        keys2 = encode_metaphone3(word2)
        similar = phonetic.are_words_similar(word1, word2)
        print(f"{word1} {keys1} vs {word2} {keys2}: {'同音' if similar else '不同'}")
    print()


if __name__ == "__main__":
    example_1_default()
    example_2_exact_and_vowels()
    example_3_key_length()
    example_4_similarity()

    print("=" * 60)
    print("✅ 所有範例執行完成!")
    print("=" * 60)
