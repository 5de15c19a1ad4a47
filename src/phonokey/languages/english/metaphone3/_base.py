"""
Metaphone3 單次編碼狀態與比對原語

EncodingPass 持有一次 encode() 所需的全部可變狀態：
大寫後的輸入字、游標、主/副兩條輸出緩衝，以及本次的配置旗標。
各字母規則（mixin）都建立在這裡的原語之上：

- string_at(): 有界子字串比對，越界（含負索引）一律回傳 False
- char_at(): 越界時回傳 "\\0"
- is_vowel() / skip_vowels(): 母音判定與母音串跳過
- add() / add_exact_approx(): 輸出符號，相鄰 'A' 在各自緩衝內合併
"""

from typing import Optional

from ..config import EnglishPhoneticConfig

NUL = "\0"


class EncodingPass:
    """一次編碼的狀態容器（每次 encode() 建立一個，不跨呼叫共用）"""

    def __init__(
        self,
        word: str,
        encode_vowels: bool = False,
        encode_exact: bool = False,
        key_length: int = 8,
    ):
        self.word = word
        self.length = len(word)
        self.last = self.length - 1
        self.encode_vowels = encode_vowels
        self.encode_exact = encode_exact
        self.key_length = key_length

        self.current = 0
        self.primary = ""
        self.secondary = ""

        # 已做過一次 "-AL-"/"-LE-" 母音換位
        self.flag_al_inversion = False

    # =========================================================================
    # 輸出
    # =========================================================================

    def add(self, main: str, alt: Optional[str] = None) -> None:
        """
        加入編碼符號

        只給 main 時兩條緩衝都加入 main；給 alt 時副緩衝改加 alt（空字串不加）。
        'A' 緊接在同一緩衝的 'A' 之後時不重複加入。
        """
        if alt is None:
            alt = main

        if not (main == "A" and self.primary.endswith("A")):
            self.primary += main

        if not (alt == "A" and self.secondary.endswith("A")):
            self.secondary += alt

    def add_exact_approx(self, main_exact: str, main: str) -> None:
        """依 encode_exact 在精確/近似符號之間選擇（兩條緩衝相同）"""
        if self.encode_exact:
            self.add(main_exact)
        else:
            self.add(main)

    def add_exact_approx_pair(self, main_exact: str, alt_exact: str, main: str, alt: str) -> None:
        """依 encode_exact 在精確/近似的 (主, 副) 符號對之間選擇"""
        if self.encode_exact:
            self.add(main_exact, alt_exact)
        else:
            self.add(main, alt)

    def advance_counter(self, if_not_encode_vowels: int, if_encode_vowels: int) -> None:
        """前進游標；是否編碼母音決定要不要把後面的母音一起吃掉"""
        if not self.encode_vowels:
            self.current += if_not_encode_vowels
        else:
            self.current += if_encode_vowels

    # =========================================================================
    # 比對原語
    # =========================================================================

    def char_at(self, at: int) -> str:
        if at < 0 or at > self.length - 1:
            return NUL
        return self.word[at]

    def string_at(self, start: int, length: int, *candidates: str) -> bool:
        """word[start:start+length] 完全在範圍內且等於任一候選字串"""
        if start < 0 or start > self.length - 1 or start + length - 1 > self.length - 1:
            return False

        target = self.word[start:start + length]
        return target in candidates

    def starts_with_any(self, table: dict) -> bool:
        """字首是否等於詞表 {長度: (拼寫, ...)} 中任一拼寫"""
        return any(self.string_at(0, length, *names) for length, names in table.items())

    @staticmethod
    def is_vowel_char(ch: str) -> bool:
        return ch in EnglishPhoneticConfig.VOWELS

    def is_vowel(self, at: int) -> bool:
        if at < 0 or at >= self.length:
            return False
        return self.word[at] in EnglishPhoneticConfig.VOWELS

    def front_vowel(self, at: int) -> bool:
        """E、I、Y 為前母音，觸發軟音規則"""
        return self.char_at(at) in ("E", "I", "Y")

    def slavo_germanic(self) -> bool:
        """以字首拼寫粗略判斷是否為德語或斯拉夫語系的字"""
        return (
            self.string_at(0, 3, "SCH")
            or self.string_at(0, 2, "SW")
            or self.char_at(0) == "J"
            or self.char_at(0) == "W"
        )

    def skip_vowels(self, at: int) -> int:
        """
        跳過一串母音（與 'W'），返回下一個子音的位置

        例外:
        - 遇到 "-WICZ"、"-OWSKI" 等波蘭姓氏字尾時停在其前
        - "WH" 中的 'H' 一併跳過，除非後面是 "HOUSE"、"HEAD" 等英文詞根
        """
        control = at
        if control < 0:
            return 0

        if control >= self.length:
            return self.length

        ch = self.char_at(control)

        while self.is_vowel_char(ch) or ch == "W":
            if (
                self.string_at(control, 4, "WICZ", "WITZ", "WIAK")
                or self.string_at(control - 1, 5, "EWSKI", "EWSKY", "OWSKI", "OWSKY")
                or (self.string_at(control, 5, "WICKI", "WACKI") and control == self.last)
            ):
                break

            control += 1
            if (
                self.char_at(control - 1) == "W" and self.char_at(control) == "H"
            ) and not (
                self.string_at(control, 3, "HOP")
                or self.string_at(control, 4, "HIDE", "HARD", "HEAD", "HAWK", "HERD", "HOOK", "HAND", "HOLE")
                or self.string_at(control, 5, "HEART", "HOUSE", "HOUND")
                or self.string_at(control, 6, "HAMMER")
            ):
                control += 1

            if control > self.length - 1:
                break
            ch = self.char_at(control)

        return control

    @staticmethod
    def root_or_inflections(word: str, root: str) -> bool:
        """
        word 是否為 root 本身或其規則英文屈折形式

        例: "ACHE" -> ACHE, ACHES, ACHED, ACHING, ACHINGLY, ACHY
        """
        length = len(root)
        root_mod = root

        test = root_mod + "S"
        if word == root_mod or word == test:
            return True

        if root_mod[length - 1] != "E":
            test = root_mod + "ES"

        if word == test:
            return True

        if root_mod[length - 1] != "E":
            test = root_mod + "ED"
        else:
            test = root_mod + "D"

        if word == test:
            return True

        if root_mod[length - 1] == "E":
            root_mod = root_mod[:length - 1]

        for suffix in ("ING", "INGLY", "Y"):
            if word == root_mod + suffix:
                return True

        return False
