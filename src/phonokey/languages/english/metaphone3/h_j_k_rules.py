"""
'H'、'J' 與 'K' 規則
"""

from ..config import EnglishPhoneticConfig


class HJKRules:
    """'H'、'J'、'K' 的規則串（mixin，依附 EncodingPass）"""

    # =========================================================================
    # H
    # =========================================================================

    def encode_h(self) -> None:
        if (
            self.encode_initial_silent_h()
            or self.encode_initial_hs()
            or self.encode_initial_hu_hw()
            or self.encode_non_initial_silent_h()
        ):
            return

        if not self.encode_h_pronounced():
            self.current += 1

    def encode_initial_silent_h(self) -> bool:
        # 'hour'、'herb'、'heir'、'honor'
        if (
            self.string_at(self.current + 1, 3, "OUR", "ERB", "EIR")
            or self.string_at(self.current + 1, 4, "ONOR")
            or self.string_at(self.current + 1, 5, "ONOUR", "ONEST")
        ):
            # 'herb' 英式讀法有 'H'
            if self.current == 0 and self.string_at(self.current, 4, "HERB"):
                if self.encode_vowels:
                    self.add("HA", "A")
                else:
                    self.add("H", "A")
            elif self.current == 0 or self.encode_vowels:
                self.add("A")

            self.current += 1
            self.current = self.skip_vowels(self.current)
            return True

        return False

    def encode_initial_hs(self) -> bool:
        # 'hsiao' 等中文姓氏
        if self.current == 0 and self.string_at(0, 2, "HS"):
            self.add("X")
            self.current += 2
            return True

        return False

    def encode_initial_hu_hw(self) -> bool:
        # 'huerta'、'huang'、'hwang'；'H' 如同 'W'
        if self.string_at(0, 3, "HUA", "HUE", "HWA"):
            if not self.string_at(self.current, 4, "HUEY"):
                self.add("A")

                if not self.encode_vowels:
                    self.current += 3
                else:
                    self.current += 1
                    while self.is_vowel(self.current) or self.char_at(self.current) == "W":
                        self.current += 1
                return True

        return False

    def encode_non_initial_silent_h(self) -> bool:
        # 'nihilist'、'vehement'、'graham'、'cohen'
        if (
            self.string_at(
                self.current - 2, 5, "NIHIL", "VEHEM", "LOHEN", "NEHEM", "MAHON", "MAHAN", "COHEN", "GAHAN"
            )
            or self.string_at(self.current - 3, 6, "GRAHAM", "PROHIB", "FRAHER", "TOOHEY", "TOUHEY")
            or self.string_at(self.current - 3, 5, "TOUHY")
            or self.string_at(0, 9, "CHIHUAHUA")
        ):
            if not self.encode_vowels:
                self.current += 2
            else:
                self.current += 1
                self.current = self.skip_vowels(self.current)
            return True

        return False

    def encode_h_pronounced(self) -> bool:
        """'H' 只在母音之前（且前面是字首、母音或 'W'）才發音"""
        if (
            (
                self.current == 0
                or self.is_vowel(self.current - 1)
                or (self.current > 0 and self.char_at(self.current - 1) == "W")
            )
            and self.is_vowel(self.current + 1)
        ) or (
            # 'H' 重複，例如 'hohhot'
            self.char_at(self.current + 1) == "H" and self.is_vowel(self.current + 2)
        ):
            self.add("H")
            self.advance_counter(2, 1)
            return True

        return False

    # =========================================================================
    # J
    # =========================================================================

    def encode_j(self) -> None:
        if self.encode_spanish_j() or self.encode_spanish_oj_uj():
            return

        self.encode_other_j()

    def encode_spanish_j(self) -> bool:
        # 明顯的西班牙語："jose"、"san jacinto"
        if (
            (
                self.string_at(self.current + 1, 3, "UAN", "ACI", "ALI", "EFE", "ICA", "IME", "OAQ", "UAR")
                and not self.string_at(self.current, 8, "JIMERSON", "JIMERSEN")
            )
            or (self.string_at(self.current + 1, 3, "OSE") and self.current + 3 == self.last)
            or self.string_at(self.current + 1, 4, "EREZ", "UNTA", "AIME", "AVIE", "AVIA")
            or self.string_at(self.current + 1, 6, "IMINEZ", "ARAMIL")
            or (self.current + 2 == self.last and self.string_at(self.current - 2, 5, "MEJIA"))
            or self.string_at(
                self.current - 2, 5,
                "TEJED", "TEJAD", "LUJAN", "FAJAR", "BEJAR", "BOJOR", "CAJIG", "DEJAS", "DUJAR", "DUJAN",
                "MIJAR", "MEJOR", "NAJAR", "NOJOS", "RAJED", "RIJAL", "REJON", "TEJAN", "UIJAN",
            )
            or self.string_at(self.current - 3, 8, "ALEJANDR", "GUAJARDO", "TRUJILLO")
            or (self.string_at(self.current - 2, 5, "RAJAS") and self.current > 2)
            or (self.string_at(self.current - 2, 5, "MEJIA") and not self.string_at(self.current - 2, 6, "MEJIAN"))
            or self.string_at(self.current - 1, 5, "OJEDA")
            or self.string_at(self.current - 3, 5, "LEIJA", "MINJA")
            or self.string_at(self.current - 3, 6, "VIAJES", "GRAJAL")
            or self.string_at(self.current, 8, "JAUREGUI")
            or self.string_at(self.current - 4, 8, "HINOJOSA")
            or self.string_at(0, 4, "SAN ")
            or (
                self.current + 1 == self.last
                and self.char_at(self.current + 1) == "O"
                # 例外
                and not (
                    self.string_at(0, 4, "TOJO")
                    or self.string_at(0, 5, "BANJO")
                    or self.string_at(0, 6, "MARYJO")
                )
            )
        ):
            # 美式英語 "juan" 讀作 'wan'，"marijuana"、"tijuana" 也沒有 'H'，當作母音處理
            if not (self.string_at(self.current, 4, "JUAN") or self.string_at(self.current, 4, "JOAQ")):
                self.add("H")
            else:
                if self.current == 0:
                    self.add("A")
            self.advance_counter(2, 1)
            return True

        # 'jorge' 的副鍵為 HARHA，'julio'、'jesus' 同理
        if self.string_at(self.current + 1, 4, "ORGE", "ULIO", "ESUS") and not self.string_at(0, 6, "JORGEN"):
            # 'jorge' 兩個子音都編碼
            if self.current + 4 == self.last and self.string_at(self.current + 1, 4, "ORGE"):
                if self.encode_vowels:
                    self.add("JARJ", "HARHA")
                else:
                    self.add("JRJ", "HRH")
                self.advance_counter(5, 5)
                return True

            self.add("J", "H")
            self.advance_counter(2, 1)
            return True

        return False

    def encode_german_j(self) -> bool:
        # 'jahn'、'johann'、'jung'、'jugo'
        if (
            self.string_at(self.current + 1, 2, "AH")
            or (self.string_at(self.current + 1, 5, "OHANN") and self.current + 5 == self.last)
            or (self.string_at(self.current + 1, 3, "UNG") and not self.string_at(self.current + 1, 4, "UNGL"))
            or self.string_at(self.current + 1, 3, "UGO")
        ):
            self.add("A")
            self.advance_counter(2, 1)
            return True

        return False

    def encode_spanish_oj_uj(self) -> bool:
        # 'hojoba'、'jujuy'
        if self.string_at(self.current + 1, 5, "OJOBA", "UJUY "):
            if self.encode_vowels:
                self.add("HAH")
            else:
                self.add("HH")

            self.advance_counter(4, 3)
            return True

        return False

    def encode_j_to_j(self) -> bool:
        if self.is_vowel(self.current + 1):
            if self.current == 0 and self.names_beginning_with_j_that_get_alt_y():
                # 'Y' 是母音，副鍵編為 'A'
                if self.encode_vowels:
                    self.add("JA", "A")
                else:
                    self.add("J", "A")
            else:
                if self.encode_vowels:
                    self.add("JA")
                else:
                    self.add("J")

            self.current += 1
            self.current = self.skip_vowels(self.current)
            return False

        self.add("J")
        self.current += 1
        return True

    def encode_spanish_j_2(self) -> bool:
        # 'brujo'、'badajoz'
        if (
            (
                self.current - 2 == 0
                and self.string_at(self.current - 2, 4, "BOJA", "BAJA", "BEJA", "BOJO", "MOJA", "MOJI", "MEJI")
            )
            or (
                self.current - 3 == 0
                and self.string_at(
                    self.current - 3, 5, "FRIJO", "BRUJO", "BRUJA", "GRAJE", "GRIJA", "LEIJA", "QUIJA"
                )
            )
            or (self.current + 3 == self.last and self.string_at(self.current - 1, 5, "AJARA"))
            or (
                self.current + 2 == self.last
                and self.string_at(
                    self.current - 1, 4,
                    "AJOS", "EJOS", "OJAS", "OJOS", "UJON", "AJOZ", "AJAL", "UJAR", "EJON", "EJAN",
                )
            )
            or (
                self.current + 1 == self.last
                and (self.string_at(self.current - 1, 3, "OJA", "EJA") and not self.string_at(0, 4, "DEJA"))
            )
        ):
            self.add("H")
            self.advance_counter(2, 1)
            return True

        return False

    def encode_j_as_vowel(self) -> bool:
        if self.string_at(self.current, 5, "JEWSK"):
            self.add("J", "")
            return True

        # 荷蘭語、斯堪地那維亞語與東歐拼寫："stijl"、"sejm"、"fjord"
        return (
            (
                self.string_at(self.current + 1, 1, "L", "T", "K", "S", "N", "M")
                # 印地語與阿拉伯語除外
                and not self.string_at(self.current + 2, 1, "A")
            )
            or self.string_at(0, 9, "HALLELUJA", "LJUBLJANA")
            or self.string_at(0, 4, "LJUB", "BJOR")
            or self.string_at(0, 5, "HAJEK")
            or self.string_at(0, 3, "WOJ")
            or self.string_at(0, 2, "FJ")
            # 'rekjavik'、'blagojevic'
            or self.string_at(self.current, 5, "JAVIK", "JEVIC")
            or (self.current + 1 == self.last and self.string_at(0, 5, "SONJA", "TANJA", "TONJA"))
        )

    def encode_other_j(self) -> None:
        if self.current == 0:
            if self.encode_german_j():
                return
            self.encode_j_to_j()
            return

        if self.encode_spanish_j_2():
            return
        elif not self.encode_j_as_vowel():
            self.add("J")

        # 'hajj'
        if self.char_at(self.current + 1) == "J":
            self.current += 2
        else:
            self.current += 1

    def names_beginning_with_j_that_get_alt_y(self) -> bool:
        return self.starts_with_any(EnglishPhoneticConfig.J_NAMES_ALT_Y)

    # =========================================================================
    # K
    # =========================================================================

    def encode_k(self) -> None:
        if not self.encode_silent_k():
            self.add("K")

            # 多餘的 'K'、'Q'
            if self.char_at(self.current + 1) in ("K", "Q"):
                self.current += 2
            else:
                self.current += 1

    def encode_silent_k(self) -> bool:
        # 字首 "KN-"，'knesset'、'knievel'、'knish' 除外
        if self.current == 0 and self.string_at(self.current, 2, "KN"):
            if not (
                self.string_at(self.current + 2, 5, "ESSET", "IEVEL") or self.string_at(self.current + 2, 3, "ISH")
            ):
                self.current += 1
                return True

        # 'know'、'knit'、'knob'；'slipknot' => SLPNT 但 'banknote' => PNKNT
        if (
            (
                self.string_at(self.current + 1, 3, "NOW", "NIT", "NOT", "NOB")
                and not self.string_at(0, 8, "BANKNOTE")
            )
            or self.string_at(self.current + 1, 4, "NOCK", "NUCK", "NIFE", "NACK")
            or self.string_at(self.current + 1, 5, "NIGHT")
        ):
            # 'penknife' 的 'N' 已經編碼
            if self.current > 0 and self.char_at(self.current - 1) == "N":
                self.current += 2
            else:
                self.current += 1
            return True

        return False
