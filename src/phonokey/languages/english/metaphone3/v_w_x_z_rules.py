"""
'V'、'W'、'X' 與 'Z' 規則
"""

from ..config import EnglishPhoneticConfig


class VWXZRules:
    """'V'、'W'、'X'、'Z' 的規則串（mixin，依附 EncodingPass）"""

    # =========================================================================
    # V
    # =========================================================================

    def encode_v(self) -> None:
        # 多餘的 'V'
        if self.char_at(self.current + 1) == "V":
            self.current += 2
        else:
            self.current += 1

        self.add_exact_approx("V", "F")

    # =========================================================================
    # W
    # =========================================================================

    def encode_w(self) -> None:
        if (
            self.encode_silent_w_at_beginning()
            or self.encode_witz_wicz()
            or self.encode_wr()
            or self.encode_initial_w_vowel()
            or self.encode_wh()
            or self.encode_eastern_european_w()
        ):
            return

        # 'zimbabwe'
        if self.encode_vowels and self.string_at(self.current, 2, "WE") and self.current + 1 == self.last:
            self.add("A")

        # 其餘 'W' 不編碼
        self.current += 1

    def encode_silent_w_at_beginning(self) -> bool:
        if self.current == 0 and self.string_at(self.current, 2, "WR"):
            self.current += 1
            return True

        return False

    def encode_witz_wicz(self) -> bool:
        # 波蘭語 'filipowicz'
        if self.current + 3 == self.last and self.string_at(self.current, 4, "WICZ", "WITZ"):
            if self.encode_vowels:
                if self.primary.endswith("A"):
                    self.add("TS", "FAX")
                else:
                    self.add("ATS", "FAX")
            else:
                self.add("TS", "FX")
            self.current += 4
            return True

        return False

    def encode_wr(self) -> bool:
        # 也可能在字中
        if self.string_at(self.current, 2, "WR"):
            self.add("R")
            self.current += 2
            return True

        return False

    def encode_initial_w_vowel(self) -> bool:
        if self.current == 0 and self.is_vowel(self.current + 1):
            # 'Witter' 要對上 'Vitter'
            if self.germanic_or_slavic_name_beginning_with_w():
                if self.encode_vowels:
                    self.add_exact_approx_pair("A", "VA", "A", "FA")
                else:
                    self.add_exact_approx_pair("A", "V", "A", "F")
            else:
                self.add("A")

            self.current += 1
            # 母音不重複編碼
            self.current = self.skip_vowels(self.current)
            return True

        return False

    def encode_wh(self) -> bool:
        if not self.string_at(self.current, 2, "WH"):
            return False

        # 讀作 H：'who'、'whole'；讀得像母音的（'whoosh'、'whoop'）除外
        if self.char_at(self.current + 2) == "O" and not (
            self.string_at(self.current + 2, 4, "OOSH")
            or self.string_at(self.current + 2, 3, "OOP", "OMP", "ORL", "ORT")
            or self.string_at(self.current + 2, 2, "OA", "OP")
        ):
            self.add("H")
            self.advance_counter(3, 2)
            return True

        # 組合詞：'hollowhearted'、'rawhide'
        if (
            self.string_at(self.current + 2, 3, "IDE", "ARD", "EAD", "AWK", "ERD", "OOK", "AND", "OLE", "OOD")
            or self.string_at(self.current + 2, 4, "EART", "OUSE", "OUND")
            or self.string_at(self.current + 2, 5, "AMMER")
        ):
            self.add("H")
            self.current += 2
            return True
        elif self.current == 0:
            self.add("A")
            self.current += 2
            # 母音不重複編碼
            self.current = self.skip_vowels(self.current)
            return True

        self.current += 2
        return True

    def encode_eastern_european_w(self) -> bool:
        # 'Arnow' 要對上 'Arnoff'
        if (
            (self.current == self.last and self.is_vowel(self.current - 1))
            or self.string_at(self.current - 1, 5, "EWSKI", "EWSKY", "OWSKI", "OWSKY")
            or (self.string_at(self.current, 5, "WICKI", "WACKI") and self.current + 4 == self.last)
            or (self.string_at(self.current, 4, "WIAK") and self.current + 3 == self.last)
            or self.string_at(0, 3, "SCH")
        ):
            self.add_exact_approx_pair("", "V", "", "F")
            self.current += 1
            return True

        return False

    def germanic_or_slavic_name_beginning_with_w(self) -> bool:
        return self.starts_with_any(EnglishPhoneticConfig.GERMANIC_SLAVIC_W_NAMES)

    # =========================================================================
    # X
    # =========================================================================

    def encode_x(self) -> None:
        if (
            self.encode_initial_x()
            or self.encode_greek_x()
            or self.encode_x_special_cases()
            or self.encode_x_to_h()
            or self.encode_x_vowel()
            or self.encode_french_x_final()
        ):
            return

        # 多餘的 'X'，以及 'excite'、'exceed'
        if self.string_at(self.current + 1, 1, "X", "Z", "S") or self.string_at(self.current + 1, 2, "CI", "CE"):
            self.current += 2
        else:
            self.current += 1

    def encode_initial_x(self) -> bool:
        # 現代漢語拼音
        if self.string_at(0, 3, "XIA", "XIO", "XIE") or self.string_at(0, 2, "XU"):
            self.add("X")
            self.current += 1
            return True

        if self.current == 0:
            self.add("S")
            self.current += 1
            return True

        return False

    def encode_greek_x(self) -> bool:
        # 'xylophone'、'xylem'、'xanthoma'、'xeno-'
        if self.string_at(self.current + 1, 3, "YLO", "YLE", "ENO") or self.string_at(self.current + 1, 4, "ANTH"):
            self.add("S")
            self.current += 1
            return True

        return False

    def encode_x_special_cases(self) -> bool:
        # 'luxury'
        if self.string_at(self.current - 2, 5, "LUXUR"):
            self.add_exact_approx("GJ", "KJ")
            self.current += 1
            return True

        # 葡萄牙語/加利西亞語姓氏
        if self.string_at(0, 7, "TEXEIRA") or self.string_at(0, 8, "TEIXEIRA"):
            self.add("X")
            self.current += 1
            return True

        return False

    def encode_x_to_h(self) -> bool:
        # 'oaxaca'、'quixote'
        if self.string_at(self.current - 2, 6, "OAXACA") or self.string_at(self.current - 3, 7, "QUIXOTE"):
            self.add("H")
            self.current += 1
            return True

        return False

    def encode_x_vowel(self) -> bool:
        # 'sexual'、'connexion'、'noxious'
        if self.string_at(self.current + 1, 3, "UAL", "ION", "IOU"):
            self.add("KX", "KS")
            self.advance_counter(3, 1)
            return True

        return False

    def encode_french_x_final(self) -> bool:
        # 法語字尾 'X' 不發音：'breaux'、'paix'；其餘補上 KS，游標交給 encode_x() 推進
        if not (
            self.current == self.last
            and (
                self.string_at(self.current - 3, 3, "IAU", "EAU", "IEU")
                or self.string_at(self.current - 2, 2, "AI", "AU", "OU", "OI", "EU")
            )
        ):
            self.add("KS")

        return False

    # =========================================================================
    # Z
    # =========================================================================

    def encode_z(self) -> None:
        if (
            self.encode_zz()
            or self.encode_zu_zier_zs()
            or self.encode_french_ez()
            or self.encode_german_z()
        ):
            return

        if self.encode_zh():
            return

        self.add("S")

        # 多餘的 'Z'
        if self.char_at(self.current + 1) == "Z":
            self.current += 2
        else:
            self.current += 1

    def encode_zz(self) -> bool:
        # 'abruzzi'、'pizza'
        if self.char_at(self.current + 1) == "Z" and (
            (self.string_at(self.current + 2, 1, "I", "O", "A") and self.current + 2 == self.last)
            or self.string_at(self.current - 2, 9, "MOZZARELL", "PIZZICATO", "PUZZONLAN")
        ):
            self.add("TS", "S")
            self.current += 2
            return True

        return False

    def encode_zu_zier_zs(self) -> bool:
        if (
            (self.current == 1 and self.string_at(self.current - 1, 4, "AZUR"))
            or (self.string_at(self.current, 4, "ZIER") and not self.string_at(self.current - 2, 6, "VIZIER"))
            or self.string_at(self.current, 3, "ZSA")
        ):
            self.add("J", "S")

            if self.string_at(self.current, 3, "ZSA"):
                self.current += 2
            else:
                self.current += 1
            return True

        return False

    def encode_french_ez(self) -> bool:
        if (self.current == 3 and self.string_at(self.current - 3, 4, "CHEZ")) or self.string_at(
            self.current - 5, 6, "RENDEZ"
        ):
            self.current += 1
            return True

        return False

    def encode_german_z(self) -> bool:
        if (
            (self.current == 2 and self.current + 1 == self.last and self.string_at(self.current - 2, 4, "NAZI"))
            or self.string_at(self.current - 2, 6, "NAZIFY", "MOZART")
            or self.string_at(self.current - 3, 4, "HOLZ", "HERZ", "MERZ", "FITZ")
            or (self.string_at(self.current - 3, 4, "GANZ") and not self.is_vowel(self.current + 1))
            or self.string_at(self.current - 4, 5, "STOLZ", "PRINZ")
            or self.string_at(self.current - 4, 7, "VENEZIA")
            or self.string_at(self.current - 3, 6, "HERZOG")
            # 以 "sch-" 開頭的德語字，但不含 'schlimazel'、'schmooze'
            or ("SCH" in self.word and not self.string_at(self.last - 2, 3, "IZE", "OZE", "ZEL"))
            or (self.current > 0 and self.string_at(self.current, 4, "ZEIT"))
            or self.string_at(self.current - 3, 4, "WEIZ")
        ):
            if self.current > 0 and self.word[self.current - 1] == "T":
                self.add("S")
            else:
                self.add("TS")
            self.current += 1
            return True

        return False

    def encode_zh(self) -> bool:
        # 漢語拼音 'zhao'，也用於英語的拼音式拼寫
        if self.char_at(self.current + 1) == "H":
            self.add("J")
            self.current += 2
            return True

        return False
