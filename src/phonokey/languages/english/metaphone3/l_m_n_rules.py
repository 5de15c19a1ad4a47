"""
'L'、'M' 與 'N' 規則

開啟母音編碼時，"-LE" 字尾會換位成 "AL"（'bristle' => PRASAL），
換位只做一次，之後字尾 'E' 的判斷會參考 flag_al_inversion。
"""


class LMNRules:
    """'L'、'M'、'N' 的規則串（mixin，依附 EncodingPass）"""

    # =========================================================================
    # L
    # =========================================================================

    def encode_l(self) -> None:
        # 下方的判斷需要知道游標移動前的位置
        save_current = self.current

        self.interpolate_vowel_when_cons_l_at_end()

        if (
            self.encode_lely_to_l()
            or self.encode_colonel()
            or self.encode_french_ault()
            or self.encode_french_euil()
            or self.encode_french_oulx()
            or self.encode_silent_l_in_lm()
            or self.encode_silent_l_in_lk_lv()
            or self.encode_silent_l_in_ould()
        ):
            return

        if self.encode_ll_as_vowel_cases():
            return

        self.encode_le_cases(save_current)

    def interpolate_vowel_when_cons_l_at_end(self) -> None:
        # 'ertl'、'vogl'
        if self.encode_vowels:
            if self.current == self.last and self.string_at(self.current - 1, 1, "D", "G", "T"):
                self.add("A")

    def encode_lely_to_l(self) -> bool:
        # 'agilely'、'docilely'
        if self.string_at(self.current - 1, 5, "ILELY") and self.current + 3 == self.last:
            self.add("L")
            self.current += 3
            return True

        return False

    def encode_colonel(self) -> bool:
        if self.string_at(self.current - 2, 7, "COLONEL"):
            self.add("R")
            self.current += 2
            return True

        return False

    def encode_french_ault(self) -> bool:
        # 'renault'、'foucault'，但不含 'fault'
        if (
            self.current > 3
            and (
                self.string_at(self.current - 3, 5, "RAULT", "NAULT", "BAULT", "SAULT", "GAULT", "CAULT")
                or self.string_at(self.current - 4, 6, "REAULT", "RIAULT", "NEAULT", "BEAULT")
            )
            and not (
                self.root_or_inflections(self.word, "ASSAULT")
                or self.string_at(self.current - 8, 10, "SOMERSAULT")
                or self.string_at(self.current - 9, 11, "SUMMERSAULT")
            )
        ):
            self.current += 2
            return True

        return False

    def encode_french_euil(self) -> bool:
        # 'auteuil'
        if self.string_at(self.current - 3, 4, "EUIL") and self.current == self.last:
            self.current += 1
            return True

        return False

    def encode_french_oulx(self) -> bool:
        # 'proulx'
        if self.string_at(self.current - 2, 4, "OULX") and self.current + 1 == self.last:
            self.current += 2
            return True

        return False

    def encode_silent_l_in_lm(self) -> bool:
        if not self.string_at(self.current, 2, "LM", "LN"):
            return False

        # 'lincoln'、'holmes'、'psalm'、'salmon'
        if (
            self.string_at(self.current - 2, 4, "COLN", "CALM", "BALM", "MALM", "PALM")
            or (self.string_at(self.current - 1, 3, "OLM") and self.current + 1 == self.last)
            or self.string_at(self.current - 3, 5, "PSALM", "QUALM")
            or self.string_at(self.current - 2, 6, "SALMON", "HOLMES")
            or self.string_at(self.current - 1, 6, "ALMOND")
            or (self.current == 1 and self.string_at(self.current - 1, 4, "ALMS"))
        ) and (
            not self.string_at(self.current + 2, 1, "A")
            and not self.string_at(self.current - 2, 5, "BALMO")
            and not self.string_at(self.current - 2, 6, "PALMER", "PALMOR", "BALMER")
            and not self.string_at(self.current - 3, 5, "THALM")
        ):
            self.current += 1
            return True

        self.add("L")
        self.current += 1
        return True

    def encode_silent_l_in_lk_lv(self) -> bool:
        # 'walk'、'yolk'、'half'、'salve'
        if (
            (
                self.string_at(self.current - 2, 4, "WALK", "YOLK", "FOLK", "HALF", "TALK", "CALF", "BALK", "CALK")
                or (
                    self.string_at(self.current - 2, 4, "POLK")
                    and not self.string_at(self.current - 2, 5, "POLKA", "WALKO")
                )
                or (
                    self.string_at(self.current - 2, 4, "HALV")
                    and not self.string_at(self.current - 2, 5, "HALVA", "HALVO")
                )
                or (
                    self.string_at(self.current - 3, 5, "CAULK", "CHALK", "BAULK", "FAULK")
                    and not self.string_at(self.current - 4, 6, "SCHALK")
                )
                or (
                    (
                        self.string_at(self.current - 2, 5, "SALVE", "CALVE")
                        or self.string_at(self.current - 2, 6, "SOLDER")
                    )
                    # 'L' 通常發音的例外
                    and not self.string_at(self.current - 2, 6, "SALVER", "CALVER")
                )
            )
            and not self.string_at(self.current - 5, 9, "GONSALVES", "GONCALVES")
            and not self.string_at(self.current - 2, 6, "BALKAN", "TALKAL")
            and not self.string_at(self.current - 3, 5, "PAULK", "CHALF")
        ):
            self.current += 1
            return True

        return False

    def encode_silent_l_in_ould(self) -> bool:
        # 'would'、'could'
        if self.string_at(self.current - 3, 5, "WOULD", "COULD") or (
            self.string_at(self.current - 4, 6, "SHOULD") and not self.string_at(self.current - 4, 8, "SHOULDER")
        ):
            self.add_exact_approx("D", "T")
            self.current += 2
            return True

        return False

    def encode_ll_as_vowel_special_cases(self) -> bool:
        if (
            self.string_at(self.current - 5, 8, "TORTILLA")
            or self.string_at(self.current - 8, 11, "RATATOUILLE")
            # 'guillermo'、'veillard'；'guillotine' 的 '-ll-' 在英語仍讀 'L'
            or (
                self.string_at(0, 5, "GUILL", "VEILL", "GAILL")
                and not (
                    self.string_at(self.current - 3, 7, "GUILLOT", "GUILLOR", "GUILLEN")
                    or (self.string_at(0, 5, "GUILL") and self.length == 5)
                )
            )
            # 'brouillard'、'gremillion'
            or self.string_at(0, 7, "BROUILL", "GREMILL", "ROBILL")
            # 'mireille'，但 'reveille' 讀作 're-vil-lee'
            or (
                self.string_at(self.current - 2, 5, "EILLE")
                and self.current + 2 == self.last
                and not self.string_at(self.current - 5, 8, "REVEILLE")
            )
        ):
            self.current += 2
            return True

        return False

    def encode_ll_as_vowel(self) -> bool:
        """
        西班牙語 "-LL-"：'cabrillo'、'gallegos'

        'gorilla'、'ballerina' 也會命中；美國人兩種讀法都有，所以副鍵省略 'L'。
        """
        if (
            (self.current + 3 == self.length and self.string_at(self.current - 1, 4, "ILLO", "ILLA", "ALLE"))
            or (
                (
                    (
                        self.string_at(self.last - 1, 2, "AS", "OS")
                        or self.string_at(self.last, 2, "AS", "OS")
                        or self.string_at(self.last, 1, "A", "O")
                    )
                    and self.string_at(self.current - 1, 2, "AL", "IL")
                )
                and not self.string_at(self.current - 1, 4, "ALLA")
            )
            or self.string_at(0, 5, "VILLE", "VILLA")
            or self.string_at(0, 8, "GALLARDO", "VALLADAR", "MAGALLAN", "CAVALLAR", "BALLASTE")
            or self.string_at(0, 3, "LLA")
        ):
            self.add("L", "")
            self.current += 2
            return True

        return False

    def encode_ll_as_vowel_cases(self) -> bool:
        if self.char_at(self.current + 1) == "L":
            if self.encode_ll_as_vowel_special_cases():
                return True
            elif self.encode_ll_as_vowel():
                return True
            self.current += 2
        else:
            self.current += 1

        return False

    def encode_vowel_le_transposition(self, save_current: int) -> bool:
        # 'bristle'、'dazzle'、'goggle' => KAKAL
        if (
            self.encode_vowels
            and save_current > 1
            and not self.is_vowel(save_current - 1)
            and self.char_at(save_current + 1) == "E"
            and self.char_at(save_current - 1) != "L"
            and self.char_at(save_current - 1) != "R"
            # 大量例外
            and not self.is_vowel(save_current + 2)
            and not self.string_at(0, 7, "ECCLESI", "COMPLEC", "COMPLEJ", "ROBLEDO")
            and not self.string_at(0, 5, "MCCLE", "MCLEL")
            and not self.string_at(0, 6, "EMBLEM", "KADLEC")
            and not (save_current + 2 == self.last and self.string_at(save_current, 3, "LET"))
            and not self.string_at(save_current, 7, "LETTING")
            and not self.string_at(save_current, 6, "LETELY", "LETTER", "LETION", "LETIAN", "LETING", "LETORY")
            and not self.string_at(save_current, 5, "LETUS", "LETIV")
            and not self.string_at(
                save_current, 4, "LESS", "LESQ", "LECT", "LEDG", "LETE", "LETH", "LETS", "LETT"
            )
            and not self.string_at(save_current, 3, "LEG", "LER", "LEX")
            # 'complement' 不應編成 KAMPALMENT
            and not (
                self.string_at(save_current, 6, "LEMENT")
                and not (
                    self.string_at(self.current - 5, 6, "BATTLE", "TANGLE", "PUZZLE", "RABBLE", "BABBLE")
                    or self.string_at(self.current - 4, 5, "TABLE")
                )
            )
            and not (
                save_current + 2 == self.last
                and self.string_at(save_current - 2, 5, "OCLES", "ACLES", "AKLES")
            )
            and not self.string_at(save_current - 3, 5, "LISLE", "AISLE")
            and not self.string_at(0, 4, "ISLE")
            and not self.string_at(0, 6, "ROBLES")
            and not self.string_at(save_current - 4, 7, "PROBLEM", "RESPLEN")
            and not self.string_at(save_current - 3, 6, "REPLEN")
            and not self.string_at(save_current - 2, 4, "SPLE")
            and self.char_at(save_current - 1) != "H"
            and self.char_at(save_current - 1) != "W"
        ):
            self.add("AL")
            self.flag_al_inversion = True

            # 多餘的 'L'
            if self.char_at(save_current + 2) == "L":
                self.current = save_current + 3
            return True

        return False

    def encode_vowel_preserve_vowel_after_l(self, save_current: int) -> bool:
        # 'hustled' 的 'L' 與 'D' 之間沒有母音，不需保留
        if (
            self.encode_vowels
            and not self.is_vowel(save_current - 1)
            and self.char_at(save_current + 1) == "E"
            and save_current > 1
            and save_current + 1 != self.last
            and not (self.string_at(save_current + 1, 2, "ES", "ED") and save_current + 2 == self.last)
            and not self.string_at(save_current - 1, 5, "RLEST")
        ):
            self.add("LA")
            self.current = self.skip_vowels(self.current)
            return True

        return False

    def encode_le_cases(self, save_current: int) -> None:
        if self.encode_vowel_le_transposition(save_current):
            return

        if self.encode_vowel_preserve_vowel_after_l(save_current):
            return

        self.add("L")

    # =========================================================================
    # M
    # =========================================================================

    def encode_m(self) -> None:
        if (
            self.encode_silent_m_at_beginning()
            or self.encode_mr_and_mrs()
            or self.encode_mac()
            or self.encode_mpt()
        ):
            return

        # "-MB" 中不發音的 'B' 在這裡一併跳過
        self.encode_mb()

        self.add("M")

    def encode_silent_m_at_beginning(self) -> bool:
        # 'mnemonic'
        if self.current == 0 and self.string_at(self.current, 2, "MN"):
            self.current += 1
            return True

        return False

    def encode_mr_and_mrs(self) -> bool:
        if self.current == 0 and self.string_at(self.current, 2, "MR"):
            # "mr." 與 "mrs."
            if self.length == 2 and self.string_at(self.current, 2, "MR"):
                if self.encode_vowels:
                    self.add("MASTAR")
                else:
                    self.add("MSTR")
                self.current += 2
                return True
            elif self.length == 3 and self.string_at(self.current, 3, "MRS"):
                if self.encode_vowels:
                    self.add("MASAS")
                else:
                    self.add("MSS")
                self.current += 3
                return True

        return False

    def encode_mac(self) -> bool:
        # 愛爾蘭與蘇格蘭姓氏：'macintosh'、'mcgee'
        if self.current == 0 and (
            self.string_at(0, 7, "MACIVER", "MACEWEN")
            or self.string_at(0, 8, "MACELROY", "MACILROY")
            or self.string_at(0, 9, "MACINTOSH")
            or self.string_at(0, 2, "MC")
        ):
            if self.encode_vowels:
                self.add("MAK")
            else:
                self.add("MK")

            if self.string_at(0, 2, "MC"):
                # 'McGeorge' 的 'G' 另外編碼
                if self.string_at(self.current + 2, 1, "K", "G", "Q") and not self.string_at(
                    self.current + 2, 4, "GEOR"
                ):
                    self.current += 3
                else:
                    self.current += 2
            else:
                self.current += 3
            return True

        return False

    def encode_mpt(self) -> bool:
        # 'comptroller'、'accompt'
        if self.string_at(self.current - 2, 8, "COMPTROL") or self.string_at(self.current - 4, 7, "ACCOMPT"):
            self.add("N")
            self.current += 2
            return True

        return False

    def test_silent_mb_1(self) -> bool:
        # 'lamb'、'comb'、'limb'、'dumb'、'bomb'，先處理組合詞根
        return (self.current == 3 and self.string_at(self.current - 3, 5, "THUMB")) or (
            self.current == 2
            and self.string_at(self.current - 2, 4, "DUMB", "BOMB", "DAMN", "LAMB", "NUMB", "TOMB")
        )

    def test_pronounced_mb(self) -> bool:
        return (
            self.string_at(self.current - 2, 6, "NUMBER")
            or (self.string_at(self.current + 2, 1, "A") and not self.string_at(self.current - 2, 7, "DUMBASS"))
            or self.string_at(self.current + 2, 1, "O")
            or self.string_at(self.current - 2, 6, "LAMBEN", "LAMBER", "LAMBET", "TOMBIG", "LAMBRE")
        )

    def test_silent_mb_2(self) -> bool:
        """"-MB" 在詞根結尾，後面接常見名詞字尾：'climbing' => KLMNK、'bomber'"""
        return (
            self.char_at(self.current + 1) == "B"
            and self.current > 1
            and (
                self.current + 1 == self.last
                or self.string_at(self.current + 2, 3, "ING", "ABL")
                or self.string_at(self.current + 2, 4, "LIKE")
                or (self.char_at(self.current + 2) == "S" and self.current + 2 == self.last)
                or self.string_at(self.current - 5, 7, "BUNCOMB")
                or (
                    self.string_at(self.current + 2, 2, "ED", "ER")
                    and self.current + 3 == self.last
                    and (
                        self.string_at(0, 5, "CLIMB", "PLUMB")
                        # 'beachcomber'
                        or not self.string_at(self.current - 1, 5, "IMBER", "AMBER", "EMBER", "UMBER")
                    )
                    and not self.string_at(self.current - 2, 6, "CUMBER", "SOMBER")
                )
            )
        )

    def test_pronounced_mb_2(self) -> bool:
        # 'bombastic'、'umbrage'、'flamboyant'
        return self.string_at(self.current - 1, 5, "OMBAS", "OMBAD", "UMBRA") or self.string_at(
            self.current - 3, 4, "FLAM"
        )

    def test_mn(self) -> bool:
        # 'damn'、'hymn'，以及後接字尾的形式
        return self.char_at(self.current + 1) == "N" and (
            self.current + 1 == self.last
            or (self.string_at(self.current + 2, 3, "ING", "EST") and self.current + 4 == self.last)
            or (self.char_at(self.current + 2) == "S" and self.current + 2 == self.last)
            or (self.string_at(self.current + 2, 2, "LY", "ER", "ED") and self.current + 3 == self.last)
            or self.string_at(self.current - 2, 9, "DAMNEDEST")
            or self.string_at(self.current - 5, 9, "GODDAMNIT")
        )

    def encode_mb(self) -> None:
        if self.test_silent_mb_1():
            if self.test_pronounced_mb():
                self.current += 1
            else:
                self.current += 2
        elif self.test_silent_mb_2():
            if self.test_pronounced_mb_2():
                self.current += 1
            else:
                self.current += 2
        elif self.test_mn():
            self.current += 2
        else:
            # 多餘的 'M'
            if self.char_at(self.current + 1) == "M":
                self.current += 2
            else:
                self.current += 1

    # =========================================================================
    # N
    # =========================================================================

    def encode_n(self) -> None:
        if self.encode_nce():
            return

        # 多餘的 'N'
        if self.char_at(self.current + 1) == "N":
            self.current += 2
        else:
            self.current += 1

        # 'monsieur'、'aloneness'
        if not self.string_at(self.current - 3, 8, "MONSIEUR") and not self.string_at(
            self.current - 3, 6, "NENESS"
        ):
            self.add("N")

    def encode_nce(self) -> bool:
        # 'acceptance'、'accountancy'
        if (
            self.string_at(self.current + 1, 1, "C", "S")
            and self.string_at(self.current + 2, 1, "E", "Y", "I")
            and (
                self.current + 2 == self.last
                or (self.current + 3 == self.last and self.char_at(self.current + 3) == "S")
            )
        ):
            self.add("NTS")
            self.current += 2
            return True

        return False
