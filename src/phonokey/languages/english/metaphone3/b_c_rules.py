"""
'B' 與 'C' 規則

'C' 是規則最多的字母之一："-CH-" 依語源可能讀作 X、K、H 或不發音，
"-CC-"、"-CE-"、"-CI-" 也有大量義大利語、西班牙語與拉丁語的例外。
"""


class BCRules:
    """'B'、'C' 的規則串（mixin，依附 EncodingPass）"""

    # =========================================================================
    # B
    # =========================================================================

    def encode_b(self) -> None:
        if self.encode_silent_b():
            return

        # "-mb" (如 "dumb") 已在 'M' 處理時跳過
        self.add_exact_approx("B", "P")

        if self.char_at(self.current + 1) == "B" or (
            self.char_at(self.current + 1) == "P"
            and (self.current + 1 < self.last and self.char_at(self.current + 2) != "H")
        ):
            self.current += 2
        else:
            self.current += 1

    def encode_silent_b(self) -> bool:
        """'-mb-' 以外不發音的 'B'：'debt'、'doubt'、'subtle'"""
        if (
            self.string_at(self.current - 2, 4, "DEBT")
            or self.string_at(self.current - 2, 5, "SUBTL")
            or self.string_at(self.current - 2, 6, "SUBTIL")
            or self.string_at(self.current - 3, 5, "DOUBT")
        ):
            self.add("T")
            self.current += 2
            return True

        return False

    # =========================================================================
    # C
    # =========================================================================

    def encode_c(self) -> None:
        if (
            self.encode_silent_c_at_beginning()
            or self.encode_ca_to_s()
            or self.encode_co_to_s()
            or self.encode_ch()
            or self.encode_ccia()
            or self.encode_cc()
            or self.encode_ck_cg_cq()
            or self.encode_c_front_vowel()
            or self.encode_silent_c()
            or self.encode_cz()
            or self.encode_cs()
        ):
            return

        if not self.string_at(self.current - 1, 1, "C", "K", "G", "Q"):
            self.add("K")

        # 名字中間有空白: 'mac caffrey'、'mac gregor'
        if self.string_at(self.current + 1, 2, " C", " Q", " G"):
            self.current += 2
        else:
            if self.string_at(self.current + 1, 1, "C", "K", "Q") and not self.string_at(
                self.current + 1, 2, "CE", "CI"
            ):
                self.current += 2
                # 例如 Ro-ckc-liffe
                if self.string_at(self.current, 1, "C", "K", "Q") and not self.string_at(
                    self.current + 1, 2, "CE", "CI"
                ):
                    self.current += 1
            else:
                self.current += 1

    def encode_silent_c_at_beginning(self) -> bool:
        if self.current == 0 and self.string_at(self.current, 2, "CT", "CN"):
            self.current += 1
            return True

        return False

    def encode_ca_to_s(self) -> bool:
        """"-CA-" 讀作 S 的例外（含漏寫 cedilla 的情況）：'caesar'、"linguica" => LNKS"""
        if (
            (self.current == 0 and self.string_at(self.current, 4, "CAES", "CAEC", "CAEM"))
            or self.string_at(0, 8, "FRANCAIS", "FRANCAIX", "LINGUICA")
            or self.string_at(0, 6, "FACADE")
            or self.string_at(0, 9, "GONCALVES", "PROVENCAL")
        ):
            self.add("S")
            self.advance_counter(2, 1)
            return True

        return False

    def encode_co_to_s(self) -> bool:
        """"-CO-" 讀作 S 的例外：'coelecanth' => SLKN0"""
        if (
            (
                self.string_at(self.current, 4, "COEL")
                and (self.is_vowel(self.current + 4) or self.current + 3 == self.last)
            )
            or self.string_at(self.current, 5, "COENA", "COENO")
            or self.string_at(0, 8, "FRANCOIS", "MELANCON")
            or self.string_at(0, 6, "GARCON")
        ):
            self.add("S")
            self.advance_counter(3, 1)
            return True

        return False

    def encode_ch(self) -> bool:
        if not self.string_at(self.current, 2, "CH"):
            return False

        # encode_ch_to_x() 必須先於德語與希臘語的判斷
        if (
            self.encode_chae()
            or self.encode_ch_to_h()
            or self.encode_silent_ch()
            or self.encode_arch()
            or self.encode_ch_to_x()
            or self.encode_english_ch_to_k()
            or self.encode_germanic_ch_to_k()
            or self.encode_greek_ch_initial()
            or self.encode_greek_ch_non_initial()
        ):
            return True

        if self.current > 0:
            if self.string_at(0, 2, "MC") and self.current == 1:
                # "McHugh"
                self.add("K")
            else:
                self.add("X", "K")
        else:
            self.add("X")
        self.current += 2
        return True

    def encode_chae(self) -> bool:
        # 'michael'
        if self.current > 0 and self.string_at(self.current + 2, 2, "AE"):
            if self.string_at(0, 7, "RACHAEL"):
                self.add("X")
            elif not self.string_at(self.current - 1, 1, "C", "K", "G", "Q"):
                self.add("K")

            self.advance_counter(4, 2)
            return True

        return False

    def encode_ch_to_h(self) -> bool:
        """
        希伯來語轉寫中以 "-CH-" 表示 'kh' 音

        英語通常讀作 'h'，替代拼法也多用 "-H-"：'channukah'、'chabad'
        """
        if (
            self.current == 0
            and (
                self.string_at(self.current + 2, 3, "AIM", "ETH", "ELM")
                or self.string_at(self.current + 2, 4, "ASID", "AZAN")
                or self.string_at(self.current + 2, 5, "UPPAH", "UTZPA", "ALLAH", "ALUTZ", "AMETZ")
                or self.string_at(self.current + 2, 6, "ESHVAN", "ADARIM", "ANUKAH")
                or self.string_at(self.current + 2, 7, "ALLLOTH", "ANNUKAH", "AROSETH")
            )
        ) or self.string_at(self.current - 3, 7, "CLACHAN"):
            # 以及同樣編碼的愛爾蘭姓氏
            self.add("H")
            self.advance_counter(3, 2)
            return True

        return False

    def encode_silent_ch(self) -> bool:
        if (
            self.string_at(self.current - 2, 7, "FUCHSIA")
            or self.string_at(self.current - 2, 5, "YACHT")
            or self.string_at(0, 8, "STRACHAN")
            or self.string_at(0, 8, "CRICHTON")
            or (
                self.string_at(self.current - 3, 6, "DRACHM")
                and not self.string_at(self.current - 3, 7, "DRACHMA")
            )
        ):
            self.current += 2
            return True

        return False

    def encode_ch_to_x(self) -> bool:
        """英語模式下 "-CH-" => X：'approach'、'beach'、'dacha'、'macho'"""
        if (
            (
                self.string_at(self.current - 2, 4, "OACH", "EACH", "EECH", "OUCH", "OOCH", "MUCH", "SUCH")
                and not self.string_at(self.current - 3, 5, "JOACH")
            )
            or (self.current + 2 == self.last and self.string_at(self.current - 1, 4, "ACHA", "ACHO"))
            or (self.string_at(self.current, 4, "CHOT", "CHOD", "CHAT") and self.current + 3 == self.last)
            or (
                (self.string_at(self.current - 1, 4, "OCHE") and self.current + 2 == self.last)
                and not self.string_at(self.current - 2, 5, "DOCHE")
            )
            or self.string_at(self.current - 4, 6, "ATTACH", "DETACH", "KOVACH")
            or self.string_at(self.current - 5, 7, "SPINACH")
            or self.string_at(0, 6, "MACHAU")
            or self.string_at(self.current - 4, 8, "PARACHUT")
            or self.string_at(self.current - 5, 8, "MASSACHU")
            or (
                self.string_at(self.current - 3, 5, "THACH")
                and not self.string_at(self.current - 1, 4, "ACHE")
            )
            or self.string_at(self.current - 2, 6, "VACHON")
        ):
            self.add("X")
            self.current += 2
            return True

        return False

    def encode_english_ch_to_k(self) -> bool:
        """字首 "A"/"E" 後接 "CH" => K：'ache'、'echo'、'michael' 的異體"""
        if (
            (self.current == 1 and self.root_or_inflections(self.word, "ACHE"))
            or (
                (
                    self.current > 3
                    and self.root_or_inflections(self.word[self.current - 1:], "ACHE")
                )
                and (
                    self.string_at(0, 3, "EAR")
                    or self.string_at(0, 4, "HEAD", "BACK")
                    or self.string_at(0, 5, "HEART", "BELLY", "TOOTH")
                )
            )
            or self.string_at(self.current - 1, 4, "ECHO")
            or self.string_at(self.current - 2, 7, "MICHEAL")
            or self.string_at(self.current - 4, 7, "JERICHO")
            or self.string_at(self.current - 5, 7, "LEPRECH")
        ):
            self.add("K", "X")
            self.current += 2
            return True

        return False

    def encode_germanic_ch_to_k(self) -> bool:
        """
        德語語境的 "-ACH-" => K

        "<子音><母音>CH-" 暗示德語字；例外另列。
        """
        if (
            (
                self.current > 1
                and not self.is_vowel(self.current - 2)
                and self.string_at(self.current - 1, 3, "ACH")
                and not self.string_at(self.current - 2, 7, "MACHADO", "MACHUCA", "LACHANC", "LACHAPE", "KACHATU")
                and not self.string_at(self.current - 3, 7, "KHACHAT")
                and (
                    self.char_at(self.current + 2) != "I"
                    and (
                        self.char_at(self.current + 2) != "E"
                        or self.string_at(self.current - 2, 6, "BACHER", "MACHER", "MACHEN", "LACHER")
                    )
                )
                # 'brecht'、'fuchs'
                or (
                    self.string_at(self.current + 2, 1, "T", "S")
                    and not (self.string_at(0, 11, "WHICHSOEVER") or self.string_at(0, 9, "LUNCHTIME"))
                )
                # 'andromache'
                or self.string_at(0, 4, "SCHR")
                or (self.current > 2 and self.string_at(self.current - 2, 5, "MACHE"))
                or (self.current == 2 and self.string_at(self.current - 2, 4, "ZACH"))
                or self.string_at(self.current - 4, 6, "SCHACH")
                or self.string_at(self.current - 1, 5, "ACHEN")
                or self.string_at(self.current - 3, 5, "SPICH", "ZURCH", "BUECH")
                or (
                    self.string_at(self.current - 3, 5, "KIRCH", "JOACH", "BLECH", "MALCH")
                    # "kirch" 與 "blech" 都編成 'X'
                    and not (self.string_at(self.current - 3, 8, "KIRCHNER") or self.current + 1 == self.last)
                )
                or (self.current + 1 == self.last and self.string_at(self.current - 2, 4, "NICH", "LICH", "BACH"))
                or (
                    self.current + 1 == self.last
                    and self.string_at(self.current - 3, 5, "URICH", "BRICH", "ERICH", "DRICH", "NRICH")
                    and not self.string_at(self.current - 5, 7, "ALDRICH")
                    and not self.string_at(self.current - 6, 8, "GOODRICH")
                    and not self.string_at(self.current - 7, 9, "GINGERICH")
                )
            )
            or (
                self.current + 1 == self.last
                and self.string_at(self.current - 4, 6, "ULRICH", "LFRICH", "LLRICH", "EMRICH", "ZURICH", "EYRICH")
            )
            # 'wachtler'、'wechsler'，但不含 'tichner'
            or (
                (self.string_at(self.current - 1, 1, "A", "O", "U", "E") or self.current == 0)
                and self.string_at(self.current + 2, 1, "L", "R", "N", "M", "B", "H", "F", "V", "W", " ")
            )
        ):
            # "CHR/L-" 如 'chris' 不給 'X' 副讀音
            if self.string_at(self.current + 2, 1, "R", "L") or self.slavo_germanic():
                self.add("K")
            else:
                self.add("K", "X")
            self.current += 2
            return True

        return False

    def encode_arch(self) -> bool:
        """
        "-ARCH-"

        希臘詞根的組合形式讀作 'K'，英語字則讀作 'X'。
        """
        if not self.string_at(self.current - 2, 4, "ARCH"):
            return False

        if (
            (
                (
                    self.is_vowel(self.current + 2)
                    and self.string_at(self.current - 2, 5, "ARCHA", "ARCHI", "ARCHO", "ARCHU", "ARCHY")
                )
                or self.string_at(
                    self.current - 2, 6,
                    "ARCHEA", "ARCHEG", "ARCHEO", "ARCHET", "ARCHEL", "ARCHES", "ARCHEP", "ARCHEM", "ARCHEN",
                )
                or (self.string_at(self.current - 2, 4, "ARCH") and self.current + 1 == self.last)
                or self.string_at(0, 7, "MENARCH")
            )
            and (
                not self.root_or_inflections(self.word, "ARCH")
                and not self.string_at(self.current - 4, 6, "SEARCH", "POARCH")
                and not self.string_at(0, 9, "ARCHENEMY", "ARCHIBALD", "ARCHULETA", "ARCHAMBAU")
                and not self.string_at(0, 6, "ARCHER", "ARCHIE")
                and not (
                    (
                        (
                            (
                                self.string_at(self.current - 3, 5, "LARCH", "MARCH", "PARCH")
                                or self.string_at(self.current - 4, 6, "STARCH")
                            )
                            and not (
                                self.string_at(0, 6, "EPARCH")
                                or self.string_at(0, 7, "NOMARCH")
                                or self.string_at(0, 8, "EXILARCH", "HIPPARCH", "MARCHESE")
                                or self.string_at(0, 9, "ARISTARCH")
                                or self.string_at(0, 9, "MARCHETTI")
                            )
                        )
                        or self.root_or_inflections(self.word, "STARCH")
                    )
                    and (
                        not self.string_at(self.current - 2, 5, "ARCHU", "ARCHY")
                        or self.string_at(0, 7, "STARCHY")
                    )
                )
            )
        ):
            self.add("K", "X")
        else:
            self.add("X")
        self.current += 2
        return True

    def encode_greek_ch_initial(self) -> bool:
        """希臘詞根字首的 "CH" => K：'chemistry'、'chorus'"""
        if (
            (
                self.string_at(
                    self.current, 6,
                    "CHAMOM", "CHARAC", "CHARIS", "CHARTO", "CHARTU", "CHARYB", "CHRIST", "CHEMIC", "CHILIA",
                )
                or (
                    self.string_at(
                        self.current, 5,
                        "CHEMI", "CHEMO", "CHEMU", "CHEMY", "CHOND", "CHONA", "CHONI", "CHOIR", "CHASM",
                        "CHARO", "CHROM", "CHROI", "CHAMA", "CHALC", "CHALD", "CHAET", "CHIRO", "CHILO",
                        "CHELA", "CHOUS", "CHEIL", "CHEIR", "CHEIM", "CHITI", "CHEOP",
                    )
                    and not (
                        self.string_at(self.current, 6, "CHEMIN")
                        or self.string_at(self.current - 2, 8, "ANCHONDO")
                    )
                )
                or (
                    self.string_at(self.current, 5, "CHISM", "CHELI")
                    # 排除西語 "machismo" 與部分法語字
                    and not (
                        self.string_at(0, 8, "MACHISMO")
                        or self.string_at(0, 10, "REVANCHISM")
                        or self.string_at(0, 9, "RICHELIEU")
                        or (self.string_at(0, 5, "CHISM") and self.length == 5)
                        or self.string_at(0, 6, "MICHEL")
                    )
                )
                # "chorus"、"chyme"、"chaos"
                or (
                    self.string_at(self.current, 4, "CHOR", "CHOL", "CHYM", "CHYL", "CHLO", "CHOS", "CHUS", "CHOE")
                    and not self.string_at(0, 6, "CHOLLO", "CHOLLA", "CHORIZ")
                )
                # "chaos" => K，但 "chao" 不是
                or (self.string_at(self.current, 4, "CHAO") and self.current + 3 != self.last)
                # "abranchiate"
                or (
                    self.string_at(self.current, 4, "CHIA")
                    and not (self.string_at(0, 10, "APPALACHIA") or self.string_at(0, 7, "CHIAPAS"))
                )
                # "chimera"
                or self.string_at(self.current, 7, "CHIMERA", "CHIMAER", "CHIMERI")
                # "chameleon"
                or (self.current == 0 and self.string_at(self.current, 5, "CHAME", "CHELO", "CHITO"))
                # "spirochete"
                or (
                    (self.current + 4 == self.last or self.current + 5 == self.last)
                    and self.string_at(self.current - 1, 6, "OCHETE")
                )
            )
            # 其他 "-CH-" => X 的例外："chortle"、"crocheter"
            and not (
                (self.string_at(0, 5, "CHORE", "CHOLO", "CHOLA") and self.length == 5)
                or self.string_at(self.current, 5, "CHORT", "CHOSE")
                or self.string_at(self.current - 3, 7, "CROCHET")
                or self.string_at(0, 7, "CHEMISE", "CHARISE", "CHARISS", "CHAROLE")
            )
        ):
            # "CHR/L-" 如 'christ'、'chlorine' 不給 'X' 副讀音
            if self.string_at(self.current + 2, 1, "R", "L"):
                self.add("K")
            else:
                self.add("K", "X")
            self.current += 2
            return True

        return False

    def encode_greek_ch_non_initial(self) -> bool:
        """希臘與部分德語詞根中段或字尾的 "-CH-" => K：'tachometer'、'orchid'"""
        if (
            self.string_at(
                self.current - 2, 6,
                "ORCHID", "NICHOL", "MECHAN", "LICHEN", "MACHIC", "PACHEL", "RACHIF", "RACHID",
                "RACHIS", "RACHIC", "MICHAL",
            )
            or self.string_at(
                self.current - 3, 5,
                "MELCH", "GLOCH", "TRACH", "TROCH", "BRACH", "SYNCH", "PSYCH", "STICH", "PULCH", "EPOCH",
            )
            or (
                self.string_at(self.current - 3, 5, "TRICH")
                and not self.string_at(self.current - 5, 7, "OSTRICH")
            )
            or (
                self.string_at(
                    self.current - 2, 4,
                    "TYCH", "TOCH", "BUCH", "MOCH", "CICH", "DICH", "NUCH", "EICH", "LOCH",
                    "DOCH", "ZECH", "WYCH",
                )
                and not (
                    self.string_at(self.current - 4, 9, "INDOCHINA")
                    or self.string_at(self.current - 2, 6, "BUCHON")
                )
            )
            or self.string_at(self.current - 2, 5, "LYCHN", "TACHO", "ORCHO", "ORCHI", "LICHO")
            or (
                self.string_at(self.current - 1, 5, "OCHER", "ECHIN", "ECHID")
                and (self.current == 1 or self.current == 2)
            )
            or self.string_at(
                self.current - 4, 6,
                "BRONCH", "STOICH", "STRYCH", "TELECH", "PLANCH", "CATECH", "MANICH", "MALACH",
                "BIANCH", "DIDACH",
            )
            or (self.string_at(self.current - 1, 4, "ICHA", "ICHN") and self.current == 1)
            or self.string_at(self.current - 2, 8, "ORCHESTR")
            or self.string_at(self.current - 4, 8, "BRANCHIO", "BRANCHIF")
            or (
                self.string_at(self.current - 1, 5, "ACHAB", "ACHAD", "ACHAN", "ACHAZ")
                and not self.string_at(self.current - 2, 7, "MACHADO", "LACHANC")
            )
            or self.string_at(self.current - 1, 6, "ACHISH", "ACHILL", "ACHAIA", "ACHENE")
            or self.string_at(self.current - 1, 7, "ACHAIAN", "ACHATES", "ACHIRAL", "ACHERON")
            or self.string_at(
                self.current - 1, 8,
                "ACHILLEA", "ACHIMAAS", "ACHILARY", "ACHELOUS", "ACHENIAL", "ACHERNAR",
            )
            or self.string_at(self.current - 1, 9, "ACHALASIA", "ACHILLEAN", "ACHIMENES")
            or self.string_at(self.current - 1, 10, "ACHIMELECH", "ACHITOPHEL")
            # 'inchoate'、'ischemia'
            or (
                self.current - 2 == 0
                and (self.string_at(self.current - 2, 6, "INCHOA") or self.string_at(0, 4, "ISCH"))
            )
            # 'ablimelech'、'antioch'、'pentateuch'
            or (
                self.current + 1 == self.last
                and self.string_at(self.current - 1, 1, "A", "O", "U", "E")
                and not (
                    self.string_at(0, 7, "DEBAUCH")
                    or self.string_at(self.current - 2, 4, "MUCH", "SUCH", "KOCH")
                    or self.string_at(self.current - 5, 7, "OODRICH", "ALDRICH")
                )
            )
        ):
            self.add("K", "X")
            self.current += 2
            return True

        return False

    def encode_ccia(self) -> bool:
        """義大利語 "-CCIA-"：'focaccia'"""
        if self.string_at(self.current + 1, 3, "CIA"):
            self.add("X", "S")
            self.current += 2
            return True

        return False

    def encode_cc(self) -> bool:
        # 雙 'C'，但不含 'McClellan'
        if not (
            self.string_at(self.current, 2, "CC")
            and not (self.current == 1 and self.char_at(0) == "M")
        ):
            return False

        if self.string_at(self.current - 3, 7, "FLACCID"):
            self.add("S")
            self.advance_counter(3, 2)
            return True

        # 'bacci'、'bertucci' 等義大利語
        if (
            (self.current + 2 == self.last and self.string_at(self.current + 2, 1, "I"))
            or self.string_at(self.current + 2, 2, "IO")
            or (self.current + 4 == self.last and self.string_at(self.current + 2, 3, "INO", "INI"))
        ):
            self.add("X")
            self.advance_counter(3, 2)
            return True

        # 'accident'、'accede'、'succeed'
        # 但 'bellocchio'、'bacchus'、'soccer' 讀作 K
        if self.string_at(self.current + 2, 1, "I", "E", "Y") and not (
            self.char_at(self.current + 2) == "H"
            or self.string_at(self.current - 2, 6, "SOCCER")
        ):
            self.add("KS")
            self.advance_counter(3, 2)
            return True

        # Pierce's rule
        self.add("K")
        self.current += 2
        return True

    def encode_ck_cg_cq(self) -> bool:
        """'C' 後面的子音多餘"""
        if self.string_at(self.current, 2, "CK", "CG", "CQ"):
            # 東歐拼法: 'gorecki' == 'goresky'
            if (
                self.string_at(self.current, 3, "CKI", "CKY")
                and self.current + 2 == self.last
                and self.length > 6
            ):
                self.add("K", "SK")
            else:
                self.add("K")
            self.current += 2

            if self.string_at(self.current, 1, "K", "G", "Q"):
                self.current += 1
            return True

        return False

    def encode_c_front_vowel(self) -> bool:
        """'C' 後接前母音 E、I、Y，多半讀作 S 或 X"""
        if self.string_at(self.current, 2, "CI", "CE", "CY"):
            if (
                self.encode_british_silent_ce()
                or self.encode_ce()
                or self.encode_ci()
                or self.encode_latinate_suffixes()
            ):
                self.advance_counter(2, 1)
                return True

            self.add("S")
            self.advance_counter(2, 1)
            return True

        return False

    def encode_british_silent_ce(self) -> bool:
        # 英國地名: 'gloucester' 讀作 glo-ster
        return (
            self.string_at(self.current + 1, 5, "ESTER") and self.current + 5 == self.last
        ) or self.string_at(self.current + 1, 10, "ESTERSHIRE")

    def encode_ce(self) -> bool:
        # 'ocean'、'commercial'、'provincial'、'cello'、'fettucini'、'medici'
        if (
            (self.string_at(self.current + 1, 3, "EAN") and self.is_vowel(self.current - 1))
            # 'rosacea'
            or (
                self.string_at(self.current - 1, 4, "ACEA")
                and self.current + 2 == self.last
                and not self.string_at(0, 7, "PANACEA")
            )
            # 'botticelli'、'concerto'
            or self.string_at(self.current + 1, 4, "ELLI", "ERTO", "EORL")
            # 美國人熟悉的義大利姓名
            or (self.string_at(self.current - 3, 5, "CROCE") and self.current + 1 == self.last)
            or self.string_at(self.current - 3, 5, "DOLCE")
            # 'cello'
            or (self.string_at(self.current + 1, 4, "ELLO") and self.current + 4 == self.last)
        ):
            self.add("X", "S")
            return True

        return False

    def encode_ci(self) -> bool:
        # 'C' 前是子音: 'fettucini'，但 'mancini' 依美式讀法例外
        if (
            (
                (self.string_at(self.current + 1, 3, "INI") and not self.string_at(0, 7, "MANCINI"))
                and self.current + 3 == self.last
            )
            # 'medici'
            or (self.string_at(self.current - 1, 3, "ICI") and self.current + 1 == self.last)
            # 'commercial'、'provincial'、'cistercian'
            or self.string_at(self.current - 1, 5, "RCIAL", "NCIAL", "RCIAN", "UCIUS")
            or self.string_at(self.current - 3, 6, "MARCIA")
            or self.string_at(self.current - 2, 7, "ANCIENT")
        ):
            self.add("X", "S")
            return True

        # 'C' 前是母音（或在字首）
        if (
            (
                self.string_at(self.current, 3, "CIO", "CIE", "CIA") and self.is_vowel(self.current - 1)
            )
            # "ciao"
            or self.string_at(self.current + 1, 3, "IAO")
        ) and not self.string_at(self.current - 4, 8, "COERCION"):
            if (
                self.string_at(self.current, 4, "CIAN", "CIAL", "CIAO", "CIES", "CIOL", "CION")
                # "glacier" => 'X'，但 "spacier" => 'S'
                or self.string_at(self.current - 3, 7, "GLACIER")
                or self.string_at(
                    self.current, 5,
                    "CIENT", "CIENC", "CIOUS", "CIATE", "CIATI", "CIATO", "CIABL", "CIARY",
                )
                or (self.current + 2 == self.last and self.string_at(self.current, 3, "CIA", "CIO"))
                or (self.current + 3 == self.last and self.string_at(self.current, 3, "CIAS", "CIOS"))
            ) and not (
                self.string_at(self.current - 4, 11, "ASSOCIATION")
                or self.string_at(0, 4, "OCIE")
                # 在美國這些名字多半來自西語而非義語
                or self.string_at(self.current - 2, 5, "LUCIO")
                or self.string_at(self.current - 2, 6, "MACIAS")
                or self.string_at(self.current - 3, 6, "GRACIE", "GRACIA")
                or self.string_at(self.current - 2, 7, "LUCIANO")
                or self.string_at(self.current - 3, 8, "MARCIANO")
                or self.string_at(self.current - 4, 7, "PALACIO")
                or self.string_at(self.current - 4, 9, "FELICIANO")
                or self.string_at(self.current - 5, 8, "MAURICIO")
                or self.string_at(self.current - 7, 11, "ENCARNACION")
                or self.string_at(self.current - 4, 8, "POLICIES")
                or self.string_at(self.current - 2, 8, "HACIENDA")
                or self.string_at(self.current - 6, 9, "ANDALUCIA")
                or self.string_at(self.current - 2, 5, "SOCIO", "SOCIE")
            ):
                self.add("X", "S")
            else:
                self.add("S", "X")

            return True

        if self.string_at(self.current - 4, 8, "COERCION"):
            self.add("J")
            return True

        return False

    def encode_latinate_suffixes(self) -> bool:
        if self.string_at(self.current + 1, 4, "EOUS", "IOUS"):
            self.add("X", "S")
            return True

        return False

    def encode_silent_c(self) -> bool:
        if self.string_at(self.current + 1, 1, "T", "S"):
            if self.string_at(0, 11, "CONNECTICUT") or self.string_at(0, 6, "INDICT", "TUCSON"):
                self.current += 1
                return True

        return False

    def encode_cz(self) -> bool:
        """斯拉夫語拼寫或轉寫的 "-CZ-" """
        if self.string_at(self.current + 1, 1, "Z") and not self.string_at(self.current - 1, 6, "ECZEMA"):
            if self.string_at(self.current, 4, "CZAR"):
                self.add("S")
            else:
                # 多半是捷克語
                self.add("X")
            self.current += 2
            return True

        return False

    def encode_cs(self) -> bool:
        # 給 "kovacs" 一個語源上的副鍵，以對上 "kovach"
        if self.string_at(0, 6, "KOVACS"):
            self.add("KS", "X")
            self.current += 2
            return True

        if (
            self.string_at(self.current - 1, 3, "ACS")
            and self.current + 1 == self.last
            and not self.string_at(self.current - 4, 6, "ISAACS")
        ):
            self.add("X")
            self.current += 2
            return True

        return False
