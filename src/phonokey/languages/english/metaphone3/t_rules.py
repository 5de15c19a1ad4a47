"""
'T' 規則

"TH" 編為 '0'（theta）；"-TIO-"、"-TURE" 等處顎化為 X，
另有法語字尾不發音的 'T' 與組合詞中分開發音的 "T-H"。
"""


class TRules:
    """'T' 的規則串（mixin，依附 EncodingPass）"""

    def encode_t(self) -> None:
        if (
            self.encode_t_initial()
            or self.encode_tch()
            or self.encode_silent_french_t()
            or self.encode_tun_tul_tua_tuo()
            or self.encode_tue_teu_teou_tul_tie()
            or self.encode_tur_tiu_suffixes()
            or self.encode_ti()
            or self.encode_tient()
            or self.encode_tsch()
            or self.encode_tzsch()
            or self.encode_th_pronounced_separately()
            or self.encode_tth()
            or self.encode_th()
        ):
            return

        # 多餘的 'T' 或 'D'
        if self.string_at(self.current + 1, 1, "T", "D"):
            self.current += 2
        else:
            self.current += 1

        self.add("T")

    def encode_t_initial(self) -> bool:
        if self.current != 0:
            return False

        # 美國人通常把 "tzar" 讀成 "zar"
        if self.string_at(self.current + 1, 3, "SAR", "ZAR"):
            self.current += 1
            return True

        # 舊式漢語拼音（法國遠東學院）'ts-' => 'X'
        if (
            (self.length == 3 and self.string_at(self.current + 1, 2, "SO", "SA", "SU"))
            or (self.length == 4 and self.string_at(self.current + 1, 3, "SAO", "SAI"))
            or (self.length == 5 and self.string_at(self.current + 1, 4, "SING", "SANG"))
        ):
            self.add("X")
            self.advance_counter(3, 2)
            return True

        # 字首 "TS<母音>-" 可讀可不讀 'T'
        if self.string_at(self.current + 1, 1, "S") and self.is_vowel(self.current + 2):
            self.add("TS", "S")
            self.advance_counter(3, 2)
            return True

        # 'tjaarda'
        if self.string_at(self.current + 1, 1, "J"):
            self.add("X")
            self.advance_counter(3, 2)
            return True

        # 字首 "TH-" 讀作 T 而不是 0
        if (
            (self.string_at(self.current + 1, 2, "HU") and self.length == 3)
            or self.string_at(self.current + 1, 3, "HAI", "HUY", "HAO")
            or self.string_at(self.current + 1, 4, "HYME", "HYMY", "HANH")
            or self.string_at(self.current + 1, 5, "HERES")
        ):
            self.add("T")
            self.advance_counter(3, 2)
            return True

        return False

    def encode_tch(self) -> bool:
        if self.string_at(self.current + 1, 2, "CH"):
            self.add("X")
            self.current += 3
            return True

        return False

    def encode_silent_french_t(self) -> bool:
        # 美國人熟悉、字尾 'T' 不發音的法語字
        if (
            (self.current == self.last and self.string_at(self.current - 4, 5, "MONET", "GENET", "CHAUT"))
            or self.string_at(self.current - 2, 9, "POTPOURRI")
            or self.string_at(self.current - 3, 9, "BOATSWAIN")
            or self.string_at(self.current - 3, 8, "MORTGAGE")
            or (
                (
                    self.string_at(
                        self.current - 4, 5, "BERET", "BIDET", "FILET", "DEBUT", "DEPOT", "PINOT", "TAROT"
                    )
                    or self.string_at(
                        self.current - 5, 6,
                        "BALLET", "BUFFET", "CACHET", "CHALET", "ESPRIT", "RAGOUT", "GOULET", "CHABOT", "BENOIT",
                    )
                    or self.string_at(
                        self.current - 6, 7,
                        "GOURMET", "BOUQUET", "CROCHET", "CROQUET", "PARFAIT", "PINCHOT", "CABARET", "PARQUET",
                        "RAPPORT", "TOUCHET", "COURBET", "DIDEROT",
                    )
                    or self.string_at(
                        self.current - 7, 8,
                        "ENTREPOT", "CABERNET", "DUBONNET", "MASSENET", "MUSCADET", "RICOCHET", "ESCARGOT",
                    )
                    or self.string_at(
                        self.current - 8, 9, "SOBRIQUET", "CABRIOLET", "CASSOULET", "OUBRIQUET", "CAMEMBERT"
                    )
                )
                and not self.string_at(self.current + 1, 2, "AN", "RY", "IC", "OM", "IN")
            )
        ):
            self.current += 1
            return True

        return False

    def encode_tun_tul_tua_tuo(self) -> bool:
        # 'fortune'、'capitulate'、'obituary'、'actual'
        if (
            self.string_at(self.current - 3, 6, "FORTUN")
            or (
                self.string_at(self.current, 3, "TUL")
                and (self.is_vowel(self.current - 1) and self.is_vowel(self.current + 3))
            )
            or self.string_at(self.current - 2, 5, "BITUA", "BITUE")
            or (self.current > 1 and self.string_at(self.current, 3, "TUA", "TUO"))
        ):
            self.add("X", "T")
            self.current += 1
            return True

        return False

    def encode_tue_teu_teou_tul_tie(self) -> bool:
        # 'constituent'、'pasteur'、'statue'、'patience'
        if (
            self.string_at(self.current + 1, 4, "UENT")
            or self.string_at(self.current - 4, 9, "RIGHTEOUS")
            or self.string_at(self.current - 3, 7, "STATUTE")
            or self.string_at(self.current - 3, 7, "AMATEUR")
            # 'blastula'
            or self.string_at(self.current - 1, 5, "NTULE", "NTULA", "STULE", "STULA", "STEUR")
            or (self.current + 2 == self.last and self.string_at(self.current, 3, "TUE"))
            # 'constituency'
            or self.string_at(self.current, 5, "TUENC")
            # 'statutory'
            or self.string_at(self.current - 3, 8, "STATUTOR")
            or (self.current + 5 == self.last and self.string_at(self.current, 6, "TIENCE"))
        ):
            self.add("X", "T")
            self.advance_counter(2, 1)
            return True

        return False

    def encode_tur_tiu_suffixes(self) -> bool:
        # 'adventure'、'musculature'
        if self.current > 0 and self.string_at(self.current + 1, 3, "URE", "URA", "URI", "URY", "URO", "IUS"):
            # 多半來自羅曼語的例外：'tessitura'、'hematuria'
            if (
                (self.string_at(self.current + 1, 3, "URA", "URO") and self.current + 3 == self.last)
                and not self.string_at(self.current - 3, 7, "VENTURA")
            ) or self.string_at(self.current + 1, 4, "URIA"):
                self.add("T")
            else:
                self.add("X", "T")

            self.advance_counter(2, 1)
            return True

        return False

    def encode_ti(self) -> bool:
        # "-TIO-"、"-TIA-"、"-TIU-"，已讀出 'T' 的組合詞（'rooseveltian'）除外
        if (
            (self.string_at(self.current + 1, 2, "IO") and not self.string_at(self.current - 1, 5, "ETIOL"))
            or self.string_at(self.current + 1, 3, "IAL")
            or self.string_at(self.current - 1, 5, "RTIUM", "ATIUM")
            or (
                (self.string_at(self.current + 1, 3, "IAN") and self.current > 0)
                and not (
                    self.string_at(self.current - 4, 8, "FAUSTIAN")
                    or self.string_at(self.current - 5, 9, "PROUSTIAN")
                    or self.string_at(self.current - 2, 7, "TATIANA")
                    or self.string_at(self.current - 3, 7, "KANTIAN", "GENTIAN")
                    or self.string_at(self.current - 8, 12, "ROOSEVELTIAN")
                )
            )
            or (
                self.current + 2 == self.last
                and self.string_at(self.current, 3, "TIA")
                # 通常讀 X 的例外
                and not (
                    self.string_at(self.current - 3, 6, "HESTIA", "MASTIA")
                    or self.string_at(self.current - 2, 5, "OSTIA")
                    or self.string_at(0, 3, "TIA")
                    or self.string_at(self.current - 5, 8, "IZVESTIA")
                )
            )
            or self.string_at(self.current + 1, 4, "IATE", "IATI", "IABL", "IATO", "IARY")
            or self.string_at(self.current - 5, 9, "CHRISTIAN")
        ):
            if (self.current == 2 and self.string_at(0, 4, "ANTI")) or self.string_at(
                0, 5, "PATIO", "PITIA", "DUTIA"
            ):
                self.add("T")
            elif self.string_at(self.current - 4, 8, "EQUATION"):
                self.add("J")
            else:
                if self.string_at(self.current, 4, "TION"):
                    self.add("X")
                elif self.string_at(0, 5, "KATIA", "LATIA"):
                    self.add("T", "X")
                else:
                    self.add("X", "T")

            self.advance_counter(3, 1)
            return True

        return False

    def encode_tient(self) -> bool:
        # 'patient'
        if self.string_at(self.current + 1, 4, "IENT"):
            self.add("X", "T")
            self.advance_counter(3, 1)
            return True

        return False

    def encode_tsch(self) -> bool:
        # 'deutsch'；德語組合詞中 'T' 分開發音者除外
        if self.string_at(self.current, 4, "TSCH") and not self.string_at(
            self.current - 3, 4, "WELT", "KLAT", "FEST"
        ):
            # 與 "chit" 的 "ch" 同音
            self.add("X")
            self.current += 4
            return True

        return False

    def encode_tzsch(self) -> bool:
        # 'nietzsche'
        if self.string_at(self.current, 5, "TZSCH"):
            self.add("X")
            self.current += 5
            return True

        return False

    def encode_th_pronounced_separately(self) -> bool:
        # 'adulthood'、'bithead'、'apartheid'
        if (
            (
                self.current > 0
                and self.string_at(
                    self.current + 1, 4,
                    "HOOD", "HEAD", "HEID", "HAND", "HILL", "HOLD", "HAWK", "HEAP", "HERD", "HOLE", "HOOK",
                    "HUNT", "HUMO", "HAUS", "HOFF", "HARD",
                )
                and not self.string_at(self.current - 3, 5, "SOUTH", "NORTH")
            )
            or self.string_at(self.current + 1, 5, "HOUSE", "HEART", "HASTE", "HYPNO", "HEQUE")
            # 希臘詞根 "-thallic"
            or (
                self.string_at(self.current + 1, 4, "HALL")
                and self.current + 4 == self.last
                and not self.string_at(self.current - 3, 5, "SOUTH", "NORTH")
            )
            or (
                self.string_at(self.current + 1, 3, "HAM")
                and self.current + 3 == self.last
                and not (
                    self.string_at(0, 6, "GOTHAM", "WITHAM", "LATHAM")
                    or self.string_at(0, 7, "BENTHAM", "WALTHAM", "WORTHAM")
                    or self.string_at(0, 8, "GRANTHAM")
                )
            )
            or (
                self.string_at(self.current + 1, 5, "HATCH")
                and not (self.current == 0 or self.string_at(self.current - 2, 8, "UNTHATCH"))
            )
            or self.string_at(self.current - 3, 7, "WARTHOG")
            # "-TH-" 通常讀 'T' 的特例
            or self.string_at(self.current - 2, 6, "ESTHER")
            or self.string_at(self.current - 3, 6, "GOETHE")
            or self.string_at(self.current - 2, 8, "NATHALIE")
        ):
            if self.string_at(self.current - 3, 7, "POSTHUM"):
                self.add("X")
            else:
                self.add("T")
            self.current += 2
            return True

        return False

    def encode_tth(self) -> bool:
        # 'matthew' 對 'outthink'
        if self.string_at(self.current, 3, "TTH"):
            if self.string_at(self.current - 2, 5, "MATTH"):
                self.add("0")
            else:
                self.add("T0")
            self.current += 3
            return True

        return False

    def encode_th(self) -> bool:
        if not self.string_at(self.current, 2, "TH"):
            return False

        # '-clothes-'：母音已編碼，直接跳到 'S'
        if self.string_at(self.current - 3, 7, "CLOTHES"):
            self.current += 3
            return True

        # 'thomas'、'thames'、'beethoven' 與德語字
        if (
            self.string_at(
                self.current + 2, 4, "OMAS", "OMPS", "OMPK", "OMSO", "OMSE", "AMES", "OVEN", "OFEN", "ILDA", "ILDE"
            )
            or (self.string_at(0, 4, "THOM") and self.length == 4)
            or (self.string_at(0, 5, "THOMS") and self.length == 5)
            or self.string_at(0, 4, "VAN ", "VON ")
            or self.string_at(0, 3, "SCH")
        ):
            self.add("T")
        else:
            # 'smith' 給一個語源上的副鍵
            if self.string_at(0, 2, "SM"):
                self.add("0", "T")
            else:
                self.add("0")

        self.current += 2
        return True
