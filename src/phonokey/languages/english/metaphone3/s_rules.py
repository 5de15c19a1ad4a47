"""
'S' 規則

涵蓋法語字尾不發音的 'S'、"-SCH-" 的荷蘭/德語讀法、
"-SIO-"、"-SIA-" 的顎化，以及 'smith' 對 'schmidt' 這類英語化拼寫。
"""

from ..config import EnglishPhoneticConfig


class SRules:
    """'S' 的規則串（mixin，依附 EncodingPass）"""

    def encode_s(self) -> None:
        if (
            self.encode_skj()
            or self.encode_special_sw()
            or self.encode_sj()
            or self.encode_silent_french_s_final()
            or self.encode_silent_french_s_internal()
            or self.encode_isl()
            or self.encode_stl()
            or self.encode_christmas()
            or self.encode_sthm()
            or self.encode_isten()
            or self.encode_sugar()
            or self.encode_sh()
            or self.encode_sch()
            or self.encode_sur()
            or self.encode_su()
            or self.encode_ssio()
            or self.encode_ss()
            or self.encode_sia()
            or self.encode_sio()
            or self.encode_anglicisations()
            or self.encode_sc()
            or self.encode_sea_sui_sier()
            or self.encode_sea()
        ):
            return

        self.add("S")

        if self.string_at(self.current + 1, 1, "S", "Z") and not self.string_at(self.current + 1, 2, "SH"):
            self.current += 2
        else:
            self.current += 1

    def encode_special_sw(self) -> bool:
        if self.current == 0:
            if self.names_beginning_with_sw_that_get_alt_sv():
                self.add("S", "SV")
                self.current += 2
                return True

            if self.names_beginning_with_sw_that_get_alt_xv():
                self.add("S", "XV")
                self.current += 2
                return True

        return False

    def names_beginning_with_sw_that_get_alt_sv(self) -> bool:
        return self.starts_with_any(EnglishPhoneticConfig.SW_NAMES_ALT_SV)

    def names_beginning_with_sw_that_get_alt_xv(self) -> bool:
        return self.starts_with_any(EnglishPhoneticConfig.SW_NAMES_ALT_XV)

    def encode_skj(self) -> bool:
        # 斯堪地那維亞語
        if self.string_at(self.current, 4, "SKJO", "SKJU") and self.is_vowel(self.current + 3):
            self.add("X")
            self.current += 3
            return True

        return False

    def encode_sj(self) -> bool:
        if self.string_at(0, 2, "SJ"):
            self.add("X")
            self.current += 2
            return True

        return False

    def encode_silent_french_s_final(self) -> bool:
        # "louis" 有兩種讀法
        if self.string_at(0, 5, "LOUIS") and self.current == self.last:
            self.add("S", "")
            self.current += 1
            return True

        # 美國人熟悉、字尾 's' 不發音的法語字
        if (
            self.current == self.last
            and (
                self.string_at(0, 4, "YVES")
                or (self.string_at(0, 4, "HORS") and self.current == 3)
                or self.string_at(self.current - 4, 5, "CAMUS", "YPRES")
                or self.string_at(self.current - 5, 6, "MESNES", "DEBRIS", "BLANCS", "INGRES", "CANNES")
                or self.string_at(
                    self.current - 6, 7, "CHABLIS", "APROPOS", "JACQUES", "ELYSEES", "OEUVRES", "GEORGES", "DESPRES"
                )
                or self.string_at(0, 8, "ARKANSAS", "FRANCAIS", "CRUDITES", "BRUYERES")
                or self.string_at(0, 9, "DESCARTES", "DESCHUTES", "DESCHAMPS", "DESROCHES", "DESCHENES")
                or self.string_at(0, 10, "RENDEZVOUS")
                or self.string_at(0, 11, "CONTRETEMPS", "DESLAURIERS")
            )
        ) or (
            self.current == self.last
            and self.string_at(self.current - 2, 2, "AI", "OI", "UI")
            and not self.string_at(0, 4, "LOIS", "LUIS")
        ):
            self.current += 1
            return True

        return False

    def encode_silent_french_s_internal(self) -> bool:
        # 字中 's' 不發音的法語字
        if (
            self.string_at(self.current - 2, 9, "DESCARTES")
            or self.string_at(
                self.current - 2, 7,
                "DESCHAM", "DESPRES", "DESROCH", "DESROSI", "DESJARD", "DESMARA", "DESCHEN", "DESHOTE", "DESLAUR",
            )
            or self.string_at(self.current - 2, 6, "MESNES")
            or self.string_at(self.current - 5, 8, "DUQUESNE", "DUCHESNE")
            or self.string_at(self.current - 7, 10, "BEAUCHESNE")
            or self.string_at(self.current - 3, 7, "FRESNEL")
            or self.string_at(self.current - 3, 9, "GROSVENOR")
            or self.string_at(self.current - 4, 10, "LOUISVILLE")
            or self.string_at(self.current - 7, 10, "ILLINOISAN")
        ):
            self.current += 1
            return True

        return False

    def encode_isl(self) -> bool:
        # 'island'、'isle'、'carlisle'、'carlysle'
        if (
            self.string_at(self.current - 2, 4, "LISL", "LYSL", "AISL")
            and not self.string_at(self.current - 3, 7, "PAISLEY", "BAISLEY", "ALISLAM", "ALISLAH", "ALISLAA")
        ) or (
            self.current == 1
            and (
                (self.string_at(self.current - 1, 4, "ISLE") or self.string_at(self.current - 1, 5, "ISLAN"))
                and not self.string_at(self.current - 1, 5, "ISLEY", "ISLER")
            )
        ):
            self.current += 1
            return True

        return False

    def encode_stl(self) -> bool:
        # 'hustle'、'bustle'、'whistle'、'corpuscle'
        if not (
            (
                self.string_at(self.current, 4, "STLE", "STLI")
                and not self.string_at(self.current + 2, 4, "LESS", "LIKE", "LINE")
            )
            or self.string_at(self.current - 3, 7, "THISTLY", "BRISTLY", "GRISTLY")
            or self.string_at(self.current - 1, 5, "USCLE")
        ):
            return False

        # 'kristen'、'krystle' 的 't' 發音；"-LING" 作名詞字尾時亦同
        if (
            self.string_at(0, 7, "KRISTEN", "KRYSTLE", "CRYSTLE", "KRISTLE")
            or self.string_at(0, 11, "CHRISTENSEN", "CHRISTENSON")
            or self.string_at(self.current - 3, 9, "FIRSTLING")
            or self.string_at(self.current - 2, 8, "NESTLING", "WESTLING")
        ):
            self.add("ST")
            self.current += 2
        else:
            if (
                self.encode_vowels
                and self.char_at(self.current + 3) == "E"
                and self.char_at(self.current + 4) != "R"
                and not self.string_at(self.current + 3, 4, "ETTE", "ETTA")
                and not self.string_at(self.current + 3, 2, "EY")
            ):
                self.add("SAL")
                self.flag_al_inversion = True
            else:
                self.add("SL")
            self.current += 3
        return True

    def encode_christmas(self) -> bool:
        if self.string_at(self.current - 4, 8, "CHRISTMA"):
            self.add("SM")
            self.current += 3
            return True

        return False

    def encode_sthm(self) -> bool:
        # 'asthma'、'isthmus'
        if self.string_at(self.current, 4, "STHM"):
            self.add("SM")
            self.current += 4
            return True

        return False

    def encode_isten(self) -> bool:
        # 動詞 'christen' 的 't' 不發音，名字裡發音
        if self.string_at(0, 8, "CHRISTEN"):
            if self.root_or_inflections(self.word, "CHRISTEN") or self.string_at(0, 11, "CHRISTENDOM"):
                self.add("S", "ST")
            else:
                # 'christenson'、'christene'
                self.add("ST")
            self.current += 2
            return True

        # 'glisten'、'listen'
        if self.string_at(
            self.current - 2, 6, "LISTEN", "RISTEN", "HASTEN", "FASTEN", "MUSTNT"
        ) or self.string_at(self.current - 3, 7, "MOISTEN"):
            self.add("S")
            self.current += 2
            return True

        return False

    def encode_sugar(self) -> bool:
        if self.string_at(self.current, 5, "SUGAR"):
            self.add("X")
            self.current += 1
            return True

        return False

    def encode_sh(self) -> bool:
        if not self.string_at(self.current, 2, "SH"):
            return False

        if self.string_at(self.current - 2, 8, "CASHMERE"):
            self.add("J")
            self.current += 2
            return True

        # 組合詞：'clotheshorse'、'woodshole'、'mishap'、'dishonor'
        if self.current > 0 and (
            (self.string_at(self.current + 1, 3, "HAP") and self.current + 3 == self.last)
            or self.string_at(
                self.current + 1, 4,
                "HEIM", "HOEK", "HOLM", "HOLZ", "HOOD", "HEAD", "HEID", "HAAR", "HORS", "HOLE", "HUND",
                "HELM", "HAWK", "HILL",
            )
            or self.string_at(self.current + 1, 5, "HEART", "HATCH", "HOUSE", "HOUND", "HONOR")
            # 'mishear'
            or (self.string_at(self.current + 2, 3, "EAR") and self.current + 4 == self.last)
            # 'hartshorn'
            or (self.string_at(self.current + 2, 3, "ORN") and not self.string_at(self.current - 2, 7, "UNSHORN"))
            # 'newshour'，但不含 'bashour'、'manshour'
            or (
                self.string_at(self.current + 1, 4, "HOUR")
                and not (
                    self.string_at(0, 7, "BASHOUR")
                    or self.string_at(0, 8, "MANSHOUR")
                    or self.string_at(0, 6, "ASHOUR")
                )
            )
            # 'dishonest'、'grasshopper'
            or self.string_at(
                self.current + 2, 5, "ARMON", "ONEST", "ALLOW", "OLDER", "OPPER", "EIMER", "ANDLE", "ONOUR"
            )
            # 'dishabille'、'transhumance'
            or self.string_at(self.current + 2, 6, "ABILLE", "UMANCE", "ABITUA")
        ):
            if not self.string_at(self.current - 1, 1, "S"):
                self.add("S")
        else:
            self.add("X")

        self.current += 2
        return True

    def encode_sch(self) -> bool:
        if not self.string_at(self.current + 1, 2, "CH"):
            return False

        # 古老的組合詞：'mischief'、'escheat'、'eschew'
        if self.current > 0 and (
            self.string_at(self.current + 3, 3, "IEF", "EAT")
            or self.string_at(self.current + 3, 4, "ANCE", "ARGE")
            or self.string_at(0, 6, "ESCHEW")
        ):
            self.add("S")
            self.current += 1
            return True

        # Schlesinger's rule：荷蘭、丹麥、義大利與希臘來源，'school'、'schooner'、'schiavone'
        if (
            (
                self.string_at(self.current + 3, 2, "OO", "ER", "EN", "UY", "ED", "EM", "IA", "IZ", "IS", "OL")
                and not self.string_at(self.current, 6, "SCHOLT", "SCHISL", "SCHERR")
            )
            or self.string_at(self.current + 3, 3, "ISZ")
            or (
                self.string_at(self.current - 1, 6, "ESCHAT", "ASCHIN", "ASCHAL", "ISCHAE", "ISCHIA")
                and not self.string_at(self.current - 2, 8, "FASCHING")
            )
            or (self.string_at(self.current - 1, 5, "ESCHI") and self.current + 3 == self.last)
            or self.char_at(self.current + 3) == "Y"
        ):
            # 'schermerhorn'、'schenker'、'schistose'
            if self.string_at(self.current + 3, 2, "ER", "EN", "IS") and (
                self.current + 4 == self.last or self.string_at(self.current + 3, 3, "ENK", "ENB", "IST")
            ):
                self.add("X", "SK")
            else:
                self.add("SK")
            self.current += 3
            return True

        self.add("X")
        self.current += 3
        return True

    def encode_sur(self) -> bool:
        # 'erasure'、'usury'
        if self.string_at(self.current + 1, 3, "URE", "URA", "URY"):
            # 'sure'、'ensure'
            if (
                self.current == 0
                or self.string_at(self.current - 1, 1, "N", "K")
                or self.string_at(self.current - 2, 2, "NO")
            ):
                self.add("X")
            else:
                self.add("J")

            self.advance_counter(2, 1)
            return True

        return False

    def encode_su(self) -> bool:
        # 'sensuous'、'consensual'
        if self.string_at(self.current + 1, 2, "UO", "UA") and self.current != 0:
            # 'persuade'
            if self.string_at(self.current - 1, 4, "RSUA"):
                self.add("S")
            # 'casual'
            elif self.is_vowel(self.current - 1):
                self.add("J", "S")
            else:
                self.add("X", "S")

            self.advance_counter(3, 1)
            return True

        return False

    def encode_ssio(self) -> bool:
        if self.string_at(self.current + 1, 4, "SION"):
            # 'abscission'
            if self.string_at(self.current - 2, 2, "CI"):
                self.add("J")
            # 'mission'
            elif self.is_vowel(self.current - 1):
                self.add("X")

            self.advance_counter(4, 2)
            return True

        return False

    def encode_ss(self) -> bool:
        # 'russian'、'pressure'、'hessian'、'assurance'
        if self.string_at(self.current - 1, 5, "USSIA", "ESSUR", "ISSUR", "ISSUE") or self.string_at(
            self.current - 1, 6, "ESSIAN", "ASSURE", "ASSURA", "ISSUAB", "ISSUAN", "ASSIUS"
        ):
            self.add("X")
            self.advance_counter(3, 2)
            return True

        return False

    def encode_sia(self) -> bool:
        # 'controversial'；'fuchsia' 的 "ch" 不發音
        if self.string_at(self.current - 2, 5, "CHSIA") or self.string_at(self.current - 1, 5, "RSIAL"):
            self.add("X")
            self.advance_counter(3, 1)
            return True

        # 人名多讀 'X'，一般詞彙（'aphasia'）讀 'J'
        if (
            (
                self.string_at(0, 6, "ALESIA", "ALYSIA", "ALISIA", "STASIA")
                and self.current == 3
                and not self.string_at(0, 9, "ANASTASIA")
            )
            or self.string_at(self.current - 5, 9, "DIONYSIAN")
            or self.string_at(self.current - 5, 8, "THERESIA")
        ):
            self.add("X", "S")
            self.advance_counter(3, 1)
            return True

        if (
            (self.string_at(self.current, 3, "SIA") and self.current + 2 == self.last)
            or (self.string_at(self.current, 4, "SIAN") and self.current + 3 == self.last)
            or self.string_at(self.current - 5, 9, "AMBROSIAL")
        ):
            if (
                (self.is_vowel(self.current - 1) or self.string_at(self.current - 1, 1, "R"))
                # 排除以人名、法語或希臘語為基礎的組合詞
                and not (
                    self.string_at(0, 5, "JAMES", "NICOS", "PEGAS", "PEPYS")
                    or self.string_at(0, 6, "HOBBES", "HOLMES", "JAQUES", "KEYNES")
                    or self.string_at(0, 7, "MALTHUS", "HOMOOUS")
                    or self.string_at(0, 8, "MAGLEMOS", "HOMOIOUS")
                    or self.string_at(0, 9, "LEVALLOIS", "TARDENOIS")
                    or self.string_at(self.current - 4, 5, "ALGES")
                )
            ):
                self.add("J")
            else:
                self.add("S")

            self.advance_counter(2, 1)
            return True

        return False

    def encode_sio(self) -> bool:
        # 愛爾蘭名字
        if self.string_at(0, 7, "SIOBHAN"):
            self.add("X")
            self.advance_counter(3, 1)
            return True

        if self.string_at(self.current + 1, 3, "ION"):
            # 'vision'、'version'
            if self.is_vowel(self.current - 1) or self.string_at(self.current - 2, 2, "ER", "UR"):
                self.add("J")
            # 'declension'
            else:
                self.add("X")

            self.advance_counter(3, 1)
            return True

        return False

    def encode_anglicisations(self) -> bool:
        """
        德語字的英語化拼寫：'smith' 對上 'schmidt'、'snider' 對上 'schneider'

        斯拉夫語的 "-SZ-" 也在這裡（匈牙利語讀 's'）。
        """
        if (self.current == 0 and self.string_at(self.current + 1, 1, "M", "N", "L")) or self.string_at(
            self.current + 1, 1, "Z"
        ):
            self.add("S", "X")

            # 多餘的 'Z'
            if self.string_at(self.current + 1, 1, "Z"):
                self.current += 2
            else:
                self.current += 1
            return True

        return False

    def encode_sc(self) -> bool:
        if not self.string_at(self.current, 2, "SC"):
            return False

        # 'viscount'
        if self.string_at(self.current - 2, 8, "VISCOUNT"):
            self.current += 1
            return True

        # "-SC<前母音>-"
        if self.string_at(self.current + 2, 1, "I", "E", "Y"):
            # 'conscious'、'prosciutto'
            if (
                self.string_at(self.current + 2, 4, "IOUS")
                or self.string_at(self.current + 2, 3, "IUT")
                or self.string_at(self.current - 4, 9, "OMNISCIEN")
                or self.string_at(self.current - 3, 8, "CONSCIEN", "CRESCEND", "CONSCION")
                or self.string_at(self.current - 2, 6, "FASCIS")
            ):
                self.add("X")
            elif (
                self.string_at(self.current, 7, "SCEPTIC", "SCEPSIS")
                or self.string_at(self.current, 5, "SCIVV", "SCIRO")
                # 美國常見讀法
                or self.string_at(self.current, 6, "SCIPIO")
                or self.string_at(self.current - 2, 10, "PISCITELLI")
            ):
                self.add("SK")
            else:
                self.add("S")
            self.current += 2
            return True

        self.add("SK")
        self.current += 2
        return True

    def encode_sea_sui_sier(self) -> bool:
        # 單獨的 "nausea" 較常讀 NJ；'casuistry'、'frasier'、'hoosier'
        if (
            (self.string_at(self.current - 3, 6, "NAUSEA") and self.current + 2 == self.last)
            or self.string_at(self.current - 2, 5, "CASUI")
            or (
                self.string_at(self.current - 1, 5, "OSIER", "ASIER")
                and not (
                    self.string_at(0, 6, "EASIER")
                    or self.string_at(0, 5, "OSIER")
                    or self.string_at(self.current - 2, 6, "ROSIER", "MOSIER")
                )
            )
        ):
            self.add("J", "X")
            self.advance_counter(3, 1)
            return True

        return False

    def encode_sea(self) -> bool:
        if (self.string_at(0, 4, "SEAN") and self.current + 3 == self.last) or (
            self.string_at(self.current - 3, 6, "NAUSEO") and not self.string_at(self.current - 3, 7, "NAUSEAT")
        ):
            self.add("X")
            self.advance_counter(3, 1)
            return True

        return False
