"""
Metaphone3 主迴圈

Metaphone3Pass 把各字母規則組合在一起，由 run() 逐字元分派：
每一步交給目前字元的規則串處理，規則串負責輸出符號並推進游標。
"""

from typing import Tuple

from ..config import EnglishPhoneticConfig
from ._base import EncodingPass
from .b_c_rules import BCRules
from .d_f_g_rules import DFGRules
from .h_j_k_rules import HJKRules
from .l_m_n_rules import LMNRules
from .p_q_r_rules import PQRRules
from .s_rules import SRules
from .t_rules import TRules
from .v_w_x_z_rules import VWXZRules
from .vowel_rules import VowelRules


class Metaphone3Pass(
    VowelRules,
    BCRules,
    DFGRules,
    HJKRules,
    LMNRules,
    PQRRules,
    SRules,
    TRules,
    VWXZRules,
    EncodingPass,
):
    """一次完整的 Metaphone3 編碼"""

    # 字母 -> 規則串方法名稱
    _LETTER_HANDLERS = {
        "B": "encode_b",
        "C": "encode_c",
        "D": "encode_d",
        "F": "encode_f",
        "G": "encode_g",
        "H": "encode_h",
        "J": "encode_j",
        "K": "encode_k",
        "L": "encode_l",
        "M": "encode_m",
        "N": "encode_n",
        "P": "encode_p",
        "Q": "encode_q",
        "R": "encode_r",
        "S": "encode_s",
        "T": "encode_t",
        "V": "encode_v",
        "W": "encode_w",
        "X": "encode_x",
        "Z": "encode_z",
    }

    def run(self) -> Tuple[str, str]:
        """
        執行編碼

        Returns:
            (primary, secondary)，皆不超過 key_length；兩者相同時 secondary 為空字串
        """
        self.flag_al_inversion = False
        self.current = 0
        self.primary = ""
        self.secondary = ""

        if self.length < 1:
            return self.primary, self.secondary

        handlers = self._LETTER_HANDLERS
        direct = EnglishPhoneticConfig.DIRECT_MAPPINGS

        # 任一緩衝超過鍵長即可停止
        while len(self.primary) <= self.key_length and len(self.secondary) <= self.key_length:
            if self.current >= self.length:
                break

            ch = self.char_at(self.current)

            handler_name = handlers.get(ch)
            if handler_name is not None:
                getattr(self, handler_name)()
            elif ch in direct:
                self.add(direct[ch])
                self.current += 1
            elif self.is_vowel_char(ch):
                self.encode_vowels_at()
            else:
                # 無法辨識的字元（數字、標點、空白）直接略過
                self.current += 1

        primary = self.primary[:self.key_length]
        secondary = self.secondary[:self.key_length]

        # 截斷後可能變成相同
        if primary == secondary:
            secondary = ""

        self.primary = primary
        self.secondary = secondary
        return primary, secondary
