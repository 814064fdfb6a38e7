"""
MOS 6502 CPUの状態定義。
"""
from dataclasses import dataclass

from retro_core_6502.core.state import CpuState


# @intent:responsibility MOS 6502 CPUの状態（レジスタ、フラグ）を保持し、フラグ更新規則を提供する。
@dataclass
class Mos6502CpuState(CpuState):
    """
    MOS 6502 CPUのレジスタ状態。
    A, X, Y, P は8bit、PCは16bit。値は常に各レジスタ幅で折り返される。
    """
    a: int = 0
    x: int = 0
    y: int = 0
    p: int = 0

    # Flag bit masks
    C_FLAG = 0x01  # Carry
    Z_FLAG = 0x02  # Zero
    V_FLAG = 0x40  # Overflow
    N_FLAG = 0x80  # Negative

    @property
    def flag_c(self) -> bool: return bool(self.p & self.C_FLAG)
    @property
    def flag_z(self) -> bool: return bool(self.p & self.Z_FLAG)
    @property
    def flag_v(self) -> bool: return bool(self.p & self.V_FLAG)
    @property
    def flag_n(self) -> bool: return bool(self.p & self.N_FLAG)

    # @intent:responsibility 指定したフラグビットを設定またはクリアする。他のビットは変更しない。
    def set_flag(self, mask: int, value: bool) -> None:
        if value:
            self.p |= mask
        else:
            self.p &= ~mask & 0xFF

    # @intent:responsibility 結果値からZ, Nフラグを更新する。C, Vは変更しない。
    def update_zero_and_negative(self, result: int) -> None:
        self.set_flag(self.Z_FLAG, result == 0)
        self.set_flag(self.N_FLAG, (result & 0x80) != 0)
