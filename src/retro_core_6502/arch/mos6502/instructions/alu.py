"""
MOS 6502 算術論理演算命令 (ALU)。
デシマルモードは扱わず、常にバイナリ演算を行う。
"""
from retro_core_6502.transport.memory import Memory
from retro_core_6502.arch.mos6502.state import Mos6502CpuState


# @intent:responsibility 標準バイナリ加算ロジック
def add_with_carry(state: Mos6502CpuState, value: int) -> None:
    a = state.a
    c = 1 if state.flag_c else 0

    res_wide = a + value + c
    res = res_wide & 0xFF

    # V is set if both operands share a sign and the result's sign differs.
    v = ((a ^ res) & (value ^ res) & 0x80) != 0

    state.a = res
    state.set_flag(state.C_FLAG, res_wide > 0xFF)
    state.set_flag(state.V_FLAG, v)
    state.update_zero_and_negative(res)


def adc(state: Mos6502CpuState, memory: Memory, address: int) -> None:
    add_with_carry(state, memory.read(address))


# --- Logical Operations ---

def and_(state: Mos6502CpuState, memory: Memory, address: int) -> None:
    state.a &= memory.read(address)
    state.update_zero_and_negative(state.a)


# --- Register Increment ---
# @intent:note INXは加算と異なりCフラグを変化させない。
def inx(state: Mos6502CpuState, memory: Memory) -> None:
    state.x = (state.x + 1) & 0xFF
    state.update_zero_and_negative(state.x)
