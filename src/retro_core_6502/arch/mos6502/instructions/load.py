"""
MOS 6502 転送系命令 (Load/Store/Transfer)。
"""
from retro_core_6502.transport.memory import Memory
from retro_core_6502.arch.mos6502.state import Mos6502CpuState


# --- LDA (Load Accumulator) ---
# @intent:responsibility メモリからAレジスタへロードし、N, Zフラグを更新。
def lda(state: Mos6502CpuState, memory: Memory, address: int) -> None:
    state.a = memory.read(address)
    state.update_zero_and_negative(state.a)


# --- STA (Store Accumulator) ---
# @intent:responsibility Aレジスタの内容をメモリへストア。フラグ変化なし。
def sta(state: Mos6502CpuState, memory: Memory, address: int) -> None:
    memory.write(address, state.a)


# --- TAX (Transfer A to X) ---
def tax(state: Mos6502CpuState, memory: Memory) -> None:
    state.x = state.a
    state.update_zero_and_negative(state.x)
