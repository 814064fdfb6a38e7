"""
MOS 6502 制御系命令。
"""
from retro_core_6502.transport.memory import Memory
from retro_core_6502.arch.mos6502.state import Mos6502CpuState


# @intent:responsibility BRKは実行ループを停止させる。
# @intent:note 割り込みベクタへのジャンプとスタック退避は行わない。
def brk(state: Mos6502CpuState, memory: Memory) -> bool:
    return True
