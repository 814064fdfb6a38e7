"""
MOS 6502 アドレッシングモード解決ロジック。

各関数は最初のオペランドバイトを指す pc を受け取り、実効アドレスを返す。
オペランドは最大2バイト読むが、pc自体は進めない（PCの更新は実行ループの責務）。
"""
from typing import Callable, Dict

from retro_core_6502.common.errors import InvalidAddressingModeError
from retro_core_6502.transport.memory import Memory
from retro_core_6502.arch.mos6502.state import Mos6502CpuState
from retro_core_6502.arch.mos6502.opcodes import AddressingMode

AddrFunc = Callable[[int, Memory, Mos6502CpuState], int]


# @intent:responsibility ゼロページ上の16bitポインタを読む。上位バイトもゼロページ内で折り返す。
def _read_zeropage_pointer(memory: Memory, ptr_addr: int) -> int:
    lo = memory.read(ptr_addr)
    hi = memory.read((ptr_addr + 1) & 0xFF)
    return (hi << 8) | lo


# @intent:responsibility Immediate Mode (#$xx)
# @intent:note オペランドそのものが置かれているアドレスを返す。
def addr_immediate(pc: int, memory: Memory, state: Mos6502CpuState) -> int:
    return pc


# @intent:responsibility Zero Page Mode ($xx)
def addr_zeropage(pc: int, memory: Memory, state: Mos6502CpuState) -> int:
    return memory.read(pc)


# @intent:responsibility Zero Page, X Mode ($xx,X)
# @intent:note ラップアラウンドあり (0xFF + 2 -> 0x01)。ページ1へははみ出さない。
def addr_zeropage_x(pc: int, memory: Memory, state: Mos6502CpuState) -> int:
    return (memory.read(pc) + state.x) & 0xFF


# @intent:responsibility Zero Page, Y Mode ($xx,Y)
def addr_zeropage_y(pc: int, memory: Memory, state: Mos6502CpuState) -> int:
    return (memory.read(pc) + state.y) & 0xFF


# @intent:responsibility Absolute Mode ($xxxx)
def addr_absolute(pc: int, memory: Memory, state: Mos6502CpuState) -> int:
    return memory.read_u16(pc)


# @intent:responsibility Absolute, X Mode ($xxxx,X)
# @intent:note ページ境界を越えてよい。64KBで折り返す。
def addr_absolute_x(pc: int, memory: Memory, state: Mos6502CpuState) -> int:
    return (memory.read_u16(pc) + state.x) & 0xFFFF


# @intent:responsibility Absolute, Y Mode ($xxxx,Y)
def addr_absolute_y(pc: int, memory: Memory, state: Mos6502CpuState) -> int:
    return (memory.read_u16(pc) + state.y) & 0xFFFF


# @intent:responsibility Indexed Indirect Mode ($xx,X) - "Pre-indexed"
# @intent:note ゼロページ内でXを加算(ラップアラウンド)し、そこにあるポインタを読む。
def addr_indexed_indirect(pc: int, memory: Memory, state: Mos6502CpuState) -> int:
    ptr_addr = (memory.read(pc) + state.x) & 0xFF
    return _read_zeropage_pointer(memory, ptr_addr)


# @intent:responsibility Indirect Indexed Mode ($xx),Y - "Post-indexed"
# @intent:note ポインタを先に読み、得られたベースアドレスにYを加算する。Indexed Indirectとは順序が逆。
def addr_indirect_indexed(pc: int, memory: Memory, state: Mos6502CpuState) -> int:
    base_addr = _read_zeropage_pointer(memory, memory.read(pc))
    return (base_addr + state.y) & 0xFFFF


RESOLVERS: Dict[AddressingMode, AddrFunc] = {
    AddressingMode.IMMEDIATE: addr_immediate,
    AddressingMode.ZERO_PAGE: addr_zeropage,
    AddressingMode.ZERO_PAGE_X: addr_zeropage_x,
    AddressingMode.ZERO_PAGE_Y: addr_zeropage_y,
    AddressingMode.ABSOLUTE: addr_absolute,
    AddressingMode.ABSOLUTE_X: addr_absolute_x,
    AddressingMode.ABSOLUTE_Y: addr_absolute_y,
    AddressingMode.INDIRECT_X: addr_indexed_indirect,
    AddressingMode.INDIRECT_Y: addr_indirect_indexed,
}


# @intent:responsibility アドレッシングモードから実効アドレスを求める。
# @intent:post-condition IMPLIEDには実効アドレスが無いため InvalidAddressingModeError を送出する。
def resolve(mode: AddressingMode, pc: int, memory: Memory, state: Mos6502CpuState) -> int:
    resolver = RESOLVERS.get(mode)
    if resolver is None:
        raise InvalidAddressingModeError(mode)
    return resolver(pc, memory, state)
