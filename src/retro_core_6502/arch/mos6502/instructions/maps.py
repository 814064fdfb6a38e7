"""
MOS 6502 命令マップとディスパッチロジック。

ハンドラは2つの集合に分かれる:
- アドレス指定命令: 解決済みの実効アドレスを受け取る
- Implied命令: アドレスを受け取らず、リゾルバも呼ばない
各オペコードのモードとハンドラ集合の対応はモジュール読み込み時に検証されるため、
IMPLIEDがリゾルバに渡る経路は存在しない。
"""
from typing import Callable, Dict, Iterable, Optional

from retro_core_6502.transport.memory import Memory
from retro_core_6502.arch.mos6502.state import Mos6502CpuState
from retro_core_6502.arch.mos6502.opcodes import AddressingMode, OpcodeDescriptor, OPCODE_TABLE
from retro_core_6502.arch.mos6502.instructions import base, load, alu, control

AddressedFunc = Callable[[Mos6502CpuState, Memory, int], None]
# Implied命令はCPUを停止させる場合にTrueを返す
ImpliedFunc = Callable[[Mos6502CpuState, Memory], Optional[bool]]

ADDRESSED_HANDLERS: Dict[str, AddressedFunc] = {
    "LDA": load.lda,
    "STA": load.sta,
    "ADC": alu.adc,
    "AND": alu.and_,
}

IMPLIED_HANDLERS: Dict[str, ImpliedFunc] = {
    "TAX": load.tax,
    "INX": alu.inx,
    "BRK": control.brk,
}


# @intent:responsibility 全てのオペコードについて、モードに対応するハンドラが存在することを検証する。
def verify_dispatch_tables(table: Iterable[Optional[OpcodeDescriptor]],
                           implied_handlers: Dict[str, ImpliedFunc],
                           addressed_handlers: Dict[str, AddressedFunc]) -> None:
    for descriptor in table:
        if descriptor is None:
            continue
        if descriptor.mode is AddressingMode.IMPLIED:
            handlers = implied_handlers
        else:
            handlers = addressed_handlers
        if descriptor.mnemonic not in handlers:
            raise ValueError(
                f"Opcode {descriptor.opcode:#04x} ({descriptor.mnemonic}, {descriptor.mode.name}) "
                f"has no matching handler."
            )


verify_dispatch_tables(OPCODE_TABLE, IMPLIED_HANDLERS, ADDRESSED_HANDLERS)


# @intent:responsibility 記述子に従って命令を実行する。
# @intent:pre-condition state.pcは最初のオペランドバイトを指している。
# @intent:return 命令がCPUを停止させる場合はTrue。
def execute_instruction(descriptor: OpcodeDescriptor, state: Mos6502CpuState, memory: Memory) -> bool:
    if descriptor.mode is AddressingMode.IMPLIED:
        return bool(IMPLIED_HANDLERS[descriptor.mnemonic](state, memory))
    address = base.resolve(descriptor.mode, state.pc, memory, state)
    ADDRESSED_HANDLERS[descriptor.mnemonic](state, memory, address)
    return False
