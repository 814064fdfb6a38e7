"""
MOS 6502 オペコード表。

オペコード値で直接インデックスする256エントリの表をモジュール読み込み時に一度だけ構築する。
構築後は変更されないため、どこから参照しても同期は不要。
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from retro_core_6502.common.errors import UnknownOpcodeError


# @intent:responsibility アドレッシングモードの閉じた列挙。
class AddressingMode(Enum):
    IMPLIED = "IMPLIED"  # Implied / Accumulator: オペランドなし
    IMMEDIATE = "IMMEDIATE"
    ZERO_PAGE = "ZERO_PAGE"
    ZERO_PAGE_X = "ZERO_PAGE_X"
    ZERO_PAGE_Y = "ZERO_PAGE_Y"
    ABSOLUTE = "ABSOLUTE"
    ABSOLUTE_X = "ABSOLUTE_X"
    ABSOLUTE_Y = "ABSOLUTE_Y"
    INDIRECT_X = "INDIRECT_X"
    INDIRECT_Y = "INDIRECT_Y"


# オペランドのバイト数
OPERAND_LENGTH = {
    AddressingMode.IMPLIED: 0,
    AddressingMode.IMMEDIATE: 1,
    AddressingMode.ZERO_PAGE: 1,
    AddressingMode.ZERO_PAGE_X: 1,
    AddressingMode.ZERO_PAGE_Y: 1,
    AddressingMode.ABSOLUTE: 2,
    AddressingMode.ABSOLUTE_X: 2,
    AddressingMode.ABSOLUTE_Y: 2,
    AddressingMode.INDIRECT_X: 1,
    AddressingMode.INDIRECT_Y: 1,
}


# @intent:responsibility 1つのオペコードの不変な記述子。
@dataclass(frozen=True)
class OpcodeDescriptor:
    opcode: int
    mnemonic: str
    bytes: int  # 命令全体のバイト長 (1-3)
    cycles: int  # 基本サイクル数 (ページ境界交差による加算は含まない)
    mode: AddressingMode


_M = AddressingMode

# (Opcode, Mnemonic, Bytes, Cycles, Addressing Mode)
_OPCODE_ENTRIES = [
    # ADC
    (0x69, "ADC", 2, 2, _M.IMMEDIATE),
    (0x65, "ADC", 2, 3, _M.ZERO_PAGE),
    (0x75, "ADC", 2, 4, _M.ZERO_PAGE_X),
    (0x6D, "ADC", 3, 4, _M.ABSOLUTE),
    (0x7D, "ADC", 3, 4, _M.ABSOLUTE_X),  # +1 if page crossed
    (0x79, "ADC", 3, 4, _M.ABSOLUTE_Y),  # +1 if page crossed
    (0x61, "ADC", 2, 6, _M.INDIRECT_X),
    (0x71, "ADC", 2, 5, _M.INDIRECT_Y),  # +1 if page crossed

    # AND
    (0x29, "AND", 2, 2, _M.IMMEDIATE),
    (0x25, "AND", 2, 3, _M.ZERO_PAGE),
    (0x35, "AND", 2, 4, _M.ZERO_PAGE_X),
    (0x2D, "AND", 3, 4, _M.ABSOLUTE),
    (0x3D, "AND", 3, 4, _M.ABSOLUTE_X),
    (0x39, "AND", 3, 4, _M.ABSOLUTE_Y),
    (0x21, "AND", 2, 6, _M.INDIRECT_X),
    (0x31, "AND", 2, 5, _M.INDIRECT_Y),

    # LDA
    (0xA9, "LDA", 2, 2, _M.IMMEDIATE),
    (0xA5, "LDA", 2, 3, _M.ZERO_PAGE),
    (0xB5, "LDA", 2, 4, _M.ZERO_PAGE_X),
    (0xAD, "LDA", 3, 4, _M.ABSOLUTE),
    (0xBD, "LDA", 3, 4, _M.ABSOLUTE_X),
    (0xB9, "LDA", 3, 4, _M.ABSOLUTE_Y),
    (0xA1, "LDA", 2, 6, _M.INDIRECT_X),
    (0xB1, "LDA", 2, 5, _M.INDIRECT_Y),

    # STA (Immediateなし)
    (0x85, "STA", 2, 3, _M.ZERO_PAGE),
    (0x95, "STA", 2, 4, _M.ZERO_PAGE_X),
    (0x8D, "STA", 3, 4, _M.ABSOLUTE),
    (0x9D, "STA", 3, 5, _M.ABSOLUTE_X),
    (0x99, "STA", 3, 5, _M.ABSOLUTE_Y),
    (0x81, "STA", 2, 6, _M.INDIRECT_X),
    (0x91, "STA", 2, 6, _M.INDIRECT_Y),

    # Implied
    (0xAA, "TAX", 1, 2, _M.IMPLIED),
    (0xE8, "INX", 1, 2, _M.IMPLIED),
    (0x00, "BRK", 1, 7, _M.IMPLIED),
]


# @intent:responsibility 記述子の一覧から256エントリの表を構築する。
# @intent:post-condition 重複したオペコード、またはモードと矛盾するバイト長はValueErrorとなる。
def build_opcode_table(entries) -> Tuple[Optional[OpcodeDescriptor], ...]:
    table = [None] * 256
    for opcode, mnemonic, length, cycles, mode in entries:
        if not 0 <= opcode <= 0xFF:
            raise ValueError(f"Opcode {opcode} is not an 8-bit value.")
        if table[opcode] is not None:
            raise ValueError(f"Duplicate opcode {opcode:#04x} ({table[opcode].mnemonic}, {mnemonic})")
        if length != 1 + OPERAND_LENGTH[mode]:
            raise ValueError(f"Opcode {opcode:#04x}: length {length} does not match mode {mode.name}")
        table[opcode] = OpcodeDescriptor(opcode, mnemonic, length, cycles, mode)
    return tuple(table)


OPCODE_TABLE = build_opcode_table(_OPCODE_ENTRIES)


# @intent:responsibility オペコード値から記述子を引く。O(1)。
def lookup(opcode: int) -> OpcodeDescriptor:
    if not 0 <= opcode <= 0xFF or OPCODE_TABLE[opcode] is None:
        raise UnknownOpcodeError(opcode)
    return OPCODE_TABLE[opcode]
