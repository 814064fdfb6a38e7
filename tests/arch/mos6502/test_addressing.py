# tests/arch/mos6502/test_addressing.py
"""
MOS 6502 アドレッシングモード解決の単体テスト。
"""
import pytest
from retro_core_6502.transport.memory import Memory
from retro_core_6502.arch.mos6502.state import Mos6502CpuState
from retro_core_6502.arch.mos6502.opcodes import AddressingMode
from retro_core_6502.arch.mos6502.instructions.base import resolve
from retro_core_6502.common.errors import InvalidAddressingModeError

PC = 0x8001


@pytest.fixture
def memory():
    return Memory()


@pytest.fixture
def state():
    return Mos6502CpuState(pc=PC)


def test_immediate_returns_pc(memory, state):
    assert resolve(AddressingMode.IMMEDIATE, PC, memory, state) == PC


def test_zeropage(memory, state):
    memory.write(PC, 0x42)
    assert resolve(AddressingMode.ZERO_PAGE, PC, memory, state) == 0x0042


# @intent:test_case_wrap ページ0内で折り返し、0x101にはならないことを検証します。
def test_zeropage_x_wraps_within_page_zero(memory, state):
    memory.write(PC, 0xFF)
    state.x = 0x02
    assert resolve(AddressingMode.ZERO_PAGE_X, PC, memory, state) == 0x01


def test_zeropage_y_wraps_within_page_zero(memory, state):
    memory.write(PC, 0x80)
    state.y = 0x90
    assert resolve(AddressingMode.ZERO_PAGE_Y, PC, memory, state) == 0x10


def test_absolute_is_little_endian(memory, state):
    memory.load(PC, [0x34, 0x12])
    assert resolve(AddressingMode.ABSOLUTE, PC, memory, state) == 0x1234


def test_absolute_x_crosses_page(memory, state):
    memory.load(PC, [0xFF, 0x12])
    state.x = 0x01
    assert resolve(AddressingMode.ABSOLUTE_X, PC, memory, state) == 0x1300


def test_absolute_y_wraps_at_64k(memory, state):
    memory.load(PC, [0xFF, 0xFF])
    state.y = 0x02
    assert resolve(AddressingMode.ABSOLUTE_Y, PC, memory, state) == 0x0001


def test_indirect_x(memory, state):
    memory.write(PC, 0x20)
    state.x = 0x04
    memory.write_u16(0x24, 0x3074)
    assert resolve(AddressingMode.INDIRECT_X, PC, memory, state) == 0x3074


# @intent:test_case_wrap ポインタ位置もポインタ上位バイトもページ0内で折り返すことを検証します。
def test_indirect_x_pointer_wraps_within_page_zero(memory, state):
    memory.write(PC, 0xFE)
    state.x = 0x01
    memory.write(0xFF, 0x34)
    memory.write(0x00, 0x12)
    memory.write(0x100, 0x99)
    assert resolve(AddressingMode.INDIRECT_X, PC, memory, state) == 0x1234


# @intent:test_case_order Yはポインタを読んだ後に加算されることを検証します。
def test_indirect_y_adds_y_after_dereference(memory, state):
    memory.write(PC, 0x86)
    memory.write_u16(0x86, 0x4028)
    memory.write_u16(0x96, 0x9999)
    state.y = 0x10
    assert resolve(AddressingMode.INDIRECT_Y, PC, memory, state) == 0x4038


def test_indirect_y_wraps_at_64k(memory, state):
    memory.write(PC, 0x10)
    memory.write_u16(0x10, 0xFFF0)
    state.y = 0x20
    assert resolve(AddressingMode.INDIRECT_Y, PC, memory, state) == 0x0010


def test_resolver_does_not_touch_pc(memory, state):
    memory.load(PC, [0x34, 0x12])
    resolve(AddressingMode.ABSOLUTE_X, PC, memory, state)
    assert state.pc == PC


def test_implied_is_rejected(memory, state):
    with pytest.raises(InvalidAddressingModeError):
        resolve(AddressingMode.IMPLIED, PC, memory, state)
