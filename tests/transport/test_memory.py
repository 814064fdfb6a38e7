# tests/transport/test_memory.py
"""
retro_core_6502.transport.memoryモジュールの単体テスト。
"""
import pytest
from retro_core_6502.transport.memory import Memory, MEMORY_SIZE
from retro_core_6502.common.errors import MemoryAddressOutOfRangeError, EmulationError

# @intent:test_suite 64KBメモリの読み書きとエラーハンドリングを検証します。


class TestMemory:
    """
    Memoryの単体テスト。
    """
    # @intent:test_case_init 64KBでゼロ初期化されることを検証します。
    def test_memory_init_default(self):
        memory = Memory()
        assert memory.get_size() == MEMORY_SIZE == 0x10000
        assert memory.read(0x0000) == 0
        assert memory.read(0xFFFF) == 0
        assert all(b == 0 for b in memory._memory)

    def test_memory_init_invalid_size(self):
        with pytest.raises(ValueError, match="Memory size must be a positive integer."):
            Memory(0)
        with pytest.raises(ValueError, match="Memory size must be a positive integer."):
            Memory(1.5)

    def test_read_write(self):
        memory = Memory()
        memory.write(0x0200, 0x12)
        memory.write(0xFFFF, 0x34)
        assert memory.read(0x0200) == 0x12
        assert memory.read(0xFFFF) == 0x34

    # @intent:test_case_oob 範囲外アクセスはMemoryAddressOutOfRangeError（IndexErrorでもある）となることを検証します。
    def test_read_write_out_of_bounds(self):
        memory = Memory()
        with pytest.raises(MemoryAddressOutOfRangeError):
            memory.read(0x10000)
        with pytest.raises(IndexError, match="Address -1 out of bounds"):
            memory.write(-1, 0x00)
        with pytest.raises(EmulationError):
            memory.read(0x12345)

    def test_write_invalid_data(self):
        memory = Memory()
        with pytest.raises(ValueError, match="Data 256 is not an 8-bit value."):
            memory.write(0, 0x100)
        with pytest.raises(ValueError, match="Data -1 is not an 8-bit value."):
            memory.write(0, -1)

    # @intent:test_case_u16 16bitアクセスがリトルエンディアンであることを検証します。
    def test_u16_little_endian(self):
        memory = Memory()
        memory.write_u16(0x1000, 0xBEEF)
        assert memory.read(0x1000) == 0xEF
        assert memory.read(0x1001) == 0xBE
        assert memory.read_u16(0x1000) == 0xBEEF

    def test_u16_wraps_at_top_of_memory(self):
        memory = Memory()
        memory.write_u16(0xFFFF, 0x1234)
        assert memory.read(0xFFFF) == 0x34
        assert memory.read(0x0000) == 0x12
        assert memory.read_u16(0xFFFF) == 0x1234

    def test_write_u16_invalid_data(self):
        memory = Memory()
        with pytest.raises(ValueError):
            memory.write_u16(0x1000, 0x10000)

    def test_load_block(self):
        memory = Memory()
        memory.load(0x8000, [0xA9, 0x05, 0x00])
        assert [memory.read(0x8000 + i) for i in range(3)] == [0xA9, 0x05, 0x00]

    def test_load_block_up_to_end(self):
        memory = Memory()
        memory.load(0xFFFE, b"\x01\x02")
        assert memory.read(0xFFFF) == 0x02

    # @intent:test_case_oob 収まらないブロックは一切書き込まれないことを検証します。
    def test_load_block_overflow(self):
        memory = Memory()
        with pytest.raises(MemoryAddressOutOfRangeError):
            memory.load(0xFFFE, [0x01, 0x02, 0x03])
        assert memory.read(0xFFFE) == 0x00
