# retro_core_6502/transport/memory.py
"""
Transport Layer (メモリ)

このモジュールは、CPUが専有する64KBのフラットなアドレス空間を提供します。
8bitアクセスと、リトルエンディアンの16bitアクセスをサポートします。
"""
import logging
from typing import Iterable

from retro_core_6502.common.errors import MemoryAddressOutOfRangeError

logger = logging.getLogger(__name__)

MEMORY_SIZE = 0x10000


# @intent:responsibility 64KBのRAMを保持し、読み書きのインターフェースを提供します。
class Memory:
    """
    ゼロ初期化された65536セルのメモリ。サイズは生成後に変化しません。
    """
    # @intent:responsibility 指定されたサイズのメモリ領域を初期化します。
    # @intent:pre-condition sizeは正の整数である必要があります。
    def __init__(self, size: int = MEMORY_SIZE):
        if not isinstance(size, int) or size <= 0:
            raise ValueError("Memory size must be a positive integer.")
        self._memory = bytearray(size)
        self._size = size

    def _check_address(self, address: int) -> None:
        if not 0 <= address < self._size:
            raise MemoryAddressOutOfRangeError(address, self._size)

    # @intent:responsibility 指定されたアドレスから8bitのデータを読み出します。
    def read(self, address: int) -> int:
        self._check_address(address)
        return self._memory[address]

    # @intent:responsibility 指定されたアドレスに8bitのデータを書き込みます。
    # @intent:pre-condition データは8bit値である必要があります。
    def write(self, address: int, data: int) -> None:
        self._check_address(address)
        if not 0 <= data <= 0xFF:
            raise ValueError(f"Data {data} is not an 8-bit value.")
        self._memory[address] = data

    # @intent:responsibility リトルエンディアンの16bit値を読み出します。
    # @intent:note 上位バイトのアドレスは64KB境界で折り返します ($FFFF の次は $0000)。
    def read_u16(self, address: int) -> int:
        lo = self.read(address)
        hi = self.read((address + 1) & 0xFFFF)
        return (hi << 8) | lo

    # @intent:responsibility リトルエンディアンの16bit値を書き込みます。
    def write_u16(self, address: int, data: int) -> None:
        if not 0 <= data <= 0xFFFF:
            raise ValueError(f"Data {data} is not a 16-bit value.")
        self.write(address, data & 0xFF)
        self.write((address + 1) & 0xFFFF, data >> 8)

    # @intent:responsibility バイト列を指定アドレスから連続して書き込みます。
    # @intent:post-condition 領域に収まらない場合は何も書き込まずに例外を送出します。
    def load(self, address: int, data: Iterable[int]) -> None:
        """
        プログラムイメージなどのバイト列をそのままコピーします。
        """
        block = bytes(data)
        self._check_address(address)
        end = address + len(block)
        if end > self._size:
            raise MemoryAddressOutOfRangeError(end - 1, self._size)
        self._memory[address:end] = block
        logger.debug("Loaded %d bytes at %#06x", len(block), address)

    # @intent:responsibility メモリのサイズを返します。
    def get_size(self) -> int:
        return self._size
