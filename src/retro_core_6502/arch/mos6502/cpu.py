"""
MOS 6502 CPUエミュレーションの中心モジュール。
"""
import logging
from typing import Iterable, Optional

from retro_core_6502.common.types import FlagMap, RegisterMap
from retro_core_6502.core.cpu import AbstractCpu
from retro_core_6502.core.snapshot import Operation
from retro_core_6502.transport.memory import Memory
from retro_core_6502.arch.mos6502.state import Mos6502CpuState
from retro_core_6502.arch.mos6502.opcodes import OpcodeDescriptor, lookup
from retro_core_6502.arch.mos6502.instructions.maps import execute_instruction
from retro_core_6502.common.errors import UnknownOpcodeError

logger = logging.getLogger(__name__)

DEFAULT_LOAD_ADDRESS = 0x8000
DEFAULT_RESET_VECTOR = 0xFFFC

# レジスタ名とビット幅のマスク
REGISTER_MASKS = {
    "A": 0xFF,
    "X": 0xFF,
    "Y": 0xFF,
    "P": 0xFF,
    "PC": 0xFFFF,
}


# @intent:responsibility MOS 6502 CPUの具体的なエミュレーションロジックを提供する。
class Mos6502Cpu(AbstractCpu):
    """
    MOS 6502 CPUをエミュレートするクラス。

    プログラムは load_address に配置され、その先頭アドレスが reset_vector に
    リトルエンディアンで書き込まれる。reset() はベクタからPCを読み込む。
    """
    def __init__(self, memory: Optional[Memory] = None,
                 load_address: int = DEFAULT_LOAD_ADDRESS,
                 reset_vector: int = DEFAULT_RESET_VECTOR):
        if not 0 <= load_address <= 0xFFFF:
            raise ValueError(f"Load address {load_address} is not a 16-bit value.")
        if not 0 <= reset_vector <= 0xFFFE:
            raise ValueError(f"Reset vector {reset_vector} leaves no room for a 16-bit address.")
        super().__init__(memory)
        self._load_address = load_address
        self._reset_vector = reset_vector
        self._current: Optional[OpcodeDescriptor] = None

    # @intent:responsibility 全レジスタ0の初期状態を生成する。
    def _create_initial_state(self) -> Mos6502CpuState:
        return Mos6502CpuState()

    def get_state(self) -> Mos6502CpuState:
        return self._state

    @property
    def load_address(self) -> int:
        return self._load_address

    @property
    def reset_vector(self) -> int:
        return self._reset_vector

    # @intent:responsibility 命令フェッチ。PCを1進める。
    def _fetch(self) -> int:
        opcode = self._memory.read(self._state.pc)
        self._state.pc = (self._state.pc + 1) & 0xFFFF
        return opcode

    # @intent:responsibility 命令デコード。未知のオペコードは致命的エラーとなる。
    def _decode(self, opcode: int) -> Operation:
        try:
            descriptor = lookup(opcode)
        except UnknownOpcodeError:
            raise UnknownOpcodeError(opcode, (self._state.pc - 1) & 0xFFFF) from None
        self._current = descriptor

        operand_bytes = [
            self._memory.read((self._state.pc + i) & 0xFFFF)
            for i in range(descriptor.bytes - 1)
        ]
        return Operation(
            opcode_hex=f"{opcode:02X}",
            mnemonic=descriptor.mnemonic,
            mode=descriptor.mode.name,
            operand_bytes=operand_bytes,
            cycle_count=descriptor.cycles,
            length=descriptor.bytes,
        )

    # @intent:responsibility 命令実行。停止命令であればHALT状態へ遷移する。
    def _execute(self, operation: Operation) -> None:
        if execute_instruction(self._current, self._state, self._memory):
            self._halted = True

    # @intent:responsibility プログラムイメージをメモリに配置し、リセットベクタを書き込む。
    def load(self, program: Iterable[int]) -> None:
        program = bytes(program)
        self._memory.load(self._load_address, program)
        self._memory.write_u16(self._reset_vector, self._load_address)
        logger.info("Loaded %d bytes at %#06x", len(program), self._load_address)

    # @intent:responsibility リセット処理。レジスタを0にし、リセットベクタからPCを読み込む。
    def reset(self) -> None:
        self._state = self._create_initial_state()
        self._state.pc = self._memory.read_u16(self._reset_vector)
        self._cycle_count = 0
        self._halted = False
        self._current = None
        self._last_operation = None
        logger.info("Reset: PC=%#06x", self._state.pc)

    # @intent:responsibility 外部からの標準的なエントリポイント。
    def load_and_run(self, program: Iterable[int]) -> None:
        self.load(program)
        self.reset()
        self.run()

    # --- テスト/デバッグ用アクセサ ---

    def mem_read(self, address: int) -> int:
        return self._memory.read(address)

    def mem_write(self, address: int, data: int) -> None:
        self._memory.write(address, data)

    def mem_read_u16(self, address: int) -> int:
        return self._memory.read_u16(address)

    def mem_write_u16(self, address: int, data: int) -> None:
        self._memory.write_u16(address, data)

    # @intent:responsibility テストハーネス用のレジスタ書き込み口。値はレジスタ幅で折り返す。
    # @intent:note get_state()で得た状態を直接書き換えると幅の不変条件が保証されないため、こちらを使う。
    def set_register(self, name: str, value: int) -> None:
        width_mask = REGISTER_MASKS.get(name.upper())
        if width_mask is None:
            raise ValueError(f"Unknown register: {name}")
        setattr(self._state, name.lower(), value & width_mask)

    def get_register(self, name: str) -> int:
        key = name.upper()
        if key not in REGISTER_MASKS:
            raise ValueError(f"Unknown register: {name}")
        return self.get_register_map()[key]

    # @intent:responsibility レジスタマップを返す。
    def get_register_map(self) -> RegisterMap:
        state = self._state
        return {
            "A": state.a,
            "X": state.x,
            "Y": state.y,
            "P": state.p,
            "PC": state.pc,
        }

    # @intent:responsibility フラグ状態を返す。
    def get_flag_state(self) -> FlagMap:
        state = self._state
        return {
            "N": state.flag_n,
            "V": state.flag_v,
            "Z": state.flag_z,
            "C": state.flag_c,
        }
