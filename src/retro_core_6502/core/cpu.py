# retro_core_6502/core/cpu.py
"""
Core Layer (抽象CPU)

このモジュールは、CPUの基本的な状態管理と命令サイクルの駆動に関する抽象化を提供します。
具体的な命令の振る舞いはInstruction Layerに移譲されます。
"""
import logging
from abc import ABC, abstractmethod
from typing import Optional

from retro_core_6502.common.errors import EmulationError
from retro_core_6502.common.types import FlagMap, RegisterMap
from retro_core_6502.core.snapshot import Metadata, Operation, Snapshot
from retro_core_6502.core.state import CpuState
from retro_core_6502.transport.memory import Memory

logger = logging.getLogger(__name__)


# @intent:responsibility 抽象CPUの基本機能とインターフェースを定義します。
class AbstractCpu(ABC):
    """
    全てのCPUエミュレーションの基底となる抽象クラス。
    Memoryとのインターフェース、基本的な状態管理、命令サイクルの抽象化を提供します。
    """
    # @intent:responsibility CPUの状態とメモリへの参照を初期化します。
    def __init__(self, memory: Optional[Memory] = None):
        self._memory = memory if memory is not None else Memory()
        self._state: CpuState = self._create_initial_state()
        self._cycle_count: int = 0
        self._halted: bool = False
        self._last_operation: Optional[Operation] = None

    # @intent:responsibility 初期状態のCpuStateオブジェクトを生成します。
    @abstractmethod
    def _create_initial_state(self) -> CpuState:
        """
        CPUの初期状態（全レジスタ0）を生成して返します。
        """
        pass

    @property
    def memory(self) -> Memory:
        return self._memory

    @property
    def halted(self) -> bool:
        return self._halted

    @property
    def cycle_count(self) -> int:
        return self._cycle_count

    # @intent:responsibility 現在のCPUの状態を返します。
    def get_state(self) -> CpuState:
        return self._state

    # @intent:responsibility メモリから次のオペコードをフェッチし、PCを1進めます。
    @abstractmethod
    def _fetch(self) -> int:
        pass

    # @intent:responsibility フェッチしたオペコードを解析し、Operationオブジェクトに変換します。
    @abstractmethod
    def _decode(self, opcode: int) -> Operation:
        pass

    # @intent:responsibility デコードされた命令を実行し、CPUの状態を更新します。
    # @intent:pre-condition PCは最初のオペランドバイトを指しています。
    @abstractmethod
    def _execute(self, operation: Operation) -> None:
        pass

    # @intent:responsibility 実行後、フェッチで消費されていないオペランドバイト分だけPCを進めます。
    def _update_pc(self, operation: Operation) -> None:
        self._state.pc = (self._state.pc + operation.length - 1) & 0xFFFF

    # @intent:responsibility CPUを1命令サイクル進め、その結果のスナップショットを返します。
    # @intent:rationale Template Methodパターンを採用し、共通の実行フロー（フェッチ→デコード→実行→PC更新→Snapshot生成）を定義します。
    def step(self) -> Snapshot:
        """
        CPUを1命令サイクル進め、その時点でのCPUの状態を含むSnapshotオブジェクトを返します。
        停止中であれば何も実行しません。
        """
        if self._halted:
            return self._handle_halt()

        initial_pc = self._state.pc

        opcode = self._fetch()
        operation = self._decode(opcode)
        self._execute(operation)
        self._update_pc(operation)

        self._cycle_count += operation.cycle_count
        self._last_operation = operation

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("%#06x %s %s", initial_pc, operation.mnemonic, self.get_register_map())

        return self._create_snapshot(initial_pc, operation)

    # @intent:responsibility 停止状態でstepが呼ばれた場合のスナップショットを返します。
    def _handle_halt(self) -> Snapshot:
        operation = self._last_operation or Operation(opcode_hex="", mnemonic="")
        return self._create_snapshot(None, operation)

    def _create_snapshot(self, initial_pc: Optional[int], operation: Operation) -> Snapshot:
        return Snapshot(
            state=self._state.copy(),
            operation=operation,
            metadata=Metadata(cycle_count=self._cycle_count, address=initial_pc),
            halted=self._halted,
        )

    # @intent:responsibility 停止命令に到達するまで命令を実行し続けます。
    # @intent:post-condition エラーは型付きの例外として呼び出し元へ伝播します。
    def run(self) -> None:
        """
        停止するか、致命的なエラーが発生するまで実行します。
        """
        try:
            while not self._halted:
                self.step()
        except EmulationError as e:
            logger.error("Execution stopped: %s", e)
            raise
        logger.info("Halted at %#06x after %d cycles", self._state.pc, self._cycle_count)

    @abstractmethod
    def reset(self) -> None:
        pass

    @abstractmethod
    def get_register_map(self) -> RegisterMap:
        """
        現在のレジスタ値を辞書形式で返す。
        """
        pass

    @abstractmethod
    def get_flag_state(self) -> FlagMap:
        """
        現在のフラグ（ステータスレジスタ）の各ビットの状態を辞書形式で返す。
        """
        pass
