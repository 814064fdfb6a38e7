# retro_core_6502/core/snapshot.py
"""
実行状態の不変スナップショット

1命令の実行結果を記録する不変のデータ構造を定義します。
テストハーネスや外部スケジューラへの情報提供に用います。
"""
from dataclasses import dataclass, field
from typing import List, Optional

from retro_core_6502.core.state import CpuState


# @intent:responsibility 実行された命令の詳細を記録します。
@dataclass(frozen=True)
class Operation:
    """
    実行された命令の詳細（HEX、ニーモニック、アドレッシングモード、オペランド）を記録するデータクラス。
    """
    opcode_hex: str  # 例: "A9"
    mnemonic: str  # 例: "LDA"
    mode: str = ""  # 例: "IMMEDIATE"
    operand_bytes: List[int] = field(default_factory=list)
    cycle_count: int = 0  # 基本サイクル数
    length: int = 1  # 命令のバイト長


# @intent:responsibility 実行に関するメタデータを記録します。
@dataclass(frozen=True)
class Metadata:
    cycle_count: int  # 累計サイクル数
    address: Optional[int] = None  # 命令の先頭アドレス


# @intent:responsibility ある一時点におけるCPUの状態を不変に記録します。
@dataclass(frozen=True)
class Snapshot:
    """
    1ステップ実行後のCPU状態と、実行した命令の記録。
    stateは生成時にコピーされたものであり、以降の実行で変化しません。
    """
    state: CpuState
    operation: Operation
    metadata: Metadata
    halted: bool = False
