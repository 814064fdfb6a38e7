# retro_core_6502/core/state.py
"""
Core Layer (CPU状態)

このモジュールは、CPUの基本的な状態（レジスタ群）を保持するデータ構造を定義します。
"""
from dataclasses import dataclass, replace


# @intent:responsibility CPUのレジスタ状態を保持します。アーキテクチャ固有のレジスタはこれを拡張します。
@dataclass
class CpuState:
    """
    CPUのレジスタ状態を保持するデータクラス。
    アーキテクチャ固有のレジスタはサブクラスで追加されます。
    """
    pc: int = 0x0000  # Program Counter

    # @intent:responsibility 状態のコピーを返します。Snapshotが実行後に変化しないようにするために使用します。
    def copy(self) -> 'CpuState':
        return replace(self)
