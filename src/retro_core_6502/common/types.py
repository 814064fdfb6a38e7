"""
共通の型定義を提供するモジュール。
"""
from typing import Dict

# @intent:data_structure レジスタ名と値をマッピングする辞書の型エイリアス。
# CPUとテストハーネスで共通して使用されます。
RegisterMap = Dict[str, int]

# @intent:data_structure フラグ名と状態をマッピングする辞書の型エイリアス。
FlagMap = Dict[str, bool]
