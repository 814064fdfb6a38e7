"""
エミュレーションエラーの定義。

全てのエラーは決定的なプログラム/データの誤りであり、リトライの対象にはなりません。
呼び出し元 (run / load_and_run) へ型付きの例外として伝播させます。
"""
from typing import Optional


# @intent:responsibility エミュレーションエラーの共通基底クラス。
class EmulationError(Exception):
    """
    コアエンジンが送出する全てのエラーの基底クラス。
    """
    pass


# @intent:responsibility オペコード表に存在しないバイトをフェッチしたことを表します。
class UnknownOpcodeError(EmulationError):
    def __init__(self, opcode: int, address: Optional[int] = None):
        self.opcode = opcode
        self.address = address
        if address is None:
            message = f"Unknown opcode {opcode:#04x}"
        else:
            message = f"Unknown opcode {opcode:#04x} at {address:#06x}"
        super().__init__(message)


# @intent:responsibility Implied アドレッシングがリゾルバに渡されたことを表します（内部不変条件の違反）。
class InvalidAddressingModeError(EmulationError):
    def __init__(self, mode):
        self.mode = mode
        super().__init__(f"Addressing mode {mode} has no effective address.")


# @intent:responsibility 64KB空間外のアドレスへのアクセスを表します。
# @intent:note 既存のバス実装に合わせ IndexError としても捕捉できるようにします。
class MemoryAddressOutOfRangeError(EmulationError, IndexError):
    def __init__(self, address: int, size: int = 0x10000):
        self.address = address
        super().__init__(f"Address {address} out of bounds for memory of size {size}.")
