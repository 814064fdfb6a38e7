# tests/core/test_snapshot.py
"""
retro_core_6502.core.snapshotモジュールの単体テスト。
"""
import pytest
from retro_core_6502.core.state import CpuState
from retro_core_6502.core.snapshot import Operation, Metadata, Snapshot

# @intent:test_suite 実行結果を記録する不変スナップショットデータ構造の検証。


class TestOperation:
    def test_operation_defaults(self):
        op = Operation(opcode_hex="E8", mnemonic="INX")
        assert op.mode == ""
        assert op.operand_bytes == []
        assert op.cycle_count == 0
        assert op.length == 1

    # @intent:test_case_immutability Operationが不変であることを検証します。
    def test_operation_immutability(self):
        op = Operation(opcode_hex="A9", mnemonic="LDA", operand_bytes=[0x05], length=2)
        with pytest.raises(AttributeError):
            op.mnemonic = "STA"


class TestSnapshot:
    def test_snapshot_init(self):
        state = CpuState(pc=0x8002)
        op = Operation(opcode_hex="A9", mnemonic="LDA", cycle_count=2, length=2)
        snapshot = Snapshot(state=state, operation=op, metadata=Metadata(cycle_count=2, address=0x8000))
        assert snapshot.state.pc == 0x8002
        assert snapshot.operation.mnemonic == "LDA"
        assert snapshot.metadata.address == 0x8000
        assert snapshot.halted is False

    def test_snapshot_immutability(self):
        snapshot = Snapshot(
            state=CpuState(),
            operation=Operation(opcode_hex="00", mnemonic="BRK"),
            metadata=Metadata(cycle_count=7),
        )
        with pytest.raises(AttributeError):
            snapshot.halted = True

    def test_state_copy_is_independent(self):
        state = CpuState(pc=0x1000)
        copied = state.copy()
        state.pc = 0x2000
        assert copied.pc == 0x1000
