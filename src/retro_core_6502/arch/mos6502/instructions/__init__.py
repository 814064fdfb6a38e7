"""
MOS 6502 命令実装パッケージ。
"""
