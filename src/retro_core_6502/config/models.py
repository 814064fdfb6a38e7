from dataclasses import dataclass

from retro_core_6502.arch.mos6502.cpu import DEFAULT_LOAD_ADDRESS, DEFAULT_RESET_VECTOR


@dataclass
class CpuConfig:
    load_address: int = DEFAULT_LOAD_ADDRESS
    reset_vector: int = DEFAULT_RESET_VECTOR
    log_level: str = "WARNING"
