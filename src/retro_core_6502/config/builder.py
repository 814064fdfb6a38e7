import logging
from typing import Tuple

from retro_core_6502.transport.memory import Memory
from retro_core_6502.arch.mos6502.cpu import Mos6502Cpu
from .models import CpuConfig

logger = logging.getLogger(__name__)

PACKAGE_LOGGER = "retro_core_6502"


# @intent:responsibility 設定（Config）に基づいて、MemoryとCPUを生成・接続します。
class SystemBuilder:
    def build_system(self, config: CpuConfig) -> Tuple[Mos6502Cpu, Memory]:
        logging.getLogger(PACKAGE_LOGGER).setLevel(config.log_level)

        memory = Memory()
        cpu = Mos6502Cpu(
            memory,
            load_address=config.load_address,
            reset_vector=config.reset_vector,
        )
        logger.debug(
            "Built MOS6502 system: load_address=%#06x reset_vector=%#06x",
            config.load_address, config.reset_vector,
        )
        return cpu, memory
