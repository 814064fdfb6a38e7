import yaml
from typing import Dict, Any

from .models import CpuConfig

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


# @intent:responsibility YAML形式の設定を読み込み、CpuConfigへ変換します。
class ConfigLoader:
    def load_from_file(self, path: str) -> CpuConfig:
        with open(path, 'r') as f:
            data = yaml.safe_load(f)
        return self._parse_config(data)

    def load_from_string(self, text: str) -> CpuConfig:
        return self._parse_config(yaml.safe_load(text))

    def _parse_config(self, data: Dict[str, Any]) -> CpuConfig:
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError(f"Configuration must be a mapping, got {type(data).__name__}")

        defaults = CpuConfig()
        load_address = self._parse_int(data.get("load_address", defaults.load_address))
        reset_vector = self._parse_int(data.get("reset_vector", defaults.reset_vector))
        log_level = str(data.get("log_level", defaults.log_level)).upper()

        if not 0 <= load_address <= 0xFFFF:
            raise ValueError(f"load_address out of range: {load_address:#x}")
        # ベクタは2バイトを占めるため $FFFE が上限
        if not 0 <= reset_vector <= 0xFFFE:
            raise ValueError(f"reset_vector out of range: {reset_vector:#x}")
        if log_level not in _LOG_LEVELS:
            raise ValueError(f"Invalid log_level: {log_level}")

        return CpuConfig(
            load_address=load_address,
            reset_vector=reset_vector,
            log_level=log_level,
        )

    def _parse_int(self, value: Any) -> int:
        if isinstance(value, bool):
            raise ValueError(f"Invalid integer format: {value}")
        if isinstance(value, int):
            return value
        if isinstance(value, str):
            value = value.strip()
            try:
                if value.lower().startswith("0x"):
                    return int(value, 16)
                if value.startswith("$"):
                    return int(value[1:], 16)
                return int(value)
            except ValueError:
                raise ValueError(f"Invalid integer format: {value}") from None
        raise ValueError(f"Invalid integer format: {value}")
