from ._config import DiagtraceConfig
from ._config import config
from ._store import OptionStore


__all__ = ["DiagtraceConfig", "OptionStore", "config"]
