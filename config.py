import json
from pathlib import Path

_DEFAULT_CONFIG = Path(__file__).parent / "config.json"


class LoggingConfig:
    __slots__ = ("level",)
    
    def __init__(self, level="INFO"):
        self.level = level


class Config:
    __slots__ = ("logging",)
    
    def __init__(self, logging=None):
        self.logging = logging or LoggingConfig()

    @classmethod
    def from_dict(cls, d):
        return cls(LoggingConfig(**d.get("logging", {})))


def load_config(path=None):
    config_path = Path(path) if path else _DEFAULT_CONFIG
    
    if not config_path.exists():
        return Config()
    
    with open(config_path) as file:
        return Config.from_dict(json.load(file))
