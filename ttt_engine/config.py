# ttt_engine/config.py
from dataclasses import dataclass, field
from typing import List, Optional
import os
import tomllib

DEFAULT_OPENING_BOOK = [1, 3, 5, 7, 9]

@dataclass
class SearchConfig:
    use_opening_book: bool = True
    opening_book: List[int] = field(default_factory=lambda: DEFAULT_OPENING_BOOK.copy())
    seed: Optional[int] = None  # None means a fresh random opening each game

@dataclass
class UIConfig:
    engine_name: str = "PerfectTTT"
    engine_author: str = "PerfectTTT developers"
    api_port: int = 8000
    cors_origins: List[str] = field(default_factory=lambda: ["*"])

@dataclass
class Config:
    search: SearchConfig = field(default_factory=SearchConfig)
    ui: UIConfig = field(default_factory=UIConfig)
    log_level: str = "INFO"

    @staticmethod
    def load_from_toml(path: str = "config.toml") -> "Config":
        cfg = Config()
        if not os.path.exists(path):
            return cfg
        with open(path, "rb") as f:
            raw = tomllib.load(f)
        for section in ("search", "ui"):
            target = getattr(cfg, section)
            for k, v in raw.get(section, {}).items():
                if hasattr(target, k):
                    setattr(target, k, v)
        if "log_level" in raw:
            cfg.log_level = str(raw["log_level"])
        return cfg

    def opening_book(self) -> List[int]:
        """Opening cells in effect; empty when the book is switched off."""
        return list(self.search.opening_book) if self.search.use_opening_book else []

# single globally importable config instance
CONFIG = Config.load_from_toml(os.environ.get("TTT_CONFIG_TOML", "config.toml"))
# env overrides for quick debugging
override_seed = os.environ.get("TTT_SEARCH_SEED")
if override_seed:
    CONFIG.search.seed = int(override_seed)
override_level = os.environ.get("TTT_LOG_LEVEL")
if override_level:
    CONFIG.log_level = override_level.upper()
