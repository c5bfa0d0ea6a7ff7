# senet/config.py
from dataclasses import dataclass, field
from typing import Optional, Tuple
import os
import tomllib  # python >=3.11

# Houses that carry a rule or a heuristic bonus
SPECIAL_SQUARES = (15, 26, 27, 28, 29, 30)


@dataclass
class SearchConfig:
    depth: int = 3
    debug: bool = False


@dataclass
class EvalConfig:
    borne_off_weight: int = 100
    special_square_bonus: int = 10
    special_squares: Tuple[int, ...] = SPECIAL_SQUARES


@dataclass
class AnalyzerConfig:
    # loss relative to the best move, in evaluation units
    TH_BEST: float = 0.5
    TH_EXCELLENT: float = 3.0
    TH_GOOD: float = 8.0
    TH_INACCURACY: float = 20.0
    TH_MISTAKE: float = 50.0


@dataclass
class UIConfig:
    engine_name: str = "Senet"
    turn_delay_ms: int = 1500
    api_port: int = 8000


@dataclass
class Config:
    search: SearchConfig = field(default_factory=SearchConfig)
    eval: EvalConfig = field(default_factory=EvalConfig)
    analyzer: AnalyzerConfig = field(default_factory=AnalyzerConfig)
    ui: UIConfig = field(default_factory=UIConfig)
    log_level: str = "INFO"
    seed: Optional[int] = None

    @staticmethod
    def load_from_toml(path: str = "config.toml") -> "Config":
        cfg = Config()
        if not os.path.exists(path):
            return cfg
        with open(path, "rb") as f:
            raw = tomllib.load(f)
        for section in ("search", "eval", "analyzer", "ui"):
            target = getattr(cfg, section)
            for k, v in raw.get(section, {}).items():
                if hasattr(target, k):
                    if k == "special_squares":
                        v = tuple(v)
                    setattr(target, k, v)
        if "log_level" in raw:
            cfg.log_level = str(raw["log_level"]).upper()
        if "seed" in raw:
            cfg.seed = int(raw["seed"])
        return cfg


# single globally importable config instance
CONFIG = Config.load_from_toml(os.environ.get("SENET_CONFIG_TOML", "config.toml"))
# allow env override of depth for quick debugging
override_depth = os.environ.get("SENET_SEARCH_DEPTH")
if override_depth and override_depth.strip().isdigit() and int(override_depth) > 0:
    CONFIG.search.depth = int(override_depth)
