from dataclasses import dataclass
from typing import Dict, Optional

@dataclass(frozen=True)
class AlgorithmDefaults:
    seed: int
    bias: Optional[float] = None   # random-walk has no bias
    rows: int = 25
    columns: int = 25

@dataclass(frozen=True)
class ViewDefaults:
    width: int = 400
    height: int = 400
    padding: int = 1
    wall_color: str = "white"
    texture_color: str = "#33CCFF"
    background: str = "black"

# Demo page settings, one per algorithm
DEMO_DEFAULTS: Dict[str, AlgorithmDefaults] = {
    "side-winder": AlgorithmDefaults(seed=2023, bias=0.8),
    "binary": AlgorithmDefaults(seed=2024, bias=0.5),
    "random-walk": AlgorithmDefaults(seed=2025),
}

VIEW = ViewDefaults()
