from dataclasses import dataclass
from typing import Optional, Union
from pathlib import Path
import yaml

@dataclass
class PruneConfig:
    """Configuration for splitting a graph into components and pruning them."""
    # Number of non-tree edges to remove from each connected component
    remove: int = 0
    # Output base name; files are <output><i>_edges.csv / <output><i>_removed.csv
    output: str = "processed"

    # Randomness: None means a fresh unseeded generator per component
    random_state: Optional[int] = None

    # Components are independent; process this many at once
    workers: int = 4

    # Input handling
    directed_input: bool = False  # keep edges one-way instead of mirroring them

    # Reporting
    verbose: bool = False
    write_summary: bool = True    # <output>_summary.csv + <output>_metadata.json

    def __post_init__(self):
        if self.remove < 0:
            raise ValueError(f"remove must be >= 0, got {self.remove}")
        if self.workers < 1:
            raise ValueError(f"workers must be >= 1, got {self.workers}")
        if not self.output:
            raise ValueError("output base name must not be empty")

    @staticmethod
    def from_yaml(path: Union[str, Path]) -> "PruneConfig":
        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
        return PruneConfig(**raw)
