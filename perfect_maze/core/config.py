from dataclasses import dataclass
from typing import Optional

# Step budget meaning "generate fully now"
INSTANT = None

# Difficulty aliases
ALGO_ALIASES = {
    "easy": "backtracker",
    "medium": "growing-tree",
    "hard": "kruskal",
}
ALGORITHMS = ("backtracker", "growing-tree", "kruskal")
SHUFFLES = ("naive", "fisher-yates")
RESTARTS = ("legacy", "mark-anchor", "hunt")

DEFAULT_CELLS = 20


class ConfigError(ValueError):
    pass


def parse_steps(value) -> Optional[int]:
    """'instant' (or None) -> INSTANT, otherwise a positive int."""
    if value is None or (isinstance(value, str) and value.lower() == "instant"):
        return INSTANT
    try:
        steps = int(value)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Step budget must be a positive integer or 'instant', got {value!r}") from e
    if steps < 1:
        raise ConfigError(f"Step budget must be >= 1, got {steps}")
    return steps


@dataclass(frozen=True)
class MazeConfig:
    width: int = DEFAULT_CELLS
    height: int = DEFAULT_CELLS
    algo: str = "backtracker"
    steps: Optional[int] = 1
    seed: Optional[int] = None
    shuffle: str = "naive"
    restart: str = "legacy"

    def __post_init__(self):
        for name in ("width", "height"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise ConfigError(f"{name} must be a positive integer, got {value!r}")

        algo = ALGO_ALIASES.get(self.algo, self.algo)
        if algo not in ALGORITHMS:
            raise ConfigError(f"Unknown algorithm {self.algo!r} (choose from {', '.join(ALGORITHMS)})")
        # Frozen: normalise through object.__setattr__
        object.__setattr__(self, "algo", algo)
        object.__setattr__(self, "steps", parse_steps(self.steps))

        if self.shuffle not in SHUFFLES:
            raise ConfigError(f"Unknown shuffle {self.shuffle!r} (choose from {', '.join(SHUFFLES)})")
        if self.restart not in RESTARTS:
            raise ConfigError(f"Unknown restart policy {self.restart!r} (choose from {', '.join(RESTARTS)})")

    @property
    def cell_count(self) -> int:
        return self.width * self.height
