"""Search configuration."""

from dataclasses import dataclass

from .strategies import STRATEGY_REGISTRY


@dataclass
class SearchConfig:
    """Tunable constants of the search strategies.

    Attributes:
        strategy: Registry name of the variant to run.
        alpha: Exploration share for simple bandit search.
        delta: Confidence parameter for LIL-UCB and LUCB.
        k1: Extra constant in the LUCB confidence radius.
        random_seed: Seed for strategies that sample (exponential weights).
    """

    strategy: str = "static"
    alpha: float = 0.3
    delta: float = 0.1
    k1: float = 1.25
    random_seed: int = 42

    def validate(self):
        """Check every field is in range.

        Returns:
            self, so construction and validation can be chained.

        Raises:
            ValueError: If the strategy is unknown or a constant is out of range.
        """
        if self.strategy not in STRATEGY_REGISTRY:
            raise ValueError(
                f"Unknown strategy '{self.strategy}'. "
                f"Available: {list(STRATEGY_REGISTRY.keys())}"
            )
        if not 0 < self.alpha <= 1:
            raise ValueError(f"alpha must be in (0, 1], got {self.alpha}")
        if not 0 < self.delta < 1:
            raise ValueError(f"delta must be in (0, 1), got {self.delta}")
        if self.k1 <= 0:
            raise ValueError(f"k1 must be > 0, got {self.k1}")
        return self
