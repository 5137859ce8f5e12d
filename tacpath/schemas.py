"""
Pydantic schemas for tactical search configuration.

Cost weights are passed into each search explicitly rather than being baked
into the algorithm, so alternative tactical profiles (cautious, reckless) can
be compared on the same grid.
"""

from pydantic import BaseModel, Field

from .config import Config


class SearchWeights(BaseModel):
    """Weights of the tactical move cost ``1 + danger * dw - cover * cw``.

    ``cover_weight`` stays below 1.0 so that a move into full cover still
    costs something; zero or negative step costs would break best-first search.
    """

    danger_weight: float = Field(5.0, ge=0.0, description="Penalty per unit of danger")
    cover_weight: float = Field(
        0.4, ge=0.0, lt=1.0, description="Discount per unit of cover"
    )

    @classmethod
    def from_config(cls) -> "SearchWeights":
        """Build weights from ``Config`` (environment variables)."""
        return cls(danger_weight=Config.DANGER_WEIGHT, cover_weight=Config.COVER_WEIGHT)

    @property
    def min_step_cost(self) -> float:
        """Cheapest possible move: zero danger, full cover."""
        return 1.0 - self.cover_weight
