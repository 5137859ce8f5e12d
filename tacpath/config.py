"""
Tacpath Configuration

Loads configuration from environment variables with sensible defaults.
"""

import os
from dotenv import load_dotenv

# Load .env file if it exists
load_dotenv()


class Config:
    """Application configuration loaded from environment variables."""

    # Search cost weights (move cost = 1 + danger * DANGER - cover * COVER)
    DANGER_WEIGHT: float = float(os.getenv("TACPATH_DANGER_WEIGHT", "5.0"))
    COVER_WEIGHT: float = float(os.getenv("TACPATH_COVER_WEIGHT", "0.4"))

    @classmethod
    def validate(cls) -> None:
        """Validate configuration and raise errors for unusable weights."""
        if cls.DANGER_WEIGHT < 0:
            raise ValueError(
                f"TACPATH_DANGER_WEIGHT must be non-negative, got {cls.DANGER_WEIGHT}"
            )

        # Full cover would make a move free (or negative) at weight >= 1
        if not 0 <= cls.COVER_WEIGHT < 1:
            raise ValueError(
                f"TACPATH_COVER_WEIGHT must be in [0, 1), got {cls.COVER_WEIGHT}"
            )

    @classmethod
    def display(cls) -> str:
        """Return a formatted string showing current configuration."""
        lines = [
            "Tacpath Configuration:",
            f"  Danger Weight: {cls.DANGER_WEIGHT}",
            f"  Cover Weight: {cls.COVER_WEIGHT}",
        ]
        return "\n".join(lines)
