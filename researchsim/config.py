"""
researchsim Configuration

Loads configuration from environment variables with sensible defaults.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# Load .env file if it exists
load_dotenv()


class Config:
    """Application configuration loaded from environment variables."""

    # Project Paths
    PROJECT_ROOT: Path = Path(__file__).parent.parent

    # Scenario files
    SCENARIOS_DIR: Path = Path(
        os.getenv("RESEARCHSIM_SCENARIOS_DIR", str(PROJECT_ROOT / "examples" / "scenarios"))
    )
    SCENARIO_SUFFIX: str = os.getenv("RESEARCHSIM_SCENARIO_SUFFIX", ".txt")
    DEFAULT_SCENARIO: str = os.getenv("RESEARCHSIM_DEFAULT_SCENARIO", "island")

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    @classmethod
    def validate(cls) -> None:
        """Validate configuration and raise errors if values are unusable."""
        if not cls.SCENARIO_SUFFIX or not cls.SCENARIO_SUFFIX.startswith("."):
            raise ValueError(
                "RESEARCHSIM_SCENARIO_SUFFIX must be a file extension starting with '.' "
                f"(got {cls.SCENARIO_SUFFIX!r})"
            )

    @classmethod
    def display(cls) -> str:
        """Return a formatted string showing current configuration."""
        lines = [
            "researchsim Configuration:",
            f"  Scenarios: {cls.SCENARIOS_DIR}",
            f"  Suffix: {cls.SCENARIO_SUFFIX}",
            f"  Default Scenario: {cls.DEFAULT_SCENARIO}",
            f"  Log Level: {cls.LOG_LEVEL}",
        ]
        return "\n".join(lines)
