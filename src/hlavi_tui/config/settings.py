"""Application settings."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings."""

    project_root: Path = Field(
        default=Path(),
        description="Path to project root containing the board directory",
    )

    data_dir: str = Field(
        default=".hlavi",
        description="Board directory name, relative to project_root",
    )

    verbose: int = Field(
        default=0,
        description="Verbosity level (0=off, 1=INFO, 2+=DEBUG)",
    )

    log_file: Path | None = Field(
        default=None,
        description="Optional path to write logs to file",
    )

    model_config = {
        "env_prefix": "HLAVI_",
    }

    @property
    def board_root(self) -> Path:
        """Directory holding board.yaml and tasks/."""
        return self.project_root / self.data_dir
