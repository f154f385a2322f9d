"""Configuration models with Pydantic validation."""

import json
from pathlib import Path
from typing import Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CarveSettings(BaseModel):
    """Global carving settings."""

    output_directory: Path = Field(
        default=Path("output"), description="Directory receiving extracted files"
    )
    definitions_file: Path = Field(
        default=Path("type.txt"), description="Signature definitions file"
    )
    log_level: str = Field(default="INFO", description="Logging level")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}")
        return v.upper()

    @classmethod
    def from_json(cls, config_path: Union[str, Path]) -> "CarveSettings":
        """Load settings from JSON file."""
        config_path = Path(config_path)

        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        try:
            with config_path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in configuration file: {e}")

        return cls.model_validate(data)


class RunConfig(BaseModel):
    """Per-run naming state, built once at entry and passed down explicitly."""

    model_config = ConfigDict(frozen=True)

    input_path: Path
    output_dir: Path
    base_name: str = Field(..., min_length=1)

    @classmethod
    def from_input(
        cls, input_path: str, output_dir: Union[str, Path]
    ) -> "RunConfig":
        """
        Build a run configuration from the raw CLI arguments.

        The base name is the last ``/``-separated segment of ``input_path``,
        kept verbatim (extension included).

        Args:
            input_path: Path of the file to scan, as given by the user
            output_dir: Directory receiving extracted files

        Returns:
            Immutable run configuration
        """
        base_name = input_path.split("/")[-1]
        return cls(
            input_path=Path(input_path),
            output_dir=Path(output_dir),
            base_name=base_name,
        )
