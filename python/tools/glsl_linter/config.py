"""
Linter settings.

The only user-facing option is the path or name of the glslangValidator
binary. Resolving it follows the editor plugin's rules: an existing
executable file is used as-is, anything else is looked up on PATH.
"""

import os
import shutil
from pathlib import Path
from typing import Any, Dict, Optional

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_VALIDATOR_PATH = "glslangValidator"


class LinterSettings(BaseModel):
    """Settings for locating the shader validator."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    validator_path: str = Field(
        default=DEFAULT_VALIDATOR_PATH,
        description="Path or command name of the glslangValidator binary",
    )

    @field_validator("validator_path")
    @classmethod
    def validate_validator_path(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("validator_path must not be empty")
        return value

    @classmethod
    def from_dict(cls, settings: Dict[str, Any]) -> "LinterSettings":
        """Create settings from a dictionary, ignoring unknown keys."""
        return cls.model_validate(settings)

    def resolve_validator(self) -> Optional[str]:
        """
        Resolve the configured validator to an executable on disk.

        Returns:
            Absolute path or PATH match, or None if nothing executable was found
        """
        candidate = Path(self.validator_path)
        if candidate.is_file():
            if os.access(candidate, os.X_OK):
                return str(candidate)
            logger.warning(f"Validator at '{candidate}' is not executable")
        else:
            found = shutil.which(self.validator_path)
            if found:
                return found

        logger.warning(
            f"Unable to locate glslangValidator at '{self.validator_path}'"
        )
        return None

    def validator_command(self) -> str:
        """Command to run, falling back to the default name when unresolved."""
        return self.resolve_validator() or DEFAULT_VALIDATOR_PATH
