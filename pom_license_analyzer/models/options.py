"""Run option models."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from pom_license_analyzer.constants import DEFAULT_OUTPUT_DIR
from pom_license_analyzer.models.config import ViolationAction


class Verbosity(Enum):
    """Output verbosity levels."""

    QUIET = "quiet"
    NORMAL = "normal"
    VERBOSE = "verbose"


class CheckOptions(BaseModel):
    """Options for a license check run."""

    model_config = {"extra": "forbid"}

    output_dir: str = Field(
        default=DEFAULT_OUTPUT_DIR,
        description="Directory receiving artifacts.json and validation.txt",
    )
    verbosity: Verbosity = Field(
        default=Verbosity.NORMAL,
        description="Output verbosity level (quiet, normal, verbose)",
    )
    violation_action: Optional[ViolationAction] = Field(
        default=None,
        description="Overrides the policy's violation action when set",
    )
