from __future__ import annotations

from pathlib import Path
from typing import Sequence

from pydantic import BaseModel, ConfigDict, Field, field_validator

USAGE = "Usage: stdcheck [exercise] [destfile]"
HELP_FLAG = "-h"


class UsageError(ValueError):
    """The positional arguments do not match any accepted invocation."""


class RunConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    exercise: str | None = None
    destination: Path | None = None
    junit: Path | None = None
    log_file: Path | None = None
    verbose: bool = False
    indent: int = Field(default=4, ge=0, le=16)

    @field_validator("exercise", "destination", "junit", "log_file", mode="before")
    @classmethod
    def strip_blank(cls, v):
        if isinstance(v, str):
            v = v.strip()
            return v or None
        return v

    @classmethod
    def from_args(cls, args: Sequence[str] | None, **options) -> "RunConfig":
        """Build a config from the 0-2 positional arguments plus CLI options.

        Raises UsageError for more than two positionals, or for two where
        the second is a help request.
        """
        args = list(args or [])
        if len(args) > 2:
            raise UsageError(f"expected at most 2 arguments, got {len(args)}")
        if len(args) == 2 and args[1].strip() == HELP_FLAG:
            raise UsageError("help requested")
        if len(args) == 2 and not args[1].strip():
            raise UsageError("destination file must not be empty")

        exercise = args[0] if args else None
        destination = args[1] if len(args) == 2 else None
        return cls(exercise=exercise, destination=destination, **options)
