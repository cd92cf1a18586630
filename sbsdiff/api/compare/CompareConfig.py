"""Compare configuration."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, ValidationError

from .CompareConfigError import CompareConfigError
from .Granularity import Granularity


class CompareConfig(BaseModel):
    """Options for a comparison.

    ``context_lines`` only drives optional collapsing of unchanged runs at
    display time; it never changes the computed model. ``show_line_numbers``
    is passed through to the model for the renderer.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    ignore_whitespace: StrictBool = Field(False, description="Trim and collapse whitespace before comparing")
    granularity: Granularity = Field("character", description="Sub-diff tokens: character or word")
    context_lines: StrictInt = Field(3, ge=0, description="Unchanged lines kept around changes when collapsing")
    show_line_numbers: StrictBool = Field(True, description="Render line numbers")

    @classmethod
    def from_config_dict(cls, config: dict[str, Any]) -> "CompareConfig":
        """Load compare config from the ``compare`` section of a config dict.

        Args:
            config: Configuration dictionary; a missing section means defaults

        Returns:
            CompareConfig instance

        Raises:
            CompareConfigError: If the section is not a dict or any value is invalid
        """
        section = config.get("compare", {})
        if not isinstance(section, dict):
            raise CompareConfigError(
                [f"compare must be a dict (found: {type(section).__name__}, expected: dict of compare options)"]
            )

        try:
            return cls(**section)
        except ValidationError as exc:
            errors = [
                f"compare.{'.'.join(str(p) for p in err['loc'])}: {err['msg']} (found: {err.get('input')!r})"
                for err in exc.errors()
            ]
            raise CompareConfigError(errors) from exc
