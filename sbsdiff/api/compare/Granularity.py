"""Sub-diff token granularity."""

from typing import Literal

Granularity = Literal["character", "word"]

GRANULARITIES: tuple[str, ...] = ("character", "word")
