from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class BuilderConfig:
    strict_combinators: bool = False  # only " ", ">", "+", "~" accepted


DEFAULT_CONFIG = BuilderConfig()
