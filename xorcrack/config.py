"""Runtime configuration with environment overrides."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

from xorcrack.error_handling import ConfigurationError
from xorcrack.utils.xor_tools import MAX_SEARCHED_KEY_LENGTH

ENV_PREFIX = "XORCRACK_"


def _truthy_env(value: str) -> bool:
    return value not in {"", "0", "false", "False", "no"}


def _int_env(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(ENV_PREFIX + name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigurationError(
            f"{ENV_PREFIX}{name} must be an integer, got {raw!r}",
            original_exception=e,
        ) from e


@dataclass(frozen=True)
class AnalysisConfig:
    """Settings shared by the analyzer, the formatter and the CLI."""

    max_key_length: int = MAX_SEARCHED_KEY_LENGTH
    debug: bool = False
    preview_length: int = 60

    def __post_init__(self):
        if self.max_key_length < 1:
            raise ConfigurationError(
                f"max_key_length must be at least 1, got {self.max_key_length}"
            )
        if self.preview_length < 0:
            raise ConfigurationError(
                f"preview_length must not be negative, got {self.preview_length}"
            )

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "AnalysisConfig":
        """Build a config from XORCRACK_* environment variables."""
        env = os.environ if env is None else env
        return cls(
            max_key_length=_int_env(env, "MAX_KEY_LENGTH", MAX_SEARCHED_KEY_LENGTH),
            debug=_truthy_env(env.get(ENV_PREFIX + "DEBUG", "0")),
            preview_length=_int_env(env, "PREVIEW_LENGTH", 60),
        )

    def with_overrides(self, **overrides) -> "AnalysisConfig":
        """Return a copy with every non-None override applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})
