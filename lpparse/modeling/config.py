"""
Parser configuration.

Settings can come from the environment (or a .env file):
- LPPARSE_DUPLICATE_OBJECTIVE: "last_wins" (default) or "error"
- LPPARSE_STRICT_RELATIONS: "1"/"true"/"yes" to require exactly <=, >= or ==
"""

import os
import logging
from dataclasses import dataclass
from typing import Literal

from dotenv import find_dotenv, load_dotenv

logger = logging.getLogger(__name__)

DuplicateObjectivePolicy = Literal["last_wins", "error"]

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


@dataclass(frozen=True)
class ParserConfig:
    """
    Parser policy switches.

    Defaults reproduce the lenient behaviour of the notation: the last
    objective wins and any operator containing '<' or '>' is accepted.
    """
    duplicate_objective: DuplicateObjectivePolicy = "last_wins"
    strict_relations: bool = False

    def __post_init__(self):
        """Validate policy values."""
        if self.duplicate_objective not in ("last_wins", "error"):
            raise ValueError(
                f"Invalid duplicate_objective policy: {self.duplicate_objective!r} "
                f"(must be 'last_wins' or 'error')"
            )

    @classmethod
    def from_env(cls) -> "ParserConfig":
        """Build configuration from LPPARSE_* environment variables."""
        load_dotenv(find_dotenv(usecwd=True))

        policy = os.environ.get("LPPARSE_DUPLICATE_OBJECTIVE", "last_wins").strip().lower()
        strict_raw = os.environ.get("LPPARSE_STRICT_RELATIONS", "").strip().lower()

        if strict_raw in _TRUE_VALUES:
            strict = True
        elif strict_raw in _FALSE_VALUES:
            strict = False
        else:
            raise ValueError(f"Invalid LPPARSE_STRICT_RELATIONS value: {strict_raw!r}")

        config = cls(duplicate_objective=policy, strict_relations=strict)
        logger.debug(f"Loaded parser config from environment: {config}")
        return config
