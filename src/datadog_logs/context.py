"""
Process-wide ``env`` / ``version`` overrides.

Overrides are plain attributes: writers assign, readers take one snapshot
per formatted event. Last write wins and no lock is taken.

The ``DD_ENV`` / ``DD_VERSION`` fallbacks come from the process environment
only; unlike ``DatadogSettings`` they are never read from a ``.env`` file.
"""

from __future__ import annotations

import os
from typing import Optional

ENV_VAR = "DD_ENV"
VERSION_VAR = "DD_VERSION"


class EnrichmentContext:
    """Holds the ``env`` and ``version`` overrides shared by formatters.

    When an override is None the matching environment variable is read on
    every call, so a changed environment takes effect without a restart.
    """

    def __init__(self, env: Optional[str] = None, version: Optional[str] = None) -> None:
        self.env = env
        self.version = version

    def resolve_env(self) -> Optional[str]:
        env = self.env
        return env if env is not None else os.getenv(ENV_VAR)

    def resolve_version(self) -> Optional[str]:
        version = self.version
        return version if version is not None else os.getenv(VERSION_VAR)

    def reset(self) -> None:
        self.env = None
        self.version = None


# Shared instance used by formatters that are not given their own context
default_context = EnrichmentContext()
