"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, timemask.toml only contains
overrides. The ``[duration]`` section is a
:class:`~timemask.domain.duration.DurationPolicy`; :class:`TmSettings`
composes both sections.
"""

from __future__ import annotations

from pydantic import BaseModel


class MaskConfig(BaseModel):
    """[mask] section."""

    model_config = {"frozen": True}

    regex: bool = False
