"""Renderer configuration.

RenderConfig is a frozen dataclass — immutable after creation, shareable
across threads, no string-key dict lookups.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from tern.errors import ConfigurationError

_TRUTHY = frozenset({"1", "true", "yes", "on"})


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Markdown renderer configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = RenderConfig(copy_buttons=True, max_source_length=64_000)
    """

    # Links — ``None`` omits the target attribute entirely
    link_target: str | None = "_blank"

    # Code blocks — copy button inside each <pre> wrapper
    copy_buttons: bool = False
    copy_label: str = "Copy"

    # Hardening — sources longer than this are escaped, not parsed
    max_source_length: int | None = None

    def __post_init__(self) -> None:
        if self.max_source_length is not None and self.max_source_length <= 0:
            msg = f"max_source_length must be positive, got {self.max_source_length}"
            raise ConfigurationError(msg)
        if self.copy_buttons and not self.copy_label.strip():
            msg = "copy_label must not be empty when copy_buttons is enabled"
            raise ConfigurationError(msg)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> RenderConfig:
        """Build a config from ``TERN_*`` environment variables.

        Unset variables keep their defaults. An empty ``TERN_LINK_TARGET``
        disables the target attribute.
        """
        env = os.environ if environ is None else environ
        kwargs: dict[str, object] = {}

        if "TERN_LINK_TARGET" in env:
            kwargs["link_target"] = env["TERN_LINK_TARGET"] or None
        if "TERN_COPY_BUTTONS" in env:
            kwargs["copy_buttons"] = env["TERN_COPY_BUTTONS"].strip().lower() in _TRUTHY
        if "TERN_COPY_LABEL" in env:
            kwargs["copy_label"] = env["TERN_COPY_LABEL"]
        if raw := env.get("TERN_MAX_SOURCE_LENGTH", "").strip():
            try:
                kwargs["max_source_length"] = int(raw)
            except ValueError:
                msg = f"TERN_MAX_SOURCE_LENGTH must be an integer, got {raw!r}"
                raise ConfigurationError(msg) from None

        return cls(**kwargs)  # type: ignore[arg-type]
