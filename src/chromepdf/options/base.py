#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Base classes for render and connection options.

This module defines the foundation shared by every options dataclass used
by the chromepdf client.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, fields, replace
from typing import Any, Mapping

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from chromepdf.exceptions import ValidationError


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities.

    This mixin adds the ability to create modified copies of frozen dataclass
    instances, which is useful for immutable configuration objects.
    """

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)

    @classmethod
    def field_names(cls) -> tuple[str, ...]:
        """Return the names of all dataclass fields in declaration order."""
        return tuple(f.name for f in fields(cls))  # type: ignore[arg-type]

    @classmethod
    def _check_known_keys(cls, data: Mapping[str, Any]) -> None:
        """Raise ValidationError if ``data`` holds keys that are not fields."""
        unknown = sorted(set(data) - set(cls.field_names()))
        if unknown:
            raise ValidationError(
                f"Unknown {cls.__name__} option(s): {', '.join(unknown)}",
                parameter_name=unknown[0],
                parameter_value=data[unknown[0]],
            )
