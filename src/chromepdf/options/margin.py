#  Copyright (c) 2025 Tom Villani, Ph.D.

# chromepdf/options/margin.py
"""Page margin options with CSS shorthand constructors."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from chromepdf.exceptions import ValidationError
from chromepdf.options.base import CloneFrozenMixin

MARGIN_SIDES = ("top", "right", "bottom", "left")


@dataclass(frozen=True)
class MarginOptions(CloneFrozenMixin):
    """Page margins sent to the renderer as CSS length strings.

    Values are passed through uninterpreted; the rendering service is the
    authority on what a valid length is.

    Parameters
    ----------
    top : str or None, default None
        Top margin, e.g. ``"1cm"``.
    right : str or None, default None
        Right margin.
    bottom : str or None, default None
        Bottom margin.
    left : str or None, default None
        Left margin.

    """

    top: str | None = field(default=None, metadata={"help": "Top margin (CSS length)"})
    right: str | None = field(default=None, metadata={"help": "Right margin (CSS length)"})
    bottom: str | None = field(default=None, metadata={"help": "Bottom margin (CSS length)"})
    left: str | None = field(default=None, metadata={"help": "Left margin (CSS length)"})

    @classmethod
    def uniform(cls, value: str | None) -> MarginOptions:
        """Use the same margin on all four sides."""
        return cls(top=value, right=value, bottom=value, left=value)

    @classmethod
    def symmetric(cls, vertical: str | None, horizontal: str | None) -> MarginOptions:
        """Use ``vertical`` for top/bottom and ``horizontal`` for left/right."""
        return cls(top=vertical, right=horizontal, bottom=vertical, left=horizontal)

    @classmethod
    def from_shorthand(cls, *values: str | None) -> MarginOptions:
        """Build margins from 1 to 4 values using CSS ``margin`` shorthand rules.

        The number of values supplied decides the interpretation, a ``None``
        value is kept as an unset side:

        - 1 value: all four sides
        - 2 values: top/bottom, left/right
        - 3 values: top, left/right, bottom
        - 4 values: top, right, bottom, left

        Parameters
        ----------
        *values : str or None
            Between one and four margin values

        Returns
        -------
        MarginOptions
            New margin options

        Raises
        ------
        ValidationError
            If zero or more than four values are given

        Examples
        --------
        >>> MarginOptions.from_shorthand("1cm", "2cm")
        MarginOptions(top='1cm', right='2cm', bottom='1cm', left='2cm')

        """
        if len(values) == 1:
            return cls.uniform(values[0])
        if len(values) == 2:
            return cls.symmetric(values[0], values[1])
        if len(values) == 3:
            top, horizontal, bottom = values
            return cls(top=top, right=horizontal, bottom=bottom, left=horizontal)
        if len(values) == 4:
            top, right, bottom, left = values
            return cls(top=top, right=right, bottom=bottom, left=left)
        raise ValidationError(
            f"Margin shorthand takes 1 to 4 values, got {len(values)}",
            parameter_name="margin",
            parameter_value=values,
        )

    @classmethod
    def from_value(cls, value: Any) -> MarginOptions:
        """Coerce a configuration value into margin options.

        Accepts an existing ``MarginOptions``, a single string (uniform), a
        list/tuple of 1-4 shorthand values, a mapping of side names, or None.
        """
        if value is None:
            return cls()
        if isinstance(value, MarginOptions):
            return value
        if isinstance(value, str):
            return cls.uniform(value)
        if isinstance(value, (list, tuple)):
            return cls.from_shorthand(*value)
        if isinstance(value, dict):
            cls._check_known_keys(value)
            return cls(**value)
        raise ValidationError(
            f"Unsupported margin value of type {type(value).__name__}",
            parameter_name="margin",
            parameter_value=value,
        )

    def as_dict(self) -> dict[str, str]:
        """Return only the sides that are set and non-empty."""
        sides = {side: getattr(self, side) for side in MARGIN_SIDES}
        return {side: value for side, value in sides.items() if value is not None and value != ""}

    @property
    def is_empty(self) -> bool:
        """Whether no side carries a value."""
        return not self.as_dict()
