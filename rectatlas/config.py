"""Packer configuration.

Every packing strategy is bounded by a ``PackerConfig``. The model is frozen
so a strategy that gets resized by the bin-size optimizer works on a copy
and never changes the configuration its caller handed in.
"""

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

from . import globs

if TYPE_CHECKING:
    from .utils.rects import Size


class PackerConfig(BaseModel):
    """Bounds and rotation policy for one atlas.

    Attributes:
        max_width: Width of every atlas in pixels.
        max_height: Height of every atlas in pixels.
        allow_flipping: Whether rectangles may be rotated by 90 degrees.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    max_width: int = Field(
        default=globs.DEFAULT_MAX_WIDTH, ge=0, description="Atlas width in pixels."
    )
    max_height: int = Field(
        default=globs.DEFAULT_MAX_HEIGHT, ge=0, description="Atlas height in pixels."
    )
    allow_flipping: bool = Field(
        default=globs.DEFAULT_ALLOW_FLIPPING,
        description="Allow width and height to be swapped on placement.",
    )

    def with_size(self, size: "Size") -> "PackerConfig":
        """Get a copy of this configuration with new atlas bounds.

        Args:
            size: New atlas width and height.

        Returns:
            A new configuration sharing the flipping policy.
        """
        return self.model_copy(update={"max_width": size.w, "max_height": size.h})
