from enum import Enum
from typing import List, Optional, Union

from ... import globs
from ...config import PackerConfig
from ..rects import RectInput, RectOutput
from .base_packer import Packer, PackingError
from .multi_atlas import pack_multi_atlas
from .skyline_packer import SkylinePacker
from .split_packer import SplitPacker
from .strip_packer import StripPacker


class PackerKind(Enum):
    """The closed set of packing strategies."""

    SPLIT = globs.PackerTypes.SPLIT
    SKYLINE = globs.PackerTypes.SKYLINE
    STRIP = globs.PackerTypes.STRIP


_PACKERS = {
    PackerKind.SPLIT: SplitPacker,
    PackerKind.SKYLINE: SkylinePacker,
    PackerKind.STRIP: StripPacker,
}


def create_packer(
    packer_type: Union[PackerKind, str] = PackerKind.SKYLINE,
    config: Optional[PackerConfig] = None,
) -> Packer:
    if not isinstance(packer_type, PackerKind):
        try:
            packer_type = PackerKind(str(packer_type).upper())
        except ValueError:
            raise PackingError("Unknown packer type: {}".format(packer_type)) from None
    return _PACKERS[packer_type](config)


def pack(
    inputs: List[RectInput],
    packer_type: Union[Packer, PackerKind, str] = PackerKind.SKYLINE,
    config: Optional[PackerConfig] = None,
) -> List[RectOutput]:
    """Pack rectangles into as many atlases as needed.

    Args:
        inputs: Rectangles to pack, sorted in place by every heuristic.
        packer_type: A packer instance, or the kind of packer to create.
        config: Bounds for a packer created from a kind or name. A packer
            instance already carries its own.

    Returns:
        Placements of the best ordering, grouped by atlas.

    Raises:
        PackingError: If the packer type is unknown, if a config is given
            together with a packer instance, or if the input can not be
            packed.
    """
    if isinstance(packer_type, Packer):
        if config is not None:
            raise PackingError("A config can only be given with a packer kind, not an instance")
        packer = packer_type
    else:
        packer = create_packer(packer_type, config)
    return pack_multi_atlas(inputs, packer)
