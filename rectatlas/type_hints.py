# Shared type hints

from typing import Tuple, TypeVar

# Caller-owned identifier carried through packing unchanged
Key = TypeVar("Key")

Position = Tuple[int, int]
Box = Tuple[int, int, int, int]
SkylineSegment = Tuple[int, int, int]
