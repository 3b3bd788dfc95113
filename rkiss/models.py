from dataclasses import dataclass
from typing import Optional, Union

Draw = Union[int, str]


@dataclass
class StreamStats:
    count: int = 0
    unique: int = 0
    repeats: int = 0
    ones_ratio: float = 0.0
    first: Optional[Draw] = None
    last: Optional[Draw] = None
