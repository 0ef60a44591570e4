"""
Parser configuration: segment delimiter and input shape.
"""

from dataclasses import dataclass
from enum import Enum


class InputMode(Enum):
    # "10-20,25-30" on one line, split by the delimiter
    SINGLE_LINE = "single"
    # ranges block, blank line, candidate values block
    TWO_BLOCK = "blocks"


DEFAULT_DELIMITER = ","


@dataclass(frozen=True)
class ParserConfig:
    delimiter: str = DEFAULT_DELIMITER
    mode: InputMode = InputMode.SINGLE_LINE

    def __post_init__(self):
        if not self.delimiter:
            raise ValueError("Segment delimiter must not be empty")
        if self.delimiter == "-":
            raise ValueError("Segment delimiter cannot be the range separator '-'")
        if not isinstance(self.mode, InputMode):
            raise ValueError(f"Unknown input mode: {self.mode!r}")
