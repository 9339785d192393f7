import math
import re
from typing import Optional, Tuple

from loguru import logger

DEFAULT_QUALITY = 1.0
INVALID_QUALITY = 0.0

TAG_SEPARATOR = ','
PARAM_SEPARATOR = ';'
VALUE_SEPARATOR = '='

_NUMBER = re.compile(r'[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?')


def parse_quality(raw_quality: str) -> float:
    """Parse the parameter part of a segment, e.g. ``q=0.5``

    Falls back to ``INVALID_QUALITY`` unless the part splits into exactly one
    key and one finite number.
    """
    parts = raw_quality.split(VALUE_SEPARATOR)
    if len(parts) != 2:
        logger.debug(f"Malformed quality '{raw_quality}'. Using {INVALID_QUALITY}.")
        return INVALID_QUALITY
    value = parts[1]
    if _NUMBER.fullmatch(value) is None:
        logger.debug(f"Could not parse quality value '{value}'. Using {INVALID_QUALITY}.")
        return INVALID_QUALITY
    quality = float(value)
    if not math.isfinite(quality):
        logger.debug(f"Quality value '{value}' is out of range. Using {INVALID_QUALITY}.")
        return INVALID_QUALITY
    return quality


def split_segment(segment: str) -> Tuple[str, float]:
    """Split a segment into name and quality at the first ``;`` only

    Further parameters stay in the quality part, so ``en;q=0.5;level=1`` gets
    ``INVALID_QUALITY``.
    """
    if PARAM_SEPARATOR not in segment:
        return segment, DEFAULT_QUALITY
    name, raw_quality = segment.split(PARAM_SEPARATOR, 1)
    return name, parse_quality(raw_quality)


class LanguageTag:
    """A single entry of an Accept-Language header

    Names keep the casing they were given but compare case-insensitively.
    """

    _name: str
    _quality: float

    def __init__(self, tag: str, quality: Optional[float] = None):
        if quality is None:
            tag, quality = split_segment(tag)
        self._name = tag
        self._quality = quality

    @classmethod
    def from_segment(cls, segment: str) -> 'LanguageTag':
        return cls(segment)

    @property
    def name(self) -> str:
        return self._name

    @property
    def quality(self) -> float:
        return self._quality

    def __eq__(self, other):
        if not isinstance(other, LanguageTag):
            return NotImplemented
        return self._quality == other._quality and \
            self._name.lower() == other._name.lower()

    def __hash__(self):
        return hash((self._name.lower(), self._quality))

    def __str__(self):
        if self._quality == DEFAULT_QUALITY:
            return self._name
        return f"{self._name}{PARAM_SEPARATOR}q{VALUE_SEPARATOR}{self._quality}"

    def __repr__(self):
        return f"{self.__class__.__name__}({self._name!r}, quality={self._quality!r})"
