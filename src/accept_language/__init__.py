"""Parsing of the Accept-Language header and matching against supported languages

Logging is disabled by default. Call ``logger.enable('accept_language')`` to see it.
"""
from loguru import logger

# noinspection PyUnresolvedReferences
from .parser import parse, parse_with_quality, intersection, intersection_ordered, \
    intersection_with_quality, intersection_ordered_with_quality
# noinspection PyUnresolvedReferences
from .tag import LanguageTag
# noinspection PyUnresolvedReferences
from .util import format_header, get_accept_language

__version__ = '1.0.0'

logger.disable('accept_language')
