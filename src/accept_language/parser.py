"""Parsing of Accept-Language header values and matching against supported languages

https://www.w3.org/Protocols/rfc2616/rfc2616-sec14.html#sec14.4
"""
from bisect import bisect_left
from operator import attrgetter
from typing import List, Tuple, Collection, Sequence

from loguru import logger

from accept_language.tag import LanguageTag, TAG_SEPARATOR
from accept_language.util.log import log_tags


def _rank(raw_languages: str) -> List[LanguageTag]:
    """Language tags by descending quality, equal qualities in header order"""
    stripped = raw_languages.replace(' ', '')
    tags = [LanguageTag.from_segment(segment) for segment in stripped.split(TAG_SEPARATOR)]
    tags = sorted(tags, key=attrgetter('quality'), reverse=True)
    ranked = []
    for tag in tags:
        if tag.name == '':
            logger.debug(f"Dropping nameless language entry (q={tag.quality}).")
            continue
        ranked.append(tag)
    log_tags(raw_languages, ranked)
    return ranked


def parse(raw_languages: str) -> List[str]:
    """Parse a raw Accept-Language header value into an ordered list of language tags

    The result should equal ``window.navigator.languages`` in supported browsers.

    >>> parse('en-US, en-GB;q=0.5')
    ['en-US', 'en-GB']
    """
    return [tag.name for tag in _rank(raw_languages)]


def parse_with_quality(raw_languages: str) -> List[Tuple[str, float]]:
    """Like :func:`parse`, but keeps the quality of each language tag

    >>> parse_with_quality('en-US, en-GB;q=0.5')
    [('en-US', 1.0), ('en-GB', 0.5)]
    """
    return [(tag.name, tag.quality) for tag in _rank(raw_languages)]


def _contains_sorted(supported_languages: Sequence[str], language: str) -> bool:
    index = bisect_left(supported_languages, language)
    return index < len(supported_languages) and supported_languages[index] == language


def intersection(raw_languages: str, supported_languages: Collection[str]) -> List[str]:
    """Common languages of the header and the languages the application supports

    Keeps the order of the user's preferences.

    >>> intersection('en-US, en-GB;q=0.5', ['en-US', 'de', 'en-GB'])
    ['en-US', 'en-GB']
    """
    return [lang for lang in parse(raw_languages) if lang in supported_languages]


def intersection_ordered(raw_languages: str, supported_languages: Sequence[str]) -> List[str]:
    """Same as :func:`intersection`, using binary search on the supported languages

    The supported languages MUST be sorted in ascending order. This is not checked,
    an unsorted sequence yields incomplete results.

    >>> intersection_ordered('en-US, en-GB;q=0.5', ['de', 'en-GB', 'en-US'])
    ['en-US', 'en-GB']
    """
    return [lang for lang in parse(raw_languages)
            if _contains_sorted(supported_languages, lang)]


def intersection_with_quality(raw_languages: str, supported_languages: Collection[str]) -> \
        List[Tuple[str, float]]:
    return [(lang, quality) for lang, quality in parse_with_quality(raw_languages)
            if lang in supported_languages]


def intersection_ordered_with_quality(raw_languages: str, supported_languages: Sequence[str]) -> \
        List[Tuple[str, float]]:
    """Quality carrying variant of :func:`intersection_ordered`, same sorting precondition"""
    return [(lang, quality) for lang, quality in parse_with_quality(raw_languages)
            if _contains_sorted(supported_languages, lang)]
