from typing import Iterable, Mapping

from requests.structures import CaseInsensitiveDict

from accept_language.tag import LanguageTag, TAG_SEPARATOR

ACCEPT_LANGUAGE = 'Accept-Language'


def get_accept_language(headers: Mapping[str, str]) -> str:
    """Value of the Accept-Language header, regardless of the header name's casing

    Optional convenience for hosts holding a whole header mapping, e.g.
    ``requests`` or WSGI style headers. The parsing functions only ever need
    the header value itself. Returns an empty string when the header is missing.
    """
    return CaseInsensitiveDict(headers).get(ACCEPT_LANGUAGE, '')


def format_header(tags: Iterable[LanguageTag]) -> str:
    """Serialize language tags into an Accept-Language header value

    >>> format_header([LanguageTag('en-US'), LanguageTag('en', 0.5)])
    'en-US,en;q=0.5'
    """
    return TAG_SEPARATOR.join(map(str, tags))
