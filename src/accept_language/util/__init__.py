"""Utility module for handy features to be used in conjunction with the parser"""

from .http import ACCEPT_LANGUAGE, get_accept_language, format_header
from .log import log_tags, quality_color
