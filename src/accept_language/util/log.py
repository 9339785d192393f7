from typing import List

from loguru import logger

from accept_language.tag import LanguageTag, DEFAULT_QUALITY

fg_grn = 32
fg_yel = 33
fg_mag = 35
fg_gry = 90


def quality_color(quality: float) -> int:
    if quality >= DEFAULT_QUALITY:
        return fg_grn
    if quality >= 0.5:
        return fg_yel
    if quality > 0.0:
        return fg_mag
    return fg_gry


def log_tags(raw_languages: str, tags: List[LanguageTag]):
    ranking = ' '.join(f"\033[{quality_color(tag.quality)}m{tag.name}\033[0m" for tag in tags)
    logger.debug(f"Accept-Language '{raw_languages}' → {ranking or '-'}")
