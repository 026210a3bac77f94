import math
from typing import Iterable

from spacetraveling.errors import InvalidArgument
from spacetraveling.schemas.blog import Section

DEFAULT_WORDS_PER_MINUTE = 200


def count_words(text: str) -> int:
    # Markup is not stripped, "<strong>bold</strong> text" counts as 2 words
    return len(text.split())


def estimate(
    content: Iterable[Section], words_per_minute: int = DEFAULT_WORDS_PER_MINUTE
) -> int:
    """
    Estimate reading time in whole minutes for a sequence of sections.

    Every heading and every body block contributes its word count; the total
    is divided by ``words_per_minute`` and rounded up. No words means 0.
    """
    if words_per_minute <= 0:
        raise InvalidArgument(
            f"words_per_minute must be positive, got {words_per_minute}"
        )

    total_words = sum(
        count_words(section.heading)
        + sum(count_words(block.text) for block in section.body)
        for section in content
    )
    return math.ceil(total_words / words_per_minute)


def format_reading_time(minutes: int) -> str:
    return f"{minutes} min"
