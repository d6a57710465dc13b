"""Reading time estimation for posts.

The estimate only looks at the first content block: every block is counted,
but only the first count feeds the formula ``ceil(words / 200 + 3)``.
An empty post counts as zero words and therefore reads in "3 min".
"""
import math
import re
from typing import Callable, Sequence

from spacetraveling.schemas.post import ContentBlock, RichTextSpan
from spacetraveling.services.rich_text import as_html

WPM = 200
OFFSET_MINUTES = 3

RichTextRenderer = Callable[[Sequence[RichTextSpan]], str]

# ECMAScript whitespace and line terminators; Python's \s differs (\x1c-\x1f, \ufeff)
_WHITESPACE = re.compile(
    "[\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff]+"
)


def count_words(text: str) -> int:
    """Count whitespace-separated tokens, keeping empty tokens at the edges."""
    if not text:
        return 0
    return len(_WHITESPACE.split(text))


def block_word_count(block: ContentBlock, render: RichTextRenderer = as_html) -> int:
    return count_words(block.heading) + count_words(render(block.body))


def estimate_reading_time(
    content: Sequence[ContentBlock], render: RichTextRenderer = as_html
) -> str:
    counts = [block_word_count(block, render) for block in content]
    words = counts[0] if counts else 0
    return f"{math.ceil(words / WPM + OFFSET_MINUTES)} min"
