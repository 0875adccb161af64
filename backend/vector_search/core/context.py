# context.py
"""
Greedy, token-budgeted concatenation of retrieved page sections.
"""
from typing import Callable, Iterable, Tuple

from vector_search.api.models import PageSection

SECTION_SEPARATOR = "\n---\n"


def build_context(
    sections: Iterable[PageSection],
    count_tokens: Callable[[str], int],
    max_tokens: int = 1500,
) -> Tuple[str, int]:
    """
    Walk sections in store order, adding each one's token count to a running total.
    Once the total reaches max_tokens the walk stops and the section that got it
    there is left out whole (never truncated).
    Returns (context_text, token_count) where token_count includes that dropped section.
    """
    token_count = 0
    context_text = ""
    for section in sections:
        content = section.content or ""
        token_count += count_tokens(content)
        if token_count >= max_tokens:
            break
        context_text += f"{content.strip()}{SECTION_SEPARATOR}"
    return context_text, token_count
