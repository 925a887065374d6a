from typing import Iterable

from .response import ApiResponse

SEPARATOR = ", "


def join_hobbies(hobbies: Iterable[str]) -> str:
    return SEPARATOR.join(hobbies)


def reverse_text(text: str) -> str:
    """Reverse a string character by character."""
    return text[::-1]


def format_output(response: ApiResponse) -> str:
    """Build the output line: the joined hobbies, or their reversal and the reversed token when a token is present."""
    joined = join_hobbies(response.hobbies)
    if not response.has_token:
        return joined
    return f"{reverse_text(joined)}:{reverse_text(response.challenge_token)}"
