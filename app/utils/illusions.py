"""
Illusion Wording

Content filter that keeps magicians' performances described as illusions
rather than tricks.
"""

import re

# Whole-word "trick" (optionally followed by a plural "s"), except in
# "trick for money" / "tricks for money".  Only the root is consumed, so a
# plural "s" stays after the replacement.
TRICK_PATTERN = re.compile(r"\btrick(?=s|\b)(?!s? for money)", re.IGNORECASE)


def _illusion(match: re.Match) -> str:
    return "illusion" if match.group(0)[0].islower() else "Illusion"


def replace_tricks(content: str) -> str:
    """
    Rewrite "trick" to "illusion", mirroring the case of the first letter.

    Only the first letter's case is carried over: "TRICK" becomes "Illusion".
    """
    if not content:
        return content
    return TRICK_PATTERN.sub(_illusion, content)
