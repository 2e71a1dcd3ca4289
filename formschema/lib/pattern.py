"""Regular expression helpers."""

import re

# Characters with a meaning in HTML pattern attributes (ECMAScript regex syntax)
SPECIAL_CHARS = re.compile(r"[\\^$.*+?()\[\]{}|]")


def escape(value: str) -> str:
    """Escape every regex metacharacter in value.

    Unlike ``re.escape`` this leaves spaces and punctuation such as ``;``
    or ``,`` untouched, so the result stays readable as a pattern attribute.
    """
    return SPECIAL_CHARS.sub(lambda match: "\\" + match.group(0), value)
