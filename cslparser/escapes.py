"""Backslash escape decoding for finished tokens."""

from . import errors

# Single-character escapes and what they stand for
SIMPLE_ESCAPES = {
    "b": "\b",
    "t": "\t",
    "n": "\n",
    "f": "\f",
    "r": "\r",
    "s": " ",
    '"': '"',
    "'": "'",
    "\\": "\\",
}

OCTAL_DIGITS = "01234567"


def translate_escapes(text: str) -> str:
    """
    Resolve the backslash escapes in a raw token.

    Recognized sequences:
    - \\b \\t \\n \\f \\r \\s and the escaped quotes and backslash
    - Octal escapes from \\0 to \\377 (up to three digits, three only when
      the first digit is 0-3)
    - Line continuations: a backslash followed by \\n, \\r or \\r\\n is dropped

    Args:
        text: The raw token text

    Returns:
        The token with every escape sequence resolved

    Raises:
        MalformedEscapeError: If a backslash is followed by anything else,
            or ends the text
    """
    if "\\" not in text:
        return text

    chars = []
    i = 0
    length = len(text)

    while i < length:
        c = text[i]
        if c != "\\":
            chars.append(c)
            i += 1
            continue

        start = i
        i += 1
        if i >= length:
            raise errors.MalformedEscapeError(text, start)

        c = text[i]
        i += 1

        if c in SIMPLE_ESCAPES:
            chars.append(SIMPLE_ESCAPES[c])
        elif c in OCTAL_DIGITS:
            # Leading 0-3 allows two more digits, 4-7 only one
            limit = min(i + (2 if c <= "3" else 1), length)
            code = int(c)
            while i < limit and text[i] in OCTAL_DIGITS:
                code = (code << 3) | int(text[i])
                i += 1
            chars.append(chr(code))
        elif c == "\n":
            continue
        elif c == "\r":
            if i < length and text[i] == "\n":
                i += 1
        else:
            raise errors.MalformedEscapeError(text, start)

    return "".join(chars)
