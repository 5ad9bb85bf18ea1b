"""Shell-like tokenizer splitting a line on a configurable delimiter."""

from enum import Enum
from typing import Optional, Union

from . import delimiters
from . import errors
from .escapes import translate_escapes

DEFAULT_DELIMITER = delimiters.whitespace


class State(Enum):
    """Quoting mode of the scanner."""

    NONE = None
    SINGLE_QUOTE = "'"
    DOUBLE_QUOTE = '"'


class Tokenizer:
    """
    Split source strings into tokens.

    Rules:
    - Characters accepted by the delimiter separate tokens (whitespace by default)
    - Runs of delimiters never produce empty tokens
    - Single quotes (') and double quotes (") suppress splitting and are removed
    - Backslash escapes are resolved once a token is complete
    - An escaped quote inside a quoted region does not close it
    - An unterminated quote runs to the end of the input

    A tokenizer keeps no state between parse calls, but its delimiter can be
    replaced at any time. Instances are not locked; use one per thread or
    guard set_delimiter externally.
    """

    def __init__(self, delimiter: Optional[delimiters.Delimiter] = None):
        """Initialize a tokenizer with the given delimiter, or whitespace."""
        self._delimiter: delimiters.Delimiter = DEFAULT_DELIMITER
        self.set_delimiter(delimiter)

    @property
    def delimiter(self) -> delimiters.Delimiter:
        """The predicate deciding which characters separate tokens."""
        return self._delimiter

    @delimiter.setter
    def delimiter(self, delimiter: Optional[delimiters.Delimiter]) -> None:
        self.set_delimiter(delimiter)

    def set_delimiter(self, delimiter: Optional[delimiters.Delimiter]) -> None:
        """
        Replace the delimiter used by subsequent parse calls.

        Args:
            delimiter: A predicate over a single character, or None to reset
                to the default whitespace delimiter

        Raises:
            InvalidDelimiterError: If the delimiter accepts a single or double
                quote. The current delimiter is kept.
        """
        if delimiter is None:
            self._delimiter = DEFAULT_DELIMITER
            return

        quote = delimiters.accepts_quote(delimiter)
        if quote is not None:
            raise errors.InvalidDelimiterError(quote)
        self._delimiter = delimiter

    def parse(
        self, source: Union[str, bytes], encoding: str = "utf-8"
    ) -> tuple[str, ...]:
        """
        Split a source string into tokens.

        Args:
            source: The text to split. Bytes are decoded with encoding first.
            encoding: Encoding of bytes input

        Returns:
            Tuple of tokens in order of appearance

        Raises:
            MalformedEscapeError: If a token holds an invalid escape sequence
        """
        if isinstance(source, bytes):
            source = source.decode(encoding)

        delimiter = self._delimiter
        tokens = []
        buf = []
        state = State.NONE
        escaping = False
        prev = ""

        # str iteration yields whole code points
        for c in source:
            if state is State.NONE:
                if c == "'":
                    state = State.SINGLE_QUOTE
                elif c == '"':
                    state = State.DOUBLE_QUOTE
                elif delimiter(c):
                    if buf:
                        tokens.append(translate_escapes("".join(buf)))
                        buf = []
                else:
                    buf.append(c)
            elif c == state.value:
                if escaping:
                    buf.append(c)
                    escaping = False
                else:
                    state = State.NONE
            else:
                if c == "\\":
                    # A doubled backslash escapes itself
                    escaping = prev != "\\"
                elif prev == "\\":
                    escaping = False
                buf.append(c)
            prev = c

        # Flush the last token, even inside an unterminated quote
        if buf:
            tokens.append(translate_escapes("".join(buf)))

        return tuple(tokens)


def split(
    line: Union[str, bytes], delimiter: Optional[delimiters.Delimiter] = None
) -> tuple[str, ...]:
    """
    Split a line into tokens with a one-off tokenizer.

    Args:
        line: The line to split
        delimiter: Optional delimiter predicate (whitespace if None)

    Returns:
        Tuple of parsed tokens

    Raises:
        InvalidDelimiterError: If the delimiter accepts a quote character
        MalformedEscapeError: If a token holds an invalid escape sequence
    """
    return Tokenizer(delimiter).parse(line)
