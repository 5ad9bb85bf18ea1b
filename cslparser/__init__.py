"""Shell-style command-line tokenizer."""

from .errors import InvalidDelimiterError, MalformedEscapeError, TokenizerException
from .escapes import translate_escapes
from .tokenizer import Tokenizer, split

__version__ = "0.1.0"

__all__ = [
    "InvalidDelimiterError",
    "MalformedEscapeError",
    "Tokenizer",
    "TokenizerException",
    "split",
    "translate_escapes",
]
