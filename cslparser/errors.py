"""Exceptions raised by the tokenizer."""


class TokenizerException(ValueError):
    """Base exception for tokenizer errors."""

    pass


class InvalidDelimiterError(TokenizerException):
    """Raised when a delimiter would accept a quote character."""

    def __init__(self, quote: str):
        self.quote = quote
        super().__init__(f"delimiter can't be quote: {quote!r}")


class MalformedEscapeError(TokenizerException):
    """Raised when a token holds an invalid or dangling escape sequence."""

    def __init__(self, text: str, index: int):
        self.text = text
        self.index = index
        sequence = text[index : index + 2]
        if len(sequence) < 2:
            message = f"Dangling backslash at index {index} in {text!r}"
        else:
            message = (
                f"Invalid escape sequence {sequence!r} at index {index} in {text!r}"
            )
        super().__init__(message)
