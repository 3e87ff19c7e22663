"""
Splits a raw input line into tokens.
"""

QUOTE_CHARS = ('"', "'")


def tokenize(line: str) -> list[str]:
    """Split ``line`` on spaces, keeping quoted spans together.

    A quote character opens a quoted span when no span is open and the same
    character closes it. Spaces inside a span are literal. Empty tokens are
    never produced, neither from runs of spaces nor from an empty pair of
    quotes. An unterminated span runs to the end of the line.

    >>> tokenize('say "hello world" now')
    ['say', 'hello world', 'now']
    """
    tokens: list[str] = []
    current: list[str] = []
    quote_char: str | None = None

    def flush() -> None:
        if current:
            tokens.append("".join(current))
            current.clear()

    for char in line:
        if quote_char is None and char in QUOTE_CHARS:
            quote_char = char
        elif quote_char is not None and char == quote_char:
            quote_char = None
            flush()
        elif quote_char is None and char == " ":
            flush()
        else:
            current.append(char)

    flush()
    return tokens
