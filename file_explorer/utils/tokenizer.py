"""
Command line tokenizer supporting single quotes, double quotes and backslash escapes.
"""

from file_explorer.exceptions import CommandParseError

WHITESPACE = frozenset(" \t\n\r")


def tokenize(line: str) -> list[str]:
    """
    Split a raw input line into arguments.

    Rules, checked in order for every character:
      - after a backslash the character is taken literally
      - a backslash starts an escape (even inside quotes) and is dropped
      - inside single or double quotes everything but the closing quote is literal
      - an opening quote starts a quoted section and is dropped
      - whitespace ends the current argument
    Empty arguments (for example a bare '') are not emitted.

    Args:
        line: One line of user input

    Returns:
        The arguments in order, possibly empty for a blank line

    Raises:
        CommandParseError: If a quote is left open or the line ends with a backslash
    """
    tokens: list[str] = []
    current: list[str] = []
    in_single = False
    in_double = False
    escaped = False

    def flush() -> None:
        if current:
            tokens.append("".join(current))
            current.clear()

    for ch in line:
        if escaped:
            current.append(ch)
            escaped = False
        elif ch == "\\":
            escaped = True
        elif in_single:
            if ch == "'":
                in_single = False
            else:
                current.append(ch)
        elif in_double:
            if ch == '"':
                in_double = False
            else:
                current.append(ch)
        elif ch == "'":
            in_single = True
        elif ch == '"':
            in_double = True
        elif ch in WHITESPACE:
            flush()
        else:
            current.append(ch)

    if escaped or in_single or in_double:
        raise CommandParseError("Invalid command: unmatched quote or trailing escape")
    flush()
    return tokens
