import re
from typing import List, Optional

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def split_commands(raw: Optional[str]) -> List[str]:
    """
    Splits a model response into individual shell commands.

    Every non-blank line becomes one command, stripped of surrounding
    whitespace, in the order it appeared. Lines are never parsed as shell, so
    a line chaining several steps with ``&&`` stays a single command.

    Args:
        raw: The text returned by the model.

    Returns:
        The ordered list of commands, empty if there is nothing to run.
    """
    if not raw:
        return []
    return [line.strip() for line in _LINE_BREAK.split(raw) if line.strip()]
