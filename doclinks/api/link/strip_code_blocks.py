"""Neutralize fenced code blocks before link matching."""

import re

CODE_BLOCK_PATTERN = re.compile(r"```.*?```", re.DOTALL)


def strip_code_blocks(content: str) -> str:
    """Replace each fenced block with the newlines it contained.

    Line numbers of everything after a block stay unchanged.
    """
    return CODE_BLOCK_PATTERN.sub(lambda match: "\n" * match.group(0).count("\n"), content)
