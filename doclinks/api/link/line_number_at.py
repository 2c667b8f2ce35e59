"""1-based line number of a character offset."""


def line_number_at(content: str, index: int) -> int:
    return content.count("\n", 0, index) + 1
