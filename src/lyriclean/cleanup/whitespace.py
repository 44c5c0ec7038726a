"""Final cosmetic pass of the cleanup pipeline."""


def normalize_whitespace(text: str) -> str:
    """Trim every line, collapse blank-line runs to one, trim the result.

    Example::

        "  Hello  \\n\\n\\n\\n World\\n"  ->  "Hello\\n\\nWorld"
    """
    lines: list[str] = []
    for line in text.split("\n"):
        stripped = line.strip()
        if not stripped and lines and not lines[-1]:
            continue  # already separated by one blank line
        lines.append(stripped)
    return "\n".join(lines).strip()
