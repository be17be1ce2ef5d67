"""Front-matter header splitting for stored documents.

A document optionally starts with a `---` delimited block of `key: value`
lines, then one blank separator line, then the markdown body.
"""

from termpress.core.errors import ParseError

DELIMITER = "---"


def split_frontmatter(text: str) -> tuple[str, dict[str, str]]:
    """Split a stored document into (body, metadata).

    Raises ParseError when the header is opened but never closed.
    """
    lines = text.split("\n")
    if not lines[0].startswith(DELIMITER):
        return text, {}

    metadata: dict[str, str] = {}
    for i, line in enumerate(lines[1:], start=1):
        if line.startswith(DELIMITER):
            rest = lines[i + 1:]
            if rest and not rest[0].strip():
                rest = rest[1:]
            return "\n".join(rest), metadata
        # Only the first colon splits; values may contain colons (URLs, times).
        key, sep, value = line.partition(":")
        if sep:
            metadata[key.strip()] = value.strip()

    raise ParseError("metadata header is missing its closing delimiter")
