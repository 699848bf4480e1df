"""Convert catalog descriptions (HTML fragments) to markdown."""
from markdownify import markdownify


def to_markdown(text):
    if text is None:
        return ""
    return markdownify(str(text)).strip()
