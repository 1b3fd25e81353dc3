"""HTML escaping for code content"""


def escape_html(text: str) -> str:
    """Escape &, < and > (in that order). Not idempotent; apply once per text."""
    return text.replace('&', '&amp;').replace('<', '&lt;').replace('>', '&gt;')
