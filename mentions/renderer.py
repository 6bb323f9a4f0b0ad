# mentions/renderer.py

from .config import get_mention_config
from .pipeline import MarkdownPipeline
from .pipeline.utils import to_html


def render_markdown(text, context=None, result=None):
    """
    Render markdown and link @mentions.

    Args:
        text: Raw markdown text
        context: Optional dict for filters; overrides configured defaults
            (``base_url``, ``user_resolver``, ``username_max_length``)
        result: Optional dict that collects ``mentioned_users``

    Returns:
        HTML string
    """
    context = {**get_mention_config(), **(context or {})}
    result = MarkdownPipeline.call(text or "", context, result)
    return to_html(result["output"])
