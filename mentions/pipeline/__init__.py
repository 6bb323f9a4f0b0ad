# mentions/pipeline/__init__.py

from .filters import markdown_filter, mention_filter
from .runner import Pipeline, text_filter
from .utils import parse_fragment, to_html

MarkdownPipeline = Pipeline(
    [
        markdown_filter,  # Must run first, it needs raw text
        mention_filter,  # Link @mentions of known users
        # Order matters - they run sequentially
    ]
)

__all__ = (
    "MarkdownPipeline",
    "Pipeline",
    "markdown_filter",
    "mention_filter",
    "parse_fragment",
    "text_filter",
    "to_html",
)
