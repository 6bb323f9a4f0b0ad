# mentions/pipeline/filters/markdown.py

import pypandoc

from ..runner import text_filter
from ..utils import to_html
from ...config import get_pandoc_config


@text_filter
def markdown_filter(text, context=None, result=None):
    """
    Convert GitHub-flavoured markdown to HTML using pypandoc.

    Runs on raw text, so it has to come before any HTML filter in a
    pipeline. Pandoc errors are not caught.
    """
    pandoc_config = get_pandoc_config()

    return pypandoc.convert_text(
        to_html(text),
        to="html5",
        format=pandoc_config["format"],
        extra_args=pandoc_config["extra_args"],
        filters=pandoc_config.get("filters", []),
    )
