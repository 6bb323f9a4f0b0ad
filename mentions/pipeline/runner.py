# mentions/pipeline/runner.py
"""
Ordered HTML filter pipeline.

A filter is any callable ``filter(doc, context, result) -> doc``. Most
filters work on a parsed BeautifulSoup fragment; filters that need raw text
(a Markdown renderer has no HTML to work on yet) are marked with
``@text_filter`` and receive a string instead.

The pipeline converts between the two shapes only at the boundaries where
it has to, so a string fed to a run of HTML filters is parsed exactly once
and the same fragment is handed from filter to filter.
"""

import logging
import time

from .utils import to_document, to_html

logger = logging.getLogger(__name__)


def text_filter(func):
    """Mark ``func`` as a filter that takes and returns a string."""
    func.text_filter = True
    return func


def is_text_filter(func) -> bool:
    return getattr(func, "text_filter", False)


class Pipeline:
    """
    Apply filters in declaration order.

    Args:
        filters: Sequence of filter callables
        default_context: Context values every run starts from; the context
            passed to ``call`` is merged over it
    """

    def __init__(self, filters, default_context=None):
        filters = list(filters)
        for func in filters:
            if not callable(func):
                raise TypeError(f"Pipeline filter {func!r} is not callable")
        self.filters = filters
        self.default_context = dict(default_context or {})

    def __repr__(self):
        names = ", ".join(_filter_name(f) for f in self.filters)
        return f"Pipeline([{names}])"

    def call(self, doc, context=None, result=None):
        """
        Run every filter over ``doc``.

        Args:
            doc: HTML/text string or an already parsed fragment
            context: Per-run configuration, merged over ``default_context``
            result: Mutable dict shared by all filters; created if omitted

        Returns:
            ``result``, with ``result["output"]`` holding the final document
        """
        context = {**self.default_context, **(context or {})}
        if result is None:
            result = {}

        for func in self.filters:
            if is_text_filter(func):
                doc = to_html(doc) if not isinstance(doc, str) else doc
            else:
                doc = to_document(doc)

            started = time.perf_counter()
            doc = func(doc, context, result)
            logger.debug(
                "Filter %s finished in %.2fms",
                _filter_name(func),
                (time.perf_counter() - started) * 1000,
            )

        result["output"] = doc
        return result

    def to_document(self, doc, context=None, result=None):
        """Run the pipeline and return the output as a fragment."""
        result = self.call(doc, context, result)
        return to_document(result["output"])

    def to_html(self, doc, context=None, result=None):
        """Run the pipeline and return the output serialised as HTML."""
        result = self.call(doc, context, result)
        return to_html(result["output"])


def _filter_name(func):
    return getattr(func, "__name__", type(func).__name__)
