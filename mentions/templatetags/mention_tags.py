# mentions/templatetags/mention_tags.py

from django import template
from django.utils.safestring import mark_safe

from mentions.config import get_mention_config
from mentions.pipeline import mention_filter, to_html
from mentions.renderer import render_markdown
from mentions.users import model_user_resolver

register = template.Library()


@register.filter(name="mentionize")
def mentionize_filter(value):
    """Link @mentions in already rendered HTML"""
    context = {**get_mention_config(), "user_resolver": model_user_resolver}
    return mark_safe(to_html(mention_filter(str(value or ""), context)))


@register.filter(name="markdown_mentions")
def markdown_mentions_filter(value):
    return mark_safe(render_markdown(value, context={"user_resolver": model_user_resolver}))
