from django.template import Context, Template
from django.test import override_settings
from django.utils.safestring import SafeString

from mentions.templatetags import mention_tags
from mentions.users import StaticUserResolver


def _known_users(monkeypatch, *usernames):
    monkeypatch.setattr(mention_tags, "model_user_resolver", StaticUserResolver(usernames))


def test_mentionize_links_known_users(monkeypatch):
    _known_users(monkeypatch, "kneath")

    html = mention_tags.mentionize_filter("<p>@kneath and @nobody</p>")

    assert isinstance(html, SafeString)
    assert html == '<p><a href="/kneath" class="user-mention">@kneath</a> and @nobody</p>'


@override_settings(MENTION_BASE_URL="/people/")
def test_mentionize_uses_configured_base_url(monkeypatch):
    _known_users(monkeypatch, "kneath")

    template = Template("{% load mention_tags %}{{ body|mentionize }}")
    html = template.render(Context({"body": "<p>@kneath</p>"}))

    assert html == '<p><a href="/people/kneath" class="user-mention">@kneath</a></p>'


def test_markdown_mentions_renders_markdown(monkeypatch):
    _known_users(monkeypatch, "kneath")

    html = mention_tags.markdown_mentions_filter("**hi** @kneath")

    assert isinstance(html, SafeString)
    assert "<strong>hi</strong>" in html
    assert '<a href="/kneath" class="user-mention">@kneath</a>' in html
