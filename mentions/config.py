from django.conf import settings

DEFAULT_BASE_URL = "/"

# GitHub caps logins at 39 characters
DEFAULT_USERNAME_MAX_LENGTH = 39


def _setting(name, default):
    # The pipeline is usable without a configured Django project
    if not settings.configured:
        return default
    return getattr(settings, name, default)


def get_mention_config():
    """
    Defaults for the mention filter.

    Read from Django settings when a project is configured:
        MENTION_BASE_URL: prefix for generated profile links
        MENTION_USERNAME_MAX_LENGTH: longest username that is still linked,
            None to disable the bound
    """
    return {
        "base_url": _setting("MENTION_BASE_URL", DEFAULT_BASE_URL),
        "username_max_length": _setting(
            "MENTION_USERNAME_MAX_LENGTH", DEFAULT_USERNAME_MAX_LENGTH
        ),
    }


def get_pandoc_config():
    """
    Configuration for pypandoc/Pandoc markdown rendering.

    The ``gfm`` reader is used instead of pandoc's own markdown: pandoc
    markdown parses ``@name`` as a citation, which would hide mentions from
    the mention filter.
    """
    return {
        "format": "gfm",
        "extra_args": list(_setting("MENTION_PANDOC_EXTRA_ARGS", ["--wrap=none"])),
        # Pandoc filters can be added here (Python or Lua filters)
        "filters": [],
    }
