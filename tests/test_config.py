from django.test import override_settings

from mentions.config import get_mention_config, get_pandoc_config


def test_mention_defaults():
    assert get_mention_config() == {"base_url": "/", "username_max_length": 39}


@override_settings(MENTION_BASE_URL="/users/", MENTION_USERNAME_MAX_LENGTH=None)
def test_mention_settings_override_defaults():
    assert get_mention_config() == {"base_url": "/users/", "username_max_length": None}


def test_pandoc_uses_gfm_reader():
    config = get_pandoc_config()
    assert config["format"] == "gfm"
    assert config["extra_args"] == ["--wrap=none"]


@override_settings(MENTION_PANDOC_EXTRA_ARGS=("--wrap=auto",))
def test_pandoc_extra_args_from_settings():
    assert get_pandoc_config()["extra_args"] == ["--wrap=auto"]
