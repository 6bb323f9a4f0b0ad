import django
import pytest
from django.conf import settings


def pytest_configure():
    if not settings.configured:
        settings.configure(
            INSTALLED_APPS=[
                "django.contrib.contenttypes",
                "django.contrib.auth",
                "mentions",
            ],
            DATABASES={"default": {"ENGINE": "django.db.backends.sqlite3", "NAME": ":memory:"}},
            TEMPLATES=[
                {"BACKEND": "django.template.backends.django.DjangoTemplates", "APP_DIRS": True}
            ],
            USE_TZ=True,
        )
        django.setup()


USERNAMES = ["defunkt", "mojombo", "kneath", "tmm1", "atmos", "mislav", "rtomayko"]


@pytest.fixture
def users():
    from mentions.users import StaticUserResolver

    return StaticUserResolver(USERNAMES)
