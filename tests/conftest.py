import os

import django
import pytest
from django.core.paginator import Paginator


def pytest_configure():
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "project.settings")
    django.setup()


@pytest.fixture
def page_factory():
    def make(number, count=47, per_page=5):
        return Paginator(list(range(count)), per_page).page(number)

    return make
