from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.utils.translation import gettext

DEFAULTS = {
    "ON_EACH_SIDE": 3,
    "PAGE_KEYWORD": None,
    "STYLES": {},
    "ABSOLUTE_URLS": True,
}


def get_setting(name):
    user_settings = getattr(settings, "PAGINATE_ROUTE", None) or {}
    unknown = set(user_settings) - set(DEFAULTS)
    if unknown:
        raise ImproperlyConfigured(
            f"Unknown PAGINATE_ROUTE keys: {', '.join(sorted(unknown))}"
        )
    return user_settings.get(name, DEFAULTS[name])


def get_on_each_side():
    side = get_setting("ON_EACH_SIDE")
    if not isinstance(side, int) or side < 0:
        raise ImproperlyConfigured("PAGINATE_ROUTE['ON_EACH_SIDE'] must be a non-negative integer")
    return side


def get_page_keyword():
    """Path literal before the page number, e.g. "page" in /users/page/2."""
    keyword = get_setting("PAGE_KEYWORD")
    if keyword:
        return keyword
    # Translators: URL path segment, must be a single lowercase word.
    return gettext("page")
