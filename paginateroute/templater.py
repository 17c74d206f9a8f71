import re

from django.urls import get_script_prefix

from .conf import get_page_keyword

PAGE_QUERY = "page_query"

# {page_query?} or a Django placeholder named page_query, at the end of the route
PAGE_PLACEHOLDER_RE = re.compile(r"/?(?:\{%s\??\}|<(?:\w+:)?%s>)/?$" % (PAGE_QUERY, PAGE_QUERY))
PARAMETER_RE = re.compile(r"\{(?P<brace>\w+)\??\}|<(?:\w+:)?(?P<angle>\w+)>")


def strip_page_placeholder(route):
    return PAGE_PLACEHOLDER_RE.sub("/", route, count=1)


def substitute_parameters(url, parameters=None):
    """Replaces {name}, {name?}, <name> and <conv:name> with bound values."""
    if not parameters:
        return url

    def replace(match):
        name = match.group("brace") or match.group("angle")
        if name not in parameters:
            return match.group(0)
        return str(parameters[name])

    return PARAMETER_RE.sub(replace, url)


def add_page_query(url, page, full=False, keyword=None):
    # First page is canonical without the page segment unless a full URL is requested.
    if page == 1 and not full:
        return url
    if keyword is None:
        keyword = get_page_keyword()
    return f"{url.strip('/')}/{keyword}/{page}"


def to_path(url):
    return get_script_prefix() + url.lstrip("/")


def page_url(base_path, page, full=False, parameters=None, query_string="", keyword=None, resolve=None):
    url = add_page_query(strip_page_placeholder(base_path), page, full, keyword)
    url = substitute_parameters(url, parameters)
    url = (resolve or to_path)(url)
    if query_string:
        url = f"{url}?{query_string}"
    return url
