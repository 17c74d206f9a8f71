import logging

from django import template
from django.core.exceptions import ImproperlyConfigured

from paginateroute.conf import get_on_each_side, get_setting
from paginateroute.links import PageLinks
from paginateroute.render import StyleOptions, render_page_list, render_rel_links
from paginateroute.state import PaginationState
from paginateroute.templater import to_path
from paginateroute.window import page_window as compute_window

logger = logging.getLogger(__name__)

register = template.Library()


def get_page_links(context, page_obj, on_each_side=None):
    request = context.get("request")
    match = getattr(request, "resolver_match", None)

    base_path = getattr(page_obj.paginator, "path", None)
    if not base_path:
        if match is None:
            raise ImproperlyConfigured(
                "Cannot build page URLs: set paginator.path or render with a resolved request in the context"
            )
        logger.debug("No paginator path, using route %r of %s", match.route, match.view_name)
        base_path = match.route

    if on_each_side is None:
        on_each_side = get_on_each_side()

    resolve = None
    if request is not None and get_setting("ABSOLUTE_URLS"):
        def resolve(url):
            return request.build_absolute_uri(to_path(url))

    return PageLinks(
        PaginationState.from_page(page_obj, base_path, int(on_each_side)),
        parameters=match.kwargs if match is not None else None,
        query_string=request.META.get("QUERY_STRING", "") if request is not None else "",
        resolve=resolve,
    )


@register.simple_tag
def page_window(page_obj, window=None):
    """
    Возвращает окно страниц вокруг текущей.
    Использование в шаблоне:
      {% load paginate_route %}
      {% page_window page_obj 2 as win %}
    """
    side = get_on_each_side() if window is None else int(window)
    total = page_obj.paginator.num_pages
    win = compute_window(page_obj.number, total, side)
    if win is None:
        return {"range": range(0), "start": 0, "end": 0, "total": total}
    return {
        "range": win.pages,
        "start": win.left,
        "end": win.right,
        "total": total,
    }


@register.simple_tag(takes_context=True)
def page_url(context, page_obj, number, full=False):
    return get_page_links(context, page_obj).page_url(int(number), full)


@register.simple_tag(takes_context=True)
def next_page_url(context, page_obj):
    return get_page_links(context, page_obj).next_page_url() or ""


@register.simple_tag(takes_context=True)
def previous_page_url(context, page_obj, full=False):
    return get_page_links(context, page_obj).previous_page_url(full) or ""


@register.simple_tag(takes_context=True)
def page_list(context, page_obj, full=False, additional_links=False, on_each_side=None, **styles):
    """{% page_list page_obj additional_links=True ul="pagination" active_a="current" %}"""
    links = get_page_links(context, page_obj, on_each_side)
    options = StyleOptions.from_mapping(get_setting("STYLES"), **styles)
    return render_page_list(links, full, options, additional_links)


@register.simple_tag(takes_context=True)
def rel_links(context, page_obj, full=False):
    return render_rel_links(get_page_links(context, page_obj), full)
