from dataclasses import dataclass, fields
from typing import Optional

from django.core.exceptions import ImproperlyConfigured
from django.utils.html import format_html
from django.utils.safestring import mark_safe

RELATIONS = {-1: "prev", 1: "next"}


@dataclass(frozen=True)
class StyleOptions:
    ul: Optional[str] = None
    li: str = "page-item"
    a: str = "page-link"
    previous_a: str = "page-link"
    next_a: str = "page-link"
    # when set, goes on the current page's link instead of "active" on its <li>
    active_a: Optional[str] = None
    previous_label: str = mark_safe("&laquo;")
    next_label: str = mark_safe("&raquo;")

    @classmethod
    def from_mapping(cls, styles=None, **overrides):
        values = {**(styles or {}), **overrides}
        unknown = set(values) - {f.name for f in fields(cls)}
        if unknown:
            raise ImproperlyConfigured(f"Unknown pagination style keys: {', '.join(sorted(unknown))}")
        values = {key: value for key, value in values.items() if value is not None}
        # labels are markup (icons, entities)
        for key in ("previous_label", "next_label"):
            if key in values:
                values[key] = mark_safe(values[key])
        return cls(**values)


def _list_item(li_class, a_class, url, text):
    return format_html('<li class="{}"><a class="{}" href="{}">{}</a></li>', li_class, a_class, url, text)


def render_page_list(links, full=False, styles=None, additional_links=False):
    """
    <ul> with one <li> per page of the window, optionally wrapped
    by previous/next items when `additional_links` is set.
    """
    if not isinstance(styles, StyleOptions):
        styles = StyleOptions.from_mapping(styles)

    items = []
    if additional_links and links.has_previous_page():
        items.append(_list_item(styles.li, styles.previous_a, links.previous_page_url(full), styles.previous_label))

    for link in links.page_links(full):
        li_class, a_class = styles.li, styles.a
        if link.is_current:
            if styles.active_a:
                a_class = f"{a_class} {styles.active_a}"
            else:
                li_class = f"{li_class} active"
        items.append(_list_item(li_class, a_class, link.url, link.number))

    if additional_links and links.has_next_page():
        items.append(_list_item(styles.li, styles.next_a, links.next_page_url(), styles.next_label))

    opening = format_html('<ul class="{}">', styles.ul) if styles.ul else "<ul>"
    return mark_safe(opening + "".join(items) + "</ul>")


def render_rel_links(links, full=False):
    """<link rel="prev"> and <link rel="next"> tags for the neighbours of the current page."""
    tags = []
    for link in links.page_links(full):
        rel = RELATIONS.get(link.number - links.current_page)
        if rel:
            tags.append(format_html('<link rel="{}" href="{}">', rel, link.url))
    return mark_safe("".join(tags))
