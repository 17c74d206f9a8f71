from .links import PageLinks
from .render import StyleOptions, render_page_list, render_rel_links
from .state import PageLink, PaginationState
from .templater import add_page_query, page_url
from .window import PageWindow, left_point, page_window, right_point

__all__ = [
    "PageLink",
    "PageLinks",
    "PageWindow",
    "PaginationState",
    "StyleOptions",
    "add_page_query",
    "left_point",
    "page_url",
    "page_window",
    "render_page_list",
    "render_rel_links",
    "right_point",
]
