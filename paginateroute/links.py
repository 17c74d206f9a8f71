import logging

from . import templater
from .state import PageLink
from .window import page_window

logger = logging.getLogger(__name__)


class PageLinks:
    """Previous/next pages and page URLs for one PaginationState."""

    def __init__(self, state, parameters=None, query_string="", keyword=None, resolve=None):
        self.state = state
        self.parameters = parameters or {}
        self.query_string = query_string
        self.keyword = keyword
        self.resolve = resolve

    @property
    def current_page(self):
        return self.state.current_page

    def is_current_page(self, page):
        return page == self.current_page

    def next_page(self):
        if not self.state.has_more_pages:
            return None
        return self.current_page + 1

    def has_next_page(self):
        return self.next_page() is not None

    def next_page_url(self):
        next_page = self.next_page()
        if next_page is None:
            return None
        return self.page_url(next_page)

    def previous_page(self):
        if self.current_page <= 1:
            return None
        return self.current_page - 1

    def has_previous_page(self):
        return self.previous_page() is not None

    def previous_page_url(self, full=False):
        previous_page = self.previous_page()
        if previous_page is None:
            return None
        return self.page_url(previous_page, full)

    def page_url(self, page, full=False):
        return templater.page_url(
            self.state.base_path,
            page,
            full=full,
            parameters=self.parameters,
            query_string=self.query_string,
            keyword=self.keyword,
            resolve=self.resolve,
        )

    def window(self):
        return page_window(self.current_page, self.state.last_page, self.state.on_each_side)

    def all_urls(self, full=False):
        window = self.window()
        if not self.state.has_pages or window is None:
            logger.debug("No pages to link for %r", self.state)
            return {}
        return {page: self.page_url(page, full) for page in window.pages}

    def page_links(self, full=False):
        return [
            PageLink(number=page, url=url, is_current=self.is_current_page(page))
            for page, url in self.all_urls(full).items()
        ]
