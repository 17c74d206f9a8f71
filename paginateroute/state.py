from dataclasses import dataclass


@dataclass(frozen=True)
class PaginationState:
    current_page: int
    last_page: int
    on_each_side: int = 0
    base_path: str = ""
    has_more_pages: bool = False

    @property
    def has_pages(self):
        return self.current_page != 1 or self.has_more_pages

    @classmethod
    def from_page(cls, page, base_path="", on_each_side=0):
        """Builds the state from a django.core.paginator.Page."""
        return cls(
            current_page=page.number,
            last_page=page.paginator.num_pages,
            on_each_side=on_each_side,
            base_path=base_path,
            has_more_pages=page.has_next(),
        )


@dataclass(frozen=True)
class PageLink:
    number: int
    url: str
    is_current: bool = False
