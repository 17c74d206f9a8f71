from typing import NamedTuple


class PageWindow(NamedTuple):
    left: int
    right: int

    @property
    def pages(self):
        return range(self.left, self.right + 1)

    @property
    def width(self):
        return self.right - self.left + 1


def left_point(current, last, side):
    """Левая граница окна. Если окно упирается в last, сдвигаем его влево."""
    if not side:
        return 1
    offset = max(current + side - last, 0)
    return max(current - side - offset, 1)


def right_point(current, last, side):
    """Правая граница окна. Около первой страницы окно растягивается вправо."""
    if not side:
        return last
    offset = side - current + 1 if current <= side else 0
    return min(current + side + offset, last)


def page_window(current, last, side=0):
    """
    Returns the inclusive range of pages to show around `current`,
    or None when there is nothing to paginate.
    """
    if last <= 0:
        return None
    return PageWindow(left_point(current, last, side), right_point(current, last, side))
