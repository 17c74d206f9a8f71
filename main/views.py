import logging
from django.http import Http404
from django.shortcuts import render
from django.core.paginator import Paginator, EmptyPage
from paginateroute.conf import get_page_keyword


logger = logging.getLogger(__name__)

DEVICES = [f'Шлюз {i}' for i in range(1, 48)]
PER_PAGE = 5


def get_page_number(page_query):
    """"page/3" -> 3. Без page_query это первая страница."""
    if not page_query:
        return 1
    keyword, _, number = page_query.strip('/').partition('/')
    if keyword != get_page_keyword() or not number.isdigit():
        raise Http404('Unknown page segment')
    return int(number)


def device_list(request, page_query=None, owner=None):
    devices = DEVICES if owner is None else [name for i, name in enumerate(DEVICES) if i % 2 == owner % 2]
    paginator = Paginator(devices, PER_PAGE)
    page_number = get_page_number(page_query)
    try:
        page_obj = paginator.page(page_number)
    except EmptyPage:
        logger.warning('Page %s requested, only %s available', page_number, paginator.num_pages)
        raise Http404('Page not found')

    context = {
        'page_obj': page_obj,
        'owner': owner,
    }
    return render(request, 'main/device_list.html', context)
