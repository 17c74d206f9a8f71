"""Tests for the paginate_route template tags."""

import pytest
from django.apps import apps
from django.core.exceptions import ImproperlyConfigured
from django.template import Context, Template
from django.test import RequestFactory, override_settings
from django.urls import resolve

from paginateroute.conf import get_on_each_side


def render(source, **context):
    return Template("{% load paginate_route %}" + source).render(Context(context))


def make_request(path, query=None):
    request = RequestFactory().get(path, query or {})
    request.resolver_match = resolve(path)
    return request


class TestPageWindowTag:
    def test_window(self, page_factory):
        html = render("{% page_window page_obj 2 as win %}{{ win.start }}-{{ win.end }}/{{ win.total }}", page_obj=page_factory(5))
        assert html == "3-7/10"

    def test_window_from_settings(self, page_factory):
        html = render(
            "{% page_window page_obj as win %}{% for n in win.range %}{{ n }},{% endfor %}",
            page_obj=page_factory(10),
        )
        assert html == "6,7,8,9,10,"


class TestUrlTags:
    def test_page_url_uses_route_and_parameters(self, page_factory):
        request = make_request("/owners/7/devices/page/2")
        html = render("{% page_url page_obj 4 %}", page_obj=page_factory(2, count=23), request=request)
        assert html == "http://testserver/owners/7/devices/page/4"

    def test_first_page_url(self, page_factory):
        request = make_request("/devices/page/2")
        assert render("{% page_url page_obj 1 %}", page_obj=page_factory(2), request=request) == "http://testserver/devices/"
        assert render("{% page_url page_obj 1 True %}", page_obj=page_factory(2), request=request) == (
            "http://testserver/devices/page/1"
        )

    def test_query_string(self, page_factory):
        request = make_request("/devices/", {"sort": "name"})
        html = render("{% next_page_url page_obj %}", page_obj=page_factory(1), request=request)
        assert html == "http://testserver/devices/page/2?sort=name"

    def test_missing_next_and_previous(self, page_factory):
        request = make_request("/devices/")
        assert render("{% previous_page_url page_obj %}", page_obj=page_factory(1), request=request) == ""
        request = make_request("/devices/page/10")
        assert render("{% next_page_url page_obj %}", page_obj=page_factory(10), request=request) == ""

    def test_paginator_path_wins(self, page_factory):
        page = page_factory(2)
        page.paginator.path = "archive/{page_query?}"
        request = make_request("/devices/page/2")
        assert render("{% previous_page_url page_obj True %}", page_obj=page, request=request) == (
            "http://testserver/archive/page/1"
        )

    @override_settings(PAGINATE_ROUTE={"ABSOLUTE_URLS": False})
    def test_relative_urls(self, page_factory):
        request = make_request("/devices/page/2")
        assert render("{% page_url page_obj 3 %}", page_obj=page_factory(2), request=request) == "/devices/page/3"

    def test_without_request_or_path(self, page_factory):
        with pytest.raises(ImproperlyConfigured):
            render("{% page_url page_obj 2 %}", page_obj=page_factory(1))

    def test_path_without_request(self, page_factory):
        page = page_factory(1)
        page.paginator.path = "devices/"
        assert render("{% page_url page_obj 2 %}", page_obj=page) == "/devices/page/2"


class TestRenderTags:
    def test_page_list(self, page_factory):
        request = make_request("/devices/page/3")
        html = render('{% page_list page_obj active_a="current" %}', page_obj=page_factory(3), request=request)
        assert html.startswith('<ul class="pagination">')
        assert '<a class="page-link current" href="http://testserver/devices/page/3">3</a>' in html
        assert html.count("<li") == 5

    def test_page_list_on_each_side(self, page_factory):
        request = make_request("/devices/page/3")
        html = render("{% page_list page_obj on_each_side=1 %}", page_obj=page_factory(3), request=request)
        assert html.count("<li") == 3

    def test_page_list_unknown_style(self, page_factory):
        request = make_request("/devices/page/3")
        with pytest.raises(ImproperlyConfigured):
            render('{% page_list page_obj colour="red" %}', page_obj=page_factory(3), request=request)

    def test_rel_links(self, page_factory):
        request = make_request("/devices/page/5")
        html = render("{% rel_links page_obj %}", page_obj=page_factory(5), request=request)
        assert html == (
            '<link rel="prev" href="http://testserver/devices/page/4">'
            '<link rel="next" href="http://testserver/devices/page/6">'
        )


class TestConfiguration:
    def test_defaults(self):
        with override_settings(PAGINATE_ROUTE=None):
            assert get_on_each_side() == 3

    def test_unknown_setting(self):
        with override_settings(PAGINATE_ROUTE={"SIDE": 1}):
            with pytest.raises(ImproperlyConfigured):
                get_on_each_side()

    def test_negative_side(self):
        with override_settings(PAGINATE_ROUTE={"ON_EACH_SIDE": -1}):
            with pytest.raises(ImproperlyConfigured):
                get_on_each_side()

    def test_ready_validates_styles(self):
        config = apps.get_app_config("paginateroute")
        with override_settings(PAGINATE_ROUTE={"STYLES": {"span": "x"}}):
            with pytest.raises(ImproperlyConfigured):
                config.ready()
        config.ready()
