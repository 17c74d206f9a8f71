from django.apps import AppConfig


class PaginateRouteConfig(AppConfig):
    name = "paginateroute"
    verbose_name = "Paginate route"

    def ready(self):
        from .conf import get_on_each_side, get_setting
        from .render import StyleOptions

        # fail on startup rather than on first render
        get_on_each_side()
        StyleOptions.from_mapping(get_setting("STYLES"))
