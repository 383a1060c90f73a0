from route_postman.config import ExportConfig
from route_postman.exporter.filter import filter_routes, is_api_route, is_ignored_route
from route_postman.routes.base import RouteRecord

HANDLER = "sample_controllers.UserController@index"


def _route(method="GET", uri="api/users", middleware=("api",), handler=HANDLER) -> RouteRecord:
    return RouteRecord(method=method, uri=uri, middleware=list(middleware), handler=handler)


class TestIsApiRoute:
    def test_tagged(self):
        assert is_api_route(_route()) is True

    def test_untagged(self):
        assert is_api_route(_route(middleware=["web"])) is False
        assert is_api_route(_route(middleware=[])) is False

    def test_custom_marker(self):
        assert is_api_route(_route(middleware=["public-api"]), "public-api") is True


class TestIsIgnoredRoute:
    def test_glob_match(self):
        assert is_ignored_route("sanctum/csrf-cookie", ["sanctum/*"]) is True

    def test_star_crosses_slashes(self):
        assert is_ignored_route("admin/users/{user}/roles", ["admin/*"]) is True

    def test_no_patterns(self):
        assert is_ignored_route("users", []) is False

    def test_only_first_pattern_is_evaluated(self):
        # Later patterns are not consulted unless match_all is enabled
        assert is_ignored_route("telescope/entries", ["sanctum/*", "telescope/*"]) is False

    def test_match_all_extension(self):
        assert is_ignored_route("telescope/entries", ["sanctum/*", "telescope/*"], match_all=True) is True


class TestFilterRoutes:
    def test_drops_non_exportable_routes(self):
        routes = [
            _route(uri="api/users"),
            _route(middleware=["web"], uri="dashboard"),
            _route(method="HEAD", uri="api/users"),
            _route(uri="api/health", handler="Closure"),
            _route(uri="api/ping", handler=None),
            _route(method="POST", uri="api/users"),
        ]
        kept = filter_routes(routes, ExportConfig())
        assert [(r.method, r.uri) for r in kept] == [("GET", "api/users"), ("POST", "api/users")]

    def test_ignore_pattern_uses_prefix_stripped_uri(self):
        routes = [_route(uri="api/v1/sanctum/csrf-cookie"), _route(uri="api/v1/users")]
        config = ExportConfig(ignored_routes=["sanctum/*"])
        assert [r.uri for r in filter_routes(routes, config)] == ["api/v1/users"]

    def test_registration_order_is_preserved(self):
        uris = ["api/zeta", "api/alpha", "api/mid"]
        kept = filter_routes([_route(uri=u) for u in uris], ExportConfig())
        assert [r.uri for r in kept] == uris
