import logging
from urllib.parse import parse_qsl, urlsplit

import pytest

from wistia_kit import (RequestBuilder, HTTPMethod, DebugMode, InvalidRequestURL, MediaRoute,
                        ProjectsRoute, MediaCaptionsRoute, VisitorsRoute, HeatmapRoute, path_for)

API_PASSWORD = "abc1234567890"


@pytest.fixture
def builder():
    return RequestBuilder(API_PASSWORD)


def credential_values(request):
    return [v for k, v in parse_qsl(urlsplit(request.url).query) if k == "api_password"]


def test_show_media_request(builder):
    request = builder.build(MediaRoute("abcd123"))
    parts = urlsplit(request.url)

    assert parts.hostname == "api.wistia.com"
    assert parts.path == "/v1/medias/abcd123.json"
    assert request.query["api_password"] == API_PASSWORD
    assert request.method is HTTPMethod.GET
    assert request.body is None


def test_list_projects_request(builder):
    request = builder.build(ProjectsRoute())
    assert request.path == "/v1/projects.json"
    assert request.body is None
    assert credential_values(request) == [API_PASSWORD]


@pytest.mark.parametrize("route", [MediaRoute("abcd123"), MediaCaptionsRoute("x-1"), VisitorsRoute()])
def test_path_is_prefix_plus_template(builder, route):
    assert builder.build(route).path == "/v1/" + path_for(route)


def test_caller_cannot_override_credential(builder):
    request = builder.build(VisitorsRoute(), query_params={"api_password": "stolen", "page": 2})
    assert credential_values(request) == [API_PASSWORD]
    assert request.query["page"] == "2"


def test_params_pruned_and_stringified(builder):
    request = builder.build(VisitorsRoute(), query_params={"search": None, "archived": True, "per_page": 25})
    assert request.query == {"archived": "true", "per_page": "25", "api_password": API_PASSWORD}


def test_method_and_body_attached_verbatim(builder):
    body = b'{"name": "renamed"}'
    request = builder.build(MediaRoute("abcd123"), method=HTTPMethod.PUT, body=body)
    assert request.method is HTTPMethod.PUT
    assert request.body is body


def test_heatmap_not_prefixed_with_base_url(builder):
    request = builder.build(HeatmapRoute("evt1", "tok9"))
    assert request.url.startswith("https://api.wistia.com/v1/stats/events/evt1/iframe.html?")
    assert request.url.count("https://") == 1
    assert request.query == {"public_token": "tok9", "api_password": API_PASSWORD}


def test_caller_params_cannot_replace_heatmap_token(builder):
    request = builder.build(HeatmapRoute("evt1", "tok9"), query_params={"public_token": "forged", "extra": 1})
    assert request.query == {"public_token": "tok9", "extra": "1", "api_password": API_PASSWORD}


def test_host_forms_accepted():
    assert RequestBuilder(API_PASSWORD, base_url="http://127.0.0.1:8080/v1").base_url == "http://127.0.0.1:8080/v1/"
    assert RequestBuilder(API_PASSWORD, base_url="http://[::1]:8080/v1/").build(ProjectsRoute()).path == "/v1/projects.json"


def test_dot_segment_identifier_is_fatal_on_nested_route(builder):
    with pytest.raises(InvalidRequestURL) as exc:
        builder.build(MediaCaptionsRoute(".."))
    assert "MediaCaptionsRoute" in str(exc.value)


def test_base_url_gains_trailing_slash():
    builder = RequestBuilder(API_PASSWORD, base_url="https://api.wistia.com/v1")
    assert builder.base_url == "https://api.wistia.com/v1/"
    assert builder.build(ProjectsRoute()).path == "/v1/projects.json"


@pytest.mark.parametrize("base_url", [
    "api.wistia.com/v1/",
    "https:///v1/",
    "https://api.wistia.com/v 1/",
    "ftp://api.wistia.com/",
    "https://api.wistia.com:notaport/v1/",
    "https://api<wistia>.com/v1/",
    "https://[::1/v1/",
])
def test_malformed_base_url_is_fatal(base_url):
    with pytest.raises(InvalidRequestURL):
        RequestBuilder(API_PASSWORD, base_url=base_url)


@pytest.mark.parametrize("media_id", ["", "abc/def", "abc?x=1", "abc def", "abc#frag", ".", ".."])
def test_unsafe_identifier_is_fatal(builder, media_id):
    with pytest.raises(InvalidRequestURL) as exc:
        builder.build(MediaRoute(media_id))
    assert "MediaRoute" in str(exc.value)


def test_empty_password_rejected():
    with pytest.raises(ValueError):
        RequestBuilder("")


def test_debug_mode_accepts_strings():
    assert RequestBuilder(API_PASSWORD, debug_mode="Verbose").debug_mode is DebugMode.VERBOSE
    with pytest.raises(ValueError) as exc:
        RequestBuilder(API_PASSWORD, debug_mode="loud")
    assert "debug_mode='loud'" in str(exc.value)


def test_debug_off_logs_nothing(builder, caplog):
    with caplog.at_level(logging.INFO, logger="wistia_kit._request"):
        builder.build(ProjectsRoute())
    assert caplog.records == []


@pytest.mark.parametrize("mode", [DebugMode.SUMMARY, DebugMode.VERBOSE])
def test_debug_logging_masks_password_and_keeps_request(mode, caplog):
    quiet = RequestBuilder(API_PASSWORD).build(MediaRoute("abcd123"), query_params={"page": 1})
    with caplog.at_level(logging.INFO, logger="wistia_kit._request"):
        loud = RequestBuilder(API_PASSWORD, debug_mode=mode).build(MediaRoute("abcd123"), query_params={"page": 1})

    assert loud == quiet
    assert len(caplog.records) == 1
    message = caplog.records[0].getMessage()
    assert "/v1/medias/abcd123.json" in message
    assert API_PASSWORD not in message
