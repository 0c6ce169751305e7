"""GitHubDispatcher tests against a mock transport."""

import json

import httpx
import pytest

from conftest import TOKEN, reply
from github_manager.domain.exceptions import GitHubTransportError
from github_manager.domain.params import Params
from github_manager.infrastructure.config import GitHubSettings
from github_manager.infrastructure.http_dispatcher import GitHubDispatcher


class TestHeadersAndUrl:
    def test_every_call_is_authenticated(self, make_dispatcher, sent):
        dispatcher = make_dispatcher(reply(200, "{}"))

        dispatcher.send_get("user")

        headers = sent[0].headers
        assert headers["Authorization"] == f"Bearer {TOKEN}"
        assert headers["Accept"] == "application/vnd.github+json"
        assert headers["X-GitHub-Api-Version"] == "2022-11-28"
        assert headers["User-Agent"] == "github-manager/1.0"

    def test_url_is_base_plus_path_plus_query(self, make_dispatcher, sent):
        dispatcher = make_dispatcher(reply(200, "[]"))

        dispatcher.send_get("repos/octocat/hello/issues", Params(per_page=50, page=2))

        assert str(sent[0].url) == (
            "https://api.github.com/repos/octocat/hello/issues?per_page=50&page=2"
        )

    def test_custom_base_url(self, make_client, sent):
        settings = GitHubSettings(
            token=TOKEN, base_url="https://ghe.example.com/api/v3/", _env_file=None
        )
        dispatcher = GitHubDispatcher(settings, client=make_client(reply(200, "{}")))

        dispatcher.send_get("user")

        assert str(sent[0].url) == "https://ghe.example.com/api/v3/user"

    def test_configured_timeout_reaches_the_request(self, make_client, sent):
        settings = GitHubSettings(token=TOKEN, request_timeout=7.5, _env_file=None)
        dispatcher = GitHubDispatcher(settings, client=make_client(reply(200, "{}")))

        dispatcher.send_get("user")

        assert sent[0].extensions["timeout"] == httpx.Timeout(7.5).as_dict()


class TestBodies:
    def test_post_serializes_nested_body(self, make_dispatcher, sent):
        dispatcher = make_dispatcher(reply(201, "{}"))
        body = Params(name="web", config={"url": "https://example.com/hook"}, events=["push"])

        dispatcher.send_post("repos/o/r/hooks", body)

        assert sent[0].method == "POST"
        assert sent[0].headers["Content-Type"] == "application/json"
        assert json.loads(sent[0].content) == {
            "name": "web",
            "config": {"url": "https://example.com/hook"},
            "events": ["push"],
        }

    def test_missing_body_is_sent_as_empty_object(self, make_dispatcher, sent):
        dispatcher = make_dispatcher(reply(204))

        dispatcher.send_put("gists/abc/star")

        assert json.loads(sent[0].content) == {}

    def test_delete_has_no_body(self, make_dispatcher, sent):
        dispatcher = make_dispatcher(reply(204))

        dispatcher.send_delete("gists/abc")

        assert sent[0].method == "DELETE"
        assert sent[0].content == b""

    def test_raw_post_content_type_applies_to_that_call_only(self, make_dispatcher, sent):
        dispatcher = make_dispatcher(reply(200, "<p>hi</p>"))

        dispatcher.send_raw_post("markdown/raw", "hi")
        dispatcher.send_get("user")

        assert sent[0].headers["Content-Type"] == "text/plain"
        assert sent[0].content == b"hi"
        assert "Content-Type" not in sent[1].headers


class TestResponses:
    def test_error_status_is_returned_not_raised(self, make_dispatcher):
        dispatcher = make_dispatcher(reply(404, '{"message":"Not Found"}'))

        response = dispatcher.send_get("users/ghost-user")

        assert response.status_code == 404
        assert response.error_message() == "Not Found"

    def test_headers_are_lowercased(self, make_dispatcher):
        dispatcher = make_dispatcher(reply(200, "{}", {"X-RateLimit-Remaining": "59"}))

        response = dispatcher.send_get("rate_limit")

        assert response.headers["x-ratelimit-remaining"] == "59"

    def test_each_call_gets_its_own_envelope(self, make_dispatcher):
        bodies = iter(['{"login":"a"}', '{"message":"Not Found"}'])
        statuses = iter([200, 404])

        def handler(request):
            return httpx.Response(next(statuses), content=next(bodies).encode())

        dispatcher = make_dispatcher(handler)
        first = dispatcher.send_get("users/a")
        second = dispatcher.send_get("users/b")

        assert first.ok and first.text == '{"login":"a"}'
        assert second.status_code == 404


class TestTransportFailure:
    def test_connect_error_becomes_transport_error(self, make_dispatcher):
        def handler(request):
            raise httpx.ConnectError("name resolution failed", request=request)

        dispatcher = make_dispatcher(handler)

        with pytest.raises(GitHubTransportError) as exc_info:
            dispatcher.send_get("user")

        response = exc_info.value.response
        assert response.status_code is None
        assert response.text == ""
        assert response.error_response() == "Error is not in api request format"

    def test_configured_default_message_is_used(self, make_client):
        settings = GitHubSettings(
            token=TOKEN, default_error_message="GitHub unreachable", _env_file=None
        )

        def handler(request):
            raise httpx.ReadTimeout("timed out", request=request)

        dispatcher = GitHubDispatcher(settings, client=make_client(handler))

        with pytest.raises(GitHubTransportError) as exc_info:
            dispatcher.send_get("user")

        assert exc_info.value.response.json_error_response() == "GitHub unreachable"


class TestLifecycle:
    def test_injected_client_is_not_closed(self, make_client, settings):
        client = make_client(reply(200, "{}"))

        with GitHubDispatcher(settings, client=client):
            pass

        assert not client.is_closed

    def test_owned_client_is_closed(self, settings):
        dispatcher = GitHubDispatcher(settings)
        dispatcher.close()

        assert dispatcher._client.is_closed
