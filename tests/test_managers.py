"""Manager tests: request shapes and result handling through the facade."""

import json
import logging

import httpx
import pytest

from conftest import reply
from github_manager.domain.exceptions import NotFoundError
from github_manager.domain.params import Params
from github_manager.domain.records.cache import CacheSort, RepositoryCachesList
from github_manager.domain.records.issues import Issue, LockReason
from github_manager.domain.records.permissions import (
    AllowedActions,
    DefaultWorkflowPermissions,
    EnabledItems,
    EnterpriseActionsPermissions,
    PermissionsScope,
    RepositoryActionsPermissions,
    WorkflowPermissions,
)
from github_manager.domain.records.webhooks import ContentType, WebhookConfig
from github_manager.manager import GitHubManager
from github_manager.services.markdown_manager import MarkdownMode
from github_manager.services.response_formatter import ReturnFormat


def _path(request: httpx.Request) -> str:
    return request.url.raw_path.decode()


def _body(request: httpx.Request):
    return json.loads(request.content)


class TestFacade:
    def test_managers_share_one_dispatcher(self, make_gh):
        gh = make_gh(reply(200, "{}"))

        assert gh.issues.dispatcher is gh.gists.dispatcher is gh.dispatcher

    def test_context_manager_closes_owned_client(self, settings):
        with GitHubManager(settings) as gh:
            client = gh.dispatcher._client

        assert client.is_closed


class TestBooleanOperations:
    def test_204_is_success(self, make_gh, sent):
        gh = make_gh(reply(204))

        assert gh.gists.star_gist("abc") is True
        assert sent[0].method == "PUT"
        assert _path(sent[0]) == "/gists/abc/star"

    def test_other_status_is_failure(self, make_gh, caplog):
        gh = make_gh(reply(404, '{"message":"Not Found"}'))

        with caplog.at_level(logging.WARNING):
            assert gh.webhooks.delete_webhook("o", "r", 1) is False

        assert "Not Found" in caplog.text

    def test_transport_failure_is_false(self, make_gh):
        def handler(request):
            raise httpx.ConnectError("offline", request=request)

        gh = make_gh(handler)

        assert gh.artifacts.delete_artifact("o", "r", 5) is False

    def test_is_gist_starred(self, make_gh):
        assert make_gh(reply(204)).gists.is_gist_starred("abc") is True
        assert make_gh(reply(404)).gists.is_gist_starred("abc") is False

    def test_delete_sends_delete(self, make_gh, sent):
        gh = make_gh(reply(204))

        gh.gists.delete_gist("abc")
        gh.cache.delete_cache_by_id("o", "r", 9)

        assert [(r.method, _path(r)) for r in sent] == [
            ("DELETE", "/gists/abc"),
            ("DELETE", "/repos/o/r/actions/caches/9"),
        ]


class TestReturnFormats:
    ISSUE = '{"number":1,"title":"Bug","state":"open","user":{"login":"octocat"}}'

    def test_each_format(self, make_gh):
        gh = make_gh(reply(200, self.ISSUE))

        assert gh.issues.get_issue("o", "r", 1, fmt=ReturnFormat.STRING) == self.ISSUE
        assert gh.issues.get_issue("o", "r", 1, fmt=ReturnFormat.JSON)["title"] == "Bug"
        issue = gh.issues.get_issue("o", "r", 1)
        assert isinstance(issue, Issue)
        assert issue.user.login == "octocat"

    def test_typed_error(self, make_gh):
        gh = make_gh(reply(404, '{"message":"Not Found"}'))

        with pytest.raises(NotFoundError):
            gh.users.get_user("ghost-user")

        assert gh.users.get_user("ghost-user", fmt=ReturnFormat.JSON) == {"message": "Not Found"}

    def test_gateway_page_in_json_format(self, make_gh):
        gh = make_gh(reply(502, "<html>Bad Gateway</html>"))

        assert gh.users.get_user("octocat", fmt=ReturnFormat.JSON) == (
            "Error is not in api request format"
        )

    def test_bare_array(self, make_gh, sent):
        gh = make_gh(reply(200, '[{"login":"a"},{"login":"b"}]'))

        users = gh.users.list_users(Params(since=10, per_page=2))

        assert [user.login for user in users] == ["a", "b"]
        assert str(sent[0].url).endswith("/users?since=10&per_page=2")


class TestIssuesManager:
    def test_create_issue_body(self, make_gh, sent):
        gh = make_gh(reply(201, '{"number":2,"title":"New"}'))

        issue = gh.issues.create_issue("o", "r", "New", Params(labels=["bug"]))

        assert issue.number == 2
        assert sent[0].method == "POST"
        assert _path(sent[0]) == "/repos/o/r/issues"
        assert _body(sent[0]) == {"title": "New", "labels": ["bug"]}

    def test_lock_with_reason(self, make_gh, sent):
        gh = make_gh(reply(204))

        assert gh.issues.lock_issue("o", "r", 3, LockReason.OFF_TOPIC)
        assert _path(sent[0]) == "/repos/o/r/issues/3/lock"
        assert _body(sent[0]) == {"lock_reason": "off-topic"}

    def test_unlock(self, make_gh, sent):
        gh = make_gh(reply(204))

        assert gh.issues.unlock_issue("o", "r", 3)
        assert sent[0].method == "DELETE"


class TestCacheManager:
    def test_list_caches_query(self, make_gh, sent):
        gh = make_gh(reply(200, '{"total_count":1,"actions_caches":[{"id":505,"key":"k"}]}'))

        caches = gh.cache.list_repository_caches(
            "o", "r", Params(sort=CacheSort.LAST_ACCESSED_AT, direction="desc")
        )

        assert isinstance(caches, RepositoryCachesList)
        assert caches.actions_caches[0].id == 505
        assert str(sent[0].url).endswith(
            "/repos/o/r/actions/caches?sort=last_accessed_at&direction=desc"
        )

    def test_delete_by_key_without_ref(self, make_gh, sent):
        gh = make_gh(reply(200, '{"total_count":0,"actions_caches":[]}'))

        gh.cache.delete_caches_by_key("o", "r", "npm-linux")

        assert sent[0].method == "DELETE"
        assert str(sent[0].url).endswith("/repos/o/r/actions/caches?key=npm-linux")


class TestPermissionsManager:
    def test_scope_picks_path_and_variant(self, make_gh, sent):
        gh = make_gh(reply(200, '{"enabled_organizations":"all","allowed_actions":"all"}'))

        permissions = gh.permissions.get_actions_permissions(PermissionsScope.ENTERPRISE, "acme")

        assert isinstance(permissions, EnterpriseActionsPermissions)
        assert _path(sent[0]) == "/enterprises/acme/actions/permissions"

    def test_set_repository_permissions(self, make_gh, sent):
        gh = make_gh(reply(204))
        permissions = RepositoryActionsPermissions(
            enabled=True, allowed_actions=AllowedActions.SELECTED
        )

        assert gh.permissions.set_actions_permissions("repos", "o/r", permissions)
        assert sent[0].method == "PUT"
        assert _path(sent[0]) == "/repos/o/r/actions/permissions"
        assert _body(sent[0]) == {"enabled": True, "allowed_actions": "selected"}

    def test_variant_must_match_scope(self, make_gh):
        gh = make_gh(reply(204))
        permissions = EnterpriseActionsPermissions(enabled_organizations=EnabledItems.ALL)

        with pytest.raises(ValueError):
            gh.permissions.set_actions_permissions(PermissionsScope.ORGANIZATION, "acme", permissions)

    def test_default_workflow_permissions(self, make_gh, sent):
        gh = make_gh(reply(204))
        permissions = DefaultWorkflowPermissions(
            default_workflow_permissions=WorkflowPermissions.WRITE
        )

        assert gh.permissions.set_default_workflow_permissions("orgs", "acme", permissions)
        assert _path(sent[0]) == "/orgs/acme/actions/permissions/workflow"
        assert _body(sent[0]) == {
            "default_workflow_permissions": "write",
            "can_approve_pull_request_reviews": False,
        }


class TestWebhooksManager:
    def test_create_webhook_body(self, make_gh, sent):
        gh = make_gh(reply(201, '{"id":1,"name":"web","config":{"content_type":"json"}}'))
        config = WebhookConfig(url="https://example.com/webhook", content_type=ContentType.JSON)

        webhook = gh.webhooks.create_webhook("o", "r", config, Params(events=["push"]))

        assert webhook.config.content_type is ContentType.JSON
        assert _body(sent[0]) == {
            "name": "web",
            "config": {
                "url": "https://example.com/webhook",
                "content_type": "json",
                "insecure_ssl": "0",
            },
            "events": ["push"],
        }

    def test_ping(self, make_gh, sent):
        gh = make_gh(reply(204))

        assert gh.webhooks.ping_webhook("o", "r", 7)
        assert (sent[0].method, _path(sent[0])) == ("POST", "/repos/o/r/hooks/7/pings")


class TestGistsManager:
    def test_create_gist_body(self, make_gh, sent):
        gh = make_gh(reply(201, '{"id":"abc","files":{"a.py":{"filename":"a.py"}}}'))

        gist = gh.gists.create_gist({"a.py": "print(1)"}, description="demo", public=True)

        assert gist.file_map["a.py"].filename == "a.py"
        assert _body(sent[0]) == {
            "files": {"a.py": {"content": "print(1)"}},
            "public": True,
            "description": "demo",
        }

    def test_update_removes_file(self, make_gh, sent):
        gh = make_gh(reply(200, '{"id":"abc"}'))

        gh.gists.update_gist("abc", {"old.py": None})

        assert sent[0].method == "PATCH"
        assert _body(sent[0]) == {"files": {"old.py": None}}


class TestSmallManagers:
    def test_markdown_render(self, make_gh, sent):
        gh = make_gh(reply(200, "<h1>Hello</h1>"))

        html = gh.markdown.render("# Hello", MarkdownMode.GFM, "o/r")

        assert html == "<h1>Hello</h1>"
        assert _body(sent[0]) == {"text": "# Hello", "mode": "gfm", "context": "o/r"}

    def test_markdown_render_raw(self, make_gh, sent):
        gh = make_gh(reply(200, "<p>hi</p>"))

        assert gh.markdown.render_raw("hi") == "<p>hi</p>"
        assert sent[0].headers["Content-Type"] == "text/plain"

    def test_emojis_filter_is_case_insensitive(self, make_gh):
        gh = make_gh(reply(200, '{"+1":"https://x/+1.png","Smile":"https://x/smile.png","tada":"u"}'))

        assert gh.emojis.get_emojis("smile", "TADA") == {
            "Smile": "https://x/smile.png",
            "tada": "u",
        }
        assert json.loads(gh.emojis.get_emojis("smile", fmt=ReturnFormat.STRING)) == {
            "Smile": "https://x/smile.png"
        }

    def test_gitignore_templates(self, make_gh):
        gh = make_gh(reply(200, '["C", "Python"]'))

        assert gh.gitignore.list_templates() == ["C", "Python"]

    def test_artifact_download_url(self, make_gh):
        gh = make_gh(reply(302, "", {"Location": "https://pipelines.example.com/a.zip"}))

        url = gh.artifacts.get_artifact_download_url("o", "r", 11)

        assert url == "https://pipelines.example.com/a.zip"

    def test_rate_limit(self, make_gh):
        gh = make_gh(
            reply(200, '{"resources":{"core":{"limit":5000,"remaining":10}},"rate":{"limit":5000}}')
        )

        assert gh.rate_limit.get_rate_limit_status().resources.core.remaining == 10

    def test_licenses(self, make_gh, sent):
        gh = make_gh(reply(200, '[{"key":"mit","spdx_id":"MIT"}]'))

        licenses = gh.licenses.list_common_licenses(Params(featured=True))

        assert licenses[0].spdx_id == "MIT"
        assert str(sent[0].url).endswith("/licenses?featured=true")
