"""Repository webhook records."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from github_manager.domain.records.base import (
    GitHubResponse,
    enum_or_default,
    nested,
    strings,
    to_timestamp,
)


class ContentType(str, Enum):
    JSON = "json"
    FORM = "form"


@dataclass(frozen=True, slots=True, kw_only=True)
class WebhookConfig:
    """Delivery settings of a webhook.

    GitHub masks ``secret`` and ``password`` as ``********`` on read.
    ``insecure_ssl`` is the API's string flag (``"0"`` or ``"1"``).
    """

    url: str | None = None
    content_type: ContentType = ContentType.FORM
    insecure_ssl: str = "0"
    secret: str | None = None
    username: str | None = None
    password: str | None = None

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> WebhookConfig:
        insecure_ssl = data.get("insecure_ssl")
        return cls(
            url=data.get("url"),
            content_type=enum_or_default(ContentType, data.get("content_type"), ContentType.FORM),
            insecure_ssl=str(insecure_ssl) if insecure_ssl is not None else "0",
            secret=data.get("secret"),
            username=data.get("username"),
            password=data.get("password"),
        )

    @property
    def verifies_ssl(self) -> bool:
        return self.insecure_ssl != "1"

    def to_body(self) -> dict[str, Any]:
        """Request form of the config; unset credentials are omitted."""
        body: dict[str, Any] = {
            "url": self.url,
            "content_type": self.content_type.value,
            "insecure_ssl": self.insecure_ssl,
        }
        for key in ("secret", "username", "password"):
            value = getattr(self, key)
            if value is not None:
                body[key] = value
        return body


@dataclass(frozen=True, slots=True, kw_only=True)
class WebhookLastResponse:
    code: int | None = None
    status: str | None = None
    message: str | None = None

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> WebhookLastResponse:
        return cls(
            code=data.get("code"),
            status=data.get("status"),
            message=data.get("message"),
        )


@dataclass(frozen=True, slots=True, kw_only=True)
class RepositoryWebhook(GitHubResponse):
    id: int = 0
    type: str | None = None
    name: str | None = None
    active: bool = False
    events: tuple[str, ...] = ()
    config: WebhookConfig = field(default_factory=WebhookConfig)
    url: str | None = None
    test_url: str | None = None
    ping_url: str | None = None
    deliveries_url: str | None = None
    created_at: str | None = None
    updated_at: str | None = None
    last_response: WebhookLastResponse = field(default_factory=WebhookLastResponse)

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> RepositoryWebhook:
        return cls(
            **GitHubResponse.base_fields(data),
            id=data.get("id") or 0,
            type=data.get("type"),
            name=data.get("name"),
            active=bool(data.get("active")),
            events=strings(data, "events"),
            config=WebhookConfig.from_json(nested(data, "config")),
            url=data.get("url"),
            test_url=data.get("test_url"),
            ping_url=data.get("ping_url"),
            deliveries_url=data.get("deliveries_url"),
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
            last_response=WebhookLastResponse.from_json(nested(data, "last_response")),
        )

    @property
    def created_at_timestamp(self) -> int | None:
        return to_timestamp(self.created_at)

    @property
    def updated_at_timestamp(self) -> int | None:
        return to_timestamp(self.updated_at)
