"""Workspace administration: groups, invites, members, sharing, webhooks
and service accounts."""

from typing import Any, Sequence

from .base import Endpoint, compact, quote_id, require


class WorkspaceGroups(Endpoint):
    async def search(self, name: str) -> list:
        """Find groups by name. GET /v1/workspace/groups/search"""
        require("name", name)
        return await self._transport.get("/v1/workspace/groups/search", params={"name": name})

    async def add_member(self, group_id: str, email: str) -> dict:
        require("group_id", group_id)
        require("email", email)
        return await self._transport.post(
            f"/v1/workspace/groups/{quote_id(group_id)}/members", {"email": email}
        )

    async def remove_member(self, group_id: str, email: str) -> dict:
        require("group_id", group_id)
        require("email", email)
        return await self._transport.post(
            f"/v1/workspace/groups/{quote_id(group_id)}/members/remove", {"email": email}
        )


class WorkspaceInvites(Endpoint):
    async def invite(
        self,
        email: str,
        *,
        group_ids: Sequence[str] | None = None,
        workspace_permission: str | None = None,
    ) -> dict:
        """POST /v1/workspace/invites/add"""
        require("email", email)
        body = {
            "email": email,
            **compact(
                group_ids=list(group_ids) if group_ids is not None else None,
                workspace_permission=workspace_permission,
            ),
        }
        return await self._transport.post("/v1/workspace/invites/add", body)

    async def invite_bulk(
        self,
        emails: Sequence[str],
        *,
        group_ids: Sequence[str] | None = None,
    ) -> dict:
        """POST /v1/workspace/invites/add-bulk"""
        emails = list(emails)
        require("emails", emails)
        body = {
            "emails": emails,
            **compact(group_ids=list(group_ids) if group_ids is not None else None),
        }
        return await self._transport.post("/v1/workspace/invites/add-bulk", body)

    async def delete(self, email: str) -> dict:
        """Revoke a pending invite. DELETE /v1/workspace/invites with a JSON body."""
        require("email", email)
        return await self._transport.delete("/v1/workspace/invites", {"email": email})


class WorkspaceMembers(Endpoint):
    async def update(
        self,
        email: str,
        *,
        is_locked: bool | None = None,
        workspace_role: str | None = None,
    ) -> dict:
        """Lock/unlock a member or change their role. POST /v1/workspace/members"""
        require("email", email)
        body = {
            "email": email,
            **compact(is_locked=is_locked, workspace_role=workspace_role),
        }
        return await self._transport.post("/v1/workspace/members", body)


class WorkspaceResources(Endpoint):
    """Sharing of workspace resources (voices, dictionaries, projects, ...)."""

    @staticmethod
    def _principal(
        user_email: str | None,
        group_id: str | None,
        workspace_api_key_id: str | None,
    ) -> dict[str, Any]:
        return compact(
            user_email=user_email,
            group_id=group_id,
            workspace_api_key_id=workspace_api_key_id,
        )

    async def get(self, resource_id: str, resource_type: str) -> dict:
        require("resource_id", resource_id)
        require("resource_type", resource_type)
        return await self._transport.get(
            f"/v1/workspace/resources/{quote_id(resource_id)}",
            params={"resource_type": resource_type},
        )

    async def share(
        self,
        resource_id: str,
        role: str,
        resource_type: str,
        *,
        user_email: str | None = None,
        group_id: str | None = None,
        workspace_api_key_id: str | None = None,
    ) -> dict:
        """Grant ``role`` ("admin", "editor" or "viewer") on a resource.

        Exactly one principal is normally given: a user email, a group ID or a
        workspace API key ID.
        """
        require("resource_id", resource_id)
        require("role", role)
        require("resource_type", resource_type)
        body = {
            "role": role,
            "resource_type": resource_type,
            **self._principal(user_email, group_id, workspace_api_key_id),
        }
        return await self._transport.post(
            f"/v1/workspace/resources/{quote_id(resource_id)}/share", body
        )

    async def unshare(
        self,
        resource_id: str,
        resource_type: str,
        *,
        user_email: str | None = None,
        group_id: str | None = None,
        workspace_api_key_id: str | None = None,
    ) -> dict:
        require("resource_id", resource_id)
        require("resource_type", resource_type)
        body = {
            "resource_type": resource_type,
            **self._principal(user_email, group_id, workspace_api_key_id),
        }
        return await self._transport.post(
            f"/v1/workspace/resources/{quote_id(resource_id)}/unshare", body
        )


class Webhooks(Endpoint):
    async def list(self, *, include_usages: bool | None = None) -> dict:
        """GET /v1/workspace/webhooks"""
        return await self._transport.get(
            "/v1/workspace/webhooks", params=compact(include_usages=include_usages)
        )


class ServiceAccounts(Endpoint):
    """Service accounts and their API keys."""

    async def list(self) -> dict:
        """GET /v1/service-accounts"""
        return await self._transport.get("/v1/service-accounts")

    async def list_api_keys(self, service_account_user_id: str) -> dict:
        require("service_account_user_id", service_account_user_id)
        return await self._transport.get(
            f"/v1/service-accounts/{quote_id(service_account_user_id)}/api-keys"
        )

    async def create_api_key(
        self,
        service_account_user_id: str,
        name: str,
        permissions: Sequence[str] | str,
        *,
        character_limit: int | None = None,
    ) -> dict:
        """Create an API key.

        ``permissions`` is a list of permission names or the string "all".
        """
        require("service_account_user_id", service_account_user_id)
        require("name", name)
        body = {
            "name": name,
            "permissions": permissions if isinstance(permissions, str) else list(permissions),
            **compact(character_limit=character_limit),
        }
        return await self._transport.post(
            f"/v1/service-accounts/{quote_id(service_account_user_id)}/api-keys", body
        )

    async def update_api_key(
        self,
        service_account_user_id: str,
        api_key_id: str,
        is_enabled: bool,
        name: str,
        permissions: Sequence[str] | str,
        *,
        character_limit: int | None = None,
    ) -> dict:
        require("service_account_user_id", service_account_user_id)
        require("api_key_id", api_key_id)
        body = {
            "is_enabled": is_enabled,
            "name": name,
            "permissions": permissions if isinstance(permissions, str) else list(permissions),
            **compact(character_limit=character_limit),
        }
        return await self._transport.patch(
            f"/v1/service-accounts/{quote_id(service_account_user_id)}/api-keys/{quote_id(api_key_id)}",
            body,
        )

    async def delete_api_key(self, service_account_user_id: str, api_key_id: str) -> dict:
        require("service_account_user_id", service_account_user_id)
        require("api_key_id", api_key_id)
        return await self._transport.delete(
            f"/v1/service-accounts/{quote_id(service_account_user_id)}/api-keys/{quote_id(api_key_id)}"
        )
