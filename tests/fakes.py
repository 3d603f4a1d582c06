"""In-memory implementations of the application ports.

One InMemoryStore holds every table; each fake repository reads and
writes it. FakeUnitOfWork snapshots the store when the outermost
transaction opens and restores it on error, so pipeline tests can
observe all-or-nothing behaviour without a database.
"""

from __future__ import annotations

import copy
import itertools
from collections.abc import AsyncIterator, Sequence
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

from colletro.application.dtos.achievement import UserStats
from colletro.application.dtos.admin import CoverCandidate, ImageUpdate
from colletro.application.dtos.collection import (
    AuthorSummary,
    CatalogDraft,
    CatalogItemResult,
    CollectionDraft,
    CollectionResult,
    CommunityCollectionResult,
    ItemDraft,
    ItemResult,
    RecommendedCollectionResult,
)
from colletro.application.dtos.community import ReportResult
from colletro.application.dtos.folder import FolderResult
from colletro.application.dtos.user import UserResult, UserStatus
from colletro.domain.achievements import parse_achievements

FIXED_NOW = datetime(2025, 6, 1, 12, 0, 0, tzinfo=UTC)

_COLLECTION_FIELDS = (
    "name",
    "description",
    "category",
    "template",
    "custom_field_definitions",
    "cover_image",
    "cover_image_fit",
    "tags",
)


def _order(items: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """Number ascending (missing numbers last), then name."""
    return sorted(
        items,
        key=lambda i: (i["number"] is None, i["number"] or 0, i["name"]),
    )


@dataclass
class InMemoryStore:
    users: dict[str, dict[str, Any]] = field(default_factory=dict)
    collections: dict[str, dict[str, Any]] = field(default_factory=dict)
    items: dict[str, dict[str, Any]] = field(default_factory=dict)
    community: dict[str, dict[str, Any]] = field(default_factory=dict)
    community_items: dict[str, dict[str, Any]] = field(default_factory=dict)
    votes: list[dict[str, Any]] = field(default_factory=list)
    reports: list[dict[str, Any]] = field(default_factory=list)
    recommended: dict[str, dict[str, Any]] = field(default_factory=dict)
    recommended_items: dict[str, dict[str, Any]] = field(default_factory=dict)
    folders: dict[str, dict[str, Any]] = field(default_factory=dict)
    _ids: Any = field(default_factory=lambda: itertools.count(1))

    TABLES = (
        "users",
        "collections",
        "items",
        "community",
        "community_items",
        "votes",
        "reports",
        "recommended",
        "recommended_items",
        "folders",
    )

    def new_id(self, prefix: str) -> str:
        return f"{prefix}{next(self._ids)}"

    def snapshot(self) -> dict[str, Any]:
        return {name: copy.deepcopy(getattr(self, name)) for name in self.TABLES}

    def restore(self, snap: dict[str, Any]) -> None:
        for name, value in snap.items():
            setattr(self, name, value)

    # ---- Seeding helpers ----

    def add_user(
        self,
        user_id: str,
        *,
        is_admin: bool = False,
        is_verified: bool = False,
        achievements: Any = None,
        created_at: datetime = FIXED_NOW,
        name: str | None = None,
    ) -> str:
        self.users[user_id] = {
            "id": user_id,
            "email": f"{user_id}@example.com",
            "name": name or user_id.title(),
            "image": None,
            "badge": None,
            "is_admin": is_admin,
            "is_verified": is_verified,
            "is_private": False,
            "achievements": achievements if achievements is not None else [],
            "created_at": created_at,
        }
        return user_id

    def add_collection(self, user_id: str, name: str, **fields: Any) -> str:
        collection_id = fields.pop("id", None) or self.new_id("col")
        row = {
            "id": collection_id,
            "user_id": user_id,
            "name": name,
            "description": None,
            "category": None,
            "template": None,
            "custom_field_definitions": None,
            "cover_image": None,
            "cover_image_fit": None,
            "tags": [],
            "folder_id": None,
            "recommended_collection_id": None,
            "community_collection_id": None,
            "shared_to_community_id": None,
            "share_token": None,
            "is_public": False,
            "last_synced_at": None,
            "created_at": FIXED_NOW,
        }
        row.update(fields)
        self.collections[collection_id] = row
        return collection_id

    def add_item(self, collection_id: str, name: str, **fields: Any) -> str:
        item_id = fields.pop("id", None) or self.new_id("item")
        row = {
            "id": item_id,
            "collection_id": collection_id,
            "name": name,
            "number": None,
            "notes": None,
            "image": None,
            "is_owned": False,
            "custom_fields": None,
            "personal_rating": None,
            "log_date": None,
        }
        row.update(fields)
        self.items[item_id] = row
        return item_id

    def add_recommended(self, name: str, **fields: Any) -> str:
        rec_id = fields.pop("id", None) or self.new_id("rec")
        row = {
            "id": rec_id,
            "name": name,
            "description": None,
            "category": None,
            "template": None,
            "custom_field_definitions": None,
            "cover_image": None,
            "cover_image_fit": None,
            "tags": [],
            "is_public": True,
            "created_at": FIXED_NOW,
            "updated_at": FIXED_NOW,
        }
        row.update(fields)
        self.recommended[rec_id] = row
        return rec_id

    def add_recommended_item(self, rec_id: str, name: str, **fields: Any) -> str:
        item_id = fields.pop("id", None) or self.new_id("ritem")
        row = {
            "id": item_id,
            "collection_id": rec_id,
            "name": name,
            "number": None,
            "notes": None,
            "image": None,
            "custom_fields": None,
        }
        row.update(fields)
        self.recommended_items[item_id] = row
        return item_id

    def add_community(self, user_id: str, name: str, **fields: Any) -> str:
        community_id = fields.pop("id", None) or self.new_id("comm")
        row = {
            "id": community_id,
            "user_id": user_id,
            "name": name,
            "description": None,
            "category": None,
            "template": None,
            "custom_field_definitions": None,
            "cover_image": None,
            "cover_image_fit": None,
            "tags": [],
            "created_at": FIXED_NOW,
        }
        row.update(fields)
        self.community[community_id] = row
        return community_id

    def add_community_item(self, community_id: str, name: str, **fields: Any) -> str:
        item_id = fields.pop("id", None) or self.new_id("citem")
        row = {
            "id": item_id,
            "collection_id": community_id,
            "name": name,
            "number": None,
            "notes": None,
            "image": None,
            "custom_fields": None,
        }
        row.update(fields)
        self.community_items[item_id] = row
        return item_id

    def add_folder(self, user_id: str, name: str, parent_id: str | None = None) -> str:
        folder_id = self.new_id("fold")
        self.folders[folder_id] = {
            "id": folder_id,
            "user_id": user_id,
            "name": name,
            "parent_id": parent_id,
            "created_at": FIXED_NOW,
        }
        return folder_id

    # ---- Query helpers used by repositories and assertions ----

    def items_of(self, collection_id: str) -> list[dict[str, Any]]:
        return _order([i for i in self.items.values() if i["collection_id"] == collection_id])

    def community_items_of(self, community_id: str) -> list[dict[str, Any]]:
        return _order(
            [i for i in self.community_items.values() if i["collection_id"] == community_id]
        )

    def recommended_items_of(self, rec_id: str) -> list[dict[str, Any]]:
        return _order(
            [i for i in self.recommended_items.values() if i["collection_id"] == rec_id]
        )


def _item_result(row: dict[str, Any]) -> ItemResult:
    return ItemResult(
        id=row["id"],
        collection_id=row["collection_id"],
        name=row["name"],
        number=row["number"],
        notes=row["notes"],
        image=row["image"],
        is_owned=row["is_owned"],
        custom_fields=copy.deepcopy(row["custom_fields"]),
        personal_rating=row["personal_rating"],
        log_date=row["log_date"],
    )


def _catalog_item_result(row: dict[str, Any]) -> CatalogItemResult:
    return CatalogItemResult(
        id=row["id"],
        collection_id=row["collection_id"],
        name=row["name"],
        number=row["number"],
        notes=row["notes"],
        image=row["image"],
        custom_fields=copy.deepcopy(row["custom_fields"]),
    )


def _user_result(row: dict[str, Any]) -> UserResult:
    return UserResult(
        id=row["id"],
        email=row["email"],
        name=row["name"],
        image=row["image"],
        badge=row["badge"],
        is_admin=row["is_admin"],
        is_verified=row["is_verified"],
        is_private=row["is_private"],
        achievements=parse_achievements(row["achievements"]),
        created_at=row["created_at"],
    )


def _draft_item_row(
    store: InMemoryStore, prefix: str, collection_id: str, draft: ItemDraft
) -> dict[str, Any]:
    return {
        "id": store.new_id(prefix),
        "collection_id": collection_id,
        "name": draft.name,
        "number": draft.number,
        "notes": draft.notes,
        "image": draft.image,
        "custom_fields": copy.deepcopy(draft.custom_fields),
    }


class FakeUnitOfWork:
    """Snapshot on outermost enter; restore on error. Counts commits."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store
        self._depth = 0
        self.commits = 0
        self.rollbacks = 0

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[None]:
        snap = self._store.snapshot()
        self._depth += 1
        try:
            yield
        except BaseException:
            self._store.restore(snap)
            self.rollbacks += 1
            raise
        finally:
            self._depth -= 1
        if self._depth == 0:
            self.commits += 1


class FakeUserRepository:
    def __init__(self, store: InMemoryStore) -> None:
        self.store = store
        self.status_reads = 0

    async def get_by_id(self, user_id: str) -> UserResult | None:
        row = self.store.users.get(user_id)
        return _user_result(row) if row else None

    async def get_status(self, user_id: str) -> UserStatus | None:
        self.status_reads += 1
        row = self.store.users.get(user_id)
        if row is None:
            return None
        return UserStatus(is_admin=row["is_admin"], is_verified=row["is_verified"])

    async def get_author_summary(self, user_id: str) -> AuthorSummary | None:
        row = self.store.users.get(user_id)
        if row is None:
            return None
        return AuthorSummary(id=row["id"], name=row["name"], image=row["image"], badge=row["badge"])

    async def get_achievements_for_update(self, user_id: str) -> list[str] | None:
        row = self.store.users.get(user_id)
        return parse_achievements(row["achievements"]) if row else None

    async def set_achievements(self, user_id: str, achievement_ids: list[str]) -> None:
        self.store.users[user_id]["achievements"] = list(achievement_ids)

    async def set_verified(self, user_id: str, is_verified: bool) -> UserResult | None:
        row = self.store.users.get(user_id)
        if row is None:
            return None
        row["is_verified"] = is_verified
        return _user_result(row)


class FakeStatsRepository:
    """Same aggregation rules as the SQL StatsRepository, over the store."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    async def get_user_stats(self, user_id: str, as_of: datetime) -> UserStats | None:
        user = self.store.users.get(user_id)
        if user is None:
            return None
        collections = [c for c in self.store.collections.values() if c["user_id"] == user_id]
        items = [i for c in collections for i in self.store.items_of(c["id"])]
        completed = 0
        best = 0.0
        for c in collections:
            mine = self.store.items_of(c["id"])
            if not mine:
                continue
            owned = sum(1 for i in mine if i["is_owned"])
            if owned == len(mine):
                completed += 1
            best = max(best, owned * 100.0 / len(mine))
        owned_items = sum(1 for i in items if i["is_owned"])
        return UserStats(
            collection_count=len(collections),
            collections_with_covers=sum(1 for c in collections if c["cover_image"]),
            distinct_categories=len({c["category"] for c in collections if c["category"]}),
            completed_collections=completed,
            best_collection_percent=best,
            overall_percent=owned_items * 100.0 / len(items) if items else 0.0,
            total_items=len(items),
            owned_items=owned_items,
            items_with_notes=sum(1 for i in items if i["notes"]),
            items_with_images=sum(1 for i in items if i["image"]),
            items_with_ratings=sum(1 for i in items if i["personal_rating"] is not None),
            items_with_log_dates=sum(1 for i in items if i["log_date"] is not None),
            community_collections_added=sum(
                1 for c in collections if c["community_collection_id"]
            ),
            community_shares=sum(
                1 for c in self.store.community.values() if c["user_id"] == user_id
            ),
            folders_created=sum(1 for f in self.store.folders.values() if f["user_id"] == user_id),
            account_age_days=max((as_of - user["created_at"]).days, 0),
        )


class FakeCollectionRepository:
    def __init__(self, store: InMemoryStore) -> None:
        self.store = store
        self.list_calls = 0

    def _result(self, row: dict[str, Any]) -> CollectionResult:
        return CollectionResult(
            id=row["id"],
            user_id=row["user_id"],
            name=row["name"],
            description=row["description"],
            category=row["category"],
            template=row["template"],
            custom_field_definitions=copy.deepcopy(row["custom_field_definitions"]),
            cover_image=row["cover_image"],
            cover_image_fit=row["cover_image_fit"],
            tags=list(row["tags"]),
            folder_id=row["folder_id"],
            recommended_collection_id=row["recommended_collection_id"],
            community_collection_id=row["community_collection_id"],
            shared_to_community_id=row["shared_to_community_id"],
            share_token=row["share_token"],
            last_synced_at=row["last_synced_at"],
            created_at=row["created_at"],
            is_public=row["is_public"],
            items=[_item_result(i) for i in self.store.items_of(row["id"])],
        )

    async def get_by_id(self, collection_id: str) -> CollectionResult | None:
        row = self.store.collections.get(collection_id)
        return self._result(row) if row else None

    async def get_by_id_and_user(
        self, collection_id: str, user_id: str
    ) -> CollectionResult | None:
        row = self.store.collections.get(collection_id)
        if row is None or row["user_id"] != user_id:
            return None
        return self._result(row)

    async def get_by_share_token(self, share_token: str) -> CollectionResult | None:
        for row in self.store.collections.values():
            if row["share_token"] == share_token:
                return self._result(row)
        return None

    async def list_by_user(self, user_id: str) -> list[CollectionResult]:
        self.list_calls += 1
        rows = [c for c in self.store.collections.values() if c["user_id"] == user_id]
        return [self._result(r) for r in rows]

    async def create_with_items(self, draft: CollectionDraft) -> CollectionResult:
        collection_id = self.store.add_collection(
            draft.user_id,
            draft.name,
            **{f: copy.deepcopy(getattr(draft, f)) for f in _COLLECTION_FIELDS if f != "name"},
            folder_id=draft.folder_id,
            recommended_collection_id=draft.recommended_collection_id,
            community_collection_id=draft.community_collection_id,
            last_synced_at=draft.last_synced_at,
        )
        for item in draft.items:
            self.store.add_item(
                collection_id,
                item.name,
                number=item.number,
                notes=item.notes,
                image=item.image,
                is_owned=item.is_owned,
                custom_fields=copy.deepcopy(item.custom_fields),
            )
        return self._result(self.store.collections[collection_id])

    async def update_fields(self, collection_id: str, values: dict[str, Any]) -> None:
        self.store.collections[collection_id].update(copy.deepcopy(values))

    async def set_shared_to_community(
        self, collection_id: str, community_collection_id: str | None
    ) -> None:
        self.store.collections[collection_id]["shared_to_community_id"] = community_collection_id

    async def list_missing_covers(self) -> list[CoverCandidate]:
        return [
            CoverCandidate(id=c["id"], name=c["name"], category=c["category"])
            for c in self.store.collections.values()
            if not c["cover_image"]
        ]

    async def set_cover_image(self, collection_id: str, cover_image: str) -> bool:
        row = self.store.collections.get(collection_id)
        if row is None:
            return False
        row["cover_image"] = cover_image
        return True

    async def set_folder(self, collection_id: str, folder_id: str | None) -> None:
        self.store.collections[collection_id]["folder_id"] = folder_id

    async def unfile_folder(self, folder_id: str) -> int:
        count = 0
        for row in self.store.collections.values():
            if row["folder_id"] == folder_id:
                row["folder_id"] = None
                count += 1
        return count


class FakeItemRepository:
    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    async def list_by_collection(self, collection_id: str) -> list[ItemResult]:
        return [_item_result(i) for i in self.store.items_of(collection_id)]

    async def create_many(self, collection_id: str, drafts: Sequence[ItemDraft]) -> int:
        for draft in drafts:
            self.store.add_item(
                collection_id,
                draft.name,
                number=draft.number,
                notes=draft.notes,
                image=draft.image,
                is_owned=draft.is_owned,
                custom_fields=copy.deepcopy(draft.custom_fields),
            )
        return len(drafts)

    async def update_fields(self, item_id: str, values: dict[str, Any]) -> None:
        self.store.items[item_id].update(values)

    async def get_owner_ids(self, item_ids: Sequence[str]) -> dict[str, str]:
        owners: dict[str, str] = {}
        for item_id in item_ids:
            item = self.store.items.get(item_id)
            if item is None:
                continue
            owners[item_id] = self.store.collections[item["collection_id"]]["user_id"]
        return owners

    async def set_owned(self, item_ids: Sequence[str], is_owned: bool) -> int:
        count = 0
        for item_id in item_ids:
            if item_id in self.store.items:
                self.store.items[item_id]["is_owned"] = is_owned
                count += 1
        return count

    async def delete_many(self, item_ids: Sequence[str]) -> int:
        return sum(1 for item_id in item_ids if self.store.items.pop(item_id, None) is not None)


class FakeCommunityCollectionRepository:
    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    def _result(self, row: dict[str, Any]) -> CommunityCollectionResult:
        author = self.store.users.get(row["user_id"])
        return CommunityCollectionResult(
            id=row["id"],
            user_id=row["user_id"],
            name=row["name"],
            description=row["description"],
            category=row["category"],
            template=row["template"],
            custom_field_definitions=copy.deepcopy(row["custom_field_definitions"]),
            cover_image=row["cover_image"],
            cover_image_fit=row["cover_image_fit"],
            tags=list(row["tags"]),
            created_at=row["created_at"],
            items=[_catalog_item_result(i) for i in self.store.community_items_of(row["id"])],
            author=(
                AuthorSummary(
                    id=author["id"], name=author["name"], image=author["image"], badge=author["badge"]
                )
                if author
                else None
            ),
        )

    async def get_by_id(self, community_collection_id: str) -> CommunityCollectionResult | None:
        row = self.store.community.get(community_collection_id)
        return self._result(row) if row else None

    async def create_with_items(self, draft: CollectionDraft) -> CommunityCollectionResult:
        community_id = self.store.add_community(
            draft.user_id,
            draft.name,
            **{f: copy.deepcopy(getattr(draft, f)) for f in _COLLECTION_FIELDS if f != "name"},
        )
        for item in draft.items:
            row = _draft_item_row(self.store, "citem", community_id, item)
            self.store.community_items[row["id"]] = row
        return self._result(self.store.community[community_id])

    async def delete_with_dependents(self, community_collection_id: str) -> None:
        self.store.community_items = {
            k: v
            for k, v in self.store.community_items.items()
            if v["collection_id"] != community_collection_id
        }
        self.store.votes = [
            v for v in self.store.votes if v["community_collection_id"] != community_collection_id
        ]
        self.store.reports = [
            r for r in self.store.reports if r["community_collection_id"] != community_collection_id
        ]
        self.store.community.pop(community_collection_id, None)

    def _vote_index(self, community_collection_id: str, user_id: str) -> int | None:
        for index, vote in enumerate(self.store.votes):
            if (vote["community_collection_id"], vote["user_id"]) == (
                community_collection_id,
                user_id,
            ):
                return index
        return None

    async def has_vote(self, community_collection_id: str, user_id: str) -> bool:
        return self._vote_index(community_collection_id, user_id) is not None

    async def add_vote(self, community_collection_id: str, user_id: str, value: int) -> None:
        if await self.has_vote(community_collection_id, user_id):
            raise RuntimeError("duplicate vote (uq_vote_collection_user)")
        self.store.votes.append(
            {
                "id": self.store.new_id("vote"),
                "community_collection_id": community_collection_id,
                "user_id": user_id,
                "value": value,
            }
        )

    async def remove_vote(self, community_collection_id: str, user_id: str) -> None:
        index = self._vote_index(community_collection_id, user_id)
        if index is not None:
            del self.store.votes[index]

    async def vote_totals(self, community_collection_id: str) -> tuple[int, int]:
        values = [
            v["value"]
            for v in self.store.votes
            if v["community_collection_id"] == community_collection_id
        ]
        return sum(1 for v in values if v > 0), sum(values)

    async def has_report(self, community_collection_id: str, reporter_id: str) -> bool:
        return any(
            r["community_collection_id"] == community_collection_id
            and r["reporter_id"] == reporter_id
            for r in self.store.reports
        )

    async def create_report(
        self,
        community_collection_id: str,
        reporter_id: str,
        reason: str,
        details: str | None,
    ) -> ReportResult:
        row = {
            "id": self.store.new_id("rep"),
            "community_collection_id": community_collection_id,
            "reporter_id": reporter_id,
            "reason": reason,
            "details": details,
            "status": "pending",
        }
        self.store.reports.append(row)
        return ReportResult(id=row["id"], status=row["status"])


class FakeRecommendedCollectionRepository:
    def __init__(self, store: InMemoryStore) -> None:
        self.store = store
        self.fail_on_item: str | None = None

    async def get_by_id(self, recommended_collection_id: str) -> RecommendedCollectionResult | None:
        row = self.store.recommended.get(recommended_collection_id)
        if row is None:
            return None
        return RecommendedCollectionResult(
            id=row["id"],
            name=row["name"],
            description=row["description"],
            category=row["category"],
            template=row["template"],
            custom_field_definitions=copy.deepcopy(row["custom_field_definitions"]),
            cover_image=row["cover_image"],
            cover_image_fit=row["cover_image_fit"],
            tags=list(row["tags"]),
            is_public=row["is_public"],
            created_at=row["created_at"],
            items=[_catalog_item_result(i) for i in self.store.recommended_items_of(row["id"])],
            updated_at=row["updated_at"],
        )

    async def get_item_ids(self, recommended_collection_id: str) -> set[str]:
        return {i["id"] for i in self.store.recommended_items_of(recommended_collection_id)}

    async def update_item_images(self, updates: Sequence[ImageUpdate]) -> list[CatalogItemResult]:
        results = []
        for update in updates:
            if update.item_id == self.fail_on_item:
                raise RuntimeError(f"write failed for {update.item_id}")
            row = self.store.recommended_items[update.item_id]
            row["image"] = update.image
            results.append(_catalog_item_result(row))
        return results

    async def exists_with_name(self, name: str) -> bool:
        return any(r["name"] == name for r in self.store.recommended.values())

    async def create_with_items(self, draft: CatalogDraft) -> RecommendedCollectionResult:
        rec_id = self.store.add_recommended(
            draft.name,
            **{f: copy.deepcopy(getattr(draft, f)) for f in _COLLECTION_FIELDS if f != "name"},
            is_public=draft.is_public,
        )
        for item in draft.items:
            row = _draft_item_row(self.store, "ritem", rec_id, item)
            self.store.recommended_items[row["id"]] = row
        return await self.get_by_id(rec_id)


class FakeFolderRepository:
    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    @staticmethod
    def _result(row: dict[str, Any]) -> FolderResult:
        return FolderResult(
            id=row["id"],
            user_id=row["user_id"],
            name=row["name"],
            parent_id=row["parent_id"],
            created_at=row["created_at"],
        )

    async def get_by_id_and_user(self, folder_id: str, user_id: str) -> FolderResult | None:
        row = self.store.folders.get(folder_id)
        if row is None or row["user_id"] != user_id:
            return None
        return self._result(row)

    async def list_by_user(self, user_id: str) -> list[FolderResult]:
        rows = [f for f in self.store.folders.values() if f["user_id"] == user_id]
        return [self._result(r) for r in sorted(rows, key=lambda r: r["name"])]

    async def create(self, user_id: str, name: str, parent_id: str | None) -> FolderResult:
        folder_id = self.store.add_folder(user_id, name, parent_id)
        return self._result(self.store.folders[folder_id])

    async def update_fields(self, folder_id: str, values: dict[str, Any]) -> FolderResult:
        self.store.folders[folder_id].update(values)
        return self._result(self.store.folders[folder_id])

    async def reparent_children(self, folder_id: str, new_parent_id: str | None) -> int:
        count = 0
        for row in self.store.folders.values():
            if row["parent_id"] == folder_id:
                row["parent_id"] = new_parent_id
                count += 1
        return count

    async def delete(self, folder_id: str) -> None:
        del self.store.folders[folder_id]


class FakeCollectionRepositoryScope:
    """Stands in for a repository on its own session; counts opens and closes."""

    def __init__(self, store: InMemoryStore) -> None:
        self.repo = FakeCollectionRepository(store)
        self.opened = 0
        self.closed = 0

    @asynccontextmanager
    async def __call__(self) -> AsyncIterator[FakeCollectionRepository]:
        self.opened += 1
        try:
            yield self.repo
        finally:
            self.closed += 1


class FakeUserStatusCache:
    def __init__(self) -> None:
        self.invalidated: list[str] = []

    async def get_status(self, user_id: str) -> UserStatus | None:
        return None

    async def invalidate(self, user_id: str) -> None:
        self.invalidated.append(user_id)


@dataclass
class FakeWorld:
    """Store plus one fake per port, wired the way the composition root wires real ones."""

    store: InMemoryStore
    uow: FakeUnitOfWork
    users: FakeUserRepository
    stats: FakeStatsRepository
    collections: FakeCollectionRepository
    items: FakeItemRepository
    community: FakeCommunityCollectionRepository
    recommended: FakeRecommendedCollectionRepository
    folders: FakeFolderRepository
    collection_scope: FakeCollectionRepositoryScope

    @classmethod
    def build(cls) -> FakeWorld:
        store = InMemoryStore()
        return cls(
            store=store,
            uow=FakeUnitOfWork(store),
            users=FakeUserRepository(store),
            stats=FakeStatsRepository(store),
            collections=FakeCollectionRepository(store),
            items=FakeItemRepository(store),
            community=FakeCommunityCollectionRepository(store),
            recommended=FakeRecommendedCollectionRepository(store),
            folders=FakeFolderRepository(store),
            collection_scope=FakeCollectionRepositoryScope(store),
        )
