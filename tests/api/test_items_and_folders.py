"""Item batch and folder endpoints over the in-memory world."""

from httpx import AsyncClient

from tests.conftest import ADMIN_ID, USER_ID
from tests.fakes import FakeWorld


async def test_import_items_skips_duplicates(
    client: AsyncClient, wired: FakeWorld, as_user: str
) -> None:
    collection_id = wired.store.add_collection(USER_ID, "Records")

    response = await client.post(
        f"/api/v1/collections/{collection_id}/items",
        json={
            "items": [
                {"name": "Abbey Road", "number": 1},
                {"name": "Abbey Road", "number": 1},
                {"name": "Revolver", "number": 2, "is_owned": True},
            ]
        },
    )

    assert response.status_code == 201
    body = response.json()
    assert (body["created"], body["skipped"]) == (2, 1)
    assert "first_collection" in body["newly_unlocked_achievements"]


async def test_import_empty_list_returns_400(
    client: AsyncClient, wired: FakeWorld, as_user: str
) -> None:
    collection_id = wired.store.add_collection(USER_ID, "Records")
    response = await client.post(f"/api/v1/collections/{collection_id}/items", json={"items": []})
    assert response.status_code == 400
    assert response.json()["error"] == "VALIDATION_ERROR"


async def test_import_malformed_body_returns_422(
    client: AsyncClient, wired: FakeWorld, as_user: str
) -> None:
    collection_id = wired.store.add_collection(USER_ID, "Records")
    response = await client.post(
        f"/api/v1/collections/{collection_id}/items", json={"items": [{"number": 3}]}
    )
    assert response.status_code == 422


async def test_bulk_ownership_and_foreign_item(
    client: AsyncClient, wired: FakeWorld, as_user: str
) -> None:
    mine = wired.store.add_collection(USER_ID, "Mine")
    theirs = wired.store.add_collection(ADMIN_ID, "Theirs")
    my_item = wired.store.add_item(mine, "A")
    their_item = wired.store.add_item(theirs, "B")

    ok = await client.patch("/api/v1/items/bulk", json={"item_ids": [my_item], "is_owned": True})
    assert ok.status_code == 200
    assert ok.json()["affected"] == 1

    forbidden = await client.post(
        "/api/v1/items/bulk-delete", json={"item_ids": [my_item, their_item]}
    )
    assert forbidden.status_code == 403
    assert my_item in wired.store.items


async def test_folder_lifecycle(client: AsyncClient, wired: FakeWorld, as_user: str) -> None:
    created = await client.post("/api/v1/folders", json={"name": "Media"})
    assert created.status_code == 201
    parent_id = created.json()["id"]

    child = await client.post("/api/v1/folders", json={"name": "Films", "parent_id": parent_id})
    child_id = child.json()["id"]

    renamed = await client.patch(f"/api/v1/folders/{child_id}", json={"name": "Movies"})
    assert renamed.json()["name"] == "Movies"

    cycle = await client.post(f"/api/v1/folders/{parent_id}/move", json={"parent_id": child_id})
    assert cycle.status_code == 400
    assert cycle.json()["details"]["folder_id"] == parent_id

    listing = await client.get("/api/v1/folders")
    assert [f["name"] for f in listing.json()] == ["Media", "Movies"]

    deleted = await client.delete(f"/api/v1/folders/{parent_id}")
    assert deleted.status_code == 204
    assert wired.store.folders[child_id]["parent_id"] is None


async def test_folder_blank_name_returns_422(
    client: AsyncClient, wired: FakeWorld, as_user: str
) -> None:
    response = await client.post("/api/v1/folders", json={"name": ""})
    assert response.status_code == 422
