"""Admin endpoints: bulk covers, bulk item images, user verification."""

from httpx import AsyncClient

from colletro.api.v1.dependencies import get_cover_generator
from colletro.main import app
from tests.conftest import USER_ID
from tests.fakes import FakeWorld


class StubGenerator:
    async def generate(self, collection_id: str, name: str, category: str | None) -> str:
        if name == "Broken":
            raise OSError("cannot write")
        return f"/collection-covers/cover-{collection_id}.svg"


async def test_generate_covers_reports_counts(
    client: AsyncClient, wired: FakeWorld, as_admin: str
) -> None:
    app.dependency_overrides[get_cover_generator] = StubGenerator
    for name in ("Coins", "Broken", "Stamps"):
        wired.store.add_collection(USER_ID, name)

    response = await client.post("/api/v1/admin/generate-covers")

    assert response.status_code == 200
    assert response.json() == {
        "total": 3,
        "generated": 2,
        "updated": 2,
        "failed": 1,
        "errors": ["Broken: cannot write"],
    }


async def test_bulk_item_images(client: AsyncClient, wired: FakeWorld, as_admin: str) -> None:
    rec_id = wired.store.add_recommended("Funko Pop")
    item_id = wired.store.add_recommended_item(rec_id, "Groot", number=49)

    response = await client.post(
        f"/api/v1/recommended-collections/{rec_id}/items/bulk-images",
        json={"updates": [{"item_id": item_id, "image": "/img/groot.png"}]},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["updated"] == 1
    assert body["items"][0]["image"] == "/img/groot.png"


async def test_bulk_item_images_with_foreign_id_returns_400(
    client: AsyncClient, wired: FakeWorld, as_admin: str
) -> None:
    rec_id = wired.store.add_recommended("Funko Pop")
    item_id = wired.store.add_recommended_item(rec_id, "Groot")

    response = await client.post(
        f"/api/v1/recommended-collections/{rec_id}/items/bulk-images",
        json={
            "updates": [
                {"item_id": item_id, "image": "/img/groot.png"},
                {"item_id": "elsewhere", "image": "/img/x.png"},
            ]
        },
    )

    assert response.status_code == 400
    assert wired.store.recommended_items[item_id]["image"] is None


async def test_bulk_item_images_empty_updates_returns_422(
    client: AsyncClient, wired: FakeWorld, as_admin: str
) -> None:
    response = await client.post(
        "/api/v1/recommended-collections/rec/items/bulk-images", json={"updates": []}
    )
    assert response.status_code == 422


async def test_verify_rejects_non_boolean(
    client: AsyncClient, wired: FakeWorld, as_admin: str
) -> None:
    response = await client.patch(
        f"/api/v1/admin/users/{USER_ID}/verify", json={"is_verified": "yes"}
    )
    assert response.status_code == 400
    assert response.json()["details"] == {"field": "is_verified"}


async def test_verify_unknown_user_returns_404(
    client: AsyncClient, wired: FakeWorld, as_admin: str
) -> None:
    response = await client.patch("/api/v1/admin/users/ghost/verify", json={"is_verified": True})
    assert response.status_code == 404


async def test_convert_collection_to_recommended(
    client: AsyncClient, wired: FakeWorld, as_admin: str
) -> None:
    collection_id = wired.store.add_collection(USER_ID, "Matchbox Cars", category="Toys")
    wired.store.add_item(collection_id, "Mini Cooper", number=7, is_owned=True)

    created = await client.post(
        f"/api/v1/admin/collections/{collection_id}/convert-to-recommended"
    )
    assert created.status_code == 201
    body = created.json()
    assert (body["name"], body["is_public"]) == ("Matchbox Cars", True)
    assert [(i["name"], i["number"]) for i in body["items"]] == [("Mini Cooper", 7)]
    assert body["id"] in wired.store.recommended

    again = await client.post(
        f"/api/v1/admin/collections/{collection_id}/convert-to-recommended"
    )
    assert again.status_code == 400


async def test_convert_community_collection_to_recommended(
    client: AsyncClient, wired: FakeWorld, as_admin: str
) -> None:
    community_id = wired.store.add_community(USER_ID, "Sneakers")

    created = await client.post(
        f"/api/v1/admin/community-collections/{community_id}/convert-to-recommended"
    )
    missing = await client.post(
        "/api/v1/admin/community-collections/nope/convert-to-recommended"
    )

    assert created.status_code == 201
    assert created.json()["cover_image_fit"] == "contain"
    assert missing.status_code == 404


async def test_convert_requires_admin(client: AsyncClient, wired: FakeWorld, as_user: str) -> None:
    collection_id = wired.store.add_collection(USER_ID, "Matchbox Cars")
    response = await client.post(
        f"/api/v1/admin/collections/{collection_id}/convert-to-recommended"
    )
    assert response.status_code == 403
    assert wired.store.recommended == {}
