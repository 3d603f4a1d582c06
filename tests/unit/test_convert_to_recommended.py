"""Admin conversion of personal and community collections into the recommended catalog."""

import pytest

from colletro.application.use_cases.admin import ConvertToRecommendedService
from colletro.domain.exceptions import ResourceNotFoundException, ValidationException
from tests.conftest import USER_ID
from tests.fakes import FakeWorld

FIELD_SCHEMA = [{"key": "grade", "label": "Grade", "type": "text"}]


def _service(world: FakeWorld) -> ConvertToRecommendedService:
    return ConvertToRecommendedService(
        world.collections, world.community, world.recommended, world.uow
    )


async def test_personal_collection_becomes_public_catalog_copy(world: FakeWorld) -> None:
    collection_id = world.store.add_collection(
        USER_ID,
        "Silver Eagles",
        category="Coins",
        custom_field_definitions=FIELD_SCHEMA,
        tags=["bullion"],
        cover_image_fit="cover",
    )
    world.store.add_item(
        collection_id, "1986", number=1986, is_owned=True, custom_fields={"grade": "MS70"}
    )

    recommended = await _service(world).from_collection(collection_id)

    assert recommended.name == "Silver Eagles"
    assert recommended.is_public is True
    assert recommended.custom_field_definitions == FIELD_SCHEMA
    assert (recommended.tags, recommended.cover_image_fit) == (["bullion"], "cover")
    [item] = recommended.items
    assert (item.name, item.number, item.custom_fields) == ("1986", 1986, {"grade": "MS70"})
    # The source collection is left alone.
    assert world.store.collections[collection_id]["recommended_collection_id"] is None


async def test_community_collection_defaults_cover_fit_to_contain(world: FakeWorld) -> None:
    world.store.add_user("sharer")
    community_id = world.store.add_community("sharer", "Tarot Decks")
    world.store.add_community_item(community_id, "Rider-Waite", number=1)

    recommended = await _service(world).from_community(community_id)

    assert recommended.cover_image_fit == "contain"
    assert [i.name for i in recommended.items] == ["Rider-Waite"]


async def test_existing_recommended_name_is_rejected(world: FakeWorld) -> None:
    world.store.add_recommended("Silver Eagles")
    collection_id = world.store.add_collection(USER_ID, "Silver Eagles")
    with pytest.raises(ValidationException):
        await _service(world).from_collection(collection_id)
    assert len(world.store.recommended) == 1


async def test_unknown_sources_are_not_found(world: FakeWorld) -> None:
    service = _service(world)
    with pytest.raises(ResourceNotFoundException):
        await service.from_collection("missing")
    with pytest.raises(ResourceNotFoundException):
        await service.from_community("missing")
