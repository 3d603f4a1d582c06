"""Response builders shared by endpoint modules."""

from colletro.application.dtos.collection import CloneResult
from colletro.schemas.collection import AddToAccountResponse, CollectionResponse


def add_to_account_response(result: CloneResult) -> AddToAccountResponse:
    """Flatten the new collection and attach the achievements it unlocked."""
    collection = CollectionResponse.model_validate(result.collection)
    return AddToAccountResponse(
        **collection.model_dump(),
        newly_unlocked_achievements=result.newly_unlocked,
    )
