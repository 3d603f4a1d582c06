"""Admin use cases: bulk covers, bulk item images, catalog conversion, user verification."""

from colletro.application.use_cases.admin.bulk_covers import BulkCoverGenerationService
from colletro.application.use_cases.admin.bulk_item_images import BulkItemImageService
from colletro.application.use_cases.admin.convert import (
    ConvertToRecommendedService,
    build_catalog_draft,
)
from colletro.application.use_cases.admin.user_verification import UserVerificationService

__all__ = [
    "BulkCoverGenerationService",
    "BulkItemImageService",
    "ConvertToRecommendedService",
    "UserVerificationService",
    "build_catalog_draft",
]
