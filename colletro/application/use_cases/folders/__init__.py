"""Folder use cases."""

from colletro.application.use_cases.folders.folder_operations import FolderService

__all__ = ["FolderService"]
