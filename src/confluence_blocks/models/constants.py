"""
Constants and default values for block inputs and outputs.

This module centralizes the defaults and enumerations declared by the
block input schemas, so that the schema, the handler and the tests share a
single source of truth.
"""

from typing import Literal

#
# Query defaults
#
DEFAULT_LIMIT = 25
MAX_LIMIT = 250

#
# Body representations
#
DEFAULT_BODY_REPRESENTATION = "storage"

PageBodyRepresentation = Literal["storage", "atlas_doc_format", "wiki"]
CommentBodyRepresentation = Literal["storage", "atlas_doc_format"]
ListBodyFormat = Literal["storage", "atlas_doc_format"]
PageBodyFormat = Literal[
    "storage", "atlas_doc_format", "view", "editor", "anonymous_export_view"
]

#
# Statuses
#
DEFAULT_PAGE_STATUS = "current"

PageStatus = Literal["current", "draft"]
PageListStatus = Literal["current", "draft", "archived"]
SpaceStatus = Literal["current", "archived"]
SpaceType = Literal["global", "personal"]

#
# Sort orders
#
PageSort = Literal["id", "title", "created-date", "modified-date"]
SpaceSort = Literal[
    "id", "key", "name", "type", "status", "created-date", "modified-date"
]
VersionSort = Literal["modified-date", "version"]

#
# Delete messages
#
PAGE_PURGED_MESSAGE = "Page has been permanently deleted"
PAGE_TRASHED_MESSAGE = "Page has been moved to trash"

#
# App status
#
STATUS_READY = "ready"
STATUS_FAILED = "failed"
AUTH_FAILED_DESCRIPTION = "Authentication error, see logs"
