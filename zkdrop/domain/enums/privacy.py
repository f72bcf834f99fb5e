"""User privacy enums carried by settings and profile endpoints."""

from enum import IntEnum


class UserVisibilityLevel(IntEnum):
    """Who can find the user through search and public profile lookup."""

    NONE = 0
    CONTACTS = 1
    AUTHENTICATED = 2
    EVERYONE = 3


class UserItemTransferPermission(IntEnum):
    """Who may send messages or files to the user."""

    NONE = 0
    EXCLUSIVE_CONTACTS = 1
    MUTUAL_CONTACTS = 2
    AUTHENTICATED_USERS = 3
    EVERYONE = 4
