from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, Any


class SortKind(str, Enum):
    NEWEST = "newest"
    OLDEST = "oldest"
    TITLE = "title"
    SITE = "site"


class ContentType(str, Enum):
    ARTICLE = "article"
    VIDEO = "video"
    IMAGE = "image"


class ItemState(str, Enum):
    UNREAD = "unread"
    ARCHIVE = "archive"
    ALL = "all"


class DetailType(str, Enum):
    SIMPLE = "simple"
    COMPLETE = "complete"


class ActionKind(str, Enum):
    # basic actions
    ADD = "add"
    ARCHIVE = "archive"
    READD = "readd"
    FAVORITE = "favorite"
    UNFAVORITE = "unfavorite"
    DELETE = "delete"

    # tagging actions
    TAGS_ADD = "tags_add"
    TAGS_REMOVE = "tags_remove"
    TAGS_REPLACE = "tags_replace"
    TAGS_CLEAR = "tags_clear"
    TAG_RENAME = "tag_rename"


@dataclass
class Action:
    """One mutation applied to a saved item by a batched modify call."""

    kind: ActionKind
    params: Dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Wire form: the kind under "action" plus the action's own params."""
        data = {"action": ActionKind(self.kind).value}
        data.update(self.params)
        return data

    @classmethod
    def add(cls, url: str) -> "Action":
        return cls(ActionKind.ADD, {"url": url})

    @classmethod
    def archive(cls, item_id: str) -> "Action":
        return cls(ActionKind.ARCHIVE, {"item_id": str(item_id)})

    @classmethod
    def readd(cls, item_id: str) -> "Action":
        return cls(ActionKind.READD, {"item_id": str(item_id)})

    @classmethod
    def favorite(cls, item_id: str) -> "Action":
        return cls(ActionKind.FAVORITE, {"item_id": str(item_id)})

    @classmethod
    def unfavorite(cls, item_id: str) -> "Action":
        return cls(ActionKind.UNFAVORITE, {"item_id": str(item_id)})

    @classmethod
    def delete(cls, item_id: str) -> "Action":
        return cls(ActionKind.DELETE, {"item_id": str(item_id)})

    @classmethod
    def tags_add(cls, item_id: str, tags: Iterable[str]) -> "Action":
        return cls(ActionKind.TAGS_ADD, {"item_id": str(item_id), "tags": ",".join(tags)})

    @classmethod
    def tags_remove(cls, item_id: str, tags: Iterable[str]) -> "Action":
        return cls(
            ActionKind.TAGS_REMOVE, {"item_id": str(item_id), "tags": ",".join(tags)}
        )

    @classmethod
    def tags_replace(cls, item_id: str, tags: Iterable[str]) -> "Action":
        return cls(
            ActionKind.TAGS_REPLACE, {"item_id": str(item_id), "tags": ",".join(tags)}
        )

    @classmethod
    def tags_clear(cls, item_id: str) -> "Action":
        return cls(ActionKind.TAGS_CLEAR, {"item_id": str(item_id)})

    @classmethod
    def tag_rename(cls, old_tag: str, new_tag: str) -> "Action":
        return cls(ActionKind.TAG_RENAME, {"old_tag": old_tag, "new_tag": new_tag})
