"""
Request builders for the Pocket item endpoints.

Each setter stores its value and returns the builder, so calls chain:

    req = RetrieveRequest().only_state(ItemState.UNREAD).count(10)
"""

from typing import Dict, Iterable, List, Union

from models import Action, ContentType, DetailType, ItemState, SortKind

UNTAGGED = "_untagged_"


class RetrieveRequest:
    """Parameters for /v3/get."""

    def __init__(self):
        self.params: Dict[str, str] = {}

    def sort(self, kind: SortKind) -> "RetrieveRequest":
        self.params["sort"] = SortKind(kind).value
        return self

    def detail_type(self, detail: DetailType) -> "RetrieveRequest":
        self.params["detailType"] = DetailType(detail).value
        return self

    def simple_item_info(self) -> "RetrieveRequest":
        return self.detail_type(DetailType.SIMPLE)

    def complete_item_info(self) -> "RetrieveRequest":
        return self.detail_type(DetailType.COMPLETE)

    def only_content_type(self, kind: ContentType) -> "RetrieveRequest":
        self.params["contentType"] = ContentType(kind).value
        return self

    def only_tag(self, tag: str) -> "RetrieveRequest":
        self.params["tag"] = tag
        return self

    def only_untagged(self) -> "RetrieveRequest":
        self.params["tag"] = UNTAGGED
        return self

    def only_favorited(self) -> "RetrieveRequest":
        self.params["favorite"] = "1"
        return self

    def only_unfavorited(self) -> "RetrieveRequest":
        self.params["favorite"] = "0"
        return self

    def only_state(self, state: ItemState) -> "RetrieveRequest":
        self.params["state"] = ItemState(state).value
        return self

    def count(self, count: int) -> "RetrieveRequest":
        self.params["count"] = str(count)
        return self

    def offset(self, offset: int) -> "RetrieveRequest":
        self.params["offset"] = str(offset)
        return self

    def since(self, timestamp: Union[str, int]) -> "RetrieveRequest":
        """Only items modified after ``timestamp`` (unix seconds)."""
        self.params["since"] = str(timestamp)
        return self

    def only_domain(self, domain: str) -> "RetrieveRequest":
        self.params["domain"] = domain
        return self

    def search(self, key: str) -> "RetrieveRequest":
        self.params["search"] = key
        return self

    def __repr__(self):
        return f"RetrieveRequest({self.params!r})"


class AddRequest:
    """Parameters for /v3/add. Only the url is required."""

    def __init__(self, url: str = ""):
        self.url = url
        self.title = ""
        self.tags: List[str] = []
        self.tweet_id = ""

    def set_url(self, url: str) -> "AddRequest":
        self.url = url
        return self

    def set_title(self, title: str) -> "AddRequest":
        self.title = title
        return self

    def add_tags(self, tags: Iterable[str]) -> "AddRequest":
        self.tags.extend(tags)
        return self

    def add_tag(self, tag: str) -> "AddRequest":
        self.tags.append(tag)
        return self

    def set_tweet_id(self, tweet_id: str) -> "AddRequest":
        self.tweet_id = tweet_id
        return self

    def to_params(self) -> Dict[str, str]:
        """Optional fields are left out when empty."""
        params = {"url": self.url}
        if self.title:
            params["title"] = self.title
        if self.tags:
            params["tags"] = ",".join(self.tags)
        if self.tweet_id:
            params["tweet_id"] = self.tweet_id
        return params


class ModifyRequest:
    """Ordered batch of actions for /v3/send."""

    def __init__(self, actions: Iterable[Action] = ()):
        self._actions: List[Action] = list(actions)

    def add_action(self, action: Action) -> "ModifyRequest":
        self._actions.append(action)
        return self

    @property
    def actions(self) -> List[Action]:
        return list(self._actions)

    def to_list(self) -> List[Dict[str, str]]:
        return [action.to_dict() for action in self._actions]

    def __len__(self):
        return len(self._actions)
