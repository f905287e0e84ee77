"""Subscribe messages and helpers for building subscription responses."""

from __future__ import annotations

import copy
import enum
from dataclasses import dataclass, field

from telemkit.value import TypedValue

__all__ = [
    "PathElem",
    "Path",
    "Update",
    "Notification",
    "SubscriptionMode",
    "Subscription",
    "SubscriptionList",
    "PollRequest",
    "SubscribeRequest",
    "SubscribeResponse",
    "MessageError",
    "make_subscribe_response",
    "is_target_delete",
]


class MessageError(ValueError):
    """Raised when a message is not of the kind an operation requires."""


@dataclass
class PathElem:
    """One element of a path: a name with optional list keys."""

    name: str = ""
    key: dict[str, str] = field(default_factory=dict)


@dataclass
class Path:
    """A path into a target's data tree.

    ``elem`` is the structured form; ``element`` is the older plain-string
    form, used only when ``elem`` is empty.
    """

    target: str = ""
    origin: str = ""
    elem: list[PathElem] = field(default_factory=list)
    element: list[str] = field(default_factory=list)

    def to_strings(self, include_target: bool = False) -> list[str]:
        """Return the path as a list of strings.

        With include_target, the target (and origin, when set) come first.
        Keys of an element follow its name, ordered by key name.
        """
        parts: list[str] = []
        if include_target:
            parts.append(self.target)
            if self.origin:
                parts.append(self.origin)
        if self.elem:
            for e in self.elem:
                parts.append(e.name)
                parts.extend(e.key[k] for k in sorted(e.key))
        else:
            parts.extend(self.element)
        return parts


@dataclass
class Update:
    """A value for a path, with a count of coalesced duplicates."""

    path: Path | None = None
    val: TypedValue | None = None
    duplicates: int = 0


@dataclass
class Notification:
    """A set of updates and deletes sharing a timestamp and prefix."""

    timestamp: int = 0
    prefix: Path | None = None
    update: list[Update] = field(default_factory=list)
    delete: list[Path] = field(default_factory=list)
    atomic: bool = False


class SubscriptionMode(enum.Enum):
    """How a subscription list delivers its results."""

    STREAM = 0
    ONCE = 1
    POLL = 2


@dataclass
class Subscription:
    """A single path to subscribe to."""

    path: Path | None = None


@dataclass
class SubscriptionList:
    """The subscriptions of one Subscribe request."""

    prefix: Path | None = None
    subscription: list[Subscription] = field(default_factory=list)
    mode: SubscriptionMode = SubscriptionMode.STREAM
    updates_only: bool = False


@dataclass
class PollRequest:
    """A trigger to repeat a polling subscription."""


@dataclass
class SubscribeRequest:
    """A client message: a subscription list or a poll trigger."""

    subscribe: SubscriptionList | None = None
    poll: PollRequest | None = None


@dataclass
class SubscribeResponse:
    """A server message: a notification or a sync marker."""

    update: Notification | None = None
    sync_response: bool = False

    @classmethod
    def sync(cls) -> SubscribeResponse:
        """Return the response marking that all initial results were sent."""
        return cls(sync_response=True)


def make_subscribe_response(
    notification: Notification, dup: int, report_duplicates: bool = True
) -> SubscribeResponse:
    """Wrap a notification in a SubscribeResponse.

    When dup is positive and duplicates are reported, the notification is
    copied and the first update carries the duplicate count; the original,
    which may be shared among clients, is left unchanged.
    """
    if not isinstance(notification, Notification):
        raise MessageError(f"invalid notification type: {notification!r}")
    if report_duplicates and dup > 0 and notification.update:
        notification = copy.deepcopy(notification)
        notification.update[0].duplicates = dup
    return SubscribeResponse(update=notification)


def is_target_delete(notification: object) -> bool:
    """Report whether a notification deletes an entire target."""
    if not isinstance(notification, Notification) or len(notification.delete) != 1:
        return False
    prefix = notification.prefix
    origin = prefix.origin if prefix is not None else ""
    parts = prefix.to_strings(False) if prefix is not None else []
    parts += notification.delete[0].to_strings(False)
    return origin == "" and parts == ["*"]