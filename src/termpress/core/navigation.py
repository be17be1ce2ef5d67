"""Navigation locations and the transition table.

// [LAW:one-source-of-truth] The class IS the location kind; no string tags.
// [LAW:single-enforcer] transition() is the only place the graph is encoded.

Root -p-> List -enter-> Detail(path) -b-> Root. List -b-> Root. q quits anywhere.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from pathlib import PurePosixPath


@dataclass(frozen=True)
class Location(ABC):
    """Base class for where the session is."""

    @property
    @abstractmethod
    def label(self) -> str:
        """Path shown after the site name in the header."""


@dataclass(frozen=True)
class RootLocation(Location):
    @property
    def label(self) -> str:
        return "/"


@dataclass(frozen=True)
class ListLocation(Location):
    @property
    def label(self) -> str:
        return "/posts"


@dataclass(frozen=True)
class DetailLocation(Location):
    """A document taken from the list; path is store-relative."""

    path: str

    @property
    def label(self) -> str:
        return "/" + str(PurePosixPath(self.path).with_suffix(""))


ROOT = RootLocation()
LIST = ListLocation()


class Action(Enum):
    ENTER_LIST = "enter_list"
    SELECT = "select"
    BACK = "back"
    QUIT = "quit"


# [LAW:one-source-of-truth] Key -> navigation action. Unlisted keys go to the body.
NAV_KEYMAP: dict[str, Action] = {
    "p": Action.ENTER_LIST,
    "enter": Action.SELECT,
    "b": Action.BACK,
    "q": Action.QUIT,
    "ctrl+c": Action.QUIT,
}


def action_for_key(key: str) -> Action | None:
    return NAV_KEYMAP.get(key)


def transition(location: Location, action: Action, selected_path: str | None = None) -> Location | None:
    """Next location for action at location, or None when the action does nothing there.

    QUIT is not a location change; callers handle it before asking.
    """
    if action is Action.ENTER_LIST and isinstance(location, RootLocation):
        return LIST
    if action is Action.SELECT and isinstance(location, ListLocation):
        return DetailLocation(selected_path) if selected_path is not None else None
    if action is Action.BACK and not isinstance(location, RootLocation):
        return ROOT
    return None
