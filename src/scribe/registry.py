"""In-memory registry of validated post-processing actions."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional, Tuple

from .exceptions import ActionNotFoundError
from .models import PostAction


class ActionRegistry:
    """Ordered collection of actions, queried by id.

    The registry is created empty and filled by ``config.load_config_actions``
    after a successful validation. Its contents are only ever swapped as a
    whole.

    Example:
        >>> registry = ActionRegistry()
        >>> api_key = config.load_config_actions("config.yml", registry)
        >>> action = registry.find("openai-meeting-summary")
    """

    def __init__(self, actions: Optional[Iterable[PostAction]] = None) -> None:
        self._actions: Tuple[PostAction, ...] = tuple(actions or ())

    def replace(self, actions: Iterable[PostAction]) -> None:
        """Swap the entire action sequence."""
        self._actions = tuple(actions)

    def find(self, action_id: str) -> Optional[PostAction]:
        """Return the first action whose id equals ``action_id``, or None."""
        for action in self._actions:
            if action.id == action_id:
                return action
        return None

    def get(self, action_id: str) -> PostAction:
        """Like ``find`` but raises ActionNotFoundError when absent."""
        action = self.find(action_id)
        if action is None:
            raise ActionNotFoundError(action_id)
        return action

    def list(self) -> Tuple[PostAction, ...]:
        """Return the current actions in declaration order."""
        return self._actions

    def __len__(self) -> int:
        return len(self._actions)

    def __iter__(self) -> Iterator[PostAction]:
        return iter(self._actions)
