"""Centralized input routing.

Transforms raw pygame events into high-level *actions* depending on the
active state, and samples held direction keys into an ``InputState``.

Design:
- A dict from state name -> list of rules processed in declaration
  order. Each rule is a function(event) -> action|None; the first match
  adds its action to the output list. Duplicate actions in one frame are
  collapsed preserving order of first occurrence.
- KEYDOWN rules give "pressed this frame" semantics (confirm, cancel);
  continuous movement is read from the held-key state instead.
"""

from __future__ import annotations

from typing import Callable, Dict, Iterable, List

import pygame

from rocket_dodge.entities import InputState
from rocket_dodge.settings import settings

Action = str
Rule = Callable[[pygame.event.Event], Action | None]
KeyDown = Callable[[int], bool]

MOVEMENT_ACTIONS = ("up", "down", "left", "right")


def _key_rule(key: int, action: Action, event_type=pygame.KEYDOWN) -> Rule:
    def _r(e: pygame.event.Event):
        if e.type == event_type and getattr(e, "key", None) == key:
            return action
        return None

    return _r


class InputRouter:
    """Maps pygame events to semantic actions for the active state."""

    def __init__(self) -> None:
        self._rules: Dict[str, List[Rule]] = {}
        self._register_default_rules()

    def _register_default_rules(self) -> None:
        for state_name, binds in settings.key_bindings.items():
            rules: List[Rule] = []
            for act, keys in binds.items():
                if act in MOVEMENT_ACTIONS:
                    continue
                rules.extend(_key_rule(k, act) for k in keys)
            self._rules[state_name] = rules

    def process(self, events: Iterable[pygame.event.Event], state_name: str) -> List[Action]:
        rules = self._rules.get(state_name, [])
        actions: List[Action] = []
        for e in events:
            for rule in rules:
                a = rule(e)
                if a:
                    if a not in actions:  # de-duplicate per frame
                        actions.append(a)
                    break  # stop at first rule match for this event
        return actions

    def held(self, key_down: KeyDown) -> InputState:
        """Sample the bound direction keys through ``key_down(code)``."""
        keys = settings.movement_keys()
        return InputState(**{d: any(key_down(k) for k in keys[d]) for d in MOVEMENT_ACTIONS})


__all__ = ["InputRouter", "Action"]
