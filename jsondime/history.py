# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from . import log


class NavigationHistory(object):
    """Bounded back/forward history of viewed documents.

    Works like browser history: pushing after going back drops the
    forward entries, and the oldest entries are dropped beyond max_items.
    The history is owned by its caller, there is no shared state.
    """

    def __init__(self, max_items=50):
        if max_items < 1:
            raise ValueError("max_items must be positive, got %r" % (max_items,))
        self.max_items = max_items
        self.reset()

    def reset(self):
        self._items = []
        self._index = -1

    def __len__(self):
        return len(self._items)

    @property
    def current(self):
        if self._index < 0:
            return None
        return self._items[self._index]

    @property
    def position(self):
        "One-based position of the current item, 0 when empty."
        return self._index + 1

    @property
    def can_go_back(self):
        return self._index > 0

    @property
    def can_go_forward(self):
        return self._index < len(self._items) - 1

    def push(self, item):
        "Make item the current entry. Returns False if it already was."
        if self._index >= 0 and self._items[self._index] == item:
            return False
        del self._items[self._index + 1:]
        self._items.append(item)
        excess = len(self._items) - self.max_items
        if excess > 0:
            del self._items[:excess]
        self._index = len(self._items) - 1
        return True

    def back(self):
        if not self.can_go_back:
            return None
        self._index -= 1
        log.debug("Navigated back to position %d/%d", self.position, len(self))
        return self._items[self._index]

    def forward(self):
        if not self.can_go_forward:
            return None
        self._index += 1
        log.debug("Navigated forward to position %d/%d", self.position, len(self))
        return self._items[self._index]
