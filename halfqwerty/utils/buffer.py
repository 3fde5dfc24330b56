"""CommitBuffer: characters resolved by the current processing call."""

import logging

import halfqwerty.log  # registers TRACE level and logger.trace()

logger = logging.getLogger(__name__)


class CommitBuffer:
    CAPACITY = 63

    def __init__(self, capacity=CAPACITY):
        self.capacity = capacity
        self._chars = []

    def clear(self):
        self._chars.clear()

    def append(self, ch):
        """Append one character; returns False when the buffer is full."""
        if len(self._chars) >= self.capacity:
            logger.trace("Commit buffer full, dropping %r", ch)  # type: ignore[attr-defined]
            return False
        self._chars.append(ch)
        return True

    @property
    def text(self):
        return "".join(self._chars)

    def __len__(self):
        return len(self._chars)

    def __bool__(self):
        return bool(self._chars)
