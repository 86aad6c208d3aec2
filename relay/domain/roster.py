"""Pending NAMES request counter."""


class PendingRosterRequests:
    """Counts NAMES requests sent on behalf of Slack users.

    IRC also sends NAMES replies on its own (every channel join), so a reply
    is only forwarded while a request is outstanding. This is a count, not a
    queue: a reply is attributed to whichever request is oldest.
    """

    def __init__(self):
        self._count = 0

    @property
    def count(self) -> int:
        return self._count

    def record_request(self):
        self._count += 1

    def consume(self) -> bool:
        """Take one outstanding request. False when none is pending."""
        if self._count == 0:
            return False
        self._count -= 1
        return True

    def __repr__(self) -> str:
        return f"PendingRosterRequests(count={self._count})"
