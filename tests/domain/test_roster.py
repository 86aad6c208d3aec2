"""Tests for domain/roster.py."""

from relay.domain.roster import PendingRosterRequests


class TestPendingRosterRequests:
    def test_starts_at_zero(self):
        assert PendingRosterRequests().count == 0

    def test_record_then_consume(self):
        roster = PendingRosterRequests()
        roster.record_request()
        assert roster.count == 1
        assert roster.consume() is True
        assert roster.count == 0

    def test_consume_when_empty(self):
        roster = PendingRosterRequests()
        assert roster.consume() is False
        assert roster.count == 0

    def test_never_negative(self):
        roster = PendingRosterRequests()
        roster.record_request()
        results = [roster.consume() for _ in range(3)]
        assert results == [True, False, False]
        assert roster.count == 0

    def test_counts_multiple_requests(self):
        roster = PendingRosterRequests()
        roster.record_request()
        roster.record_request()
        assert roster.count == 2
        roster.consume()
        assert roster.count == 1
