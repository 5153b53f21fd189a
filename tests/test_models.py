"""
Peacekeeper - Global Ban Model Tests
====================================

Tests for user id parsing and BanRequest construction.
"""

import dataclasses

import pytest

from peacekeeper.services.global_ban import BanRequest, parse_user_id
from peacekeeper.services.global_ban.models import BanOutcome, BanSummary, NotificationOutcome, NotificationStatus

from conftest import make_unknown_user_error


class TestParseUserId:

    @pytest.mark.parametrize("value,expected", [
        ("123456789012345678", 123456789012345678),
        ("  123456789012345678\n", 123456789012345678),
        ("<@123456789012345678>", 123456789012345678),
        ("<@!123456789012345678>", 123456789012345678),
        ("18446744073709551615", 2 ** 64 - 1),
    ])
    def test_valid_ids(self, value, expected):
        assert parse_user_id(value) == expected

    @pytest.mark.parametrize("value", [
        None,
        "",
        "   ",
        "abc",
        "-5",
        "0",
        "12.5",
        "18446744073709551616",
        "<#123456789012345678>",
    ])
    def test_invalid_ids(self, value):
        assert parse_user_id(value) is None


class TestBanRequest:

    def test_from_options(self, mock_executor):
        request = BanRequest.from_options(mock_executor, "123456789012345678", "  raiding ")

        assert request.executor is mock_executor
        assert request.target_user_id == 123456789012345678
        assert request.reason == "raiding"

    @pytest.mark.parametrize("reason", [None, "", "   "])
    def test_missing_reason_uses_placeholder(self, mock_executor, reason):
        request = BanRequest.from_options(mock_executor, "1", reason)

        assert request.reason == "<No Reason Specified>"

    def test_request_is_immutable(self, mock_executor):
        request = BanRequest.from_options(mock_executor, "1")

        with pytest.raises(dataclasses.FrozenInstanceError):
            request.reason = "changed"


class TestBanSummary:

    def test_counts(self, mock_target_user):
        outcomes = [
            BanOutcome(1, "A", True, notification=NotificationOutcome(NotificationStatus.SENT, channel_id=10)),
            BanOutcome(2, "B", True, notification=NotificationOutcome(NotificationStatus.SKIPPED)),
            BanOutcome(3, "C", False, error=make_unknown_user_error()),
        ]
        summary = BanSummary(user=mock_target_user, reason="spam", outcomes=outcomes)

        assert summary.banned_count == 2
        assert summary.notified_count == 1
        assert summary.failures == [outcomes[2]]
        assert outcomes[2].unknown_user is True
        assert outcomes[0].unknown_user is False
        assert outcomes[2].notification.status is NotificationStatus.NOT_ATTEMPTED
