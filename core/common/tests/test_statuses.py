from django.test import TestCase
from freezegun import freeze_time

from core.common.exceptions import AuthorizationException, ResourceNotFoundException
from core.common.includes import conversations, memberships, statuses
from core.common.models import MessageStatus, ReadReceipt
from core.common.tests.utils import ChatUsers, create_group_with, send


class PrivateStatusTestCase(ChatUsers, TestCase):
    def setUp(self):
        self.conversation = conversations.resolve_private(self.alice.pk, self.bob.pk)
        self.message = send(self.conversation, self.alice, "ping")

    def test_mark_delivered(self):
        with freeze_time("2024-06-01 10:00:00"):
            message = statuses.mark_delivered(self.message.pk)

        self.assertEqual(message.status, MessageStatus.DELIVERED)
        self.assertEqual(message.delivered_at.isoformat(), "2024-06-01T10:00:00+00:00")

    def test_mark_delivered_twice_keeps_first_timestamp(self):
        with freeze_time("2024-06-01 10:00:00"):
            statuses.mark_delivered(self.message.pk)
        with freeze_time("2024-06-01 11:00:00"):
            message = statuses.mark_delivered(self.message.pk)

        self.assertEqual(message.delivered_at.isoformat(), "2024-06-01T10:00:00+00:00")

    def test_recipient_read_marks_read(self):
        message = statuses.mark_read(self.message.pk, self.bob.pk)

        self.assertEqual(message.status, MessageStatus.READ)
        self.assertIsNotNone(message.read_at)
        self.assertIsNotNone(message.delivered_at)

    def test_read_can_skip_delivered(self):
        message = statuses.mark_read(self.message.pk, self.bob.pk)

        self.assertEqual(message.status, MessageStatus.READ)

    def test_delivered_never_downgrades_read(self):
        statuses.mark_read(self.message.pk, self.bob.pk)

        message = statuses.mark_delivered(self.message.pk)

        self.assertEqual(message.status, MessageStatus.READ)

    def test_sender_reading_own_message_changes_nothing(self):
        message = statuses.mark_read(self.message.pk, self.alice.pk)

        self.assertEqual(message.status, MessageStatus.SENT)
        self.assertFalse(ReadReceipt.objects.exists())

    def test_non_member_cannot_mark_read(self):
        with self.assertRaises(AuthorizationException):
            statuses.mark_read(self.message.pk, self.carol.pk)

    def test_unknown_message(self):
        with self.assertRaises(ResourceNotFoundException):
            statuses.mark_delivered("0b7c9a52-1111-4222-8333-444455556666")

    def test_repeated_read_keeps_one_receipt(self):
        statuses.mark_read(self.message.pk, self.bob.pk)
        statuses.mark_read(self.message.pk, self.bob.pk)

        self.assertEqual(ReadReceipt.objects.filter(message=self.message).count(), 1)


class GroupReadQuorumTestCase(ChatUsers, TestCase):
    def setUp(self):
        self.group = create_group_with(self.alice, self.bob, self.carol)
        self.message = send(self.group, self.alice, "meeting moved")

    def test_read_requires_every_other_member(self):
        message = statuses.mark_read(self.message.pk, self.bob.pk)
        self.assertNotEqual(message.status, MessageStatus.READ)
        self.assertEqual(statuses.read_quorum(message), (1, 2))

        message = statuses.mark_read(self.message.pk, self.carol.pk)
        self.assertEqual(message.status, MessageStatus.READ)
        self.assertEqual(statuses.read_quorum(message), (2, 2))

    def test_delivered_status_is_kept_until_quorum(self):
        statuses.mark_delivered(self.message.pk)

        message = statuses.mark_read(self.message.pk, self.bob.pk)

        self.assertEqual(message.status, MessageStatus.DELIVERED)

    def test_new_member_raises_the_bar(self):
        memberships.add_member(self.group.pk, self.dave.pk)

        statuses.mark_read(self.message.pk, self.bob.pk)
        message = statuses.mark_read(self.message.pk, self.carol.pk)

        self.assertNotEqual(message.status, MessageStatus.READ)
        self.assertEqual(statuses.read_quorum(message), (2, 3))

    def test_quorum_is_recomputed_after_a_member_leaves(self):
        statuses.mark_read(self.message.pk, self.bob.pk)
        memberships.leave_group(self.group.pk, self.carol.pk)

        message = statuses.mark_read(self.message.pk, self.bob.pk)

        self.assertEqual(message.status, MessageStatus.READ)

    def test_receipts_of_former_members_do_not_count(self):
        statuses.mark_read(self.message.pk, self.bob.pk)
        memberships.leave_group(self.group.pk, self.bob.pk)

        self.message.refresh_from_db()
        self.assertEqual(statuses.read_quorum(self.message), (0, 1))

    def test_sender_alone_in_group(self):
        solo = create_group_with(self.dave, name="Notes")
        note = send(solo, self.dave, "remember milk")

        message = statuses.mark_read(note.pk, self.dave.pk)

        self.assertEqual(message.status, MessageStatus.SENT)
        self.assertEqual(statuses.read_quorum(message), (0, 0))
