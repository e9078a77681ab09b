from django.test import TestCase

from core.common.exceptions import AuthorizationException, ResourceNotFoundException
from core.common.includes import conversations, forwarding
from core.common.models import Message, MessageStatus
from core.common.tests.utils import ChatUsers, create_group_with, send

PNG = "data:image/png;base64,iVBORw0KGgoAAAANSUhEUgAAAAE"


class ForwardTestCase(ChatUsers, TestCase):
    def setUp(self):
        self.source = conversations.resolve_private(self.alice.pk, self.bob.pk)
        self.target = create_group_with(self.bob, self.carol, name="Friends")

    def test_forward_text_prefixes_provenance(self):
        original = send(self.source, self.alice, "party at 8")

        copy = forwarding.forward(original.pk, self.target.pk, self.bob.pk)

        self.assertEqual(copy.content, "Forwarded from alice: party at 8")
        self.assertEqual(copy.forwarded_label, "Forwarded from alice")
        self.assertTrue(copy.is_forwarded)
        self.assertEqual(copy.sender_id, self.bob.pk)
        self.assertEqual(copy.conversation_id, self.target.pk)
        self.assertEqual(copy.status, MessageStatus.SENT)
        self.assertNotEqual(copy.pk, original.pk)

    def test_forward_leaves_original_untouched(self):
        original = send(self.source, self.alice, "party at 8")

        forwarding.forward(original.pk, self.target.pk, self.bob.pk)

        original.refresh_from_db()
        self.assertEqual(original.content, "party at 8")
        self.assertIsNone(original.forwarded_label)
        self.assertEqual(Message.objects.filter(conversation=self.source).count(), 1)

    def test_forward_image_keeps_content_intact(self):
        original = send(self.source, self.alice, PNG)

        copy = forwarding.forward(original.pk, self.target.pk, self.bob.pk)

        self.assertEqual(copy.content, PNG)
        self.assertTrue(copy.is_image)
        self.assertEqual(copy.forwarded_label, "Forwarded from alice")

    def test_forwarder_must_belong_to_target(self):
        original = send(self.source, self.bob, "hello")
        outsider_group = create_group_with(self.carol)

        with self.assertRaises(AuthorizationException):
            forwarding.forward(original.pk, outsider_group.pk, self.bob.pk)

    def test_forwarder_must_see_original(self):
        original = send(self.source, self.alice, "just for bob")

        with self.assertRaises(AuthorizationException):
            forwarding.forward(original.pk, self.target.pk, self.carol.pk)

    def test_forward_unknown_message(self):
        with self.assertRaises(ResourceNotFoundException):
            forwarding.forward(
                "6f1c3e1e-0000-4000-8000-000000000000", self.target.pk, self.bob.pk
            )

    def test_forwarding_a_forward_names_the_forwarder(self):
        original = send(self.source, self.alice, "news")
        first = forwarding.forward(original.pk, self.target.pk, self.bob.pk)

        second = forwarding.forward(first.pk, self.source.pk, self.bob.pk)

        self.assertEqual(second.forwarded_label, "Forwarded from bob")
        self.assertEqual(second.content, "Forwarded from bob: Forwarded from alice: news")
