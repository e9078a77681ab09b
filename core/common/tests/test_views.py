import uuid

from rest_framework import status
from rest_framework.test import APITestCase

from core.common.error_codes import CommonAPIErrorCodes
from core.common.includes import conversations, reactions
from core.common.models import Message, MessageStatus
from core.common.tests.utils import ChatUsers, authenticate_user, create_group_with, send

API = "/api/v1"


class ConversationViewSetTestCase(ChatUsers, APITestCase):
    def setUp(self):
        super().setUp()
        authenticate_user(self.client, self.alice)

    def test_requires_authentication(self):
        self.client.credentials()
        response = self.client.get(f"{API}/conversations/")

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(response.data["error"], CommonAPIErrorCodes.AUTHENTICATION_ERROR)

    def test_unknown_bearer_identifier(self):
        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {uuid.uuid4()}")
        response = self.client.get(f"{API}/conversations/")

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_malformed_bearer_identifier(self):
        self.client.credentials(HTTP_AUTHORIZATION="Bearer not-a-user")
        response = self.client.get(f"{API}/conversations/")

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_list_conversations(self):
        private = conversations.resolve_private(self.alice.pk, self.bob.pk)
        send(private, self.bob, "hi alice")
        create_group_with(self.carol, self.dave)

        response = self.client.get(f"{API}/conversations/")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(len(response.data), 1)
        self.assertEqual(response.data[0]["id"], str(private.pk))
        self.assertEqual(response.data[0]["name"], "bob")
        self.assertEqual(response.data[0]["last_message_content"], "hi alice")
        self.assertCountEqual(
            [member["name"] for member in response.data[0]["members"]], ["alice", "bob"]
        )

    def test_retrieve_conversation_with_messages(self):
        private = conversations.resolve_private(self.alice.pk, self.bob.pk)
        first = send(private, self.alice, "one")
        reactions.react(first.pk, self.bob.pk, "👍")
        send(private, self.bob, "two")

        response = self.client.get(f"{API}/conversations/{private.pk}/")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["conversation"]["name"], "bob")
        self.assertEqual([m["content"] for m in response.data["messages"]], ["one", "two"])
        self.assertEqual(response.data["messages"][0]["reactions"][0]["reaction"], "👍")
        self.assertEqual(response.data["messages"][0]["reactions"][0]["name"], "bob")

    def test_retrieve_as_non_member(self):
        private = conversations.resolve_private(self.bob.pk, self.carol.pk)

        response = self.client.get(f"{API}/conversations/{private.pk}/")

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(response.data["error"], CommonAPIErrorCodes.AUTHORIZATION_ERROR)

    def test_retrieve_unknown_and_malformed_ids(self):
        response = self.client.get(f"{API}/conversations/{uuid.uuid4()}/")
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

        response = self.client.get(f"{API}/conversations/nope/")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["error"], CommonAPIErrorCodes.INVALID_ARGUMENT)

    def test_conversation_with_user(self):
        response = self.client.get(f"{API}/conversations/with/{self.bob.pk}/")
        again = self.client.get(f"{API}/conversations/with/{self.bob.pk}/")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["conversation"]["id"], again.data["conversation"]["id"])
        self.assertEqual(response.data["messages"], [])


class MessageViewSetTestCase(ChatUsers, APITestCase):
    def setUp(self):
        super().setUp()
        authenticate_user(self.client, self.alice)
        self.private = conversations.resolve_private(self.alice.pk, self.bob.pk)

    def test_send_to_receiver(self):
        response = self.client.post(
            f"{API}/messages/", {"content": "hello carol", "receiver_id": str(self.carol.pk)}
        )

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data["content"], "hello carol")
        self.assertEqual(response.data["status"], MessageStatus.SENT)
        self.assertEqual(response.data["sender"]["name"], "alice")

    def test_send_to_group(self):
        group = create_group_with(self.bob, self.alice)

        response = self.client.post(
            f"{API}/messages/",
            {"content": "hi all", "is_group": True, "group_id": str(group.pk)},
        )

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data["conversation_id"], str(group.pk))

    def test_send_reply(self):
        original = send(self.private, self.bob, "lunch?")

        response = self.client.post(
            f"{API}/messages/",
            {
                "content": "yes",
                "conversation_id": str(self.private.pk),
                "reply_to": str(original.pk),
            },
        )

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data["reply_to_id"], str(original.pk))

    def test_send_without_target(self):
        response = self.client.post(f"{API}/messages/", {"content": "hello?"})

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["error"], CommonAPIErrorCodes.VALIDATION_ERROR)

    def test_send_empty_content(self):
        response = self.client.post(
            f"{API}/messages/", {"content": "   ", "receiver_id": str(self.bob.pk)}
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_send_into_foreign_conversation(self):
        foreign = conversations.resolve_private(self.bob.pk, self.carol.pk)

        response = self.client.post(
            f"{API}/messages/", {"content": "hi", "conversation_id": str(foreign.pk)}
        )

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_delete_own_message(self):
        message = send(self.private, self.alice, "oops")

        response = self.client.delete(f"{API}/messages/{message.pk}/")

        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)
        self.assertFalse(Message.objects.filter(pk=message.pk).exists())

    def test_delete_others_message(self):
        message = send(self.private, self.bob, "mine")

        response = self.client.delete(f"{API}/messages/{message.pk}/")

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_forward(self):
        original = send(self.private, self.bob, "see you at 5")
        group = create_group_with(self.alice, self.carol)

        response = self.client.post(
            f"{API}/messages/{original.pk}/forward/",
            {"target_conversation_id": str(group.pk)},
        )

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data["content"], "Forwarded from bob: see you at 5")
        self.assertTrue(response.data["is_forwarded"])

    def test_delivered_and_read(self):
        message = send(self.private, self.bob, "ping")

        response = self.client.post(f"{API}/messages/{message.pk}/delivered/")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["status"], MessageStatus.DELIVERED)

        response = self.client.post(f"{API}/messages/{message.pk}/read/")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["status"], MessageStatus.READ)

    def test_delivered_by_non_member(self):
        foreign = conversations.resolve_private(self.bob.pk, self.carol.pk)
        message = send(foreign, self.bob, "private")

        response = self.client.post(f"{API}/messages/{message.pk}/delivered/")

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_reactions(self):
        message = send(self.private, self.bob, "good news")

        response = self.client.post(f"{API}/messages/{message.pk}/reactions/", {"reaction": "🎉"})
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["name"], "alice")

        response = self.client.get(f"{API}/messages/{message.pk}/reactions/")
        self.assertEqual([r["reaction"] for r in response.data], ["🎉"])

        response = self.client.delete(f"{API}/messages/{message.pk}/reactions/")
        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)

        response = self.client.delete(f"{API}/messages/{message.pk}/reactions/")
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)


class GroupViewSetTestCase(ChatUsers, APITestCase):
    def setUp(self):
        super().setUp()
        authenticate_user(self.client, self.alice)

    def _create_group(self, name="Hiking"):
        response = self.client.post(f"{API}/groups/", {"name": name})
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        return response.data["id"]

    def test_create_and_list_groups(self):
        group_id = self._create_group()
        conversations.resolve_private(self.alice.pk, self.bob.pk)

        response = self.client.get(f"{API}/groups/")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([g["id"] for g in response.data], [group_id])
        self.assertEqual(response.data[0]["name"], "Hiking")

    def test_create_group_without_name(self):
        response = self.client.post(f"{API}/groups/", {"name": ""})

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_add_members(self):
        group_id = self._create_group()

        response = self.client.post(f"{API}/groups/{group_id}/members/", {"name": "bob"})
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)

        response = self.client.post(
            f"{API}/groups/{group_id}/members/", {"user_id": str(self.carol.pk)}
        )
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)

        response = self.client.get(f"{API}/groups/{group_id}/members/")
        self.assertCountEqual([m["name"] for m in response.data], ["alice", "bob", "carol"])

    def test_non_member_cannot_add_or_list(self):
        group = create_group_with(self.bob)

        response = self.client.post(f"{API}/groups/{group.pk}/members/", {"name": "carol"})
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

        response = self.client.post(
            f"{API}/groups/{group.pk}/members/", {"user_id": str(self.alice.pk)}
        )
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

        response = self.client.get(f"{API}/groups/{group.pk}/members/")
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_add_member_to_private_conversation(self):
        private = conversations.resolve_private(self.alice.pk, self.bob.pk)

        response = self.client.post(f"{API}/groups/{private.pk}/members/", {"name": "carol"})

        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(response.data["error"], CommonAPIErrorCodes.MEMBERSHIP_LIMIT_REACHED)

    def test_leave_group(self):
        group_id = self._create_group()

        response = self.client.delete(f"{API}/groups/{group_id}/leave/")
        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)

        response = self.client.delete(f"{API}/groups/{group_id}/leave/")
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_leave_private_conversation_is_rejected(self):
        private = conversations.resolve_private(self.alice.pk, self.bob.pk)

        response = self.client.delete(f"{API}/groups/{private.pk}/leave/")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["error"], CommonAPIErrorCodes.INVALID_ARGUMENT)
        self.assertEqual(private.memberships.count(), 2)

    def test_rename_and_change_photo(self):
        group_id = self._create_group()

        response = self.client.put(f"{API}/groups/{group_id}/name/", {"name": "Climbing"})
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["name"], "Climbing")

        response = self.client.put(
            f"{API}/groups/{group_id}/photo/", {"photo_url": "https://cdn/g.png"}
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["photo_url"], "https://cdn/g.png")

    def test_rename_private_conversation(self):
        private = conversations.resolve_private(self.alice.pk, self.bob.pk)

        response = self.client.put(f"{API}/groups/{private.pk}/name/", {"name": "Us"})

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)


class HealthCheckTestCase(APITestCase):
    def test_health_check(self):
        response = self.client.get("/api/health/")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
