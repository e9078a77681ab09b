from accounts.models import AccountUser
from core.common.includes import conversations, memberships, messages


def create_user(name: str) -> AccountUser:
    return AccountUser.objects.create_user(name)


def create_group_with(creator: AccountUser, *others: AccountUser, name: str = "Weekend Plans"):
    group = conversations.create_group(creator.pk, name)
    for user in others:
        memberships.add_member(group.pk, user.pk)
    return group


def send(conversation, sender: AccountUser, content: str = "hello"):
    return messages.append(conversation.pk, sender.pk, content)


def authenticate_user(client, user: AccountUser):
    client.credentials(HTTP_AUTHORIZATION=f"Bearer {user.pk}")


class ChatUsers:
    @classmethod
    def setUpTestData(cls):
        cls.alice = create_user("alice")
        cls.bob = create_user("bob")
        cls.carol = create_user("carol")
        cls.dave = create_user("dave")
