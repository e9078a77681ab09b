from accounts.models import AccountUser


def authenticate_user(client, user: AccountUser):
    client.credentials(HTTP_AUTHORIZATION=f"Bearer {user.pk}")


class TestUsers:
    @classmethod
    def setUpTestData(cls):
        cls.owner = AccountUser.objects.create_user("owner")
        cls.friend = AccountUser.objects.create_user("friend")
