from django.core.exceptions import ValidationError
from django.db import IntegrityError, transaction
from django.test import TestCase

from accounts.models import AccountUser
from accounts.tests.utils import TestUsers


class AccountUserTestCase(TestUsers, TestCase):
    def test_model_is_created(self):
        self.assertIsInstance(self.owner, AccountUser)
        self.assertIsNotNone(self.owner.date_joined)

    def test_string_representation(self):
        self.assertEqual(str(self.owner), "owner")
        self.assertEqual(self.owner.get_full_name(), "owner")

    def test_users_have_no_usable_password(self):
        self.assertFalse(self.owner.has_usable_password())

    def test_create_user_strips_name(self):
        user = AccountUser.objects.create_user("  padded ")

        self.assertEqual(user.name, "padded")

    def test_name_is_unique(self):
        with self.assertRaises(IntegrityError), transaction.atomic():
            AccountUser.objects.create_user("owner")

    def test_name_length_is_validated(self):
        for name in ["ab", "x" * 17]:
            with self.assertRaises(ValidationError):
                AccountUser(name=name).full_clean(exclude=["password"])

        AccountUser(name="abc").full_clean(exclude=["password"])
        AccountUser(name="x" * 16).full_clean(exclude=["password"])
