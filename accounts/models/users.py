import uuid

from django.contrib.auth.base_user import AbstractBaseUser, BaseUserManager
from django.core.validators import MaxLengthValidator, MinLengthValidator
from django.db import models
from django.utils import timezone
from django.utils.translation import gettext_lazy as _

USERNAME_MIN_LENGTH = 3
USERNAME_MAX_LENGTH = 16


class UserManager(BaseUserManager):
    use_in_migrations = True

    def create_user(self, name, password=None, **extra_fields):
        """
        Create and save a user with the given name.

        Identity is trusted, so users normally have no usable password.
        """
        name = name.strip()
        user = self.model(name=name, **extra_fields)
        user.set_password(password or None)
        user.save(using=self._db)
        return user

    def get_by_natural_key(self, name):
        return self.get(name=name)


class AccountUser(AbstractBaseUser):
    """
    A chat user. Referenced by id from every conversation-engine table.
    """

    id = models.UUIDField(
        verbose_name="id",
        primary_key=True,
        default=uuid.uuid4,
        editable=False,
    )
    name = models.CharField(
        verbose_name=_("name"),
        max_length=USERNAME_MAX_LENGTH,
        unique=True,
        validators=[
            MinLengthValidator(USERNAME_MIN_LENGTH),
            MaxLengthValidator(USERNAME_MAX_LENGTH),
        ],
        help_text=_("Unique display name, 3-16 characters."),
    )
    photo_url = models.TextField(
        verbose_name=_("photo"),
        blank=True,
        null=True,
        help_text=_("Reference to the user's avatar."),
    )
    date_joined = models.DateTimeField(
        verbose_name=_("date joined"),
        default=timezone.now,
    )

    objects = UserManager()

    USERNAME_FIELD = "name"
    REQUIRED_FIELDS = []

    class Meta:
        verbose_name = _("user")
        verbose_name_plural = _("users")
        ordering = ["name"]

    def __str__(self):
        return self.name

    def get_full_name(self):
        return self.name

    def get_short_name(self):
        return self.name
