# Generated manually for the Palaver user model

import uuid

import django.core.validators
import django.utils.timezone
from django.db import migrations, models

import accounts.models.users


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='AccountUser',
            fields=[
                ('password', models.CharField(max_length=128, verbose_name='password')),
                ('last_login', models.DateTimeField(blank=True, null=True, verbose_name='last login')),
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False, verbose_name='id')),
                ('name', models.CharField(help_text='Unique display name, 3-16 characters.', max_length=16, unique=True, validators=[django.core.validators.MinLengthValidator(3), django.core.validators.MaxLengthValidator(16)], verbose_name='name')),
                ('photo_url', models.TextField(blank=True, help_text="Reference to the user's avatar.", null=True, verbose_name='photo')),
                ('date_joined', models.DateTimeField(default=django.utils.timezone.now, verbose_name='date joined')),
            ],
            options={
                'verbose_name': 'user',
                'verbose_name_plural': 'users',
                'ordering': ['name'],
            },
            managers=[
                ('objects', accounts.models.users.UserManager()),
            ],
        ),
    ]
