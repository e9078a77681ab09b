# Generated manually for the conversation engine models

import uuid

import django.db.models.deletion
import django.utils.timezone
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Conversation',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, help_text='UUID primary key', primary_key=True, serialize=False, verbose_name='id')),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='creation date')),
                ('last_modified_at', models.DateTimeField(auto_now=True, verbose_name='last modified date')),
                ('name', models.CharField(blank=True, help_text='Display name for a group (empty for private conversations)', max_length=255, null=True, verbose_name='Conversation Name')),
                ('is_group', models.BooleanField(default=False, help_text='Whether this is a group conversation', verbose_name='Is Group')),
                ('photo_url', models.TextField(blank=True, help_text='Reference to the group photo', null=True, verbose_name='Photo')),
                ('private_key', models.CharField(blank=True, editable=False, help_text='Sorted member pair of a private conversation; NULL for groups', max_length=100, null=True, unique=True, verbose_name='Private Key')),
            ],
            options={
                'verbose_name': 'Conversation',
                'verbose_name_plural': 'Conversations',
                'ordering': ['-created_at'],
                'indexes': [models.Index(fields=['is_group', 'created_at'], name='conv_group_created_idx')],
            },
        ),
        migrations.CreateModel(
            name='Membership',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, help_text='UUID primary key', primary_key=True, serialize=False, verbose_name='id')),
                ('joined_at', models.DateTimeField(auto_now_add=True, help_text='When the user joined this conversation', verbose_name='Joined At')),
                ('conversation', models.ForeignKey(help_text='The conversation this membership belongs to', on_delete=django.db.models.deletion.CASCADE, related_name='memberships', to='common.conversation', verbose_name='Conversation')),
                ('user', models.ForeignKey(help_text='The member', on_delete=django.db.models.deletion.CASCADE, related_name='memberships', to=settings.AUTH_USER_MODEL, verbose_name='User')),
            ],
            options={
                'verbose_name': 'Membership',
                'verbose_name_plural': 'Memberships',
                'ordering': ['joined_at'],
                'indexes': [models.Index(fields=['user', 'conversation'], name='membership_user_conv_idx')],
                'constraints': [models.UniqueConstraint(fields=('conversation', 'user'), name='unique_membership_per_user')],
            },
        ),
        migrations.CreateModel(
            name='Message',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, help_text='UUID primary key', primary_key=True, serialize=False, verbose_name='id')),
                ('content', models.TextField(help_text='Message text or an embedded media reference (data URI)', verbose_name='Content')),
                ('forwarded_label', models.CharField(blank=True, help_text='Provenance marker for forwarded messages', max_length=255, null=True, verbose_name='Forwarded Label')),
                ('status', models.CharField(choices=[('pending', 'Pending'), ('sent', 'Sent'), ('delivered', 'Delivered'), ('read', 'Read')], default='sent', help_text='Current delivery status of the message', max_length=20, verbose_name='Status')),
                ('sent_at', models.DateTimeField(default=django.utils.timezone.now, verbose_name='Sent At')),
                ('delivered_at', models.DateTimeField(blank=True, null=True, verbose_name='Delivered At')),
                ('read_at', models.DateTimeField(blank=True, null=True, verbose_name='Read At')),
                ('conversation', models.ForeignKey(help_text='The conversation this message belongs to', on_delete=django.db.models.deletion.CASCADE, related_name='messages', to='common.conversation', verbose_name='Conversation')),
                ('reply_to', models.ForeignKey(blank=True, help_text='The message this is a reply to', null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='replies', to='common.message', verbose_name='Reply To')),
                ('sender', models.ForeignKey(help_text='The user who sent this message', on_delete=django.db.models.deletion.CASCADE, related_name='sent_messages', to=settings.AUTH_USER_MODEL, verbose_name='Sender')),
            ],
            options={
                'verbose_name': 'Message',
                'verbose_name_plural': 'Messages',
                'ordering': ['sent_at', 'id'],
                'indexes': [
                    models.Index(fields=['conversation', 'sent_at'], name='message_conv_sent_idx'),
                    models.Index(fields=['sender', 'sent_at'], name='message_sender_sent_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='Reaction',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, help_text='UUID primary key', primary_key=True, serialize=False, verbose_name='id')),
                ('reaction', models.CharField(help_text='Reaction value, usually an emoji', max_length=64, verbose_name='Reaction')),
                ('reacted_at', models.DateTimeField(default=django.utils.timezone.now, verbose_name='Reacted At')),
                ('message', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='reactions', to='common.message', verbose_name='Message')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='reactions', to=settings.AUTH_USER_MODEL, verbose_name='User')),
            ],
            options={
                'verbose_name': 'Reaction',
                'verbose_name_plural': 'Reactions',
                'ordering': ['reacted_at'],
                'constraints': [models.UniqueConstraint(fields=('message', 'user'), name='unique_reaction_per_user')],
            },
        ),
        migrations.CreateModel(
            name='ReadReceipt',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, help_text='UUID primary key', primary_key=True, serialize=False, verbose_name='id')),
                ('read_at', models.DateTimeField(default=django.utils.timezone.now, verbose_name='Read At')),
                ('message', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='read_receipts', to='common.message', verbose_name='Message')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='read_receipts', to=settings.AUTH_USER_MODEL, verbose_name='Reader')),
            ],
            options={
                'verbose_name': 'Read Receipt',
                'verbose_name_plural': 'Read Receipts',
                'constraints': [models.UniqueConstraint(fields=('message', 'user'), name='unique_read_receipt_per_user')],
            },
        ),
    ]
