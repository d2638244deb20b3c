# Generated manually for follows app

import uuid
import django.utils.timezone
from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('businesses', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Follow',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('status', models.CharField(choices=[('active', 'Active'), ('muted', 'Muted'), ('unfollowed', 'Unfollowed')], default='active', max_length=20)),
                ('notify_new_deals', models.BooleanField(default=True)),
                ('notify_flash_deals', models.BooleanField(default=False)),
                ('followed_at', models.DateTimeField(default=django.utils.timezone.now)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('business', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='follows', to='businesses.business')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='follows', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'follows',
                'ordering': ['-followed_at'],
                'unique_together': {('user', 'business')},
                'indexes': [
                    models.Index(fields=['business', 'status'], name='follows_business_status_idx'),
                    models.Index(fields=['user', 'status'], name='follows_user_status_idx'),
                ],
            },
        ),
    ]
