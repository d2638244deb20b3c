# Generated manually for reviews app

import uuid
from django.conf import settings
from django.core.validators import MinValueValidator, MaxValueValidator
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
            name='Review',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('rating', models.PositiveSmallIntegerField(validators=[MinValueValidator(1), MaxValueValidator(5)])),
                ('review_text', models.TextField(blank=True, max_length=1000)),
                ('is_verified_buyer', models.BooleanField(default=False)),
                ('status', models.CharField(choices=[('active', 'Active'), ('hidden', 'Hidden'), ('removed', 'Removed')], default='active', max_length=20)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('business', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='reviews', to='businesses.business')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='reviews', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'business_reviews',
                'ordering': ['-created_at'],
                'unique_together': {('business', 'user')},
                'indexes': [
                    models.Index(fields=['business', 'status'], name='reviews_business_status_idx'),
                    models.Index(fields=['user', 'created_at'], name='reviews_user_created_idx'),
                    models.Index(fields=['created_at'], name='reviews_created_at_idx'),
                ],
            },
        ),
    ]
