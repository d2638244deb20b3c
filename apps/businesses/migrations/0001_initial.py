# Generated manually for businesses app

import uuid
from decimal import Decimal
from django.conf import settings
from django.core.validators import MinValueValidator, MaxValueValidator
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Business',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('business_name', models.CharField(max_length=255)),
                ('slug', models.SlugField(max_length=255, unique=True)),
                ('description', models.TextField(blank=True)),
                ('category', models.CharField(choices=[('food_beverage', 'Food & Beverage'), ('shopping', 'Shopping'), ('services', 'Services'), ('health_beauty', 'Health & Beauty'), ('entertainment', 'Entertainment'), ('travel', 'Travel'), ('other', 'Other')], default='other', max_length=50)),
                ('city', models.CharField(blank=True, max_length=100)),
                ('country', models.CharField(default='US', max_length=2)),
                ('follower_count', models.PositiveIntegerField(default=0)),
                ('total_redemptions', models.PositiveIntegerField(default=0)),
                ('average_rating', models.DecimalField(decimal_places=2, default=Decimal('0.00'), max_digits=3, validators=[MinValueValidator(Decimal('0.00')), MaxValueValidator(Decimal('5.00'))])),
                ('is_verified', models.BooleanField(default=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('owner', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='businesses', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'businesses',
                'verbose_name_plural': 'businesses',
                'ordering': ['business_name'],
                'indexes': [
                    models.Index(fields=['owner'], name='businesses_owner_idx'),
                    models.Index(fields=['category'], name='businesses_category_idx'),
                    models.Index(fields=['city'], name='businesses_city_idx'),
                ],
            },
        ),
    ]
