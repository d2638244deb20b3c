# Generated manually for redemptions app

import uuid
from decimal import Decimal
from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('businesses', '0001_initial'),
        ('deals', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Redemption',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('original_price', models.DecimalField(decimal_places=2, max_digits=10, validators=[MinValueValidator(Decimal('0.00'))])),
                ('paid_price', models.DecimalField(decimal_places=2, max_digits=10, validators=[MinValueValidator(Decimal('0.00'))])),
                ('savings_amount', models.DecimalField(decimal_places=2, max_digits=10, validators=[MinValueValidator(Decimal('0.00'))])),
                ('deal_category', models.CharField(choices=[('food_beverage', 'Food & Beverage'), ('shopping', 'Shopping'), ('services', 'Services'), ('health_beauty', 'Health & Beauty'), ('entertainment', 'Entertainment'), ('travel', 'Travel'), ('other', 'Other')], max_length=50)),
                ('status', models.CharField(choices=[('pending', 'Pending'), ('validated', 'Validated'), ('expired', 'Expired'), ('cancelled', 'Cancelled')], default='pending', max_length=20)),
                ('redeemed_at', models.DateTimeField(auto_now_add=True)),
                ('validated_at', models.DateTimeField(blank=True, null=True)),
                ('business', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='redemptions', to='businesses.business')),
                ('deal', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='redemptions', to='deals.deal')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='redemptions', to=settings.AUTH_USER_MODEL)),
                ('validated_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='validated_redemptions', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'user_redemptions',
                'ordering': ['-redeemed_at'],
                'indexes': [
                    models.Index(fields=['user', 'deal'], name='redemptions_user_deal_idx'),
                    models.Index(fields=['business', 'status'], name='redemptions_biz_status_idx'),
                    models.Index(fields=['redeemed_at'], name='redemptions_redeemed_at_idx'),
                ],
            },
        ),
    ]
