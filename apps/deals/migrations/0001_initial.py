# Generated manually for deals app

import uuid
from decimal import Decimal
from django.core.validators import MinValueValidator
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('businesses', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Deal',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('title', models.CharField(max_length=200)),
                ('description', models.TextField(blank=True)),
                ('original_price', models.DecimalField(decimal_places=2, max_digits=10, validators=[MinValueValidator(Decimal('0.00'))])),
                ('discounted_price', models.DecimalField(decimal_places=2, max_digits=10, validators=[MinValueValidator(Decimal('0.00'))])),
                ('category', models.CharField(choices=[('food_beverage', 'Food & Beverage'), ('shopping', 'Shopping'), ('services', 'Services'), ('health_beauty', 'Health & Beauty'), ('entertainment', 'Entertainment'), ('travel', 'Travel'), ('other', 'Other')], default='other', max_length=50)),
                ('starts_at', models.DateTimeField()),
                ('expires_at', models.DateTimeField()),
                ('is_flash_deal', models.BooleanField(default=False)),
                ('quantity_available', models.PositiveIntegerField(blank=True, null=True)),
                ('quantity_redeemed', models.PositiveIntegerField(default=0)),
                ('max_per_user', models.PositiveIntegerField(default=1, validators=[MinValueValidator(1)])),
                ('status', models.CharField(choices=[('active', 'Active'), ('paused', 'Paused'), ('expired', 'Expired'), ('sold_out', 'Sold Out')], default='active', max_length=20)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('business', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='deals', to='businesses.business')),
            ],
            options={
                'db_table': 'deals',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['business', 'status'], name='deals_business_status_idx'),
                    models.Index(fields=['expires_at'], name='deals_expires_at_idx'),
                ],
                'constraints': [
                    models.CheckConstraint(check=models.Q(('discounted_price__lt', models.F('original_price'))), name='deals_discount_below_original'),
                    models.CheckConstraint(check=models.Q(('quantity_available__isnull', True), ('quantity_redeemed__lte', models.F('quantity_available')), _connector='OR'), name='deals_redeemed_within_quantity'),
                ],
            },
        ),
    ]
