# ==========================================
# apps/deals/models.py
# ==========================================

from django.db import models
from django.db.models import Q, F
from django.core.exceptions import ValidationError
from django.core.validators import MinValueValidator
from decimal import Decimal
import uuid

from apps.businesses.models import BusinessCategory


class DealStatus(models.TextChoices):
    ACTIVE = 'active', 'Active'
    PAUSED = 'paused', 'Paused'
    EXPIRED = 'expired', 'Expired'
    SOLD_OUT = 'sold_out', 'Sold Out'


class Deal(models.Model):
    """Time-limited discounted offer published by a business."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    business = models.ForeignKey('businesses.Business', on_delete=models.CASCADE, related_name='deals')
    title = models.CharField(max_length=200)
    description = models.TextField(blank=True)

    original_price = models.DecimalField(max_digits=10, decimal_places=2, validators=[MinValueValidator(Decimal('0.00'))])
    discounted_price = models.DecimalField(max_digits=10, decimal_places=2, validators=[MinValueValidator(Decimal('0.00'))])
    category = models.CharField(max_length=50, choices=BusinessCategory.choices, default=BusinessCategory.OTHER)

    starts_at = models.DateTimeField()
    expires_at = models.DateTimeField()
    is_flash_deal = models.BooleanField(default=False)

    # Inventory, null quantity_available means unlimited
    quantity_available = models.PositiveIntegerField(null=True, blank=True)
    quantity_redeemed = models.PositiveIntegerField(default=0)
    max_per_user = models.PositiveIntegerField(default=1, validators=[MinValueValidator(1)])

    status = models.CharField(max_length=20, choices=DealStatus.choices, default=DealStatus.ACTIVE)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'deals'
        indexes = [
            models.Index(fields=['business', 'status'], name='deals_business_status_idx'),
            models.Index(fields=['expires_at'], name='deals_expires_at_idx'),
        ]
        constraints = [
            models.CheckConstraint(
                check=Q(discounted_price__lt=F('original_price')),
                name='deals_discount_below_original',
            ),
            models.CheckConstraint(
                check=Q(quantity_available__isnull=True) | Q(quantity_redeemed__lte=F('quantity_available')),
                name='deals_redeemed_within_quantity',
            ),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return self.title

    def clean(self):
        if self.original_price is not None and self.discounted_price is not None:
            if self.discounted_price >= self.original_price:
                raise ValidationError({'discounted_price': 'Discounted price must be lower than the original price.'})
        if self.starts_at and self.expires_at and self.expires_at <= self.starts_at:
            raise ValidationError({'expires_at': 'Deal must expire after it starts.'})

    @property
    def savings_amount(self) -> Decimal:
        return self.original_price - self.discounted_price

    def is_sold_out(self) -> bool:
        if self.quantity_available is None:
            return False
        return self.quantity_redeemed >= self.quantity_available
