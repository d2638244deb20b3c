# ==========================================
# apps/redemptions/models.py
# ==========================================

from django.db import models
from django.core.validators import MinValueValidator
from decimal import Decimal
import uuid

from apps.businesses.models import BusinessCategory


class RedemptionStatus(models.TextChoices):
    PENDING = 'pending', 'Pending'
    VALIDATED = 'validated', 'Validated'
    EXPIRED = 'expired', 'Expired'
    CANCELLED = 'cancelled', 'Cancelled'


class Redemption(models.Model):
    """
    A user's claim on a deal, waiting to be confirmed by the business.

    Prices and category are snapshots taken at redemption time so later
    edits to the deal do not rewrite a user's savings history.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='redemptions')
    deal = models.ForeignKey('deals.Deal', on_delete=models.CASCADE, related_name='redemptions')
    business = models.ForeignKey('businesses.Business', on_delete=models.CASCADE, related_name='redemptions')

    # Snapshot at redemption time
    original_price = models.DecimalField(max_digits=10, decimal_places=2, validators=[MinValueValidator(Decimal('0.00'))])
    paid_price = models.DecimalField(max_digits=10, decimal_places=2, validators=[MinValueValidator(Decimal('0.00'))])
    savings_amount = models.DecimalField(max_digits=10, decimal_places=2, validators=[MinValueValidator(Decimal('0.00'))])
    deal_category = models.CharField(max_length=50, choices=BusinessCategory.choices)

    status = models.CharField(max_length=20, choices=RedemptionStatus.choices, default=RedemptionStatus.PENDING)
    redeemed_at = models.DateTimeField(auto_now_add=True)
    validated_at = models.DateTimeField(null=True, blank=True)
    validated_by = models.ForeignKey(
        'accounts.User',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='validated_redemptions'
    )

    class Meta:
        db_table = 'user_redemptions'
        indexes = [
            models.Index(fields=['user', 'deal'], name='redemptions_user_deal_idx'),
            models.Index(fields=['business', 'status'], name='redemptions_biz_status_idx'),
            models.Index(fields=['redeemed_at'], name='redemptions_redeemed_at_idx'),
        ]
        ordering = ['-redeemed_at']

    def __str__(self):
        return f"{self.user} - {self.deal} ({self.status})"

    @property
    def redemption_code(self) -> str:
        """Code shown to the business, encoded in the QR image."""
        return str(self.id)
