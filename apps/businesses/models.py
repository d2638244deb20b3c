# ==========================================
# apps/businesses/models.py
# ==========================================

from django.db import models
from django.core.validators import MinValueValidator, MaxValueValidator
from decimal import Decimal
import uuid


class BusinessCategory(models.TextChoices):
    FOOD_BEVERAGE = 'food_beverage', 'Food & Beverage'
    SHOPPING = 'shopping', 'Shopping'
    SERVICES = 'services', 'Services'
    HEALTH_BEAUTY = 'health_beauty', 'Health & Beauty'
    ENTERTAINMENT = 'entertainment', 'Entertainment'
    TRAVEL = 'travel', 'Travel'
    OTHER = 'other', 'Other'


class Business(models.Model):
    """Local business publishing deals."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    owner = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='businesses')
    business_name = models.CharField(max_length=255)
    slug = models.SlugField(max_length=255, unique=True)
    description = models.TextField(blank=True)
    category = models.CharField(max_length=50, choices=BusinessCategory.choices, default=BusinessCategory.OTHER)
    city = models.CharField(max_length=100, blank=True)
    country = models.CharField(max_length=2, default='US')

    # Denormalized counters
    follower_count = models.PositiveIntegerField(default=0)
    total_redemptions = models.PositiveIntegerField(default=0)
    average_rating = models.DecimalField(
        max_digits=3,
        decimal_places=2,
        default=Decimal('0.00'),
        validators=[MinValueValidator(Decimal('0.00')), MaxValueValidator(Decimal('5.00'))]
    )

    is_verified = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'businesses'
        verbose_name_plural = 'businesses'
        indexes = [
            models.Index(fields=['owner'], name='businesses_owner_idx'),
            models.Index(fields=['category'], name='businesses_category_idx'),
            models.Index(fields=['city'], name='businesses_city_idx'),
        ]
        ordering = ['business_name']

    def __str__(self):
        return self.business_name

    def is_owned_by(self, user_id) -> bool:
        return str(self.owner_id) == str(user_id)
