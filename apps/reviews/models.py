# ==========================================
# apps/reviews/models.py
# ==========================================

from django.db import models
from django.core.validators import MinValueValidator, MaxValueValidator
import uuid


class ReviewStatus(models.TextChoices):
    ACTIVE = 'active', 'Active'
    HIDDEN = 'hidden', 'Hidden'
    REMOVED = 'removed', 'Removed'


class Review(models.Model):
    """User review/rating of a business."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    business = models.ForeignKey('businesses.Business', on_delete=models.CASCADE, related_name='reviews')
    user = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='reviews')
    rating = models.PositiveSmallIntegerField(validators=[MinValueValidator(1), MaxValueValidator(5)])
    review_text = models.TextField(max_length=1000, blank=True)
    is_verified_buyer = models.BooleanField(default=False)
    status = models.CharField(max_length=20, choices=ReviewStatus.choices, default=ReviewStatus.ACTIVE)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'business_reviews'
        unique_together = [['business', 'user']]
        indexes = [
            models.Index(fields=['business', 'status'], name='reviews_business_status_idx'),
            models.Index(fields=['user', 'created_at'], name='reviews_user_created_idx'),
            models.Index(fields=['created_at'], name='reviews_created_at_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.user.get_display_name()} - {self.business.business_name} ({self.rating}★)"
