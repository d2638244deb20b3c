# ==========================================
# apps/follows/models.py
# ==========================================

from django.db import models
from django.utils import timezone
import uuid


class FollowStatus(models.TextChoices):
    ACTIVE = 'active', 'Active'
    MUTED = 'muted', 'Muted'
    UNFOLLOWED = 'unfollowed', 'Unfollowed'


class Follow(models.Model):
    """
    Subscription from a user to a business's deals.

    One row per (user, business). Unfollowing keeps the row with status
    unfollowed so preferences survive a later re-follow.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='follows')
    business = models.ForeignKey('businesses.Business', on_delete=models.CASCADE, related_name='follows')
    status = models.CharField(max_length=20, choices=FollowStatus.choices, default=FollowStatus.ACTIVE)

    # Notification preferences
    notify_new_deals = models.BooleanField(default=True)
    notify_flash_deals = models.BooleanField(default=False)

    followed_at = models.DateTimeField(default=timezone.now)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'follows'
        unique_together = [['user', 'business']]
        indexes = [
            models.Index(fields=['business', 'status'], name='follows_business_status_idx'),
            models.Index(fields=['user', 'status'], name='follows_user_status_idx'),
        ]
        ordering = ['-followed_at']

    def __str__(self):
        return f"{self.user} -> {self.business} ({self.status})"

    @property
    def is_following(self) -> bool:
        """Muted follows still count as following."""
        return self.status != FollowStatus.UNFOLLOWED
