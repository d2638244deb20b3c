from rest_framework import serializers

from apps.accounts.models import User
from apps.businesses.models import Business
from .models import Follow, FollowStatus


# =============================================================================
# Input Serializers
# =============================================================================

class NotificationPreferencesInputSerializer(serializers.Serializer):
    """
    Validate input for updating follow notification preferences.

    Fields:
        notify_new_deals (bool): Notify about every new deal
        notify_flash_deals (bool): Notify about flash deals
    """

    notify_new_deals = serializers.BooleanField(required=False)
    notify_flash_deals = serializers.BooleanField(required=False)

    def validate(self, attrs):
        if not attrs:
            raise serializers.ValidationError('Provide at least one preference to update')
        return attrs


# =============================================================================
# Output Serializers
# =============================================================================

class FollowedBusinessSerializer(serializers.ModelSerializer):
    class Meta:
        model = Business
        fields = ['id', 'business_name', 'slug', 'category', 'city', 'country', 'follower_count', 'average_rating', 'is_verified']


class FollowerUserSerializer(serializers.ModelSerializer):
    display_name = serializers.CharField(source='get_display_name', read_only=True)

    class Meta:
        model = User
        fields = ['id', 'username', 'display_name', 'avatar_url']


class FollowSerializer(serializers.ModelSerializer):
    business_id = serializers.UUIDField(read_only=True)

    class Meta:
        model = Follow
        fields = ['id', 'business_id', 'status', 'notify_new_deals', 'notify_flash_deals', 'followed_at']
        read_only_fields = fields


class FollowingSerializer(FollowSerializer):
    """Follow row with the followed business, for the user's list."""

    business = FollowedBusinessSerializer(read_only=True)

    class Meta(FollowSerializer.Meta):
        fields = FollowSerializer.Meta.fields + ['business']
        read_only_fields = fields


class FollowerSerializer(serializers.ModelSerializer):
    user = FollowerUserSerializer(read_only=True)

    class Meta:
        model = Follow
        fields = ['id', 'user', 'notify_new_deals', 'notify_flash_deals', 'followed_at']
        read_only_fields = fields


class FollowStatusSerializer(serializers.Serializer):
    is_following = serializers.BooleanField()
    status = serializers.ChoiceField(choices=FollowStatus.choices, required=False)
    notify_new_deals = serializers.BooleanField(required=False)
    notify_flash_deals = serializers.BooleanField(required=False)
    followed_at = serializers.DateTimeField(required=False)


class FollowListResponseSerializer(serializers.Serializer):
    total = serializers.IntegerField()
    follows = FollowingSerializer(many=True)


class FollowerListResponseSerializer(serializers.Serializer):
    total = serializers.IntegerField()
    followers = FollowerSerializer(many=True)
