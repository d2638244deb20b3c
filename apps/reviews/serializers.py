from rest_framework import serializers

from apps.accounts.models import User
from apps.common.serializers import PaginationSerializer
from .models import Review


# =============================================================================
# Input Serializers
# =============================================================================

class ReviewCreateSerializer(serializers.Serializer):
    """
    Validate input for creating a review.

    Fields:
        business_id (UUID): Reviewed business
        rating (int): Overall rating 1-5
        review_text (str): Optional written review
    """

    business_id = serializers.UUIDField()
    rating = serializers.IntegerField(min_value=1, max_value=5)
    review_text = serializers.CharField(max_length=1000, required=False, allow_blank=True, default='')


class ReviewUpdateSerializer(serializers.Serializer):
    """Validate input for a partial review update."""

    rating = serializers.IntegerField(min_value=1, max_value=5, required=False)
    review_text = serializers.CharField(max_length=1000, required=False, allow_blank=True)

    def validate(self, attrs):
        if not attrs:
            raise serializers.ValidationError('Provide a rating or review text to update')
        return attrs


# =============================================================================
# Output Serializers
# =============================================================================

class UserMinimalSerializer(serializers.ModelSerializer):
    """Minimal user info for nested serialization."""

    display_name = serializers.SerializerMethodField()

    class Meta:
        model = User
        fields = ['id', 'username', 'display_name', 'avatar_url']
        read_only_fields = fields

    def get_display_name(self, obj):
        return obj.get_display_name()


class ReviewSerializer(serializers.ModelSerializer):
    """Main review serializer."""

    user = UserMinimalSerializer(read_only=True)
    business_id = serializers.UUIDField(read_only=True)

    class Meta:
        model = Review
        fields = [
            'id',
            'business_id',
            'user',
            'rating',
            'review_text',
            'is_verified_buyer',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class BusinessReviewsResponseSerializer(serializers.Serializer):
    reviews = ReviewSerializer(many=True)
    average_rating = serializers.FloatField()
    total_reviews = serializers.IntegerField()
    rating_distribution = serializers.DictField(child=serializers.IntegerField())
    pagination = PaginationSerializer()
