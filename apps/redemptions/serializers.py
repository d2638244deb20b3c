from rest_framework import serializers

from apps.accounts.models import User
from apps.businesses.models import Business
from apps.common.serializers import PaginationQuerySerializer, PaginationSerializer
from apps.deals.models import Deal
from .models import Redemption, RedemptionStatus


# =============================================================================
# Input Serializers
# =============================================================================

class ValidateRedemptionInputSerializer(serializers.Serializer):
    """
    Validate input for redemption validation by a business owner.

    Fields:
        redemption_id (UUID): Code scanned from the customer's QR
        status (str): Optional target status, defaults to validated
    """

    redemption_id = serializers.UUIDField()
    status = serializers.ChoiceField(choices=RedemptionStatus.choices, required=False)


class BusinessRedemptionFilterSerializer(PaginationQuerySerializer):
    """
    Validate query parameters for a business's redemption list.

    Query Parameters:
        status (str): Filter by redemption status
        page (int): Page number
        limit (int): Page size
    """

    status = serializers.ChoiceField(choices=RedemptionStatus.choices, required=False)


# =============================================================================
# Output Serializers
# =============================================================================

class DealMinimalSerializer(serializers.ModelSerializer):
    class Meta:
        model = Deal
        fields = ['id', 'title', 'description', 'category', 'expires_at']


class BusinessMinimalSerializer(serializers.ModelSerializer):
    class Meta:
        model = Business
        fields = ['id', 'business_name', 'category', 'city', 'country']


class UserMinimalSerializer(serializers.ModelSerializer):
    class Meta:
        model = User
        fields = ['id', 'username', 'email']


class RedemptionSerializer(serializers.ModelSerializer):
    """Redemption as seen by the user who made it."""

    deal = DealMinimalSerializer(read_only=True)
    business = BusinessMinimalSerializer(read_only=True)
    redemption_code = serializers.CharField(read_only=True)

    class Meta:
        model = Redemption
        fields = [
            'id',
            'redemption_code',
            'original_price',
            'paid_price',
            'savings_amount',
            'deal_category',
            'status',
            'redeemed_at',
            'validated_at',
            'deal',
            'business',
        ]
        read_only_fields = fields


class BusinessRedemptionSerializer(serializers.ModelSerializer):
    """Redemption as seen by the business owner."""

    deal = DealMinimalSerializer(read_only=True)
    user = UserMinimalSerializer(read_only=True)
    validated_by = serializers.UUIDField(source='validated_by_id', read_only=True, allow_null=True)

    class Meta:
        model = Redemption
        fields = [
            'id',
            'status',
            'original_price',
            'paid_price',
            'savings_amount',
            'redeemed_at',
            'validated_at',
            'validated_by',
            'deal',
            'user',
        ]
        read_only_fields = fields


class RedeemResponseSerializer(serializers.Serializer):
    redemption = RedemptionSerializer()
    redemption_code = serializers.CharField()


class RedemptionListResponseSerializer(serializers.Serializer):
    redemptions = RedemptionSerializer(many=True)
    pagination = PaginationSerializer()


class RedemptionSummarySerializer(serializers.Serializer):
    total_redemptions = serializers.IntegerField()
    pending_count = serializers.IntegerField()
    validated_count = serializers.IntegerField()
    expired_count = serializers.IntegerField()
    cancelled_count = serializers.IntegerField()


class BusinessRedemptionsResponseSerializer(serializers.Serializer):
    redemptions = BusinessRedemptionSerializer(many=True)
    pagination = PaginationSerializer()
    summary = RedemptionSummarySerializer()
