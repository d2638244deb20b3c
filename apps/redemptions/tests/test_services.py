"""
Service layer unit tests for redemptions app.

Tests cover:
- Redemption preconditions and their order
- Inventory and per-user limits
- Counter consistency and rollback
- Validation by business owners
"""

import pytest
from datetime import timedelta
from decimal import Decimal
from unittest.mock import patch
from uuid import uuid4
from django.utils import timezone

from apps.redemptions.models import Redemption, RedemptionStatus
from apps.redemptions.services import (
    redeem_deal,
    get_user_redemptions,
    get_redemption_details,
    validate_redemption,
    get_business_redemptions,
    generate_redemption_qr,
)
from apps.redemptions.services.exceptions import (
    DealNotFoundError,
    DealNotActiveError,
    DealNotStartedError,
    DealExpiredError,
    DealSoldOutError,
    UserNotFoundError,
    RedemptionLimitReachedError,
    RedemptionNotFoundError,
    BusinessNotFoundError,
    NotBusinessOwnerError,
    RedemptionAlreadyValidatedError,
)


# =============================================================================
# Redemption Engine Tests
# =============================================================================

@pytest.mark.django_db
class TestRedeemDeal:
    """Tests for redemption_engine.redeem_deal."""

    def test_redeem_success_snapshots_prices(self, customer, deal):
        result = redeem_deal(user_id=customer.id, deal_id=deal.id)

        redemption = result.redemption
        assert result.redemption_code == str(redemption.id)
        assert redemption.status == RedemptionStatus.PENDING
        assert redemption.original_price == Decimal('10.00')
        assert redemption.paid_price == Decimal('7.50')
        assert redemption.savings_amount == Decimal('2.50')
        assert redemption.deal_category == 'food_beverage'
        assert redemption.business_id == deal.business_id

    def test_redeem_increments_counters(self, customer, deal, business):
        redeem_deal(user_id=customer.id, deal_id=deal.id)

        deal.refresh_from_db()
        business.refresh_from_db()
        assert deal.quantity_redeemed == 1
        assert business.total_redemptions == 1

    def test_snapshot_survives_price_change(self, customer, deal):
        result = redeem_deal(user_id=customer.id, deal_id=deal.id)

        deal.original_price = Decimal('20.00')
        deal.discounted_price = Decimal('5.00')
        deal.save()

        result.redemption.refresh_from_db()
        assert result.redemption.paid_price == Decimal('7.50')
        assert result.redemption.savings_amount == Decimal('2.50')

    def test_missing_deal(self, customer):
        with pytest.raises(DealNotFoundError, match="Deal not found"):
            redeem_deal(user_id=customer.id, deal_id=uuid4())

    @pytest.mark.parametrize('deal_status', ['paused', 'expired', 'sold_out'])
    def test_inactive_deal(self, customer, make_deal, deal_status):
        deal = make_deal(status=deal_status)

        with pytest.raises(DealNotActiveError, match="Deal is not active"):
            redeem_deal(user_id=customer.id, deal_id=deal.id)

    def test_deal_not_started(self, customer, make_deal):
        now = timezone.now()
        deal = make_deal(starts_at=now + timedelta(hours=1), expires_at=now + timedelta(hours=2))

        with pytest.raises(DealNotStartedError, match="Deal has not started yet"):
            redeem_deal(user_id=customer.id, deal_id=deal.id)

    def test_deal_expired(self, customer, make_deal):
        now = timezone.now()
        deal = make_deal(starts_at=now - timedelta(hours=2), expires_at=now - timedelta(hours=1))

        with pytest.raises(DealExpiredError, match="Deal has expired"):
            redeem_deal(user_id=customer.id, deal_id=deal.id)

    def test_sold_out(self, customer, make_deal):
        deal = make_deal(quantity_available=3, quantity_redeemed=3)

        with pytest.raises(DealSoldOutError, match="Deal sold out"):
            redeem_deal(user_id=customer.id, deal_id=deal.id)

        assert Redemption.objects.count() == 0

    def test_unlimited_quantity(self, customer, make_deal):
        deal = make_deal(quantity_available=None, quantity_redeemed=500)

        redeem_deal(user_id=customer.id, deal_id=deal.id)

        deal.refresh_from_db()
        assert deal.quantity_redeemed == 501

    def test_missing_user(self, deal):
        with pytest.raises(UserNotFoundError, match="User not found"):
            redeem_deal(user_id=uuid4(), deal_id=deal.id)

    def test_deal_checks_come_before_user_check(self, make_deal):
        deal = make_deal(status='paused')

        with pytest.raises(DealNotActiveError):
            redeem_deal(user_id=uuid4(), deal_id=deal.id)

    def test_per_user_limit(self, customer, make_deal):
        deal = make_deal(max_per_user=2)

        redeem_deal(user_id=customer.id, deal_id=deal.id)
        redeem_deal(user_id=customer.id, deal_id=deal.id)

        with pytest.raises(RedemptionLimitReachedError, match=r"You can only redeem this deal 2 time\(s\)"):
            redeem_deal(user_id=customer.id, deal_id=deal.id)

        assert Redemption.objects.filter(user=customer, deal=deal).count() == 2

    def test_per_user_limit_is_per_user(self, customer, other_customer, deal):
        redeem_deal(user_id=customer.id, deal_id=deal.id)
        redeem_deal(user_id=other_customer.id, deal_id=deal.id)

        deal.refresh_from_db()
        assert deal.quantity_redeemed == 2

    def test_last_unit_then_sold_out(self, customer, other_customer, make_deal):
        deal = make_deal(quantity_available=1)

        redeem_deal(user_id=customer.id, deal_id=deal.id)

        with pytest.raises(DealSoldOutError):
            redeem_deal(user_id=other_customer.id, deal_id=deal.id)

        deal.refresh_from_db()
        assert deal.quantity_redeemed == deal.quantity_available

    def test_failed_counter_update_rolls_back(self, customer, deal, business):
        """Redemption insert and deal counter commit or fail together."""
        with patch(
            'apps.redemptions.services.redemption_engine.update_business_counter',
            side_effect=RuntimeError('db down'),
        ):
            with pytest.raises(RuntimeError):
                redeem_deal(user_id=customer.id, deal_id=deal.id)

        deal.refresh_from_db()
        business.refresh_from_db()
        assert Redemption.objects.count() == 0
        assert deal.quantity_redeemed == 0
        assert business.total_redemptions == 0


@pytest.mark.django_db
class TestUserRedemptions:
    """Tests for listing and reading a user's redemptions."""

    def test_list_newest_first_with_pagination(self, customer, make_deal):
        now = timezone.now()
        for i in range(3):
            result = redeem_deal(user_id=customer.id, deal_id=make_deal(title=f'Deal {i}').id)
            Redemption.objects.filter(id=result.redemption.id).update(redeemed_at=now + timedelta(minutes=i))

        result = get_user_redemptions(user=customer, page=1, limit=2)

        assert [r.deal.title for r in result['redemptions']] == ['Deal 2', 'Deal 1']
        assert result['pagination'] == {
            'page': 1,
            'limit': 2,
            'total': 3,
            'total_pages': 2,
            'has_more': True,
        }

    def test_page_past_end_is_empty(self, customer, deal):
        redeem_deal(user_id=customer.id, deal_id=deal.id)

        result = get_user_redemptions(user=customer, page=5, limit=20)

        assert result['redemptions'] == []
        assert result['pagination']['has_more'] is False

    def test_only_own_redemptions(self, customer, other_customer, deal):
        redeem_deal(user_id=other_customer.id, deal_id=deal.id)

        result = get_user_redemptions(user=customer)

        assert result['redemptions'] == []
        assert result['pagination']['total'] == 0

    def test_details_of_other_users_redemption(self, customer, other_customer, deal):
        result = redeem_deal(user_id=other_customer.id, deal_id=deal.id)

        with pytest.raises(RedemptionNotFoundError):
            get_redemption_details(user=customer, redemption_id=result.redemption.id)

    def test_details(self, customer, deal):
        result = redeem_deal(user_id=customer.id, deal_id=deal.id)

        redemption = get_redemption_details(user=customer, redemption_id=result.redemption.id)

        assert redemption.id == result.redemption.id


# =============================================================================
# Redemption Validation Tests
# =============================================================================

@pytest.mark.django_db
class TestValidateRedemption:
    """Tests for redemption_validation.validate_redemption."""

    @pytest.fixture
    def redemption(self, customer, deal):
        return redeem_deal(user_id=customer.id, deal_id=deal.id).redemption

    def test_owner_validates(self, redemption, business_owner):
        before = timezone.now()

        validated = validate_redemption(redemption_id=redemption.id, validator_id=business_owner.id)

        assert validated.status == RedemptionStatus.VALIDATED
        assert validated.validated_by_id == business_owner.id
        assert validated.validated_at >= before

    def test_unknown_code(self, business_owner):
        with pytest.raises(RedemptionNotFoundError, match="Invalid redemption code"):
            validate_redemption(redemption_id=uuid4(), validator_id=business_owner.id)

    def test_non_owner_rejected(self, redemption, customer):
        with pytest.raises(NotBusinessOwnerError):
            validate_redemption(redemption_id=redemption.id, validator_id=customer.id)

        redemption.refresh_from_db()
        assert redemption.status == RedemptionStatus.PENDING
        assert redemption.validated_at is None

    def test_validation_is_one_way(self, redemption, business_owner):
        validate_redemption(redemption_id=redemption.id, validator_id=business_owner.id)

        with pytest.raises(RedemptionAlreadyValidatedError, match="Redemption has already been validated"):
            validate_redemption(
                redemption_id=redemption.id,
                validator_id=business_owner.id,
                status=RedemptionStatus.CANCELLED,
            )

        redemption.refresh_from_db()
        assert redemption.status == RedemptionStatus.VALIDATED

    def test_explicit_status(self, redemption, business_owner):
        updated = validate_redemption(
            redemption_id=redemption.id,
            validator_id=business_owner.id,
            status=RedemptionStatus.CANCELLED,
        )

        assert updated.status == RedemptionStatus.CANCELLED
        assert updated.validated_by_id == business_owner.id


@pytest.mark.django_db
class TestBusinessRedemptions:
    """Tests for redemption_validation.get_business_redemptions."""

    def test_summary_ignores_filter_and_page(self, customer, other_customer, business_owner, business, make_deal):
        first = redeem_deal(user_id=customer.id, deal_id=make_deal().id).redemption
        redeem_deal(user_id=other_customer.id, deal_id=make_deal().id)
        redeem_deal(user_id=customer.id, deal_id=make_deal().id)
        validate_redemption(redemption_id=first.id, validator_id=business_owner.id)

        result = get_business_redemptions(
            business_id=business.id,
            user_id=business_owner.id,
            status=RedemptionStatus.VALIDATED,
            page=1,
            limit=1,
        )

        assert len(result['redemptions']) == 1
        assert result['redemptions'][0].id == first.id
        assert result['pagination']['total'] == 1
        assert result['summary'] == {
            'total_redemptions': 3,
            'pending_count': 2,
            'validated_count': 1,
            'expired_count': 0,
            'cancelled_count': 0,
        }

    def test_empty_business(self, business_owner, business):
        result = get_business_redemptions(business_id=business.id, user_id=business_owner.id)

        assert result['redemptions'] == []
        assert result['summary']['total_redemptions'] == 0

    def test_unknown_business(self, business_owner):
        with pytest.raises(BusinessNotFoundError):
            get_business_redemptions(business_id=uuid4(), user_id=business_owner.id)

    def test_non_owner(self, customer, business):
        with pytest.raises(NotBusinessOwnerError):
            get_business_redemptions(business_id=business.id, user_id=customer.id)


@pytest.mark.django_db
class TestRedemptionQrCode:

    def test_png_bytes(self, customer, deal):
        redemption = redeem_deal(user_id=customer.id, deal_id=deal.id).redemption

        png = generate_redemption_qr(redemption)

        assert png.startswith(b'\x89PNG')
