import pytest
from datetime import timedelta
from decimal import Decimal
from django.utils import timezone
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User, UserType
from apps.businesses.models import Business
from apps.deals.models import Deal


def _client_for(user):
    client = APIClient()
    refresh = RefreshToken.for_user(user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def customer(db):
    """Create and return a consumer who redeems deals."""
    return User.objects.create_user(
        email='customer@example.com',
        password='TestPass123!',
        username='customer',
    )


@pytest.fixture
def other_customer(db):
    return User.objects.create_user(
        email='other.customer@example.com',
        password='TestPass123!',
        username='other_customer',
    )


@pytest.fixture
def business_owner(db):
    """Create and return the owner of the test business."""
    return User.objects.create_user(
        email='owner@example.com',
        password='TestPass123!',
        username='owner',
        user_type=UserType.BUSINESS,
    )


@pytest.fixture
def customer_client(customer):
    return _client_for(customer)


@pytest.fixture
def other_customer_client(other_customer):
    return _client_for(other_customer)


@pytest.fixture
def owner_client(business_owner):
    return _client_for(business_owner)


@pytest.fixture
def business(db, business_owner):
    return Business.objects.create(
        owner=business_owner,
        business_name='Corner Bakery',
        slug='corner-bakery',
        category='food_beverage',
        city='Austin',
    )


@pytest.fixture
def make_deal(db, business):
    """Factory for deals open right now, overridable per test."""
    def _make_deal(**kwargs):
        now = timezone.now()
        defaults = {
            'business': business,
            'title': 'Half price croissants',
            'original_price': Decimal('10.00'),
            'discounted_price': Decimal('7.50'),
            'category': 'food_beverage',
            'starts_at': now - timedelta(hours=1),
            'expires_at': now + timedelta(hours=1),
        }
        defaults.update(kwargs)
        return Deal.objects.create(**defaults)
    return _make_deal


@pytest.fixture
def deal(make_deal):
    return make_deal(quantity_available=5, max_per_user=1)
