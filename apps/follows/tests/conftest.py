import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User, UserType
from apps.businesses.models import Business
from apps.follows.models import Follow, FollowStatus


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
def follower(db):
    """Create and return a consumer who follows businesses."""
    return User.objects.create_user(
        email='follower@example.com',
        password='TestPass123!',
        username='follower',
        display_name='Local Shopper',
    )


@pytest.fixture
def second_follower(db):
    return User.objects.create_user(
        email='second.follower@example.com',
        password='TestPass123!',
        username='second_follower',
    )


@pytest.fixture
def shop_owner(db):
    return User.objects.create_user(
        email='shop.owner@example.com',
        password='TestPass123!',
        username='shop_owner',
        user_type=UserType.BUSINESS,
    )


@pytest.fixture
def follower_client(follower):
    return _client_for(follower)


@pytest.fixture
def shop_owner_client(shop_owner):
    return _client_for(shop_owner)


@pytest.fixture
def shop(db, shop_owner):
    return Business.objects.create(
        owner=shop_owner,
        business_name='Green Grocer',
        slug='green-grocer',
        category='shopping',
    )


@pytest.fixture
def other_shop(db, shop_owner):
    return Business.objects.create(
        owner=shop_owner,
        business_name='Night Market',
        slug='night-market',
        category='food_beverage',
    )


@pytest.fixture
def active_follow(db, follower, shop):
    """Active follow with the follower counter already in step."""
    shop.follower_count = 1
    shop.save(update_fields=['follower_count'])
    return Follow.objects.create(user=follower, business=shop, status=FollowStatus.ACTIVE)
