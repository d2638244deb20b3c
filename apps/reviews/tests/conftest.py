import pytest
from datetime import timedelta
from decimal import Decimal
from django.utils import timezone
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User, UserType
from apps.businesses.models import Business
from apps.deals.models import Deal
from apps.reviews.models import Review


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
def review_user(db):
    """Create and return a test user for reviews."""
    return User.objects.create_user(
        email='reviewer@example.com',
        password='TestPass123!',
        username='reviewer',
        display_name='Deal Hunter',
    )


@pytest.fixture
def review_other_user(db):
    """Create and return another test user for reviews."""
    return User.objects.create_user(
        email='review_other@example.com',
        password='TestPass123!',
        username='review_other',
    )


@pytest.fixture
def review_owner(db):
    return User.objects.create_user(
        email='cafe.owner@example.com',
        password='TestPass123!',
        username='cafe_owner',
        user_type=UserType.BUSINESS,
    )


@pytest.fixture
def review_auth_client(review_user):
    """Return API client authenticated as review user."""
    return _client_for(review_user)


@pytest.fixture
def review_other_client(review_other_user):
    """Return API client authenticated as other user."""
    return _client_for(review_other_user)


@pytest.fixture
def review_business(db, review_owner):
    """Create and return the reviewed business."""
    return Business.objects.create(
        owner=review_owner,
        business_name='Sunrise Cafe',
        slug='sunrise-cafe',
        category='food_beverage',
    )


@pytest.fixture
def review_deal(db, review_business):
    now = timezone.now()
    return Deal.objects.create(
        business=review_business,
        title='Two-for-one lattes',
        original_price=Decimal('8.00'),
        discounted_price=Decimal('4.00'),
        category='food_beverage',
        starts_at=now - timedelta(hours=1),
        expires_at=now + timedelta(hours=1),
        max_per_user=3,
    )


@pytest.fixture
def review(db, review_user, review_business):
    """Active 4-star review with the business average in step."""
    review = Review.objects.create(
        business=review_business,
        user=review_user,
        rating=4,
        review_text='Great coffee, friendly staff.',
    )
    review_business.average_rating = Decimal('4.00')
    review_business.save(update_fields=['average_rating'])
    return review


@pytest.fixture
def make_reviewer(db):
    """Factory for extra reviewers."""
    counter = {'n': 0}

    def _make_reviewer():
        counter['n'] += 1
        return User.objects.create_user(
            email=f'reviewer{counter["n"]}@example.org',
            password='TestPass123!',
            username=f'reviewer_{counter["n"]}',
        )
    return _make_reviewer
