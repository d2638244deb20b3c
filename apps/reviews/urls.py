from django.urls import path, include
from rest_framework.routers import SimpleRouter
from . import views

app_name = 'reviews'

# Router for ViewSets
router = SimpleRouter()
router.register(r'', views.ReviewViewSet, basename='review')

urlpatterns = [
    # Review ViewSet routes
    # POST   /api/reviews/          - Create review
    # PATCH  /api/reviews/{id}/     - Update rating/text (author)
    # DELETE /api/reviews/{id}/     - Delete review (author)

    # Business review listing
    # GET    /api/reviews/business/{business_id}/       - Reviews with statistics
    # GET    /api/reviews/business/{business_id}/mine/  - Current user's review
    path('business/<uuid:business_id>/', views.business_reviews, name='business-reviews'),
    path('business/<uuid:business_id>/mine/', views.my_business_review, name='my-business-review'),

    # Include router URLs
    path('', include(router.urls)),
]
