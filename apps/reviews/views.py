from rest_framework import viewsets, status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated, AllowAny
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from apps.common.exceptions import error_response
from apps.common.serializers import PaginationQuerySerializer, ErrorSerializer
from .models import Review
from .serializers import (
    ReviewCreateSerializer,
    ReviewUpdateSerializer,
    ReviewSerializer,
    BusinessReviewsResponseSerializer,
)
from .services import (
    create_review,
    update_review,
    delete_review,
    get_user_review,
    get_business_reviews,
    # Exceptions
    ReviewsServiceError,
)


class ReviewViewSet(viewsets.GenericViewSet):
    """
    ViewSet for review writes.

    All business logic is handled by services.
    Views are thin HTTP handlers only.

    create: Create a review for a business
    partial_update: Update rating or text (author only)
    destroy: Delete a review (author only)
    """

    queryset = Review.objects.select_related('user')
    serializer_class = ReviewSerializer
    permission_classes = [IsAuthenticated]
    lookup_value_regex = '[0-9a-f-]{36}'

    @extend_schema(
        request=ReviewCreateSerializer,
        responses={201: ReviewSerializer, 400: ErrorSerializer, 404: ErrorSerializer, 409: ErrorSerializer},
    )
    def create(self, request):
        serializer = ReviewCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            review = create_review(
                user=request.user,
                business_id=serializer.validated_data['business_id'],
                rating=serializer.validated_data['rating'],
                review_text=serializer.validated_data['review_text'],
            )
        except ReviewsServiceError as e:
            return error_response(e)

        return Response(ReviewSerializer(review).data, status=status.HTTP_201_CREATED)

    @extend_schema(
        request=ReviewUpdateSerializer,
        responses={200: ReviewSerializer, 400: ErrorSerializer, 403: ErrorSerializer, 404: ErrorSerializer},
    )
    def partial_update(self, request, pk=None):
        serializer = ReviewUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            review = update_review(
                review_id=pk,
                user=request.user,
                rating=serializer.validated_data.get('rating'),
                review_text=serializer.validated_data.get('review_text'),
            )
        except ReviewsServiceError as e:
            return error_response(e)

        return Response(ReviewSerializer(review).data)

    @extend_schema(responses={204: None, 403: ErrorSerializer, 404: ErrorSerializer})
    def destroy(self, request, pk=None):
        try:
            delete_review(review_id=pk, user=request.user)
        except ReviewsServiceError as e:
            return error_response(e)

        return Response(status=status.HTTP_204_NO_CONTENT)


@extend_schema(
    parameters=[PaginationQuerySerializer],
    responses={200: BusinessReviewsResponseSerializer, 404: ErrorSerializer},
    description="Get active reviews of a business with average and rating distribution.",
    tags=['reviews'],
)
@api_view(['GET'])
@permission_classes([AllowAny])
def business_reviews(request, business_id):
    query = PaginationQuerySerializer(data=request.query_params)
    query.is_valid(raise_exception=True)

    try:
        result = get_business_reviews(
            business_id=business_id,
            page=query.validated_data['page'],
            limit=query.validated_data.get('limit'),
        )
    except ReviewsServiceError as e:
        return error_response(e)

    return Response({
        'reviews': ReviewSerializer(result['reviews'], many=True).data,
        'average_rating': result['average_rating'],
        'total_reviews': result['total_reviews'],
        'rating_distribution': result['rating_distribution'],
        'pagination': result['pagination'],
    })


@extend_schema(
    responses={200: ReviewSerializer},
    description="Get the current user's review of a business, or null.",
    tags=['reviews'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def my_business_review(request, business_id):
    review = get_user_review(user=request.user, business_id=business_id)
    return Response(ReviewSerializer(review).data if review else None)
