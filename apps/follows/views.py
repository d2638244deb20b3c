from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from apps.common.exceptions import error_response
from apps.common.serializers import ErrorSerializer
from .serializers import (
    NotificationPreferencesInputSerializer,
    FollowSerializer,
    FollowingSerializer,
    FollowerSerializer,
    FollowStatusSerializer,
    FollowListResponseSerializer,
    FollowerListResponseSerializer,
)
from .services import (
    follow_business,
    unfollow_business,
    mute_business,
    unmute_business,
    update_notification_preferences,
    get_followed_businesses,
    get_business_followers,
    get_follow_status,
    # Exceptions
    FollowsServiceError,
)


@extend_schema(
    responses={200: FollowListResponseSerializer},
    description="Get businesses the current user follows (active and muted).",
    tags=['follows'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def my_follows(request):
    follows = list(get_followed_businesses(user_id=request.user.id))

    return Response({
        'total': len(follows),
        'follows': FollowingSerializer(follows, many=True).data,
    })


@extend_schema(
    methods=['GET'],
    responses={200: FollowStatusSerializer},
    description="Get whether the current user follows this business.",
    tags=['follows'],
)
@extend_schema(
    methods=['POST'],
    request=None,
    responses={201: FollowSerializer, 400: ErrorSerializer, 404: ErrorSerializer, 409: ErrorSerializer},
    description="Follow a business.",
    tags=['follows'],
)
@extend_schema(
    methods=['DELETE'],
    responses={204: None, 404: ErrorSerializer},
    description="Unfollow a business.",
    tags=['follows'],
)
@api_view(['GET', 'POST', 'DELETE'])
@permission_classes([IsAuthenticated])
def follow(request, business_id):
    """
    Follow state of the current user for one business.

    GET    /api/follows/{business_id}/  - Follow status
    POST   /api/follows/{business_id}/  - Follow
    DELETE /api/follows/{business_id}/  - Unfollow
    """
    if request.method == 'GET':
        result = get_follow_status(user_id=request.user.id, business_id=business_id)
        return Response(FollowStatusSerializer(result).data)

    try:
        if request.method == 'POST':
            created = follow_business(user_id=request.user.id, business_id=business_id)
            return Response(FollowSerializer(created).data, status=status.HTTP_201_CREATED)

        unfollow_business(user_id=request.user.id, business_id=business_id)
        return Response(status=status.HTTP_204_NO_CONTENT)
    except FollowsServiceError as e:
        return error_response(e)


@extend_schema(
    request=None,
    responses={200: FollowSerializer, 404: ErrorSerializer},
    description="Mute an active follow.",
    tags=['follows'],
)
@api_view(['PATCH'])
@permission_classes([IsAuthenticated])
def mute(request, business_id):
    try:
        updated = mute_business(user_id=request.user.id, business_id=business_id)
    except FollowsServiceError as e:
        return error_response(e)

    return Response(FollowSerializer(updated).data)


@extend_schema(
    request=None,
    responses={200: FollowSerializer, 404: ErrorSerializer},
    description="Unmute a muted follow.",
    tags=['follows'],
)
@api_view(['PATCH'])
@permission_classes([IsAuthenticated])
def unmute(request, business_id):
    try:
        updated = unmute_business(user_id=request.user.id, business_id=business_id)
    except FollowsServiceError as e:
        return error_response(e)

    return Response(FollowSerializer(updated).data)


@extend_schema(
    request=NotificationPreferencesInputSerializer,
    responses={200: FollowSerializer, 400: ErrorSerializer, 404: ErrorSerializer},
    description="Update notification preferences for a follow.",
    tags=['follows'],
)
@api_view(['PATCH'])
@permission_classes([IsAuthenticated])
def notifications(request, business_id):
    serializer = NotificationPreferencesInputSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        updated = update_notification_preferences(
            user_id=request.user.id,
            business_id=business_id,
            notify_new_deals=serializer.validated_data.get('notify_new_deals'),
            notify_flash_deals=serializer.validated_data.get('notify_flash_deals'),
        )
    except FollowsServiceError as e:
        return error_response(e)

    return Response(FollowSerializer(updated).data)


@extend_schema(
    responses={200: FollowerListResponseSerializer, 404: ErrorSerializer},
    description="Get active followers of a business.",
    tags=['follows'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def followers(request, business_id):
    try:
        follows = list(get_business_followers(business_id=business_id))
    except FollowsServiceError as e:
        return error_response(e)

    return Response({
        'total': len(follows),
        'followers': FollowerSerializer(follows, many=True).data,
    })
