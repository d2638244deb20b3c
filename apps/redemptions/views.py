from django.http import HttpResponse
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import extend_schema, OpenApiParameter

from apps.common.exceptions import error_response
from apps.common.serializers import PaginationQuerySerializer, ErrorSerializer
from .serializers import (
    ValidateRedemptionInputSerializer,
    BusinessRedemptionFilterSerializer,
    RedemptionSerializer,
    BusinessRedemptionSerializer,
    RedeemResponseSerializer,
    RedemptionListResponseSerializer,
    BusinessRedemptionsResponseSerializer,
)
from .services import (
    redeem_deal,
    get_user_redemptions,
    get_redemption_details,
    validate_redemption,
    get_business_redemptions,
    generate_redemption_qr,
    # Exceptions
    RedemptionsServiceError,
)


@extend_schema(
    request=None,
    responses={201: RedeemResponseSerializer, 400: ErrorSerializer, 404: ErrorSerializer, 409: ErrorSerializer},
    description="Redeem a deal. Returns the pending redemption and the code to show the business.",
    tags=['redemptions'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def redeem(request, deal_id):
    """Redeem a deal for the current user."""
    try:
        result = redeem_deal(user_id=request.user.id, deal_id=deal_id)
    except RedemptionsServiceError as e:
        return error_response(e)

    return Response({
        'redemption': RedemptionSerializer(result.redemption).data,
        'redemption_code': result.redemption_code,
    }, status=status.HTTP_201_CREATED)


@extend_schema(
    parameters=[PaginationQuerySerializer],
    responses={200: RedemptionListResponseSerializer},
    description="Get the current user's redemptions, newest first.",
    tags=['redemptions'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def my_redemptions(request):
    """List the current user's redemptions."""
    query = PaginationQuerySerializer(data=request.query_params)
    query.is_valid(raise_exception=True)

    result = get_user_redemptions(
        user=request.user,
        page=query.validated_data['page'],
        limit=query.validated_data.get('limit'),
    )

    return Response({
        'redemptions': RedemptionSerializer(result['redemptions'], many=True).data,
        'pagination': result['pagination'],
    })


@extend_schema(
    responses={200: RedemptionSerializer, 404: ErrorSerializer},
    description="Get one of the current user's redemptions.",
    tags=['redemptions'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def redemption_detail(request, redemption_id):
    try:
        redemption = get_redemption_details(user=request.user, redemption_id=redemption_id)
    except RedemptionsServiceError as e:
        return error_response(e)

    return Response(RedemptionSerializer(redemption).data)


@extend_schema(
    responses={(200, 'image/png'): OpenApiTypes.BINARY, 404: ErrorSerializer},
    description="Get the redemption code as a PNG QR image.",
    tags=['redemptions'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def redemption_qr_code(request, redemption_id):
    """
    Get QR code for a redemption.

    GET /api/redemptions/{id}/qr_code/
    """
    try:
        redemption = get_redemption_details(user=request.user, redemption_id=redemption_id)
    except RedemptionsServiceError as e:
        return error_response(e)

    return HttpResponse(generate_redemption_qr(redemption), content_type='image/png')


@extend_schema(
    request=ValidateRedemptionInputSerializer,
    responses={200: BusinessRedemptionSerializer, 400: ErrorSerializer, 403: ErrorSerializer, 404: ErrorSerializer},
    description="Validate a redemption presented at the business. Owner only.",
    tags=['redemptions'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def validate(request):
    """Validate a redemption code scanned by a business owner."""
    serializer = ValidateRedemptionInputSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        redemption = validate_redemption(
            redemption_id=serializer.validated_data['redemption_id'],
            validator_id=request.user.id,
            status=serializer.validated_data.get('status'),
        )
    except RedemptionsServiceError as e:
        return error_response(e)

    return Response(BusinessRedemptionSerializer(redemption).data)


@extend_schema(
    parameters=[
        BusinessRedemptionFilterSerializer,
        OpenApiParameter('business_id', OpenApiTypes.UUID, OpenApiParameter.PATH),
    ],
    responses={200: BusinessRedemptionsResponseSerializer, 403: ErrorSerializer, 404: ErrorSerializer},
    description="Get redemptions made at a business with a status summary. Owner only.",
    tags=['redemptions'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def business_redemptions(request, business_id):
    """List redemptions at a business owned by the current user."""
    query = BusinessRedemptionFilterSerializer(data=request.query_params)
    query.is_valid(raise_exception=True)
    params = query.validated_data

    try:
        result = get_business_redemptions(
            business_id=business_id,
            user_id=request.user.id,
            status=params.get('status'),
            page=params['page'],
            limit=params.get('limit'),
        )
    except RedemptionsServiceError as e:
        return error_response(e)

    return Response({
        'redemptions': BusinessRedemptionSerializer(result['redemptions'], many=True).data,
        'pagination': result['pagination'],
        'summary': result['summary'],
    })
