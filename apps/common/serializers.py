from django.conf import settings
from rest_framework import serializers


class PaginationQuerySerializer(serializers.Serializer):
    """
    Validate page/limit query parameters.

    Query Parameters:
        page (int): 1-based page number
        limit (int): Page size, capped at MAX_PAGE_SIZE
    """

    page = serializers.IntegerField(min_value=1, required=False, default=1)
    limit = serializers.IntegerField(min_value=1, max_value=settings.MAX_PAGE_SIZE, required=False)


class PaginationSerializer(serializers.Serializer):
    page = serializers.IntegerField()
    limit = serializers.IntegerField()
    total = serializers.IntegerField()
    total_pages = serializers.IntegerField()
    has_more = serializers.BooleanField()


class ErrorSerializer(serializers.Serializer):
    error = serializers.CharField()
