from django.contrib import admin
from .models import Business


@admin.register(Business)
class BusinessAdmin(admin.ModelAdmin):
    list_display = ['business_name', 'owner', 'category', 'city', 'follower_count', 'total_redemptions', 'average_rating', 'is_verified']
    list_filter = ['category', 'is_verified', 'country', 'created_at']
    search_fields = ['business_name', 'slug', 'owner__email', 'city']
    prepopulated_fields = {'slug': ('business_name',)}
    readonly_fields = ['id', 'follower_count', 'total_redemptions', 'average_rating', 'created_at', 'updated_at']

    def get_queryset(self, request):
        return super().get_queryset(request).select_related('owner')
