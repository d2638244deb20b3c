from django.contrib import admin
from .models import Deal


@admin.register(Deal)
class DealAdmin(admin.ModelAdmin):
    list_display = ['title', 'business', 'discounted_price', 'original_price', 'status', 'quantity_redeemed', 'quantity_available', 'expires_at']
    list_filter = ['status', 'category', 'is_flash_deal', 'starts_at', 'expires_at']
    search_fields = ['title', 'business__business_name']
    readonly_fields = ['id', 'quantity_redeemed', 'created_at', 'updated_at']
    date_hierarchy = 'starts_at'

    fieldsets = (
        ('Deal', {
            'fields': ('business', 'title', 'description', 'category', 'is_flash_deal', 'status')
        }),
        ('Pricing', {
            'fields': ('original_price', 'discounted_price')
        }),
        ('Availability', {
            'fields': ('starts_at', 'expires_at', 'quantity_available', 'quantity_redeemed', 'max_per_user')
        }),
        ('Metadata', {
            'fields': ('id', 'created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    def get_queryset(self, request):
        return super().get_queryset(request).select_related('business')
