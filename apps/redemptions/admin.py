from django.contrib import admin
from .models import Redemption


@admin.register(Redemption)
class RedemptionAdmin(admin.ModelAdmin):
    list_display = ['id', 'user', 'deal', 'business', 'paid_price', 'savings_amount', 'status', 'redeemed_at', 'validated_at']
    list_filter = ['status', 'deal_category', 'redeemed_at']
    search_fields = ['id', 'user__email', 'deal__title', 'business__business_name']
    readonly_fields = ['id', 'user', 'deal', 'business', 'original_price', 'paid_price', 'savings_amount', 'deal_category', 'redeemed_at', 'validated_at', 'validated_by']
    date_hierarchy = 'redeemed_at'

    def has_delete_permission(self, request, obj=None):
        # Redemptions are kept as savings history
        return False

    def get_queryset(self, request):
        return super().get_queryset(request).select_related('user', 'deal', 'business')
