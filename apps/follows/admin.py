from django.contrib import admin
from .models import Follow


@admin.register(Follow)
class FollowAdmin(admin.ModelAdmin):
    list_display = ['user', 'business', 'status', 'notify_new_deals', 'notify_flash_deals', 'followed_at']
    list_filter = ['status', 'notify_new_deals', 'notify_flash_deals', 'followed_at']
    search_fields = ['user__email', 'business__business_name']
    readonly_fields = ['id', 'followed_at', 'updated_at']

    def get_queryset(self, request):
        return super().get_queryset(request).select_related('user', 'business')
