from django.contrib import admin
from .models import Review
from .services import update_business_rating


@admin.register(Review)
class ReviewAdmin(admin.ModelAdmin):
    list_display = ['user', 'business', 'rating', 'is_verified_buyer', 'status', 'created_at']
    list_filter = ['rating', 'status', 'is_verified_buyer', 'created_at']
    search_fields = ['user__email', 'business__business_name', 'review_text']
    readonly_fields = ['id', 'is_verified_buyer', 'created_at', 'updated_at']

    fieldsets = (
        ('Review', {
            'fields': ('business', 'user', 'rating', 'review_text')
        }),
        ('Moderation', {
            'fields': ('status', 'is_verified_buyer')
        }),
        ('Metadata', {
            'fields': ('id', 'created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    def get_queryset(self, request):
        return super().get_queryset(request).select_related('user', 'business')

    def save_model(self, request, obj, form, change):
        # Moderation changes which reviews count toward the average
        super().save_model(request, obj, form, change)
        update_business_rating(business_id=obj.business_id)

    def delete_model(self, request, obj):
        business_id = obj.business_id
        super().delete_model(request, obj)
        update_business_rating(business_id=business_id)

    def delete_queryset(self, request, queryset):
        business_ids = set(queryset.values_list('business_id', flat=True))
        super().delete_queryset(request, queryset)
        for business_id in business_ids:
            update_business_rating(business_id=business_id)
