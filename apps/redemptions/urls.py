from django.urls import path
from . import views

app_name = 'redemptions'

urlpatterns = [
    # POST /api/redemptions/deals/{deal_id}/redeem/      - Redeem a deal
    # GET  /api/redemptions/                             - My redemptions
    # GET  /api/redemptions/{id}/                        - Redemption details
    # GET  /api/redemptions/{id}/qr_code/                - QR image of the code
    # POST /api/redemptions/validate/                    - Validate (owner)
    # GET  /api/redemptions/business/{business_id}/      - Business redemptions (owner)
    path('', views.my_redemptions, name='my-redemptions'),
    path('deals/<uuid:deal_id>/redeem/', views.redeem, name='redeem'),
    path('validate/', views.validate, name='validate'),
    path('business/<uuid:business_id>/', views.business_redemptions, name='business-redemptions'),
    path('<uuid:redemption_id>/', views.redemption_detail, name='detail'),
    path('<uuid:redemption_id>/qr_code/', views.redemption_qr_code, name='qr-code'),
]
