from django.urls import path
from . import views

app_name = 'follows'

urlpatterns = [
    # GET    /api/follows/                               - Followed businesses
    # GET    /api/follows/{business_id}/                 - Follow status
    # POST   /api/follows/{business_id}/                 - Follow
    # DELETE /api/follows/{business_id}/                 - Unfollow
    # PATCH  /api/follows/{business_id}/mute/            - Mute
    # PATCH  /api/follows/{business_id}/unmute/          - Unmute
    # PATCH  /api/follows/{business_id}/notifications/   - Notification preferences
    # GET    /api/follows/{business_id}/followers/       - Business followers
    path('', views.my_follows, name='my-follows'),
    path('<uuid:business_id>/', views.follow, name='follow'),
    path('<uuid:business_id>/mute/', views.mute, name='mute'),
    path('<uuid:business_id>/unmute/', views.unmute, name='unmute'),
    path('<uuid:business_id>/notifications/', views.notifications, name='notifications'),
    path('<uuid:business_id>/followers/', views.followers, name='followers'),
]
