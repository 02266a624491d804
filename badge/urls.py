from django.urls import path

from .views import BadgeProgressView

urlpatterns = [
    path('badges/', BadgeProgressView.as_view(), name='badge-progress'),
]
