"""
URL configuration for cosbaii project.

/api/auth/          登录、刷新 token
/api/user/          当前用户：参赛记录、徽章、通知、提交竞赛
/api/admin/         管理员：竞赛管理、参赛记录审核
/api/competitions/  竞赛搜索
"""
from django.conf import settings
from django.conf.urls.static import static
from django.contrib import admin
from django.urls import path, include
from rest_framework.routers import DefaultRouter

from competitions import urls as competition_urls
from competitions.views import AdminCompetitionViewSet
from credential.views import CredentialViewSet, AdminCredentialViewSet
from notification.views import NotificationViewSet

# 每个前缀只挂一个 router，保证 API 根视图可访问
user_router = DefaultRouter()
user_router.register(r'credentials', CredentialViewSet, basename='credential')
user_router.register(r'notifications', NotificationViewSet, basename='notification')

admin_router = DefaultRouter()
admin_router.register(r'competitions', AdminCompetitionViewSet, basename='admin-competition')
admin_router.register(r'credentials', AdminCredentialViewSet, basename='admin-credential')

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/auth/', include('userManage.urls')),
    path('api/user/', include(user_router.urls)),
    path('api/user/', include(competition_urls.user_urlpatterns)),
    path('api/user/', include('badge.urls')),
    path('api/admin/', include(admin_router.urls)),
    path('api/competitions/', include(competition_urls.urlpatterns)),
]

if settings.DEBUG:
    urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
