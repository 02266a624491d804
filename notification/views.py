from rest_framework import viewsets, mixins
from rest_framework.decorators import action
from rest_framework.response import Response

from .serializers import NotificationSerializer


class NotificationViewSet(mixins.ListModelMixin,
                          mixins.DestroyModelMixin,
                          viewsets.GenericViewSet):
    """
    当前用户的站内通知
    GET    /api/user/notifications/?unread=true&type=BADGE_AWARDED
    DELETE /api/user/notifications/{id}/
    """
    serializer_class = NotificationSerializer
    lookup_value_regex = r"[0-9]+"

    def get_queryset(self):
        queryset = self.request.user.notifications.all()
        if self.action != 'list':
            return queryset

        params = self.request.query_params
        if params.get('unread') in ('1', 'true'):
            queryset = queryset.unread()
        notification_type = params.get('type')
        if notification_type:
            # data 是文本存储的 JSON，不支持按键查询，只能取出后比对
            matched = [
                n.pk for n in queryset
                if (n.data or {}).get('notification_type') == notification_type
            ]
            queryset = queryset.filter(pk__in=matched)
        return queryset

    @action(detail=False, methods=['get'], url_path='unread-count')
    def unread_count(self, request):
        """/api/user/notifications/unread-count/"""
        return Response({'unreadCount': request.user.notifications.unread().count()})

    @action(detail=True, methods=['post'], url_path='mark-as-read')
    def mark_as_read(self, request, pk=None):
        notification = self.get_object()
        if notification.unread:
            notification.mark_as_read()
        return Response({'success': True, 'notification': self.get_serializer(notification).data})

    @action(detail=False, methods=['post'], url_path='mark-all-as-read')
    def mark_all_as_read(self, request):
        updated = request.user.notifications.mark_all_as_read()
        return Response({'success': True, 'updatedCount': updated})
