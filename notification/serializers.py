from rest_framework import serializers
from notifications.models import Notification


class NotificationSerializer(serializers.ModelSerializer):
    type = serializers.SerializerMethodField()
    title = serializers.CharField(source='verb', read_only=True)
    message = serializers.CharField(source='description', read_only=True)
    relatedId = serializers.SerializerMethodField()
    isRead = serializers.SerializerMethodField()
    createdAt = serializers.DateTimeField(source='timestamp', read_only=True)

    class Meta:
        model = Notification
        fields = ['id', 'type', 'title', 'message', 'relatedId', 'isRead', 'createdAt']

    def _payload(self, obj):
        return obj.data or {}

    def get_type(self, obj):
        return self._payload(obj).get('notification_type')

    def get_relatedId(self, obj):
        return self._payload(obj).get('related_id')

    def get_isRead(self, obj):
        return not obj.unread
