from django.contrib.auth import get_user_model
from rest_framework import serializers
from rest_framework_simplejwt.serializers import TokenObtainPairSerializer

User = get_user_model()


class UserSummarySerializer(serializers.ModelSerializer):
    """参赛记录、竞赛中嵌套展示的用户简要信息"""

    class Meta:
        model = User
        fields = ['id', 'username', 'name']


class UserRoleSummarySerializer(UserSummarySerializer):
    role = serializers.ReadOnlyField()

    class Meta(UserSummarySerializer.Meta):
        fields = ['id', 'username', 'name', 'email', 'role']


# 自定义登录返回数据
class LoginTokenObtainPairSerializer(TokenObtainPairSerializer):
    def validate(self, attrs):
        data = super().validate(attrs)
        data['user_id'] = self.user.pk
        data['username'] = self.user.username
        data['role'] = self.user.role
        return data
