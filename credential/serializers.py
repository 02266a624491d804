from rest_framework import serializers

from competitions.serializers import CompetitionSummarySerializer
from userManage.serializers import UserSummarySerializer
from .models import Credential, Position

# 请求字段 -> 模型字段
SUBMIT_FIELD_MAP = {
    'cosplayTitle': 'cosplay_title',
    'characterName': 'character_name',
    'seriesName': 'series_name',
    'description': 'description',
    'imageUrl': 'image_url',
    'videoUrl': 'video_url',
    'position': 'position',
    'category': 'category',
    'isTeam': 'is_team',
    'teamMembers': 'team_members',
    'contactEmail': 'contact_email',
    'contactPhone': 'contact_phone',
}


def optional_char(max_length):
    return serializers.CharField(max_length=max_length, required=False, allow_blank=True, allow_null=True)


class CredentialSubmitSerializer(serializers.Serializer):
    """
    提交参赛记录时的字段校验，错误按字段返回。
    竞赛是否存在、是否开放报名、是否重复提交由 services.submit 判断。
    """
    competitionId = serializers.IntegerField(min_value=1)
    cosplayTitle = serializers.CharField(
        max_length=200,
        error_messages={
            'required': 'Cosplay title is required',
            'blank': 'Cosplay title is required',
            'null': 'Cosplay title is required',
            'max_length': 'Cosplay title must be less than 200 characters',
        }
    )
    characterName = optional_char(200)
    seriesName = optional_char(200)
    category = optional_char(200)
    description = optional_char(5000)
    imageUrl = serializers.URLField(max_length=500, required=False, allow_blank=True, allow_null=True)
    videoUrl = serializers.URLField(max_length=500, required=False, allow_blank=True, allow_null=True)
    position = serializers.CharField(max_length=50, required=False, default=Position.PARTICIPANT)
    isTeam = serializers.BooleanField(required=False, default=False)
    teamMembers = optional_char(1000)
    contactEmail = serializers.EmailField(required=False, allow_blank=True, allow_null=True)
    contactPhone = optional_char(50)

    def validate_position(self, value):
        return value.upper() if value else Position.PARTICIPANT

    def submitted_competition_id(self):
        """校验失败时，competitionId 本身合法则返回它，否则返回 None"""
        data = self.initial_data
        if 'competitionId' in self.errors or not hasattr(data, 'get') or data.get('competitionId') is None:
            return None
        try:
            return self.fields['competitionId'].run_validation(data.get('competitionId'))
        except serializers.ValidationError:
            return None

    def to_model_fields(self):
        """把校验后的数据转换为模型字段，空字符串存为 NULL"""
        data = self.validated_data
        fields = {}
        for key, model_field in SUBMIT_FIELD_MAP.items():
            if key not in data:
                continue
            value = data[key]
            fields[model_field] = None if value == '' else value
        return fields


class CredentialSerializer(serializers.ModelSerializer):
    """参赛记录的返回格式"""
    userId = serializers.IntegerField(source='user_id', read_only=True)
    competitionId = serializers.IntegerField(source='competition_id', read_only=True)
    cosplayTitle = serializers.CharField(source='cosplay_title')
    characterName = serializers.CharField(source='character_name')
    seriesName = serializers.CharField(source='series_name')
    imageUrl = serializers.CharField(source='image_url')
    videoUrl = serializers.CharField(source='video_url')
    isTeam = serializers.BooleanField(source='is_team')
    teamMembers = serializers.CharField(source='team_members')
    reviewedAt = serializers.DateTimeField(source='reviewed_at')
    rejectionReason = serializers.CharField(source='rejection_reason')
    submittedAt = serializers.DateTimeField(source='submitted_at')
    displayImage = serializers.SerializerMethodField()

    user = UserSummarySerializer(read_only=True)
    competition = CompetitionSummarySerializer(read_only=True)

    class Meta:
        model = Credential
        fields = [
            'id', 'userId', 'competitionId',
            'cosplayTitle', 'characterName', 'seriesName', 'description',
            'imageUrl', 'videoUrl', 'position', 'category', 'isTeam', 'teamMembers',
            'status', 'reviewedAt', 'rejectionReason',
            'order', 'submittedAt', 'displayImage',
            'user', 'competition',
        ]
        read_only_fields = fields

    def get_displayImage(self, obj):
        return obj.display_image()


class CredentialAdminSerializer(CredentialSerializer):
    """管理员查看参赛者时额外展示联系方式"""
    contactEmail = serializers.CharField(source='contact_email')
    contactPhone = serializers.CharField(source='contact_phone')

    class Meta(CredentialSerializer.Meta):
        fields = CredentialSerializer.Meta.fields + ['contactEmail', 'contactPhone']
        read_only_fields = fields


class CredentialReviewSerializer(serializers.Serializer):
    action = serializers.ChoiceField(
        choices=['APPROVE', 'REJECT'],
        error_messages={'invalid_choice': 'Invalid action. Must be APPROVE or REJECT'}
    )
    rejectionReason = serializers.CharField(max_length=1000, required=False, allow_blank=True, allow_null=True)


class ReorderItemSerializer(serializers.Serializer):
    id = serializers.IntegerField(min_value=1)
    order = serializers.IntegerField(min_value=0, required=False)


class CredentialReorderSerializer(serializers.Serializer):
    credentials = ReorderItemSerializer(many=True, allow_empty=False)

    def validate_credentials(self, value):
        ids = [item['id'] for item in value]
        if len(ids) != len(set(ids)):
            raise serializers.ValidationError("Duplicate credential ids")
        return value
