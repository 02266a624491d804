from rest_framework import serializers

from userManage.serializers import UserRoleSummarySerializer
from .models import Competition, CompetitionLevel, CompetitionType, RivalryType


class CompetitionSummarySerializer(serializers.ModelSerializer):
    """参赛记录中嵌套展示的竞赛简要信息"""
    eventDate = serializers.DateTimeField(source='event_date', read_only=True)
    logoUrl = serializers.CharField(source='logo_url', read_only=True)
    competitionType = serializers.CharField(source='competition_type', read_only=True)
    rivalryType = serializers.CharField(source='rivalry_type', read_only=True)

    class Meta:
        model = Competition
        fields = [
            'id', 'name', 'eventDate', 'location', 'logoUrl',
            'competitionType', 'rivalryType', 'level', 'status'
        ]


class CompetitionSerializer(serializers.ModelSerializer):
    """
    竞赛信息的读写序列化器（管理员录入、用户提交共用）
    """
    name = serializers.CharField(
        min_length=3, max_length=200,
        error_messages={
            'min_length': 'Name must be at least 3 characters',
            'max_length': 'Name must be less than 200 characters',
        }
    )
    description = serializers.CharField(max_length=1000, required=False, allow_blank=True, allow_null=True)
    eventDate = serializers.DateTimeField(source='event_date')
    location = serializers.CharField(max_length=200, required=False, allow_blank=True, allow_null=True)
    organizer = serializers.CharField(max_length=200, required=False, allow_blank=True, allow_null=True)
    competitionType = serializers.ChoiceField(source='competition_type', choices=CompetitionType.choices)
    rivalryType = serializers.ChoiceField(source='rivalry_type', choices=RivalryType.choices)
    level = serializers.ChoiceField(choices=CompetitionLevel.choices)
    logoUrl = serializers.URLField(source='logo_url', max_length=500, required=False, allow_blank=True, allow_null=True)
    eventUrl = serializers.URLField(source='event_url', max_length=500, required=False, allow_blank=True, allow_null=True)
    facebookUrl = serializers.URLField(source='facebook_url', max_length=500, required=False, allow_blank=True, allow_null=True)
    instagramUrl = serializers.URLField(source='instagram_url', max_length=500, required=False, allow_blank=True, allow_null=True)
    referenceLinks = serializers.CharField(source='reference_links', required=False, allow_blank=True, allow_null=True)

    status = serializers.CharField(read_only=True)
    submittedBy = UserRoleSummarySerializer(source='submitted_by', read_only=True)
    reviewedAt = serializers.DateTimeField(source='reviewed_at', read_only=True)
    rejectionReason = serializers.CharField(source='rejection_reason', read_only=True)
    participantCount = serializers.SerializerMethodField()
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model = Competition
        fields = [
            'id', 'name', 'description', 'eventDate', 'location', 'organizer',
            'competitionType', 'rivalryType', 'level',
            'logoUrl', 'eventUrl', 'facebookUrl', 'instagramUrl', 'referenceLinks',
            'status', 'submittedBy', 'reviewedAt', 'rejectionReason',
            'participantCount', 'createdAt', 'updatedAt',
        ]

    def get_participantCount(self, obj):
        count = getattr(obj, 'participant_count', None)
        if count is None:
            count = obj.participants.count()
        return count

    def validate(self, attrs):
        # 空字符串统一存为 NULL
        for key, value in attrs.items():
            if value == '':
                attrs[key] = None
        return attrs


class CompetitionReviewSerializer(serializers.Serializer):
    action = serializers.ChoiceField(choices=['ACCEPT', 'REJECT'])
    rejectionReason = serializers.CharField(max_length=1000, required=False, allow_blank=True, allow_null=True)

    def validate(self, attrs):
        reason = (attrs.get('rejectionReason') or '').strip()
        if attrs['action'] == 'REJECT' and not reason:
            raise serializers.ValidationError(
                {"rejectionReason": "Rejection reason is required when rejecting a competition"}
            )
        attrs['rejectionReason'] = reason or None
        return attrs
