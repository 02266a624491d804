from django.conf import settings
from django.db import models
from django.utils import timezone
from django_fsm import FSMField, transition


class CredentialStatus(models.TextChoices):
    PENDING = 'PENDING', '待审核'
    APPROVED = 'APPROVED', '已通过'
    REJECTED = 'REJECTED', '已驳回'


class Position(models.TextChoices):
    CHAMPION = 'CHAMPION', 'Champion'
    FIRST_PLACE = 'FIRST_PLACE', '1st Place'
    SECOND_PLACE = 'SECOND_PLACE', '2nd Place'
    THIRD_PLACE = 'THIRD_PLACE', '3rd Place'
    PARTICIPANT = 'PARTICIPANT', 'Participant'


class Credential(models.Model):
    """
    参赛记录（用户在某一竞赛中的参赛凭证），需管理员审核。
    同一用户对同一竞赛只能有一条记录，由数据库唯一约束保证。
    """
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='credentials',
        verbose_name="参赛用户"
    )
    competition = models.ForeignKey(
        'competitions.Competition',
        on_delete=models.CASCADE,
        related_name='participants',
        verbose_name="所属竞赛"
    )

    # 1. 作品信息
    cosplay_title = models.CharField(max_length=200, verbose_name="作品标题")
    character_name = models.CharField(max_length=200, blank=True, null=True, verbose_name="角色名")
    series_name = models.CharField(max_length=200, blank=True, null=True, verbose_name="作品出处")
    description = models.TextField(max_length=5000, blank=True, null=True)
    # 只保存一张照片，不再使用序列化的照片列表
    image_url = models.URLField(max_length=500, blank=True, null=True, verbose_name="作品照片")
    video_url = models.URLField(max_length=500, blank=True, null=True, verbose_name="视频链接")
    position = models.CharField(max_length=50, default=Position.PARTICIPANT, verbose_name="名次")
    category = models.CharField(max_length=200, blank=True, null=True, verbose_name="参赛组别")

    # 2. 团队与联系方式
    is_team = models.BooleanField(default=False)
    team_members = models.TextField(max_length=1000, blank=True, null=True)
    contact_email = models.EmailField(blank=True, null=True)
    contact_phone = models.CharField(max_length=50, blank=True, null=True)

    # 3. 审核信息
    status = FSMField(default=CredentialStatus.PENDING, choices=CredentialStatus.choices, verbose_name="审核状态")
    reviewed_at = models.DateTimeField(null=True, blank=True)
    reviewed_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='reviewed_credentials',
        verbose_name="审核人"
    )
    rejection_reason = models.TextField(blank=True, null=True, verbose_name="驳回原因")

    # 4. 展示顺序：按 order 升序，再按提交时间倒序
    order = models.IntegerField(default=0, verbose_name="展示顺序")

    submitted_at = models.DateTimeField(default=timezone.now, verbose_name="提交时间")
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'sys_credential'
        verbose_name = "参赛记录"
        ordering = ['order', '-submitted_at']
        constraints = [
            models.UniqueConstraint(
                fields=['user', 'competition'],
                name='unique_credential_per_competition'
            )
        ]

    def __str__(self):
        return f"{self.cosplay_title} @ {self.competition_id}"

    def display_image(self):
        """展示图优先级：作品照片 > 竞赛 Logo > 兜底图"""
        if self.image_url:
            return self.image_url
        if self.competition.logo_url:
            return self.competition.logo_url
        return settings.COSBAII_CREDENTIAL_PLACEHOLDER

    @transition(field=status, source=CredentialStatus.PENDING, target=CredentialStatus.APPROVED)
    def approve(self, reviewer):
        self.reviewed_by = reviewer
        self.reviewed_at = timezone.now()

    @transition(field=status, source=CredentialStatus.PENDING, target=CredentialStatus.REJECTED)
    def reject(self, reviewer, reason=None):
        self.reviewed_by = reviewer
        self.reviewed_at = timezone.now()
        self.rejection_reason = reason or None
