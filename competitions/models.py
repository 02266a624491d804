from django.conf import settings
from django.db import models
from django.utils import timezone
from django_fsm import FSMField, transition


class CompetitionStatus(models.TextChoices):
    DRAFT = 'DRAFT', '草稿'
    SUBMITTED = 'SUBMITTED', '待审核'
    ACCEPTED = 'ACCEPTED', '已通过'
    ONGOING = 'ONGOING', '进行中'
    COMPLETED = 'COMPLETED', '已结束'
    REJECTED = 'REJECTED', '已驳回'
    CANCELLED = 'CANCELLED', '已取消'


# 只有这些状态的竞赛可以提交参赛记录
OPEN_FOR_PARTICIPANTS = (CompetitionStatus.ACCEPTED, CompetitionStatus.ONGOING)


class CompetitionType(models.TextChoices):
    GENERAL = 'GENERAL', 'General'
    ARMOR = 'ARMOR', 'Armor'
    CLOTH = 'CLOTH', 'Cloth'
    SINGING = 'SINGING', 'Singing'


class RivalryType(models.TextChoices):
    SOLO = 'SOLO', 'Solo'
    DUO = 'DUO', 'Duo'
    GROUP = 'GROUP', 'Group'


class CompetitionLevel(models.TextChoices):
    BARANGAY = 'BARANGAY', 'Barangay'
    LOCAL = 'LOCAL', 'Local'
    REGIONAL = 'REGIONAL', 'Regional'
    NATIONAL = 'NATIONAL', 'National'
    WORLDWIDE = 'WORLDWIDE', 'Worldwide'


class Competition(models.Model):
    """竞赛核心信息，有独立的审核流程"""
    name = models.CharField(max_length=200, verbose_name="竞赛名称")
    description = models.TextField(max_length=1000, blank=True, null=True, verbose_name="竞赛简介")
    event_date = models.DateTimeField(verbose_name="举办日期")
    location = models.CharField(max_length=200, blank=True, null=True, verbose_name="举办地点")
    organizer = models.CharField(max_length=200, blank=True, null=True, verbose_name="主办方")

    # 分类信息
    competition_type = models.CharField(max_length=20, choices=CompetitionType.choices, verbose_name="竞赛类型")
    rivalry_type = models.CharField(max_length=20, choices=RivalryType.choices, verbose_name="参赛形式")
    level = models.CharField(max_length=20, choices=CompetitionLevel.choices, verbose_name="竞赛级别")

    # 图片与外部链接
    logo_url = models.URLField(max_length=500, blank=True, null=True, verbose_name="Logo")
    event_url = models.URLField(max_length=500, blank=True, null=True, verbose_name="官网")
    facebook_url = models.URLField(max_length=500, blank=True, null=True)
    instagram_url = models.URLField(max_length=500, blank=True, null=True)
    reference_links = models.TextField(blank=True, null=True, verbose_name="参考链接")

    # 审核信息
    status = FSMField(default=CompetitionStatus.SUBMITTED, choices=CompetitionStatus.choices, verbose_name="审核状态")
    submitted_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="submitted_competitions",
        verbose_name="提交者"
    )
    reviewed_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="reviewed_competitions",
        verbose_name="审核人"
    )
    reviewed_at = models.DateTimeField(null=True, blank=True)
    rejection_reason = models.TextField(blank=True, null=True, verbose_name="驳回原因")

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'sys_competition'
        verbose_name = "竞赛信息"
        ordering = ['-event_date']

    def __str__(self):
        return self.name

    @property
    def is_open_for_participants(self):
        return self.status in OPEN_FOR_PARTICIPANTS

    @transition(field=status, source=CompetitionStatus.SUBMITTED, target=CompetitionStatus.ACCEPTED)
    def accept(self, reviewer):
        self.reviewed_by = reviewer
        self.reviewed_at = timezone.now()
        self.rejection_reason = None

    @transition(field=status, source=CompetitionStatus.SUBMITTED, target=CompetitionStatus.REJECTED)
    def reject(self, reviewer, reason):
        self.reviewed_by = reviewer
        self.reviewed_at = timezone.now()
        self.rejection_reason = reason
