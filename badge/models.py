from django.conf import settings
from django.db import models


class BadgeType(models.TextChoices):
    PARTICIPATION = 'PARTICIPATION', 'Participation'
    COMPETITION_MILESTONE = 'COMPETITION_MILESTONE', 'Competition milestone'
    SPECIAL_ACHIEVEMENT = 'SPECIAL_ACHIEVEMENT', 'Special achievement'
    PROFILE_COMPLETION = 'PROFILE_COMPLETION', 'Profile completion'


class Badge(models.Model):
    """徽章目录，由 badge.rules 中的规则生成"""
    slug = models.SlugField(max_length=50, unique=True)
    name = models.CharField(max_length=100, unique=True, verbose_name="徽章名称")
    description = models.CharField(max_length=255, verbose_name="获得条件")
    icon_url = models.CharField(max_length=255, verbose_name="图标")
    badge_type = models.CharField(max_length=30, choices=BadgeType.choices)
    requirement = models.PositiveIntegerField(null=True, blank=True, verbose_name="数量要求")

    class Meta:
        db_table = 'sys_badge'
        verbose_name = "徽章"

    def __str__(self):
        return self.name


class UserBadge(models.Model):
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='badges')
    badge = models.ForeignKey(Badge, on_delete=models.CASCADE, related_name='holders')
    awarded_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'sys_user_badge'
        verbose_name = "用户徽章"
        ordering = ['-awarded_at']
        constraints = [
            models.UniqueConstraint(fields=['user', 'badge'], name='unique_badge_per_user')
        ]

    def __str__(self):
        return f"{self.user} - {self.badge}"
