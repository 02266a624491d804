from django.contrib.auth.models import AbstractUser
from django.db import models

# 角色与用户组一一对应，权限判断统一走组
ADMIN_GROUP = 'Administrator'
MODERATOR_GROUP = 'Moderator'

ROLE_ADMIN = 'ADMIN'
ROLE_MODERATOR = 'MODERATOR'
ROLE_USER = 'USER'


class User(AbstractUser):
    name = models.CharField(max_length=150, blank=True, default='', verbose_name="显示名称")

    @property
    def role(self):
        if self.is_superuser:
            return ROLE_ADMIN
        group_names = set(self.groups.values_list('name', flat=True))
        if ADMIN_GROUP in group_names:
            return ROLE_ADMIN
        if MODERATOR_GROUP in group_names:
            return ROLE_MODERATOR
        return ROLE_USER

    def __str__(self):
        return self.name or self.username
