from rest_framework import permissions

from .models import ADMIN_GROUP, MODERATOR_GROUP


def has_any_group(user, group_names):
    if user.is_superuser:
        return True
    return user.groups.filter(name__in=group_names).exists()


class IsAdmin(permissions.BasePermission):
    """
    仅管理员：审核参赛记录、审核竞赛
    """
    message = 'Forbidden - Admin access required'

    def has_permission(self, request, view):
        if not (request.user and request.user.is_authenticated):
            return False
        return has_any_group(request.user, [ADMIN_GROUP])


class IsAdminOrModeratorCreate(permissions.BasePermission):
    """
    竞赛管理接口：创建允许版主，其余操作仅限管理员
    """
    message = 'Forbidden - Admin access required'

    def has_permission(self, request, view):
        if not (request.user and request.user.is_authenticated):
            return False

        if getattr(view, 'action', None) == 'create':
            return has_any_group(request.user, [ADMIN_GROUP, MODERATOR_GROUP])

        return has_any_group(request.user, [ADMIN_GROUP])
