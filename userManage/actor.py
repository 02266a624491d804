from dataclasses import dataclass

from .models import ROLE_ADMIN, ROLE_MODERATOR


@dataclass(frozen=True)
class Actor:
    """
    业务操作的执行者。
    服务层只接收 Actor，不直接读取 request.user，便于脱离请求单独测试。
    """
    id: int
    role: str

    @classmethod
    def from_user(cls, user):
        return cls(id=user.pk, role=user.role)

    @property
    def is_admin(self):
        return self.role == ROLE_ADMIN

    @property
    def is_moderator(self):
        return self.role == ROLE_MODERATOR
