import django_filters

from .models import Credential, CredentialStatus


class CredentialFilter(django_filters.FilterSet):
    # 审核状态精确匹配，例如 ?status=PENDING
    status = django_filters.ChoiceFilter(choices=CredentialStatus.choices)
    competition = django_filters.NumberFilter(field_name='competition_id')
    user = django_filters.NumberFilter(field_name='user_id')
    # 作品标题 / 角色名模糊搜索
    cosplay_title = django_filters.CharFilter(field_name='cosplay_title', lookup_expr='icontains')
    character_name = django_filters.CharFilter(field_name='character_name', lookup_expr='icontains')

    class Meta:
        model = Credential
        fields = ['status', 'competition', 'user', 'cosplay_title', 'character_name']
