import django_filters

from .models import Competition, CompetitionStatus


class CompetitionFilter(django_filters.FilterSet):
    status = django_filters.ChoiceFilter(choices=CompetitionStatus.choices)
    name = django_filters.CharFilter(lookup_expr='icontains')
    level = django_filters.CharFilter()

    class Meta:
        model = Competition
        fields = ['status', 'name', 'level', 'competition_type']
