from django.urls import path

from .views import CompetitionSearchView, UserCompetitionSubmitView

# /api/competitions/
urlpatterns = [
    path('search/', CompetitionSearchView.as_view(), name='competition-search'),
]

# /api/user/competitions/
user_urlpatterns = [
    path('competitions/', UserCompetitionSubmitView.as_view(), name='user-competition-submit'),
]
