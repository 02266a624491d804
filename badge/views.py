from rest_framework.response import Response
from rest_framework.views import APIView

from .services import get_badge_progress


class BadgeProgressView(APIView):
    """
    当前用户的徽章进度
    GET /api/user/badges/
    """

    def get(self, request):
        progress = get_badge_progress(request.user)
        return Response({
            'success': True,
            'badges': progress,
            'earnedCount': sum(1 for item in progress if item['earned']),
        })
