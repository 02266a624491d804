from rest_framework import viewsets, mixins, status
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from credential import services as credential_services
from credential.serializers import CredentialAdminSerializer, CredentialReviewSerializer
from credential.views import REVIEW_RESULT
from userManage.actor import Actor
from userManage.permissions import IsAdminOrModeratorCreate
from . import services
from .filters import CompetitionFilter
from .serializers import CompetitionSerializer, CompetitionSummarySerializer, CompetitionReviewSerializer


class CompetitionSearchView(APIView):
    """
    GET /api/competitions/search/?q=cosplay
    提交参赛记录前选择竞赛用
    """
    permission_classes = [IsAuthenticated]

    def get(self, request):
        query = request.query_params.get('q', '').strip()
        competitions = services.search(query)
        return Response({
            'success': True,
            'competitions': CompetitionSummarySerializer(competitions, many=True).data,
        })


class UserCompetitionSubmitView(APIView):
    """POST /api/user/competitions/ 用户提交竞赛等待审核"""
    permission_classes = [IsAuthenticated]

    def post(self, request):
        serializer = CompetitionSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        competition = services.submit_competition(Actor.from_user(request.user), serializer)
        return Response({
            'success': True,
            'message': 'Competition submitted successfully and is pending admin review',
            'competition': CompetitionSerializer(competition).data,
        }, status=status.HTTP_201_CREATED)


class AdminCompetitionViewSet(mixins.ListModelMixin,
                              mixins.RetrieveModelMixin,
                              mixins.UpdateModelMixin,
                              mixins.DestroyModelMixin,
                              viewsets.GenericViewSet):
    """
    竞赛管理
    GET/POST          /api/admin/competitions/
    GET/PUT/PATCH/DELETE /api/admin/competitions/{id}/
    POST              /api/admin/competitions/{id}/review/
    GET               /api/admin/competitions/{id}/participants/
    POST              /api/admin/competitions/{id}/participants/{participant_id}/review/
    """
    serializer_class = CompetitionSerializer
    permission_classes = [IsAdminOrModeratorCreate]
    filterset_class = CompetitionFilter
    lookup_value_regex = r"[0-9]+"

    def get_queryset(self):
        return services.competition_queryset().order_by('-created_at')

    def list(self, request, *args, **kwargs):
        queryset = self.filter_queryset(self.get_queryset())
        return Response({
            'success': True,
            'competitions': self.get_serializer(queryset, many=True).data,
            'stats': services.competition_stats(),
        })

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        actor = Actor.from_user(request.user)
        competition = services.create_competition(actor, serializer)

        message = ('Competition created successfully' if actor.is_admin
                   else 'Competition submitted successfully and is pending admin review')
        return Response({
            'success': True,
            'message': message,
            'competition': CompetitionSerializer(competition).data,
        }, status=status.HTTP_201_CREATED)

    def perform_destroy(self, instance):
        services.delete_competition(Actor.from_user(self.request.user), instance)

    @action(detail=True, methods=['post'])
    def review(self, request, pk=None):
        serializer = CompetitionReviewSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        action_type = serializer.validated_data['action']

        competition = services.review_competition(
            Actor.from_user(request.user),
            pk,
            action_type,
            rejection_reason=serializer.validated_data['rejectionReason'],
        )
        result = 'accepted' if action_type == services.ACCEPT else 'rejected'
        return Response({
            'success': True,
            'message': f"Competition {result} successfully",
            'competition': CompetitionSerializer(competition).data,
        })

    @action(detail=True, methods=['get'])
    def participants(self, request, pk=None):
        credentials = services.list_participants(pk)
        return Response({
            'success': True,
            'participants': CredentialAdminSerializer(credentials, many=True).data,
        })

    @action(detail=True, methods=['post'], url_path=r'participants/(?P<participant_id>[0-9]+)/review')
    def review_participant(self, request, pk=None, participant_id=None):
        serializer = CredentialReviewSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        action_type = serializer.validated_data['action']

        credential = credential_services.review(
            Actor.from_user(request.user),
            participant_id,
            action_type,
            rejection_reason=serializer.validated_data.get('rejectionReason'),
            competition_id=pk,
        )
        return Response({
            'success': True,
            'message': f"Participant {REVIEW_RESULT[action_type]} successfully",
            'action': action_type,
            'credential': CredentialAdminSerializer(credential).data,
        })
