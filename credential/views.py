from rest_framework import viewsets, mixins, status
from rest_framework.decorators import action
from rest_framework.exceptions import ValidationError
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from userManage.actor import Actor
from userManage.permissions import IsAdmin
from . import services
from .filters import CredentialFilter
from .serializers import (
    CredentialSerializer, CredentialAdminSerializer, CredentialSubmitSerializer,
    CredentialReviewSerializer, CredentialReorderSerializer,
)

REVIEW_RESULT = {
    services.APPROVE: 'approved',
    services.REJECT: 'rejected',
}


class CredentialViewSet(viewsets.GenericViewSet):
    """
    用户自己的参赛记录
    GET    /api/user/credentials/
    POST   /api/user/credentials/
    GET    /api/user/credentials/{id}/
    DELETE /api/user/credentials/{id}/
    GET    /api/user/credentials/competition/{competition_id}/
    PUT    /api/user/credentials/reorder/
    """
    serializer_class = CredentialSerializer
    permission_classes = [IsAuthenticated]
    lookup_value_regex = r"[0-9]+"

    def get_actor(self):
        return Actor.from_user(self.request.user)

    def list(self, request):
        credentials = services.list_credentials(self.get_actor())
        return Response({
            'success': True,
            'credentials': CredentialSerializer(credentials, many=True).data,
        })

    def retrieve(self, request, pk=None):
        credential = services.get_by_id(self.get_actor(), pk)
        return Response({'credential': CredentialSerializer(credential).data})

    def create(self, request):
        serializer = CredentialSubmitSerializer(data=request.data)
        if not serializer.is_valid():
            # 竞赛不存在或未开放时优先报告竞赛状态，而不是字段错误
            competition_id = serializer.submitted_competition_id()
            if competition_id is not None:
                services.get_open_competition(competition_id)
            raise ValidationError(serializer.errors)

        credential = services.submit(
            self.get_actor(),
            serializer.validated_data['competitionId'],
            serializer.to_model_fields(),
        )
        return Response({
            'success': True,
            'message': 'Credential submitted successfully and is pending admin review',
            'credential': CredentialSerializer(credential).data,
        }, status=status.HTTP_201_CREATED)

    def destroy(self, request, pk=None):
        deleted_id = services.delete(self.get_actor(), pk)
        return Response({
            'success': True,
            'message': 'Credential deleted successfully',
            'deletedId': int(deleted_id),
        }, status=status.HTTP_200_OK)

    @action(detail=False, methods=['get'], url_path=r'competition/(?P<competition_id>[0-9]+)')
    def by_competition(self, request, competition_id=None):
        credential = services.get_for_competition(self.get_actor(), int(competition_id))
        return Response({'credential': CredentialSerializer(credential).data})

    @action(detail=False, methods=['put'], url_path='reorder')
    def reorder(self, request):
        serializer = CredentialReorderSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        updated = services.reorder(self.get_actor(), serializer.validated_data['credentials'])
        return Response({
            'success': True,
            'message': 'Credentials reordered successfully',
            'updatedCount': updated,
        })


class AdminCredentialViewSet(mixins.ListModelMixin,
                             mixins.RetrieveModelMixin,
                             viewsets.GenericViewSet):
    """
    管理员：查看全部参赛记录并审核
    GET  /api/admin/credentials/?status=PENDING&competition=1
    POST /api/admin/credentials/{id}/review/
    """
    serializer_class = CredentialAdminSerializer
    permission_classes = [IsAdmin]
    filterset_class = CredentialFilter
    lookup_value_regex = r"[0-9]+"

    def get_queryset(self):
        return services.credential_queryset().order_by('-submitted_at')

    @action(detail=True, methods=['post'])
    def review(self, request, pk=None):
        serializer = CredentialReviewSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        action_type = serializer.validated_data['action']

        credential = services.review(
            Actor.from_user(request.user),
            pk,
            action_type,
            rejection_reason=serializer.validated_data.get('rejectionReason'),
        )
        return Response({
            'success': True,
            'message': f"Participant {REVIEW_RESULT[action_type]} successfully",
            'action': action_type,
            'credential': CredentialAdminSerializer(credential).data,
        })
