from rest_framework_simplejwt.views import TokenObtainPairView

from .serializers import LoginTokenObtainPairSerializer


class LoginTokenObtainPairView(TokenObtainPairView):
    serializer_class = LoginTokenObtainPairSerializer
