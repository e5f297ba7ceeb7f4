# api/usuarios/urls.py
from django.urls import path, include
from rest_framework.routers import DefaultRouter
from .views import UsuarioViewSet

# Sin barra final: /api/usuarios y /api/usuarios/{id}
router = DefaultRouter(trailing_slash=False)
router.register(r'usuarios', UsuarioViewSet, basename='usuario')

app_name = 'usuarios'
urlpatterns = [
    path('', include(router.urls)),
]
