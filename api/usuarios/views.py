# api/usuarios/views.py
import logging

from rest_framework import viewsets, status
from rest_framework.exceptions import NotFound
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from .exceptions import UsuarioNoEncontradoError
from .models import Usuario
from .serializers import UsuarioSerializer
from .services import UsuarioServiceImpl

logger = logging.getLogger(__name__)


class UsuarioViewSet(viewsets.ViewSet):
    """
    CRUD de usuarios sobre UsuarioServiceImpl.
    - 200 OK: GET / PUT exitoso (cuerpo JSON plano: lista u objeto)
    - 201 CREATED: POST exitoso
    - 204 NO CONTENT: DELETE (exista o no el usuario)
    - 400 BAD REQUEST: Datos inválidos
    - 404 NOT FOUND: Usuario inexistente en GET detalle y PUT

    El servicio se puede inyectar con as_view(..., usuario_service=...);
    si no, cada instancia (una por petición) crea su UsuarioServiceImpl.
    """
    permission_classes = [AllowAny]
    lookup_value_regex = r'\d+'
    usuario_service = None

    def get_usuario_service(self):
        if self.usuario_service is None:
            self.usuario_service = UsuarioServiceImpl()
        return self.usuario_service

    def list(self, request):
        usuarios = self.get_usuario_service().listar_usuarios()
        serializer = UsuarioSerializer(usuarios, many=True)
        return Response(serializer.data)

    def retrieve(self, request, pk=None):
        usuario = self.get_usuario_service().obtener_usuario(int(pk))
        if usuario is None:
            raise NotFound(detail="Usuario no encontrado")
        return Response(UsuarioSerializer(usuario).data)

    def create(self, request):
        serializer = UsuarioSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        usuario = self.get_usuario_service().crear_usuario(
            Usuario(**serializer.validated_data)
        )
        return Response(UsuarioSerializer(usuario).data, status=status.HTTP_201_CREATED)

    def update(self, request, pk=None):
        serializer = UsuarioSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            usuario = self.get_usuario_service().actualizar_usuario(
                int(pk), serializer.validated_data
            )
        except UsuarioNoEncontradoError as e:
            logger.warning(f"Intento de actualizar usuario inexistente: {e.usuario_id}")
            raise NotFound(detail="Usuario no encontrado")
        return Response(UsuarioSerializer(usuario).data)

    def destroy(self, request, pk=None):
        self.get_usuario_service().eliminar_usuario(int(pk))
        return Response(status=status.HTTP_204_NO_CONTENT)
