# api/usuarios/services/usuario_service.py
import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import List, Optional

from ..exceptions import UsuarioNoEncontradoError
from ..models import Usuario
from ..repositories import UsuarioRepository

logger = logging.getLogger(__name__)

# Únicos campos que actualizar_usuario copia sobre el registro existente
CAMPOS_ACTUALIZABLES = ('nombre_completo', 'correo_electronico', 'numero_telefono')


class UsuarioService(ABC):
    """Contrato CRUD sobre usuarios, independiente del almacenamiento"""

    @abstractmethod
    def listar_usuarios(self) -> List[Usuario]:
        ...

    @abstractmethod
    def obtener_usuario(self, usuario_id) -> Optional[Usuario]:
        ...

    @abstractmethod
    def crear_usuario(self, usuario: Usuario) -> Usuario:
        ...

    @abstractmethod
    def actualizar_usuario(self, usuario_id, datos) -> Usuario:
        ...

    @abstractmethod
    def eliminar_usuario(self, usuario_id) -> None:
        ...


class UsuarioServiceImpl(UsuarioService):
    """
    Implementación que delega toda la persistencia en el repositorio recibido.

    Los errores del repositorio se propagan sin capturar ni traducir.
    """

    def __init__(self, usuario_repository=None):
        self.usuario_repository = usuario_repository or UsuarioRepository()

    def listar_usuarios(self):
        return self.usuario_repository.find_all()

    def obtener_usuario(self, usuario_id):
        return self.usuario_repository.find_by_id(usuario_id)

    def crear_usuario(self, usuario):
        usuario = self.usuario_repository.save(usuario)
        logger.info(f"Usuario {usuario.id} creado")
        return usuario

    def actualizar_usuario(self, usuario_id, datos):
        """
        Sobrescribe nombre, correo y teléfono del usuario existente.

        `datos` puede ser un Usuario o un diccionario (p. ej. validated_data).
        Cualquier otro campo, incluido el id, se ignora.
        Lanza UsuarioNoEncontradoError si el id no existe.
        """
        usuario = self.usuario_repository.find_by_id(usuario_id)
        if usuario is None:
            raise UsuarioNoEncontradoError(usuario_id)

        for campo in CAMPOS_ACTUALIZABLES:
            setattr(usuario, campo, _valor_campo(datos, campo))

        usuario = self.usuario_repository.save(usuario)
        logger.info(f"Usuario {usuario_id} actualizado")
        return usuario

    def eliminar_usuario(self, usuario_id):
        self.usuario_repository.delete_by_id(usuario_id)
        logger.info(f"Usuario {usuario_id} eliminado")


def _valor_campo(datos, campo):
    if isinstance(datos, Mapping):
        return datos.get(campo)
    return getattr(datos, campo, None)
