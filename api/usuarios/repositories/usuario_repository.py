# api/usuarios/repositories/usuario_repository.py
from common.repositories.base_repository import BaseRepository
from ..models import Usuario


class UsuarioRepository(BaseRepository[Usuario]):
    model = Usuario
