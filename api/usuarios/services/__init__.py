# api/usuarios/services/__init__.py
from .usuario_service import UsuarioService, UsuarioServiceImpl

__all__ = [
    'UsuarioService',
    'UsuarioServiceImpl',
]
