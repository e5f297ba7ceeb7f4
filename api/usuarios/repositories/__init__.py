# api/usuarios/repositories/__init__.py
from .usuario_repository import UsuarioRepository

__all__ = ['UsuarioRepository']
