# api/usuarios/exceptions.py


class UsuarioNoEncontradoError(Exception):
    """No existe un usuario con el id solicitado."""

    def __init__(self, usuario_id):
        self.usuario_id = usuario_id
        super().__init__(f'Usuario no encontrado: {usuario_id}')
