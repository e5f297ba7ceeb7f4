# api/usuarios/tests/conftest.py
"""
Fixtures compartidas para los tests de usuarios.
"""
import itertools

import pytest
from rest_framework.test import APIClient

from api.usuarios.services import UsuarioServiceImpl


class RepositorioEnMemoria:
    """Repositorio falso con la misma interfaz que UsuarioRepository, sin BD"""

    def __init__(self):
        self.registros = {}
        self._ids = itertools.count(1)
        self.guardados = 0

    def find_all(self):
        return list(self.registros.values())

    def find_by_id(self, pk):
        return self.registros.get(pk)

    def save(self, instancia):
        if instancia.pk is None:
            instancia.pk = next(self._ids)
        self.registros[instancia.pk] = instancia
        self.guardados += 1
        return instancia

    def delete_by_id(self, pk):
        self.registros.pop(pk, None)


@pytest.fixture
def repositorio():
    return RepositorioEnMemoria()


@pytest.fixture
def servicio(repositorio):
    return UsuarioServiceImpl(usuario_repository=repositorio)


@pytest.fixture
def api_client():
    """Cliente API"""
    return APIClient()


@pytest.fixture
def usuario_payload():
    """Cuerpo JSON tal como lo envía el cliente web"""
    return {
        'nombreCompleto': 'Ana Pérez',
        'correoElectronico': 'ana@example.com',
        'numeroTelefono': '555-0100',
    }
