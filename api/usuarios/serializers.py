from rest_framework import serializers
from .models import Usuario
import re

TELEFONO_REGEX = re.compile(r'^\+?[\d\s()-]{7,20}$')


class UsuarioSerializer(serializers.ModelSerializer):
    """Representación JSON de un usuario (nombres de campo en camelCase)"""
    nombreCompleto = serializers.CharField(
        source='nombre_completo',
        max_length=150,
        error_messages={
            'required': 'El nombre completo es requerido.',
            'blank': 'El nombre completo es requerido.',
        }
    )
    correoElectronico = serializers.EmailField(
        source='correo_electronico',
        max_length=254,
        error_messages={
            'required': 'El correo electrónico es requerido.',
            'blank': 'El correo electrónico es requerido.',
            'invalid': 'Ingrese un correo electrónico válido.',
        }
    )
    numeroTelefono = serializers.CharField(
        source='numero_telefono',
        max_length=20,
        error_messages={
            'required': 'El número de teléfono es requerido.',
            'blank': 'El número de teléfono es requerido.',
        }
    )

    class Meta:
        model = Usuario
        fields = ['id', 'nombreCompleto', 'correoElectronico', 'numeroTelefono']
        read_only_fields = ['id']

    def validate_numeroTelefono(self, value):
        if not TELEFONO_REGEX.match(value):
            raise serializers.ValidationError(
                "El teléfono solo puede contener números, espacios, guiones y paréntesis."
            )
        return value
