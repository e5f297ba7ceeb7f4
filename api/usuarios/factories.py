import factory
from .models import Usuario


class UsuarioFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = Usuario

    nombre_completo = factory.Faker('name', locale='es_ES')
    correo_electronico = factory.Faker('email')
    numero_telefono = factory.Sequence(lambda n: f'555-{n:04d}')
