from django.db import models


class Usuario(models.Model):
    id = models.BigAutoField(primary_key=True)
    nombre_completo = models.CharField(max_length=150)
    correo_electronico = models.EmailField(max_length=254)
    numero_telefono = models.CharField(max_length=20)

    def __str__(self):
        return f'{self.nombre_completo} <{self.correo_electronico}>'

    class Meta:
        db_table = 'usuarios'
        verbose_name = 'Usuario'
        verbose_name_plural = 'Usuarios'
        ordering = ['id']
