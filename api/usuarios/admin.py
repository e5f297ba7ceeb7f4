from django.contrib import admin
from .models import Usuario


@admin.register(Usuario)
class UsuarioAdmin(admin.ModelAdmin):
    list_display = ('id', 'nombre_completo', 'correo_electronico', 'numero_telefono')
    search_fields = ('nombre_completo', 'correo_electronico', 'numero_telefono')
    ordering = ('id',)
