# config/urls.py
from django.contrib import admin
from django.urls import path, include


urlpatterns = [
    path('admin/', admin.site.urls),

    # Endpoints del sistema
    path('api/', include('api.usuarios.urls', namespace='usuarios')),
]
