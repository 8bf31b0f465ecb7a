"""
URL patterns para o domínio de Usuários.

Montado em /api/ por src/config/urls.py.
"""

from django.urls import path

from . import api_views

app_name = 'usuarios'

urlpatterns = [
    path('usuarios/', api_views.UsuarioAPIListView.as_view(), name='api_list'),

    # Busca (antes do <pk> para não conflitar)
    path('usuarios/buscar/', api_views.UsuarioAPIBuscarView.as_view(), name='api_buscar'),

    path('usuarios/<str:pk>/', api_views.UsuarioAPIDetailView.as_view(), name='api_detail'),

    path('auth/login/', api_views.LoginAPIView.as_view(), name='api_login'),
]
