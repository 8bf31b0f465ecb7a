"""
URL patterns para o domínio de Organizações.

Montado em /api/ por src/config/urls.py.
"""

from django.urls import path

from . import api_views

app_name = 'organizacoes'

urlpatterns = [
    path('organizacoes/', api_views.OrganizacaoAPIListView.as_view(), name='api_list'),

    # Busca (antes do <pk> para não conflitar)
    path('organizacoes/buscar/', api_views.OrganizacaoAPIBuscarView.as_view(), name='api_buscar'),

    path('organizacoes/<str:pk>/', api_views.OrganizacaoAPIDetailView.as_view(), name='api_detail'),
]
