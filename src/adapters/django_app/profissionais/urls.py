"""
URL patterns para o domínio de Profissionais.

Montado em /api/ por src/config/urls.py.
"""

from django.urls import path

from . import api_views

app_name = 'profissionais'

urlpatterns = [
    path('profissionais/', api_views.ProfissionalAPIListView.as_view(), name='api_list'),

    # Registro (antes do <pk> para não conflitar)
    path(
        'profissionais/registrar/',
        api_views.ProfissionalAPIRegistrarView.as_view(),
        name='api_registrar',
    ),

    path('profissionais/<str:pk>/', api_views.ProfissionalAPIDetailView.as_view(), name='api_detail'),
]
