"""
URL Configuration para SisMed Manager.

Estrutura:
- /api/usuarios/, /api/auth/login/ - Usuários
- /api/organizacoes/ - Organizações
- /api/profissionais/ - Profissionais
- /health/ - Health check
"""

from django.http import JsonResponse
from django.urls import include, path


def health(request):
    return JsonResponse({'status': 'ok'})


urlpatterns = [
    path('api/', include('src.adapters.django_app.usuarios.urls')),
    path('api/', include('src.adapters.django_app.organizacoes.urls')),
    path('api/', include('src.adapters.django_app.profissionais.urls')),

    path('health/', health, name='health'),
]
