"""
Helpers comuns aos Mappers Entity <-> Model.
"""

from datetime import datetime
from typing import Optional

from django.utils import timezone


def to_aware(value: Optional[datetime]) -> Optional[datetime]:
    """
    Garante datetime com timezone antes de persistir.

    Entities usam datetime.now() (naive); com USE_TZ=True o ORM
    espera valores aware.
    """
    if value is None or timezone.is_aware(value):
        return value
    return timezone.make_aware(value)
