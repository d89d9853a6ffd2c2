"""
Utilidades centralizadas para manejo de fechas y timestamps.
Todas las operaciones usan settings.TIMEZONE como zona horaria de referencia.

Convención del sistema:
- Los timestamps (created_at, updated_at, completed_at) se guardan **naive**
  en hora local, sin microsegundos.
- Las fechas de negocio (siembra, cosecha, recordatorios) son `date` puros.
"""
from datetime import datetime, date, timedelta
from zoneinfo import ZoneInfo

from config.settings import settings

LOCAL_TZ = ZoneInfo(settings.TIMEZONE)


def now_local() -> datetime:
    """
    Retorna el datetime actual en la zona horaria configurada (naive).
    """
    return datetime.now(LOCAL_TZ).replace(tzinfo=None, microsecond=0)


def today_local() -> date:
    """
    Retorna la fecha actual (date) en la zona horaria configurada.
    """
    return datetime.now(LOCAL_TZ).date()


def to_date(value: date | datetime) -> date:
    """
    Trunca a precisión de día. Un datetime AWARE se convierte primero a la
    zona local para no cambiar de día por el offset.
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(LOCAL_TZ)
        return value.date()
    return value


def add_days(d: date | datetime, days: int) -> date:
    """
    Suma días calendario y retorna un date.
    """
    return to_date(d) + timedelta(days=days)
