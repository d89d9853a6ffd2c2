# models/base.py
from pydantic import BaseModel


# ───────────────────────────────────────────────
# Clase base de la que heredarán todos los registros en memoria
# ───────────────────────────────────────────────
class Record(BaseModel):
    """
    Clase base de la que heredan todos los registros.

    - str_strip_whitespace=True: limpia espacios en strings.
    - validate_assignment=True: una asignación directa también se valida.
    """
    model_config = {
        "str_strip_whitespace": True,
        "validate_assignment": True,
    }
