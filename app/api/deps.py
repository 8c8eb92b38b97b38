"""
API Dependencies.
Common dependencies shared by the endpoint routers.
"""

from typing import Annotated
from fastapi import Depends

from app.core.registry import InvoiceRegistry, get_registry


# Type alias for cleaner route signatures
Registry = Annotated[InvoiceRegistry, Depends(get_registry)]
