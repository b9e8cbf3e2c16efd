from odoo_client.core.config import ClientConfig, load_config_from_env
from odoo_client.core.session import Session

__all__ = [
    "ClientConfig",
    "Session",
    "load_config_from_env",
]
