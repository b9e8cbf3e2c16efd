"""
odoo_client — client for the XML-RPC API of Odoo (formerly OpenERP).
Build an OdooClient (directly or via OdooClient.from_config) and call model operations on it.
"""
from odoo_client.client import OdooClient
from odoo_client.core import ClientConfig, Session, load_config_from_env
from odoo_client.errors import (
    AuthenticationError,
    OdooError,
    PreconditionError,
    RemoteFault,
    ReportTimeoutError,
    TransportError,
)
from odoo_client.report import ReportJob, ReportState
from odoo_client.rpc import EndpointCache, RpcEndpoint, XmlRpcEndpoint

__all__ = [
    "OdooClient",
    "ClientConfig",
    "Session",
    "load_config_from_env",
    "EndpointCache",
    "RpcEndpoint",
    "XmlRpcEndpoint",
    "ReportJob",
    "ReportState",
    "OdooError",
    "AuthenticationError",
    "TransportError",
    "RemoteFault",
    "PreconditionError",
    "ReportTimeoutError",
]
