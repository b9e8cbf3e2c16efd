from odoo_client.rpc.endpoints import EndpointCache
from odoo_client.rpc.protocol import EndpointFactory, RpcEndpoint
from odoo_client.rpc.xmlrpc_transport import XmlRpcEndpoint, xmlrpc_endpoint

__all__ = [
    "EndpointCache",
    "EndpointFactory",
    "RpcEndpoint",
    "XmlRpcEndpoint",
    "xmlrpc_endpoint",
]
