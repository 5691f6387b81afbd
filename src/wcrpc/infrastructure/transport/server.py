"""Standard-library XML-RPC server wiring."""

from __future__ import annotations

import logging
from xmlrpc.server import SimpleXMLRPCRequestHandler, SimpleXMLRPCServer

from wcrpc.infrastructure.config import Settings
from wcrpc.infrastructure.transport.endpoint import XmlRpcEndpoint

logger = logging.getLogger(__name__)


def create_server(endpoint: XmlRpcEndpoint, settings: Settings) -> SimpleXMLRPCServer:
    request_handler = type(
        "RequestHandler",
        (SimpleXMLRPCRequestHandler,),
        {"rpc_paths": (settings.rpc_path,)},
    )
    server = SimpleXMLRPCServer(
        (settings.host, settings.port),
        requestHandler=request_handler,
        allow_none=True,
        logRequests=False,
    )
    server.register_introspection_functions()
    server.register_instance(endpoint)
    return server


def serve(endpoint: XmlRpcEndpoint, settings: Settings) -> None:
    with create_server(endpoint, settings) as server:
        logger.info(
            "Serving XML-RPC on http://%s:%s%s",
            settings.host,
            settings.port,
            settings.rpc_path,
        )
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            logger.info("Shutting down")
