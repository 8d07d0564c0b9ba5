# Server identity advertised to MCP clients
SERVER_NAME = "CF Pulse MCP Server"
SERVER_VERSION = "1.0.0"

SYSTEM_INFO_RESOURCE = "cf://system-info"

TRANSPORT_MODES = ("stdio", "sse", "streamable-http")
DEFAULT_TRANSPORT = "stdio"
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8080
