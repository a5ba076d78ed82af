import json
import logging
import sys
import threading
from concurrent.futures import ThreadPoolExecutor

from observability.metrics import start_exporter
from shopify_mcp.config import Settings, load_local_secrets
from shopify_mcp.errors import ConfigurationError
from shopify_mcp.server import build_server

logging.basicConfig(level=logging.INFO, stream=sys.stderr)
logger = logging.getLogger(__name__)


class StdioChannel:
    """MCP stdio framing: newline-delimited JSON, or Content-Length headers
    when the client opens with them."""

    def __init__(self, stdin_b, stdout_b):
        self.stdin_b = stdin_b
        self.stdout_b = stdout_b
        self.use_headers = False
        self._lock = threading.Lock()

    def read_message(self):
        """Return the next decoded message, or None at end of input."""
        while True:
            line = self.stdin_b.readline()
            if not line:
                return None
            stripped = line.strip()
            if not stripped:
                continue
            try:
                if stripped.lower().startswith(b"content-length:"):
                    self.use_headers = True
                    length = int(stripped.split(b":", 1)[1].strip())
                    # consume remaining headers until blank line
                    while True:
                        h = self.stdin_b.readline()
                        if not h or h in (b"\r\n", b"\n"):
                            break
                    body = self.stdin_b.read(length)
                    return json.loads(body.decode("utf-8", errors="replace"))
                return json.loads(stripped.decode("utf-8", errors="replace"))
            except (ValueError, UnicodeDecodeError) as e:
                logger.error("Invalid message received: %s", e)

    def send(self, obj):
        body = json.dumps(obj, ensure_ascii=False).encode("utf-8")
        with self._lock:
            if self.use_headers:
                self.stdout_b.write(f"Content-Length: {len(body)}\r\n\r\n".encode("utf-8"))
                self.stdout_b.write(body)
            else:
                self.stdout_b.write(body + b"\n")
            self.stdout_b.flush()


def serve(server, channel, max_workers=8):
    """Read messages until EOF. tools/call runs on the pool; everything else inline."""

    def _respond(message):
        try:
            response = server.handle_message(message)
        except Exception:
            logger.exception("Error processing message")
            return
        if response:
            channel.send(response)

    with ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="tool-call") as pool:
        while True:
            message = channel.read_message()
            if message is None:
                break
            if not isinstance(message, dict):
                logger.error("Ignoring non-object message: %r", message)
                continue
            if message.get("method") == "tools/call":
                pool.submit(_respond, message)
            else:
                _respond(message)


def apply_log_level(name):
    """Set the root level; unknown names keep INFO with a warning."""
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        logger.warning("Unknown LOG_LEVEL %r; using INFO", name)
        level = logging.INFO
    logging.getLogger().setLevel(level)
    return level


def main():
    load_local_secrets()
    settings = Settings.from_env()
    apply_log_level(settings.log_level)
    try:
        server = build_server(settings=settings)
    except ConfigurationError as e:
        logger.error("Failed to initialize Shopify GraphQL client: %s", e)
        logger.error(
            "Make sure environment variables are set: "
            "SHOPIFY_ACCESS_TOKEN, SHOPIFY_STORE_URL, SHOPIFY_STORE_API_URL"
        )
        sys.exit(1)

    if settings.metrics_enabled and settings.metrics_port:
        try:
            start_exporter(settings.metrics_port)
        except OSError as e:
            logger.warning("Metrics server disabled: %s", e)

    logger.info("Shopify GraphQL MCP Server running on stdio")
    serve(server, StdioChannel(sys.stdin.buffer, sys.stdout.buffer), max_workers=settings.max_workers)


if __name__ == "__main__":
    main()
