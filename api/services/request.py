"""Submit a request for a catalog service."""

from src.services.gateway import REQUEST_SERVICE, maybe_auto_seed
from src.utils.http import JsonRequestHandler, setup_runtime

setup_runtime()


class handler(JsonRequestHandler):
    """POST {"userId", "token", "serviceId", "details"} -> 201 {"success", "requestId"}."""

    def do_POST(self):
        with self.correlation():
            try:
                maybe_auto_seed()
                status, payload = REQUEST_SERVICE(self.read_json_body())
            except Exception as e:
                status, payload = self.internal_error(e)
            self.send_json(status, payload)
