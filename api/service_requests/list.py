"""Admin listing of service requests."""

from src.services.gateway import GET_SERVICE_REQUESTS
from src.utils.http import JsonRequestHandler, setup_runtime

setup_runtime()


class handler(JsonRequestHandler):
    """POST {"userId", "token", "status"?} -> {"success", "serviceRequests"}."""

    def do_POST(self):
        with self.correlation():
            try:
                status, payload = GET_SERVICE_REQUESTS(self.read_json_body())
            except Exception as e:
                status, payload = self.internal_error(e)
            self.send_json(status, payload)
