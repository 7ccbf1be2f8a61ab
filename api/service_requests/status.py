"""Admin review: approve, reject, or reopen a service request."""

from src.services.gateway import UPDATE_SERVICE_REQUEST_STATUS
from src.utils.http import JsonRequestHandler, setup_runtime

setup_runtime()


class handler(JsonRequestHandler):
    """POST {"userId", "token", "requestId", "status"} -> {"success", "serviceRequest"}."""

    def do_POST(self):
        with self.correlation():
            try:
                status, payload = UPDATE_SERVICE_REQUEST_STATUS(self.read_json_body())
            except Exception as e:
                status, payload = self.internal_error(e)
            self.send_json(status, payload)
