"""List the service catalog for an authenticated user."""

from src.services.gateway import GET_SERVICES, maybe_auto_seed
from src.utils.http import JsonRequestHandler, setup_runtime

setup_runtime()


class handler(JsonRequestHandler):
    """POST {"userId", "token"} -> {"success", "services"}."""

    def do_POST(self):
        with self.correlation():
            try:
                maybe_auto_seed()
                status, payload = GET_SERVICES(self.read_json_body())
            except Exception as e:
                status, payload = self.internal_error(e)
            self.send_json(status, payload)
