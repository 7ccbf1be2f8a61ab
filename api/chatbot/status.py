"""AI service health proxy."""

from src.services.gateway import ai_health
from src.utils.http import JsonRequestHandler, setup_runtime

setup_runtime()


class handler(JsonRequestHandler):
    """GET -> {"success": true, "data": <upstream health>} or a 500 failure."""

    def do_GET(self):
        with self.correlation():
            try:
                status, payload = ai_health()
            except Exception as e:
                status, payload = self.internal_error(e)
            self.send_json(status, payload)
