"""Backend status probes ({"action": "checkLatency"})."""

from src.services.gateway import STATUS_ACTIONS, dispatch_action
from src.utils.http import JsonRequestHandler, setup_runtime

setup_runtime()


class handler(JsonRequestHandler):

    def do_POST(self):
        with self.correlation():
            try:
                status, payload = dispatch_action(STATUS_ACTIONS, self.read_json_body())
            except Exception as e:
                status, payload = self.internal_error(e)
            self.send_json(status, payload)
