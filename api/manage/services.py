"""Legacy services endpoint multiplexed on the "action" field.

Kept for clients that still POST {"action": "getServices" | "requestService"
| "getServiceRequests" | "updateServiceRequestStatus", ...}. New clients call
the per-operation routes under api/services and api/service_requests.
"""

from src.services.gateway import SERVICE_ACTIONS, dispatch_action, maybe_auto_seed
from src.utils.http import JsonRequestHandler, setup_runtime

setup_runtime()


class handler(JsonRequestHandler):

    def do_POST(self):
        with self.correlation():
            try:
                maybe_auto_seed()
                status, payload = dispatch_action(SERVICE_ACTIONS, self.read_json_body())
            except Exception as e:
                status, payload = self.internal_error(e)
            self.send_json(status, payload)
