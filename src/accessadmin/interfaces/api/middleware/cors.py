"""CORS for the admin frontend."""

import falcon.asgi

ALLOWED_METHODS = "GET, POST, PATCH, DELETE, OPTIONS"
ALLOWED_HEADERS = "Authorization, Content-Type"


class CORSMiddleware:
    """Echoes allowed origins and answers OPTIONS preflight.

    Requests from an origin outside `origins` get no Allow-Origin header, so
    the browser blocks them.
    """

    def __init__(self, origins: list[str]) -> None:
        self._origins = frozenset(origins)

    def allows(self, origin: str | None) -> bool:
        return origin is not None and origin in self._origins

    def _apply(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        resp.set_header("Vary", "Origin")
        origin = req.get_header("Origin")
        if not self.allows(origin):
            return
        resp.set_header("Access-Control-Allow-Origin", origin)
        resp.set_header("Access-Control-Allow-Methods", ALLOWED_METHODS)
        resp.set_header("Access-Control-Allow-Headers", ALLOWED_HEADERS)
        resp.set_header("Access-Control-Max-Age", "86400")

    async def process_request(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response
    ) -> None:
        if req.method == "OPTIONS":
            self._apply(req, resp)
            resp.status = falcon.HTTP_204
            resp.complete = True

    async def process_response(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, resource, req_succeeded
    ) -> None:
        self._apply(req, resp)
