from typing import Any, Protocol

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse, PlainTextResponse, Response


class Transmitter(Protocol):
    def status(self, code: int) -> "Transmitter": ...

    async def send(self, body: Any) -> None: ...


class BufferedResponse:
    """Transmission capability that renders into a FastAPI response.

    The body is encoded inside ``send`` so an unserializable payload fails
    there, where the page handlers can still fall back to a message.
    """

    def __init__(self):
        self.status_code = 200
        self._response: Response | None = None

    def status(self, code: int) -> "BufferedResponse":
        self.status_code = code
        return self

    async def send(self, body: Any) -> None:
        if isinstance(body, str):
            self._response = PlainTextResponse(body, status_code=self.status_code)
        else:
            self._response = JSONResponse(
                jsonable_encoder(body), status_code=self.status_code
            )

    @property
    def sent(self) -> bool:
        return self._response is not None

    def render(self) -> Response:
        if self._response is None:
            return PlainTextResponse("No response sent", status_code=500)
        return self._response
