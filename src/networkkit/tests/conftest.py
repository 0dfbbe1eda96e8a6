from __future__ import annotations

import asyncio
import functools
import json
from dataclasses import dataclass, field
from urllib.parse import parse_qsl

import httpx
import pytest
from pydantic import BaseModel

from networkkit.adapters import http_client

BASE_URL = "https://echo.test"


class EchoArgs(BaseModel):
    foo: str


class GetEcho(BaseModel):
    url: str
    args: EchoArgs


class PostEcho(BaseModel):
    url: str
    form: EchoArgs


class Item(BaseModel):
    name: str


class FakeModel(BaseModel):
    fake_prop: str


def parse_multipart(body: bytes, boundary: str) -> list[tuple[dict[str, str], bytes]]:
    """Parte un cuerpo multipart en (headers, payload) verificando el formato."""

    delimiter = b"--" + boundary.encode("ascii")
    terminator = delimiter + b"--\r\n"
    assert body.endswith(terminator)
    assert body.count(terminator) == 1

    chunks = body[: -len(terminator)].split(delimiter)
    assert chunks[0] == b""

    parts: list[tuple[dict[str, str], bytes]] = []
    for chunk in chunks[1:]:
        assert chunk.startswith(b"\r\n")
        head, _, payload = chunk[2:].partition(b"\r\n\r\n")
        assert payload.endswith(b"\r\n")
        headers = dict(line.split(": ", 1) for line in head.decode("utf-8").split("\r\n"))
        parts.append((headers, payload[:-2]))
    return parts


def boundary_of(request: httpx.Request) -> str:
    content_type = request.headers["content-type"]
    prefix = "multipart/form-data; boundary="
    assert content_type.startswith(prefix)
    return content_type[len(prefix):]


@dataclass
class EchoServer:
    """Servidor falso estilo httpbin servido por `httpx.MockTransport`."""

    requests: list[httpx.Request] = field(default_factory=list)

    async def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path

        if path == "/get":
            return httpx.Response(200, json={"url": str(request.url), "args": dict(request.url.params)})
        if path == "/post":
            form = dict(parse_qsl(request.content.decode("utf-8"), keep_blank_values=True))
            return httpx.Response(200, json={"url": str(request.url), "form": form})
        if path == "/upload":
            parts = parse_multipart(request.content, boundary_of(request))
            form: dict[str, str] = {}
            files: dict[str, dict[str, object]] = {}
            for headers, payload in parts:
                disposition = headers["Content-Disposition"]
                name = disposition.split('name="', 1)[1].split('"', 1)[0]
                if "filename=" in disposition:
                    files[name] = {
                        "filename": disposition.split('filename="', 1)[1].split('"', 1)[0],
                        "content_type": headers["Content-Type"],
                        "size": len(payload),
                    }
                else:
                    form[name] = payload.decode("utf-8")
            return httpx.Response(200, json={"form": form, "files": files})
        if path == "/items":
            return httpx.Response(200, json=[{"name": "a"}, {"name": "b"}])
        if path == "/empty":
            return httpx.Response(200, content=b"")
        if path == "/bytes":
            return httpx.Response(200, content=b"\xff\xfe\xfa")
        if path.startswith("/status/"):
            code = int(path.rsplit("/", 1)[1])
            return httpx.Response(code, text=json.dumps({"status": code}))
        if path.startswith("/delay/"):
            await asyncio.sleep(float(path.rsplit("/", 1)[1]))
            return httpx.Response(200, json={"delayed": True, "args": dict(request.url.params)})
        if path == "/broken":
            raise httpx.ConnectError("connection refused", request=request)
        return httpx.Response(404, text="not found")


@pytest.fixture
def echo(monkeypatch) -> EchoServer:
    server = EchoServer()
    transport = httpx.MockTransport(server.handle)
    monkeypatch.setattr(
        http_client,
        "build_async_client",
        functools.partial(http_client.build_async_client, transport=transport),
    )
    return server
