"""
Example: Build a multipart body and hand it to any HTTP transport

The builder only produces method, headers and body bytes; here the
standard library http.client does the sending.
"""

import http.client

import click
from formwire import MultipartBuilder, add_stderr_logger

PNG_HEADER = bytes.fromhex("89504e470d0a1a0a0000000d49484452")


def build():
    return (
        MultipartBuilder()
        .add_part("data", '{"Hello":"World"}', "application/json")
        .add_part("files", PNG_HEADER, "image/png", "test.png")
        .finalize()
    )


def send(request, host: str = "httpbin.org", path: str = "/anything") -> None:
    conn = http.client.HTTPSConnection(host, timeout=10)
    try:
        conn.request(request.method, path, body=request.body, headers=dict(request.raw_headers))
        resp = conn.getresponse()
        click.secho(f"Upload status: {resp.status}", fg="green")
        print(resp.read().decode("utf-8", errors="replace")[:500])
    finally:
        conn.close()


if __name__ == "__main__":
    add_stderr_logger()
    request = build()
    for name, value in request.raw_headers:
        print(f"{name}: {value}")
    print(request.body)
    send(request)
