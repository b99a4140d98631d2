import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest

from webgopher.cli import main


class _Handler(BaseHTTPRequestHandler):
    def do_GET(self):
        data = b'<a href="/">home</a>'
        self.send_response(200)
        self.send_header("Content-Type", "text/html")
        self.send_header("Content-Length", str(len(data)))
        self.end_headers()
        self.wfile.write(data)

    def log_message(self, *args):
        pass


@pytest.fixture
def server():
    httpd = ThreadingHTTPServer(("127.0.0.1", 0), _Handler)
    thread = threading.Thread(target=httpd.serve_forever, daemon=True)
    thread.start()
    yield f"http://127.0.0.1:{httpd.server_address[1]}"
    httpd.shutdown()
    httpd.server_close()


def test_no_arguments(capsys):
    assert main([]) == 1
    assert "no website provided" in capsys.readouterr().out


def test_too_many_arguments(capsys):
    assert main(["a", "1", "2", "3"]) == 1
    assert "too many arguments provided" in capsys.readouterr().out


def test_invalid_numbers_and_bad_url(capsys):
    assert main([":bad", "abc", "xyz"]) == 1
    captured = capsys.readouterr()
    assert "Invalid maxConcurrency value provided, using default of 5" in captured.out
    assert "Invalid maxPages value provided, using default of 100" in captured.out
    assert "error configuring WebGopher" in captured.err


def test_full_run(server, capsys):
    assert main([server, "2", "10"]) == 0
    out = capsys.readouterr().out
    assert f"starting crawl of {server}..." in out
    assert f"REPORT for {server}" in out
    host = server.removeprefix("http://")
    assert f"Found 2 internal links to {host}" in out