import json
import threading

from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest


TRANSFERS = [
    {'id': '3', 'contract_id': 'c3', 'receiver': 'r3', 'amount': 30, 'asset_id': 'AB0003'},
    {'id': '1', 'contract_id': 'c1', 'receiver': 'r1', 'amount': 10, 'asset_id': 'XY0001'},
    {'id': '2', 'contract_id': 'c2', 'receiver': 'r2', 'amount': 20, 'asset_id': 'XY0001'},
]


def pytest_addoption(parser):
    parser.addoption("--endpoint_url", action="store", default=None)


class GraphServer:
    """Stand-in for the indexer API server, serving POST /api/graph/<name>.
    """
    def __init__(self):
        self.graphs = {'fuel_examples': TRANSFERS}
        self.requests = []
        self.httpd = ThreadingHTTPServer(('127.0.0.1', 0), self.make_handler())
        self.thread = threading.Thread(target=self.httpd.serve_forever, daemon=True)

    @property
    def url(self):
        host, port = self.httpd.server_address
        return f'http://{host}:{port}/api/graph'

    def make_handler(self):
        server = self

        class Handler(BaseHTTPRequestHandler):

            def do_POST(self):
                length = int(self.headers.get('Content-Length', 0))
                body = self.rfile.read(length)
                server.requests.append({
                    'path': self.path,
                    'content_type': self.headers.get('Content-Type'),
                    'body': json.loads(body),
                })

                name = self.path.rsplit('/', 1)[-1]
                if name == 'broken':
                    self.reply(200, b'not json')
                elif name in server.graphs:
                    self.reply(200, json.dumps(server.graphs[name]).encode())
                else:
                    error = {'success': 'false', 'details': f"The graph '{name}' was not found."}
                    self.reply(404, json.dumps(error).encode())

            def reply(self, status, body):
                self.send_response(status)
                self.send_header('Content-Type', 'application/json')
                self.send_header('Content-Length', str(len(body)))
                self.end_headers()
                self.wfile.write(body)

            def log_message(self, format, *args):
                pass

        return Handler

    def start(self):
        self.thread.start()

    def stop(self):
        if self.thread.is_alive():
            self.httpd.shutdown()
            self.thread.join()
        self.httpd.server_close()


@pytest.fixture
def graph_server():
    server = GraphServer()
    server.start()
    yield server
    server.stop()


@pytest.fixture
def endpoint_url(request, graph_server):
    # a real indexer API server given on the command line wins over the stub
    url = request.config.getoption("endpoint_url", default=None)
    return url or f'{graph_server.url}/fuel_examples'
