import logging
from urllib.request import Request

from nsoneapi.util import decorate, log_requests


def _tagger(tag, seen):
    def decorator(doer):
        def wrapped(request):
            seen.append(tag)
            return doer(request)

        return wrapped

    return decorator


def test_decorate_without_decorators_returns_doer():
    def doer(request):
        return request

    assert decorate(doer) is doer


def test_decorate_applies_in_order_last_outermost():
    seen = []

    def base(request):
        seen.append("base")
        return "done"

    doer = decorate(base, _tagger("a", seen), _tagger("b", seen))
    result = doer(Request("https://api.example.com/v1/zones"))
    assert result == "done"
    assert seen == ["b", "a", "base"]


def test_log_requests_logs_and_forwards(caplog):
    logger = logging.getLogger("nsoneapi.test.util")
    caplog.set_level(logging.INFO, logger=logger.name)
    received = []

    def base(request):
        received.append(request)
        return "response"

    request = Request(
        "https://api.example.com/v1/zones", headers={"User-Agent": "agent/1.0"}
    )
    doer = decorate(base, log_requests(logger))
    assert doer(request) == "response"
    assert received == [request]
    messages = [record.getMessage() for record in caplog.records]
    assert messages == ["agent/1.0: GET https://api.example.com/v1/zones"]


def test_log_requests_uses_request_method(caplog):
    logger = logging.getLogger("nsoneapi.test.util.method")
    caplog.set_level(logging.INFO, logger=logger.name)
    request = Request("https://api.example.com/v1/zones/a", data=b"{}", method="PUT")
    doer = log_requests(logger)(lambda r: r.get_method())
    assert doer(request) == "PUT"
    message = caplog.records[0].getMessage()
    assert message.startswith(": PUT ")
    assert message.endswith("https://api.example.com/v1/zones/a")