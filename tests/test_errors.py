import httpx

from tebex_headless.errors import HeadlessAPIError, HeadlessResponseError, describe_error


def _response(status_code, **kwargs):
    request = httpx.Request("POST", "https://headless.tebex.io/api/baskets/abc/packages")
    return httpx.Response(status_code, request=request, **kwargs)


def test_api_error_prefers_detail_then_message_then_title():
    assert "Out of stock" in str(HeadlessAPIError.from_response(_response(422, json={"title": "T", "detail": "Out of stock"})))
    assert "nope" in str(HeadlessAPIError.from_response(_response(400, json={"message": "nope"})))
    assert "Forbidden" in str(HeadlessAPIError.from_response(_response(403, json={"title": "Forbidden"})))


def test_api_error_wraps_non_object_payload():
    err = HeadlessAPIError.from_response(_response(400, json=["bad"]))
    assert err.payload == {"errors": ["bad"]}
    assert err.method == "POST"


def test_describe_error_api():
    err = HeadlessAPIError("404 Not Found", status_code=404, payload={"detail": "x"}, url="u")
    out = describe_error(err)
    assert out == {
        "error": "HeadlessAPIError",
        "message": "404 Not Found",
        "status_code": 404,
        "payload": {"detail": "x"},
        "url": "u",
    }


def test_describe_error_response_and_transport():
    assert describe_error(HeadlessResponseError("bad", payload=[1]))["payload"] == [1]
    request = httpx.Request("GET", "https://headless.tebex.io")
    assert describe_error(httpx.ConnectTimeout("slow", request=request))["transport"] is True
