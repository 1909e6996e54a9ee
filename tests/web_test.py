"""Tests for commons.web."""

from requests.structures import CaseInsensitiveDict

from commons import web


class TestIsJsonRequest:
    """JSON detection from headers and parameters."""

    def test_ajax_header(self) -> None:
        assert web.is_json_request({'X-Requested-With': 'XMLHttpRequest'})

    def test_header_names_are_case_insensitive(self) -> None:
        assert web.is_json_request({'accept': 'application/x-json;charset=UTF-8'})

    def test_cors_preflight(self) -> None:
        assert web.is_json_request({'Access-Control-Request-Headers': 'x-requested-with'})

    def test_apicloud_user_agent(self) -> None:
        assert web.is_json_request({'User-Agent': 'Mozilla/5.0 APICloud/1.0'})

    def test_accept_parameter(self) -> None:
        assert web.is_json_request({}, {'Accept': ['x-json']})

    def test_plain_request(self) -> None:
        assert not web.is_json_request({'Accept': 'text/html'})
        assert not web.is_json_request(None)


def test_parameters_starting_with() -> None:
    params = {
        'search.name': ['sam'],
        'search.tags': ['a', 'b'],
        'search.empty': [],
        'page': ['1'],
    }
    assert web.parameters_starting_with(params, 'search.') == {'name': 'sam', 'tags': ['a', 'b']}
    assert list(web.parameters_starting_with(params, None)) == ['page', 'search.name', 'search.tags']


class TestResponseHeaders:
    """Cache and download headers."""

    def test_no_cache(self) -> None:
        headers = web.set_no_cache_header()
        assert headers['cache-control'] == 'no-cache, no-store, max-age=0'
        assert headers['Pragma'] == 'no-cache'
        assert headers['Expires'] == 'Thu, 01 Jan 1970 00:00:00 GMT'

    def test_expires(self) -> None:
        headers = web.set_expires_header(60)
        assert headers['Cache-Control'] == 'private, max-age=60'
        assert headers['Expires'].endswith('GMT')

    def test_writes_into_given_mapping(self) -> None:
        headers = {}
        web.set_etag('"v1"', headers)
        web.set_last_modified_header(0, headers)
        assert headers == {'ETag': '"v1"', 'Last-Modified': 'Thu, 01 Jan 1970 00:00:00 GMT'}

    def test_file_download(self) -> None:
        headers = web.set_file_download_header('report.pdf')
        assert headers['Content-Disposition'] == 'attachment; filename="report.pdf"'

    def test_file_download_non_latin_name(self) -> None:
        headers = web.set_file_download_header('报告.pdf')
        assert "filename*=UTF-8''%E6%8A%A5%E5%91%8A.pdf" in headers['Content-Disposition']


class TestConditionalRequests:
    """If-Modified-Since and If-None-Match."""

    LAST_MODIFIED = 1_700_000_000

    def test_not_modified(self) -> None:
        request = {'If-Modified-Since': web.http_date(self.LAST_MODIFIED)}
        assert web.check_if_modified_since(request, self.LAST_MODIFIED) == (False, 304)

    def test_modified(self) -> None:
        request = {'If-Modified-Since': web.http_date(self.LAST_MODIFIED - 3600)}
        assert web.check_if_modified_since(request, self.LAST_MODIFIED) == (True, None)

    def test_no_or_bad_header(self) -> None:
        assert web.check_if_modified_since({}, self.LAST_MODIFIED) == (True, None)
        assert web.check_if_modified_since({'If-Modified-Since': 'garbage'}, self.LAST_MODIFIED) == (True, None)

    def test_etag_match_echoes_etag(self) -> None:
        response = CaseInsensitiveDict()
        result = web.check_if_none_match_etag({'If-None-Match': '"a", "b"'}, '"b"', response)
        assert result == (False, 304)
        assert response['etag'] == '"b"'

    def test_etag_wildcard(self) -> None:
        assert web.check_if_none_match_etag({'If-None-Match': '*'}, '"x"') == (False, 304)

    def test_etag_mismatch(self) -> None:
        assert web.check_if_none_match_etag({'If-None-Match': '"a"'}, '"b"') == (True, None)
        assert web.check_if_none_match_etag({}, '"b"') == (True, None)
