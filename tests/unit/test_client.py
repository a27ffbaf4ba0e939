"""Unit tests for the Browserless rendering clients.

Requests go to a recording ``httpx.MockTransport`` so the tests check the
exact method, URL, headers and body the service would receive.
"""

from unittest.mock import patch

import httpx
import pytest
from utils import MINIMAL_PDF_BYTES, FakeRenderService

from chromepdf import BrowserlessClient, RenderClient, SelfHostedBrowserlessClient
from chromepdf.constants import DEFAULT_API_URL, DEFAULT_USER_AGENT
from chromepdf.exceptions import ApiError, EncodingError, FileAccessError, FileNotFoundError, ValidationError
from chromepdf.options import MarginOptions, PdfOptions


@pytest.mark.unit
class TestRequestShape:
    """Test what a render sends over the wire."""

    def test_render_content_request(self, client, fake_service):
        """Test method, endpoint, token and content type of a render."""
        result = client.render_content("<h1>Hello</h1>")

        request = fake_service.last_request
        assert result == MINIMAL_PDF_BYTES
        assert request.method == "POST"
        assert request.url.scheme == "https"
        assert request.url.host == "chrome.browserless.io"
        assert request.url.path == "/chrome/pdf"
        assert request.url.params["token"] == "test-key"
        assert request.headers["Content-Type"] == "application/json"

    def test_default_body(self, client, fake_service):
        client.render_content("<h1>Hello</h1>")

        assert fake_service.last_payload == {
            "options": {"format": "A4"},
            "safeMode": False,
            "html": "<h1>Hello</h1>",
        }

    def test_render_url_body(self, client, fake_service):
        client.set_landscape(True).render_url("https://example.com/report")

        assert fake_service.last_payload == {
            "options": {"format": "A4", "landscape": True},
            "safeMode": False,
            "url": "https://example.com/report",
        }

    def test_no_token_without_api_key(self, fake_service):
        """Test the token parameter is omitted when no key is configured."""
        client = SelfHostedBrowserlessClient("http://localhost:3000", http_client=fake_service.client())

        client.render_content("<p></p>")

        request = fake_service.last_request
        assert "token" not in request.url.params
        assert request.url.host == "localhost"
        assert request.url.port == 3000
        assert request.url.path == "/chrome/pdf"

    def test_empty_content_is_sent(self, client, fake_service):
        client.render_content("")

        assert fake_service.last_payload["html"] == ""

    def test_each_render_reads_current_options(self, client, fake_service):
        """Test options changed between renders apply to the next render only."""
        client.render_content("a")
        client.set_format("Letter")
        client.render_content("b")

        first, second = fake_service.requests
        assert b'"format": "A4"' in first.content
        assert b'"format": "Letter"' in second.content


@pytest.mark.unit
class TestFluentSetters:
    """Test option setters on the client."""

    def test_setters_chain(self, client):
        """Test every setter returns the client itself."""
        returned = (
            client.set_format("Legal")
            .set_margin("1cm", "2cm")
            .set_print_background(False)
            .set_wait_until("networkidle0")
            .set_page_ranges("1-2")
            .set_media_emulation("screen")
            .set_scale(0.5)
            .set_header("H")
            .set_footer("F")
            .set_width("10in")
            .set_height("12in")
            .set_prefer_css_page_size(True)
            .set_landscape(False)
            .set_safe_mode(True)
            .set_rotation(180)
            .set_timeout(5000)
            .set_api_key("other")
        )

        assert returned is client

    def test_full_document(self, client, fake_service):
        """Test every option lands under its wire key."""
        (
            client.set_format("Legal")
            .set_margin("1cm", "2cm", "3cm", "4cm")
            .set_print_background(False)
            .set_wait_until("networkidle0")
            .set_page_ranges("1-2")
            .set_media_emulation("print")
            .set_scale(1.5)
            .set_footer("<span class='pageNumber'></span>")
            .set_prefer_css_page_size(True)
            .set_landscape(True)
            .set_safe_mode(True)
            .set_rotation(90)
            .set_timeout(20000)
        )

        client.render_url("https://example.com")

        assert fake_service.last_payload == {
            "options": {
                "format": "Legal",
                "displayHeaderFooter": True,
                "footerTemplate": "<span class='pageNumber'></span>",
                "margin": {"top": "1cm", "right": "2cm", "bottom": "3cm", "left": "4cm"},
                "printBackground": False,
                "landscape": True,
                "pageRanges": "1-2",
                "preferCSSPageSize": True,
                "scale": 1.5,
            },
            "safeMode": True,
            "gotoOptions": {"waitUntil": "networkidle0", "timeout": 20000},
            "rotate": 90,
            "emulateMedia": "print",
            "url": "https://example.com",
        }

    def test_setters_replace_snapshot(self, client):
        """Test a setter swaps in a new options object."""
        before = client.options

        client.set_margin("5mm")

        assert before.margin == MarginOptions()
        assert client.options is not before
        assert client.options.margin == MarginOptions.uniform("5mm")

    def test_set_margin_invalid_arity(self, client):
        with pytest.raises(ValidationError):
            client.set_margin()

    def test_header_display_follows_templates(self, client):
        client.set_header("H")
        assert client.options.display_header_footer is True

        client.set_header(None)
        assert client.options.display_header_footer is False

    def test_get_formatted_options(self, client):
        client.set_wait_until("load")

        assert client.get_formatted_options() == {
            "options": {"format": "A4"},
            "safeMode": False,
            "gotoOptions": {"waitUntil": "load"},
        }

    def test_set_api_key_changes_token(self, client, fake_service):
        client.set_api_key("rotated")
        client.render_content("<p></p>")

        assert fake_service.last_request.url.params["token"] == "rotated"
        assert client.api_key == "rotated"

    def test_with_options(self, client):
        options = PdfOptions(format="Letter")

        assert client.with_options(options) is client
        assert client.options is options


@pytest.mark.unit
class TestErrors:
    """Test error mapping of render failures."""

    def test_http_error_status(self):
        service = FakeRenderService(status_code=500, content=b"boom")
        client = BrowserlessClient(http_client=service.client(), api_key="test-key")

        with pytest.raises(ApiError) as exc_info:
            client.render_content("<p></p>")

        assert exc_info.value.status_code == 500
        assert isinstance(exc_info.value.original_error, httpx.HTTPStatusError)
        assert "500" in str(exc_info.value)

    def test_unauthorized_status(self):
        service = FakeRenderService(status_code=401)
        client = BrowserlessClient(http_client=service.client(), api_key="bad")

        with pytest.raises(ApiError) as exc_info:
            client.render_url("https://example.com")

        assert exc_info.value.status_code == 401

    def test_connection_error(self):
        """Test transport failures carry no status code."""
        service = FakeRenderService(error=httpx.ConnectError("Connection refused"))
        client = BrowserlessClient(http_client=service.client(), api_key="test-key")

        with pytest.raises(ApiError) as exc_info:
            client.render_content("<p></p>")

        assert exc_info.value.status_code is None
        assert "Connection refused" in str(exc_info.value)
        assert isinstance(exc_info.value.original_error, httpx.ConnectError)

    def test_timeout_error(self):
        service = FakeRenderService(error=httpx.ReadTimeout("timed out"))
        client = BrowserlessClient(http_client=service.client())

        with pytest.raises(ApiError) as exc_info:
            client.render_content("<p></p>")

        assert exc_info.value.status_code is None

    def test_api_key_redacted(self):
        """Test the key in the request URL does not leak into the error message."""
        service = FakeRenderService(status_code=403)
        client = BrowserlessClient(http_client=service.client(), api_key="s3cr3t-key")

        with pytest.raises(ApiError) as exc_info:
            client.render_content("<p></p>")

        assert "s3cr3t-key" not in str(exc_info.value)
        assert "***" in str(exc_info.value)

    @pytest.mark.parametrize("api_key", ["ab+cd/ef=", "key with space&x=1"])
    def test_url_encoded_api_key_redacted(self, api_key):
        """Test keys that httpx percent-encodes are masked in their encoded form too."""
        service = FakeRenderService(status_code=403)
        client = BrowserlessClient(http_client=service.client(), api_key=api_key)

        with pytest.raises(ApiError) as exc_info:
            client.render_content("<p></p>")

        message = str(exc_info.value)
        encoded = str(service.last_request.url.params).split("=", 1)[1]
        assert api_key not in message
        assert encoded not in message
        assert "token=***" in message

    def test_encoding_error_sends_nothing(self, client, fake_service):
        with pytest.raises(EncodingError):
            client.render_content("\ud800")

        assert fake_service.requests == []

    def test_network_disabled(self, client, fake_service, monkeypatch):
        monkeypatch.setenv("CHROMEPDF_DISABLE_NETWORK", "1")

        with pytest.raises(ApiError, match="disabled") as exc_info:
            client.render_content("<p></p>")

        assert exc_info.value.status_code is None
        assert fake_service.requests == []


@pytest.mark.unit
class TestRenderFile:
    """Test rendering local HTML files."""

    def test_file_sent_as_html(self, client, fake_service, html_file):
        client.render_file(html_file)

        assert fake_service.last_payload["html"] == html_file.read_text(encoding="utf-8")
        assert "url" not in fake_service.last_payload

    def test_missing_file(self, client, fake_service, tmp_path):
        with pytest.raises(FileNotFoundError):
            client.render_file(tmp_path / "missing.html")

        assert fake_service.requests == []

    def test_directory_rejected(self, client, tmp_path):
        with pytest.raises(FileAccessError):
            client.render_file(tmp_path)


@pytest.mark.unit
class TestLifecycle:
    """Test construction and resource ownership."""

    def test_is_render_client(self, client):
        assert isinstance(client, RenderClient)

    def test_default_api_url(self):
        client = BrowserlessClient()

        assert client.api_url == DEFAULT_API_URL
        assert client.api_key is None

    def test_self_hosted_requires_url(self):
        with pytest.raises(TypeError):
            SelfHostedBrowserlessClient()  # type: ignore[call-arg]

    def test_self_hosted_url(self):
        client = SelfHostedBrowserlessClient("http://browserless:3000/", api_key="k")

        assert client.connection.pdf_url == "http://browserless:3000/chrome/pdf"
        assert client.api_key == "k"

    def test_injected_client_not_closed(self, fake_service):
        http_client = fake_service.client()

        with BrowserlessClient(http_client=http_client) as client:
            client.render_content("<p></p>")

        assert not http_client.is_closed

    def test_owned_client_created_lazily_and_closed(self, fake_service):
        """Test a client created by the renderer is closed with it."""
        http_client = fake_service.client()

        with patch("chromepdf.client.create_http_client", return_value=http_client) as factory:
            with BrowserlessClient(api_key="k") as client:
                factory.assert_not_called()
                client.render_content("<p></p>")
                client.render_content("<p></p>")

        factory.assert_called_once_with(timeout=30.0, user_agent=DEFAULT_USER_AGENT)
        assert http_client.is_closed
        assert len(fake_service.requests) == 2

    def test_from_config(self, fake_service):
        config = {"api_url": "http://localhost:3000", "api_key": "abc", "pdf": {"format": "Letter", "margin": "1cm"}}

        client = BrowserlessClient.from_config(config, http_client=fake_service.client())
        client.render_content("<p></p>")

        assert fake_service.last_request.url.host == "localhost"
        assert fake_service.last_payload["options"]["format"] == "Letter"
        assert fake_service.last_payload["options"]["margin"] == {
            "top": "1cm",
            "right": "1cm",
            "bottom": "1cm",
            "left": "1cm",
        }

    def test_from_config_discovers_environment(self, fake_service, monkeypatch):
        monkeypatch.setenv("CHROMEPDF_API_KEY", "from-env")

        client = BrowserlessClient.from_config(http_client=fake_service.client())

        assert client.api_key == "from-env"
