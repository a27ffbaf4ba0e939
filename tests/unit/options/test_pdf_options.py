"""Unit tests for PdfOptions and ConnectionOptions."""

from dataclasses import FrozenInstanceError

import pytest

from chromepdf.constants import DEFAULT_API_URL, DEFAULT_REQUEST_TIMEOUT, PDF_ENDPOINT
from chromepdf.exceptions import ValidationError
from chromepdf.options import ConnectionOptions, MarginOptions, PdfOptions
from chromepdf.payload import build_options_payload


@pytest.mark.unit
class TestPdfOptionsDefaults:
    """Test default values of PdfOptions."""

    def test_defaults(self):
        """Test the defaults match a fresh client."""
        options = PdfOptions()

        assert options.format == "A4"
        assert options.print_background is True
        assert options.safe_mode is False
        assert options.margin.is_empty
        for name in ("wait_until", "page_ranges", "emulate_media", "scale", "header", "footer", "landscape"):
            assert getattr(options, name) is None

    def test_frozen(self):
        """Test options cannot be mutated in place."""
        options = PdfOptions()

        with pytest.raises(FrozenInstanceError):
            options.format = "Letter"  # type: ignore[misc]

    def test_create_updated_leaves_original_untouched(self):
        original = PdfOptions()
        updated = original.create_updated(format="Letter", landscape=True)

        assert original.format == "A4"
        assert original.landscape is None
        assert updated.format == "Letter"
        assert updated.landscape is True


@pytest.mark.unit
class TestDisplayHeaderFooter:
    """Test derivation of header/footer display."""

    def test_false_without_templates(self):
        assert PdfOptions().display_header_footer is False

    def test_true_with_header_only(self):
        assert PdfOptions(header="<span></span>").display_header_footer is True

    def test_true_with_footer_only(self):
        assert PdfOptions(footer="<span class='pageNumber'></span>").display_header_footer is True

    def test_empty_template_counts_as_set(self):
        """Test an empty template still enables display."""
        assert PdfOptions(footer="").display_header_footer is True

    def test_clearing_templates_turns_display_off(self):
        options = PdfOptions(header="h", footer="f").create_updated(header=None, footer=None)

        assert options.display_header_footer is False


@pytest.mark.unit
class TestPdfOptionsFromDict:
    """Test PdfOptions.from_dict."""

    def test_margin_list_is_coerced(self):
        options = PdfOptions.from_dict({"format": "Letter", "margin": ["1cm", "2cm"]})

        assert options.format == "Letter"
        assert options.margin == MarginOptions.symmetric("1cm", "2cm")

    def test_unknown_key_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            PdfOptions.from_dict({"format": "A4", "colour": "red"})

        assert exc_info.value.parameter_name == "colour"

    def test_empty_mapping_gives_defaults(self):
        assert PdfOptions.from_dict({}) == PdfOptions()

    def test_none_for_non_nullable_fields_uses_defaults(self):
        """Test a null format or flag in config never reaches the wire as null."""
        options = PdfOptions.from_dict(
            {"format": None, "print_background": None, "safe_mode": None, "margin": None, "landscape": None}
        )

        assert options == PdfOptions()
        assert build_options_payload(options) == {"options": {"format": "A4"}, "safeMode": False}


@pytest.mark.unit
class TestConnectionOptions:
    """Test ConnectionOptions."""

    def test_defaults(self):
        connection = ConnectionOptions()

        assert connection.api_key is None
        assert connection.api_url == DEFAULT_API_URL
        assert connection.request_timeout == DEFAULT_REQUEST_TIMEOUT

    def test_pdf_url(self):
        connection = ConnectionOptions(api_url="http://localhost:3000")

        assert connection.pdf_url == f"http://localhost:3000{PDF_ENDPOINT}"

    def test_trailing_slash_removed(self):
        """Test a trailing slash does not produce a double slash in the endpoint URL."""
        connection = ConnectionOptions(api_url="http://localhost:3000/")

        assert connection.api_url == "http://localhost:3000"
        assert "//chrome" not in connection.pdf_url

    def test_query_params(self):
        assert ConnectionOptions().query_params == {}
        assert ConnectionOptions(api_key="abc").query_params == {"token": "abc"}

    def test_empty_api_url_rejected(self):
        with pytest.raises(ValidationError):
            ConnectionOptions(api_url="")

    @pytest.mark.parametrize("timeout", [0, -1.5])
    def test_non_positive_timeout_rejected(self, timeout):
        with pytest.raises(ValidationError) as exc_info:
            ConnectionOptions(request_timeout=timeout)

        assert exc_info.value.parameter_name == "request_timeout"

    def test_from_dict_converts_timeout_string(self):
        """Test timeouts read from the environment as strings become floats."""
        connection = ConnectionOptions.from_dict({"request_timeout": "12.5", "api_key": None})

        assert connection.request_timeout == 12.5
        assert connection.api_key is None

    def test_from_dict_rejects_non_numeric_timeout(self):
        with pytest.raises(ValidationError, match="must be a number"):
            ConnectionOptions.from_dict({"request_timeout": "soon"})
