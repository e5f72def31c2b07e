"""Tests for form-fields data models."""

from form_fields.models.directives import FieldDirectives
from form_fields.models.form_field import (
    FormField,
    ProjectedForm,
    TrustedHTML,
)
from form_fields.models.validation_result import (
    FieldValidationError,
    ValidationResult,
)


class TestTrustedHTML:
    """Tests for TrustedHTML."""

    def test_is_str(self):
        """Test trusted markup compares equal to its text."""
        html = TrustedHTML("<b>bold</b>")
        assert html == "<b>bold</b>"
        assert isinstance(html, str)

    def test_html_protocol(self):
        """Test __html__ returns the markup unchanged."""
        assert TrustedHTML("<i>x</i>").__html__() == "<i>x</i>"


class TestFormField:
    """Tests for FormField model."""

    def test_basic_field(self):
        """Test creating a basic field."""
        field = FormField(name="email", label="Email")
        assert field.placeholder == ""
        assert field.type == "text"
        assert field.value == ""
        assert field.id is None
        assert field.footer is None
        assert field.read_only is False
        assert field.errors == []
        assert not field.is_section

    def test_footer_coerced_to_trusted(self):
        """Test a plain string footer becomes TrustedHTML."""
        field = FormField(name="password", label="Password", footer="<small>8+ chars</small>")
        assert isinstance(field.footer, TrustedHTML)

    def test_section(self):
        """Test section detection."""
        field = FormField(name="Address", label="Address", type="section", id="address")
        assert field.is_section

    def test_to_config(self):
        """Test exporting a field for client-side renderers."""
        field = FormField(
            name="password",
            label="Password",
            placeholder="Password",
            type="password",
            footer="Something super secret!",
            read_only=True,
        )
        assert field.to_config() == {
            "name": "password",
            "label": "Password",
            "placeholder": "Password",
            "type": "password",
            "value": "",
            "readOnly": True,
            "footer": "Something super secret!",
        }

    def test_to_config_with_id_and_errors(self):
        field = FormField(name="email", label="Email", id="email", errors=["is required"])
        config = field.to_config()
        assert config["id"] == "email"
        assert config["errors"] == ["is required"]
        assert "footer" not in config


class TestProjectedForm:
    """Tests for ProjectedForm model."""

    def _form(self) -> ProjectedForm:
        return ProjectedForm(
            fields=[
                FormField(name="name", label="Name"),
                FormField(name="Address", label="Address", type="section", id="address"),
                FormField(name="Address.Street1", label="Street1", value="123 Test St"),
            ]
        )

    def test_names(self):
        """Test names skip section markers."""
        assert self._form().names() == ["name", "Address.Street1"]

    def test_get(self):
        """Test lookup by flattened key."""
        form = self._form()
        assert form.get("Address.Street1").value == "123 Test St"
        assert form.get("Address") is None
        assert form.get("missing") is None

    def test_sections(self):
        assert [f.id for f in self._form().sections()] == ["address"]

    def test_form_config_export(self):
        """Test exporting form configuration."""
        config = self._form().to_form_config()
        assert [f["name"] for f in config["fields"]] == ["name", "Address", "Address.Street1"]
        assert config["fields"][1]["type"] == "section"


class TestFieldDirectives:
    """Tests for FieldDirectives model."""

    def test_from_mapping(self):
        directives = FieldDirectives.from_mapping({"label": "Name", "readonly": "true", "x": "y"})
        assert directives.label == "Name"
        assert directives.read_only is True
        assert directives.header is False
        assert directives.raw == {"label": "Name", "readonly": "true", "x": "y"}

    def test_skipped(self):
        directives = FieldDirectives.skipped()
        assert directives.skip is True
        assert directives.raw == {}


class TestValidationResult:
    """Tests for ValidationResult model."""

    def test_empty_result(self):
        """Test an empty result converts to an empty dict."""
        assert ValidationResult().to_error_dict() == {}

    def test_error_type_defaults_to_invalid(self):
        """Test the error kind defaults when not given."""
        error = FieldValidationError(field_name="email", message="Invalid email format")
        assert error.error_type == "invalid"

    def test_error_dict_conversion(self):
        """Test converting errors to dict format."""
        result = ValidationResult(
            errors=[
                FieldValidationError(field_name="email", message="Invalid email format"),
                FieldValidationError(field_name="email", message="Email is required"),
                FieldValidationError(field_name="Address.Zip", message="Must be 5 digits"),
            ],
        )
        error_dict = result.to_error_dict()
        assert len(error_dict["email"]) == 2
        assert len(error_dict["Address.Zip"]) == 1
