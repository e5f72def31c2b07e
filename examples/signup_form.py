"""
form-fields example: project a signup record onto form fields.

Usage:
    python examples/signup_form.py
"""

import json
from dataclasses import dataclass, field
from typing import Annotated, Optional

from form_fields import FieldValidationError, FormTag, project_form, setup_logging


@dataclass
class Address:
    street1: str = field(default="", metadata={"form": "label=Street"})
    city: str = ""


@dataclass
class Signup:
    name: str = field(default="", metadata={"form": "label=Full Name;id=name"})
    email: Annotated[str, FormTag("type=email;placeholder=you@example.com")] = ""
    password: str = field(
        default="",
        metadata={"form": "type=password;footer=<small>At least 8 characters</small>"},
    )
    address: Optional[Address] = field(default=None, metadata={"form": "header=true"})
    internal_id: str = field(default="", metadata={"form": "-"})


def main():
    """Main entry point."""
    setup_logging(level="DEBUG")

    form = project_form(
        Signup(name="Michael Scott", internal_id="42"),
        errors=[FieldValidationError(field_name="email", message="Email is required")],
    )
    print(json.dumps(form.to_form_config(), indent=2))


if __name__ == "__main__":
    main()
