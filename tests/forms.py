"""Form classes shared across the test suite."""

from __future__ import annotations

from observable_form import Form, FormControl
from observable_form.validation import email, required


class ProfileForm(Form):
    """Name plus email, both required."""

    def __init__(self) -> None:
        super().__init__(
            name=FormControl("", validators=[required]),
            email=FormControl("", validators=[required, email]),
        )
