from dataclasses import dataclass


@dataclass(frozen=True)
class FormSubmissionResult:
    """What the page showed after the form was submitted."""
    page_title: str
    submitted_text: str
    message: str
    expected_message: str | None = None

    @property
    def passed(self) -> bool:
        """True when no message is expected or the received one matches exactly."""
        return self.expected_message is None or self.message == self.expected_message
