import logging
from dataclasses import dataclass, field

from webform_bot.application.job.job import Job, JobStatus
from webform_bot.domain.config import FormConfig
from webform_bot.domain.errors import WebFormBotError
from webform_bot.domain.model.result import FormSubmissionResult
from webform_bot.domain.protocols.driver_protocol import DriverProtocol

logger = logging.getLogger(__name__)


@dataclass(kw_only=True)
class FormSubmissionJob(Job):
    """Fill the text field of a web form, submit it and read the confirmation."""
    form_config: FormConfig = field(default_factory=FormConfig)
    implicit_wait_ms: int = 500
    success_message: str = "Form submitted and confirmation received"
    failure_message: str = "Form submission did not produce the expected confirmation"

    def execute(self, driver: DriverProtocol) -> FormSubmissionResult:
        self.status = JobStatus.RUNNING
        form = self.form_config

        try:
            driver.navigate(form.url)
            page_title = driver.title()
            logger.info(f"Form run started on page '{page_title}'")

            driver.set_implicit_wait(self.implicit_wait_ms)

            logger.debug(f"Typing {form.text!r} into {form.text_field_locator}")
            driver.type_text(form.text_field_locator, form.text)

            logger.debug(f"Clicking {form.submit_locator}")
            driver.click(form.submit_locator)

            message = driver.get_text(form.message_locator)
        except WebFormBotError as e:
            self.status = JobStatus.FAILED
            logger.error(f"{self.failure_message}: {e}")
            raise
        except KeyboardInterrupt:
            self.status = JobStatus.TERMINATED
            raise

        result = FormSubmissionResult(
            page_title=page_title,
            submitted_text=form.text,
            message=message,
            expected_message=form.expected_message,
        )
        logger.info(f"Received message: {message!r}")

        if result.passed:
            self.status = JobStatus.COMPLETED
            logger.info(self.success_message)
        else:
            self.status = JobStatus.FAILED
            logger.warning(f"{self.failure_message}: expected {form.expected_message!r}, got {message!r}")

        return result
