"""Job implementations for the form bot."""

from webform_bot.application.job.job import Job, JobStatus
from webform_bot.application.job.form_submission_job import FormSubmissionJob

__all__ = [
    "Job",
    "JobStatus",
    "FormSubmissionJob",
]
