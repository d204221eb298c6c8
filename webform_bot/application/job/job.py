from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any
import uuid

from webform_bot.domain.protocols.driver_protocol import DriverProtocol


class JobStatus(Enum):
    PENDING = "pending"
    RUNNING = "running"
    COMPLETED = "completed"
    FAILED = "failed"
    TERMINATED = "terminated"


@dataclass(kw_only=True)
class Job(ABC):
    job_id: str = field(default_factory=lambda: uuid.uuid4().hex)
    success_message: str
    failure_message: str
    status: JobStatus = JobStatus.PENDING

    @abstractmethod
    def execute(self, driver: DriverProtocol) -> Any:
        pass

    def is_finished(self) -> bool:
        return self.status in (JobStatus.COMPLETED, JobStatus.FAILED, JobStatus.TERMINATED)
