"""Completed job result model."""

from pydantic import BaseModel, ConfigDict, Field

from .job import Job


class JobResult(BaseModel):
    """Record of which worker completed which job.

    Ownership passes to the coordinator on receipt. Results must be
    correlated by content (``job``), never by arrival order.
    """

    model_config = ConfigDict(frozen=True)

    worker_id: int = Field(ge=0, description="Stable id of the worker that ran the job")
    job: Job = Field(description="The job that was processed")
    output: str = Field(default="", description="Value returned by the job handler")

    @property
    def message(self) -> str:
        """Human-readable completion line, as published to the result sink."""
        return f"Worker {self.worker_id} completed job with data '{self.job.data}'"

    def __str__(self) -> str:
        return self.message
