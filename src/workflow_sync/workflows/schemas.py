"""Schemas for the workflow files

This defines the minimal shape of a GitHub Actions workflow that the compatibility check needs: a mapping of job names to jobs,
where each job has a list of steps, and each step may reference an action with `uses`.

Everything else in the workflow (`on`, `runs-on`, `with`, etc.) is ignored. Missing (or null) `jobs`, `steps`, and `uses` are loaded as empty
values rather than being errors.

:Module: workflow_sync.workflows.schemas
:License: See the LICENSE file for details
"""
from typing import Any, Dict, Generator, List, Optional

from marshmallow import Schema, fields, EXCLUDE, post_load


class Step:
    """A single step in a job. `uses` is the action reference (`owner/action@ref`) if the step runs an action."""

    def __init__(self, uses: Optional[str] = None):
        self.uses = uses


class Job:
    """A job in the workflow, which is just an ordered list of steps."""

    def __init__(self, steps: Optional[List[Step]] = None):
        self.steps = steps or []


class Workflow:
    """The loaded workflow."""

    def __init__(self, jobs: Optional[Dict[str, Job]] = None):
        self.jobs = jobs or {}

    def action_references(self) -> Generator[str, None, None]:
        """Yields each step's `uses` value in document order. This is lazy so that callers can stop at the first one they care about."""
        for job in self.jobs.values():
            for step in job.steps:
                if step.uses:
                    yield step.uses


class StepSchema(Schema):
    """The schema for a job step."""

    uses = fields.String(required=False, load_default=None, allow_none=True)

    @post_load
    def make_step(self, in_data: Dict[str, Any], **kwargs) -> Step:  # pylint: disable=W0613
        """Returns the Step object."""
        return Step(uses=in_data.get("uses"))

    class Meta:
        """Steps have lots of other fields (`name`, `run`, `with`, ...) that we don't care about."""

        unknown = EXCLUDE


class JobSchema(Schema):
    """The schema for a job."""

    steps = fields.List(fields.Nested(StepSchema), required=False, load_default=list, allow_none=True)

    @post_load
    def make_job(self, in_data: Dict[str, Any], **kwargs) -> Job:  # pylint: disable=W0613
        """Returns the Job object."""
        return Job(steps=in_data.get("steps"))

    class Meta:
        """We only care about the steps."""

        unknown = EXCLUDE


class WorkflowSchema(Schema):
    """The schema for the workflow document itself."""

    jobs = fields.Dict(keys=fields.Raw(), values=fields.Nested(JobSchema, allow_none=True), required=False, load_default=dict, allow_none=True)

    @post_load
    def make_workflow(self, in_data: Dict[str, Any], **kwargs) -> Workflow:  # pylint: disable=W0613
        """Returns the Workflow object. A job without a body is the same as a job without steps."""
        jobs = {name: job or Job() for name, job in (in_data.get("jobs") or {}).items()}
        return Workflow(jobs=jobs)

    class Meta:
        """Note: YAML loads the `on` key as the boolean True, which is fine since it's excluded."""

        unknown = EXCLUDE
