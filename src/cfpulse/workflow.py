"""Sequential multi-step workflows and the application push workflow.

A workflow is an ordered list of steps. Each step's remote call is awaited
before the next one starts; the first failure aborts the workflow and is
reported with the step that failed and the last step that succeeded, so the
caller can resume without repeating completed work. There is no retry and no
cancellation once the first step has begun.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Awaitable, Callable, Dict, List, Optional, Sequence

from cf.client import PlatformClient
from cf.requests import (
    ApplicationRequest,
    PushApplicationRequest,
    SetEnvironmentVariableRequest,
)
from cfpulse.errors import PartialWorkflowFailure, WorkflowAbortedError

logger = logging.getLogger(__name__)

JAVA_BUILDPACK = "java_buildpack_offline"
JRE_CONFIG_VARIABLE = "JBP_CONFIG_OPEN_JDK_JRE"
JRE_CONFIG_VALUE = "{ jre: { version: 17.+ } }"


class WorkflowState(str, Enum):
    PENDING = "pending"
    UPLOADED = "uploaded"
    CONFIGURED = "configured"
    STARTED = "started"
    DONE = "done"
    ABORTED = "aborted"


@dataclass(frozen=True)
class WorkflowStep:
    """One remote call in a workflow and the state reached when it succeeds."""

    name: str
    reached: WorkflowState
    action: Callable[[], Awaitable[object]]
    enabled: bool = True


class WorkflowRunner:
    """Runs workflow steps strictly in order with short-circuit on failure.

    Args:
        workflow: Name used in failure messages (e.g. ``push``)
        subject: What the workflow acts on, as shown to the caller
        steps: Steps in execution order
        aborted_states: Description of the subject's state when the workflow
            aborts after a given step name (``None`` key = no step completed)
    """

    def __init__(
        self,
        workflow: str,
        subject: str,
        steps: Sequence[WorkflowStep],
        aborted_states: Optional[Dict[Optional[str], str]] = None,
    ):
        self.workflow = workflow
        self.subject = subject
        self.steps = list(steps)
        self.aborted_states = aborted_states or {}
        self.state = WorkflowState.PENDING
        self.completed: List[str] = []
        self.abort_reason: Optional[str] = None

    @property
    def last_completed_step(self) -> Optional[str]:
        return self.completed[-1] if self.completed else None

    async def run(self) -> WorkflowState:
        """Execute every enabled step.

        Returns:
            ``WorkflowState.DONE`` once all enabled steps have succeeded

        Raises:
            WorkflowAbortedError: The first step failed
            PartialWorkflowFailure: A later step failed after earlier ones succeeded
        """
        for step in self.steps:
            if not step.enabled:
                logger.debug(f"{self.workflow} of {self.subject}: skipping step '{step.name}'")
                continue

            logger.info(f"{self.workflow} of {self.subject}: running step '{step.name}'")
            try:
                await step.action()
            except Exception as e:
                self._abort(step, e)

            self.completed.append(step.name)
            self.state = step.reached
            logger.debug(f"{self.workflow} of {self.subject}: state -> {self.state.value}")

        self.state = WorkflowState.DONE
        return self.state

    def _abort(self, step: WorkflowStep, cause: Exception) -> None:
        last = self.last_completed_step
        error_cls = PartialWorkflowFailure if last else WorkflowAbortedError
        error = error_cls(
            workflow=self.workflow,
            subject=self.subject,
            failed_step=step.name,
            last_completed_step=last,
            state=self.aborted_states.get(last, ""),
            cause=cause,
        )
        self.state = WorkflowState.ABORTED
        self.abort_reason = str(error)
        logger.warning(self.abort_reason)
        raise error from cause


class PushApplicationWorkflow:
    """Deploys an application: upload, configure the JRE, then optionally start.

    Example:
        workflow = PushApplicationWorkflow(client, "demo", "/tmp/demo.jar")
        await workflow.run()
    """

    UPLOAD = "upload"
    CONFIGURE = "configure"
    START = "start"

    def __init__(
        self,
        client: PlatformClient,
        name: str,
        path: str,
        no_start: bool = False,
        memory: Optional[int] = None,
        disk: Optional[int] = None,
    ):
        self.client = client
        self.name = name
        self.path = path
        self.no_start = no_start
        self.memory = memory
        self.disk = disk
        self.runner = WorkflowRunner(
            workflow="push",
            subject=f"application '{name}'",
            steps=self._steps(),
            aborted_states={
                None: (
                    "No new bits were uploaded; an existing application may have been "
                    "stopped or a new one created."
                ),
                self.UPLOAD: "The application is uploaded but not configured.",
                self.CONFIGURE: "The application is uploaded and configured but not running.",
            },
        )

    def _steps(self) -> List[WorkflowStep]:
        return [
            WorkflowStep(self.UPLOAD, WorkflowState.UPLOADED, self._upload),
            WorkflowStep(self.CONFIGURE, WorkflowState.CONFIGURED, self._configure),
            WorkflowStep(
                self.START, WorkflowState.STARTED, self._start, enabled=not self.no_start
            ),
        ]

    @property
    def state(self) -> WorkflowState:
        return self.runner.state

    async def _upload(self) -> None:
        await self.client.push_application(
            PushApplicationRequest(
                name=self.name,
                path=self.path,
                no_start=True,
                buildpack=JAVA_BUILDPACK,
                memory=self.memory,
                disk_quota=self.disk,
            )
        )

    async def _configure(self) -> None:
        await self.client.set_environment_variable(
            SetEnvironmentVariableRequest(
                name=self.name,
                variable_name=JRE_CONFIG_VARIABLE,
                variable_value=JRE_CONFIG_VALUE,
            )
        )

    async def _start(self) -> None:
        await self.client.start_application(ApplicationRequest(name=self.name))

    async def run(self) -> str:
        """Run the workflow and return the acknowledgement text."""
        await self.runner.run()
        if self.no_start:
            return f"Application '{self.name}' pushed but not started (noStart)."
        return f"Application '{self.name}' pushed and started."
