"""Error taxonomy for the tool invocation gateway.

Every error raised here is caught at the dispatcher boundary and turned into
a failure result; none of them is allowed to reach the transport.
"""

from typing import Optional


class GatewayError(Exception):
    """Base class for gateway errors."""


class DuplicateToolError(GatewayError):
    """A tool with the same name is already registered."""

    def __init__(self, name: str):
        super().__init__(f"Tool '{name}' is already registered")
        self.name = name


class RegistryFrozenError(GatewayError):
    """The registry no longer accepts registrations."""

    def __init__(self, name: str):
        super().__init__(
            f"Cannot register tool '{name}': the registry is read-only after construction"
        )
        self.name = name


class UnknownToolError(GatewayError, LookupError):
    """The requested tool is not in the registry."""

    def __init__(self, name: str):
        super().__init__(f"Unknown tool: {name}")
        self.name = name


class ArgumentCoercionError(GatewayError, ValueError):
    """A supplied argument is missing or cannot be converted to the expected type."""

    def __init__(self, argument: str, message: str):
        super().__init__(f"Invalid argument '{argument}': {message}")
        self.argument = argument


class WorkflowAbortedError(GatewayError):
    """A workflow step failed and the remaining steps were not run.

    Attributes:
        workflow: Name of the workflow (e.g. ``push``)
        subject: What the workflow acts on (e.g. the application name)
        failed_step: Name of the step that failed
        last_completed_step: Name of the last step that succeeded, if any
        state: Description of the state the subject was left in
        cause: The underlying exception
    """

    def __init__(
        self,
        workflow: str,
        subject: str,
        failed_step: str,
        last_completed_step: Optional[str],
        state: str,
        cause: BaseException,
    ):
        self.workflow = workflow
        self.subject = subject
        self.failed_step = failed_step
        self.last_completed_step = last_completed_step
        self.state = state
        self.cause = cause
        super().__init__(self._format())

    def _format(self) -> str:
        reason = (str(self.cause) or type(self.cause).__name__).rstrip(".")
        if self.last_completed_step is None:
            progress = "before any step completed"
        else:
            progress = f"after step '{self.last_completed_step}' succeeded"
        message = (
            f"{self.workflow.capitalize()} of {self.subject} failed at step "
            f"'{self.failed_step}' {progress}: {reason}."
        )
        return f"{message} {self.state}" if self.state else message


class PartialWorkflowFailure(WorkflowAbortedError):
    """A workflow failed after one or more earlier steps had already succeeded."""
