from typing import Dict


class AgentForgeError(Exception):
    """Base class for agent builder errors."""


class DraftValidationError(AgentForgeError):
    """A draft is missing required data and must not be submitted."""

    def __init__(self, errors: Dict[str, str]):
        self.errors = errors
        super().__init__("; ".join(f"{field}: {msg}" for field, msg in errors.items()))


class WizardStepError(AgentForgeError):
    """Raised when the wizard cannot advance past the current step."""


class SubmissionError(AgentForgeError):
    """The agent service rejected the create request."""

    def __init__(self, message: str, status_code: int = 0):
        self.status_code = status_code
        super().__init__(message)


class SessionExpiredError(SubmissionError):
    """The agent service says the caller is not authenticated."""
