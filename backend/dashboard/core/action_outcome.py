"""Action Outcome — the result contract of a form action.

Invariants:
    - FormState with neither errors nor message is the pending/initial state
    - A successful invoice mutation never yields a FormState: it yields Redirect
    - Redirect is a value, never an exception — error containment around persistence
      catches typed errors only and cannot swallow navigation
    - Failed and Redirect are terminal; the HTTP layer renders them (422 / 303)

Design Decisions:
    - Tagged union (Failed | Redirect) over a control-flow exception: "domain failure"
      and "control transfer" are separated at the type level, so no broad except
      has to re-raise a navigation signal
    - Frozen dataclasses: an outcome is owned by one request and never mutated
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class FormState:
    """Field errors and/or a top-level message returned to the submitting form."""
    errors: dict[str, list[str]] | None = None
    message: str | None = None

    @property
    def is_pending(self) -> bool:
        return not self.errors and self.message is None

    def to_dict(self) -> dict:
        """JSON shape for the form: absent keys are omitted."""
        body: dict = {}
        if self.errors:
            body["errors"] = {name: list(msgs) for name, msgs in self.errors.items()}
        if self.message is not None:
            body["message"] = self.message
        return body


@dataclass(frozen=True)
class Failed:
    """Terminal failure: re-render the form with this state."""
    state: FormState = field(default_factory=FormState)


@dataclass(frozen=True)
class Redirect:
    """Terminal success: the client must navigate to `path`."""
    path: str


ActionOutcome = Failed | Redirect


def redirect(path: str) -> Redirect:
    """End an action by instructing the client to navigate to `path`."""
    return Redirect(path=path)
