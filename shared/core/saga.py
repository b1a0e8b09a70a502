"""Ordered multi-step writes with per-step compensation.

The store commits every call on its own, so a submit that touches several
collections (a property and its owner/broker join rows, an agreement and the
property it occupies) runs as a saga: if step N fails, steps N-1..1 are undone
in reverse order and the caller gets the failing step's error message.
"""
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Tuple

logger = logging.getLogger(__name__)

Action = Callable[[Dict[str, Any]], Any]
Compensation = Callable[[Dict[str, Any], Any], None]


class SagaError(Exception):
    def __init__(self, saga: str, step: str, cause: Exception):
        self.saga = saga
        self.step = step
        self.cause = cause
        self.message = getattr(cause, "message", None) or str(cause)
        self.compensation_errors: List[Tuple[str, str]] = []
        super().__init__(self.message)


@dataclass
class SagaStep:
    name: str
    action: Action
    compensate: Optional[Compensation] = None


@dataclass
class Saga:
    name: str
    steps: List[SagaStep] = field(default_factory=list)

    def step(self, name: str, action: Action, compensate: Optional[Compensation] = None) -> "Saga":
        self.steps.append(SagaStep(name, action, compensate))
        return self

    def run(self, context: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        context = dict(context or {})
        completed: List[SagaStep] = []

        for step in self.steps:
            try:
                context[step.name] = step.action(context)
            except Exception as exc:
                logger.error("Saga %s failed at step %s: %s", self.name, step.name, exc)
                error = SagaError(self.name, step.name, exc)
                self._compensate(completed, context, error)
                raise error from exc
            completed.append(step)

        return context

    def _compensate(self, completed: List[SagaStep], context: Dict[str, Any], error: SagaError):
        for step in reversed(completed):
            if step.compensate is None:
                continue
            try:
                step.compensate(context, context.get(step.name))
            except Exception as exc:
                # keep unwinding; the failure is reported on the SagaError
                logger.exception(
                    "Saga %s could not compensate step %s", self.name, step.name)
                error.compensation_errors.append((step.name, str(exc)))
