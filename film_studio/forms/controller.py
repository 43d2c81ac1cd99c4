"""
Submission state machines for the storyboard and 3D model forms.

Each form instance owns one controller. A controller moves through
``IDLE -> SUBMITTING -> SUCCESS | FAILED`` and accepts a new submission from
any state except ``SUBMITTING``. Notifications go to the callback passed to
``submit``.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Mapping, Optional
import asyncio
import logging

from ..errors import ReadError, ValidationError
from ..generation.coordinator import GenerationCoordinator
from ..request_builder import build_model_request, build_storyboard_request
from ..schemas import Result

logger = logging.getLogger(__name__)


class FormState(str, Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCESS = "success"
    FAILED = "failed"


@dataclass(frozen=True)
class Notification:
    title: str
    description: str
    variant: str = "default"


Notify = Callable[[Notification], None]


class FormController:
    """Base controller; subclasses provide request building and the generation call."""

    name = "form"
    success_notification = Notification("Done", "The request completed.")
    failure_notification = Notification("Error", "The request failed. Please try again.", "destructive")

    def __init__(self, coordinator: GenerationCoordinator):
        self.coordinator = coordinator
        self.state = FormState.IDLE
        self.field_errors: Dict[str, str] = {}
        self.result: Optional[Any] = None
        self.last_error: Optional[str] = None
        self.closed = False

    @property
    def is_submitting(self) -> bool:
        return self.state is FormState.SUBMITTING

    def close(self):
        """Tear the form down; a response arriving afterwards is discarded."""
        self.closed = True

    async def build_request(self, form: Mapping[str, Any]) -> Result:
        raise NotImplementedError

    async def generate(self, request: Any) -> Any:
        raise NotImplementedError

    async def submit(self, form: Mapping[str, Any], notify: Notify) -> FormState:
        """Validate the form, run one generation call and report the outcome.

        Args:
            form: Raw form state keyed by field name
            notify: Callback receiving the success or failure notification

        Returns:
            The state after the submission
        """
        if self.closed:
            logger.warning(f"Ignoring submission on closed {self.name} form")
            return self.state
        if self.is_submitting:
            logger.warning(f"{self.name} form is already submitting, ignoring")
            return self.state

        self.state = FormState.SUBMITTING
        self.result = None
        self.field_errors = {}
        self.last_error = None

        try:
            built = await self.build_request(form)
            if built.field_errors:
                raise ValidationError(built.field_errors)
            if not built.success:
                raise ReadError(built.error or "Could not read the uploaded file")

            response = await self.generate(built.value)
        except ValidationError as e:
            logger.info(f"{self.name} form has invalid fields: {list(e.field_errors)}")
            self.field_errors = e.field_errors
            self.state = FormState.IDLE
            return self.state
        except asyncio.CancelledError:
            logger.info(f"{self.name} submission cancelled")
            self.state = FormState.IDLE
            raise
        except Exception as e:
            logger.error(f"Error submitting {self.name} form: {str(e)}", exc_info=True)
            if self.closed:
                self.state = FormState.IDLE
                return self.state
            self.last_error = str(e)
            self.state = FormState.FAILED
            notify(self.failure_notification)
            return self.state

        if self.closed:
            logger.info(f"Discarding {self.name} response received after teardown")
            self.state = FormState.IDLE
            return self.state

        self.result = response
        self.state = FormState.SUCCESS
        notify(self.success_notification)
        return self.state


class StoryboardFormController(FormController):
    name = "storyboard"
    success_notification = Notification(
        "Storyboard Generated",
        "AI has successfully generated the storyboard.",
    )
    failure_notification = Notification(
        "Error",
        "Failed to generate storyboard. Please try again.",
        "destructive",
    )

    async def build_request(self, form: Mapping[str, Any]) -> Result:
        return build_storyboard_request(form)

    async def generate(self, request: Any) -> Any:
        return await self.coordinator.generate_storyboard(request)


class ModelFormController(FormController):
    name = "model"
    success_notification = Notification(
        "3D Model Generated",
        "AI has successfully generated the 3D model assets.",
    )
    failure_notification = Notification(
        "Error",
        "Failed to generate 3D model. Please try again.",
        "destructive",
    )

    async def build_request(self, form: Mapping[str, Any]) -> Result:
        return await build_model_request(form)

    async def generate(self, request: Any) -> Any:
        return await self.coordinator.generate_3d_model(request)
