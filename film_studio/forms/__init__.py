"""
Forms Module

Submission state machines, concept art previews and result view data for
the storyboard and 3D model forms.
"""

from film_studio.forms.controller import (
    FormController,
    FormState,
    ModelFormController,
    Notification,
    StoryboardFormController,
)
from film_studio.forms.preview import PreviewSlot
from film_studio.forms.session import reset_session

__all__ = [
    'FormController',
    'FormState',
    'ModelFormController',
    'Notification',
    'StoryboardFormController',
    'PreviewSlot',
    'reset_session',
]
