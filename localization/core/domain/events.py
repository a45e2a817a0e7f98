# localization/core/domain/events.py
from typing import Optional

from pydantic import BaseModel, ConfigDict


class CancellableEventArgs(BaseModel):
    """
    Arguments passed to pre/post mutation handlers.

    A "before" handler sets `cancel = True` to stop the mutation. The flag
    is only consulted once, before anything is written; setting it from an
    "after" handler has no effect.
    """

    cancel: bool = False

    model_config = ConfigDict(validate_assignment=True)


class SaveEventArgs(CancellableEventArgs):
    pass


class DeleteEventArgs(CancellableEventArgs):
    # Id of the entity being deleted (None if it was never saved)
    id: Optional[int] = None
