"""Common configuration for command objects."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class BaseCommand(BaseModel):
    """An immutable request for one user-triggered action.

    Commands carry exactly the parameters their remote calls need and are
    consumed once by the dispatcher.
    """

    model_config = ConfigDict(frozen=True, strict=True)

    @property
    def name(self) -> str:
        return type(self).__name__.removesuffix("Command")
