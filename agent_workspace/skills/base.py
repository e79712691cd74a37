from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Mapping, Type, Union

from pydantic import BaseModel


class SkillInput(BaseModel):
    """
    Base class for skill input models.

    Each concrete skill declares a subclass describing its parameters; raw
    mappings are validated against it before the skill runs.
    """


class Skill(ABC):
    """
    Reusable capability an agent can invoke (calculation, lookup, I/O).
    """

    name: str = ""
    description: str = ""
    input_model: Type[SkillInput] = SkillInput

    def get_name(self) -> str:
        return self.name

    def get_description(self) -> str:
        return self.description

    def parameters(self) -> Dict[str, Any]:
        """JSON schema of the skill's input, suitable for a prompt or tool listing."""
        return self.input_model.model_json_schema()

    async def execute(self, payload: Union[SkillInput, Mapping[str, Any]]) -> Any:
        """
        Validate `payload` against `input_model` and run the skill.

        Raises pydantic.ValidationError for malformed input.
        """
        args = self.input_model.model_validate(payload)
        return await self._run(args)

    @abstractmethod
    async def _run(self, args: Any) -> Any:
        ...
