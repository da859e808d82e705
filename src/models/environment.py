from typing import Any, Dict, List

from pydantic import BaseModel


class EnvironmentValue(BaseModel):
    key: str
    value: Any = ""
    enabled: bool = True


class EnvironmentDocument(BaseModel):
    """A named set of Postman environment variables."""

    name: str
    values: List[EnvironmentValue]

    def to_variables(self) -> Dict[str, Any]:
        """Map variable keys to values; a repeated key keeps its last value. Disabled values are kept too."""
        return {entry.key: entry.value for entry in self.values}
