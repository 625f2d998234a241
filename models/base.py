from pydantic import BaseModel, ConfigDict, ValidationError
from typing import Any, List, Optional, Tuple


class BaseGolfModel(BaseModel):
    """Shared configuration and methods."""
    model_config = ConfigDict(validate_assignment=True)

    def update_field(self, field_name: str, value: Any) -> Optional[str]:
        """Update a field with user correction. Returns error message if validation fails."""
        try:
            setattr(self, field_name, value)
            return None
        except ValidationError as e:
            return e.errors()[0]['msg']


def error_locations(exc: ValidationError, prefix: str = "") -> List[Tuple[str, str]]:
    """Flatten a pydantic ValidationError into (field, message) pairs.

    Locations are dotted ("players.2.name"); ``prefix`` is prepended when the
    model was built from a nested input.
    """
    pairs = []
    for error in exc.errors():
        loc = ".".join(str(part) for part in error.get("loc", ()))
        field = ".".join(part for part in (prefix, loc) if part)
        pairs.append((field or prefix or "__root__", error["msg"]))
    return pairs
