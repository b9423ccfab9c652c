from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Shared settings: camelCase on the wire, snake_case in Python."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    @classmethod
    def document(cls, record: Any) -> Optional[Dict[str, Any]]:
        """JSON-ready dict for an ORM record, or None for a missing one."""
        if record is None:
            return None
        return cls.model_validate(record).model_dump(by_alias=True, mode="json")


class PayloadModel(CamelModel):
    """Loose input model for the unvalidated write endpoints.

    Numbers are accepted for string fields and unknown keys are dropped.
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
        coerce_numbers_to_str=True,
        extra="ignore",
    )
