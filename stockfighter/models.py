# stockfighter/models.py
from enum import Enum
from pydantic import BaseModel, ConfigDict

class Direction(str, Enum):
    BUY = "buy"
    SELL = "sell"

class OrderType(str, Enum):
    """Order types accepted by the venue (wire strings)"""
    LIMIT = "limit"
    MARKET = "market"
    FILL_OR_KILL = "fill-or-kill"
    IMMEDIATE_OR_CANCEL = "immediate-or-cancel"


class WireModel(BaseModel):
    """
    Base for JSON payloads exchanged with the API.

    Attributes are snake_case, wire keys are set through field aliases and
    either name is accepted on input. Strict typing keeps a payload of the
    wrong shape from being coerced into this one.
    """
    model_config = ConfigDict(populate_by_name=True, strict=True)

    def replace_with(self, fresh: "WireModel") -> None:
        """Overwrite every field with the values of a freshly decoded instance."""
        if not isinstance(fresh, type(self)):
            raise TypeError(f"Cannot refresh {type(self).__name__} from {type(fresh).__name__}")
        for name in type(fresh).model_fields:
            setattr(self, name, getattr(fresh, name))

    def to_wire(self) -> dict:
        return self.model_dump(by_alias=True, mode="json")
