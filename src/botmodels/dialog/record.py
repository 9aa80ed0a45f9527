from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass
class Record:
    """One dialog row: a candidate query and the canned response for it.

    Query is None for rows that match any query. States/NewState are None
    when the column (or the cell, on a short row) is absent and "" when the
    cell is present but empty.
    """

    Query: Optional[str]
    Response: Optional[str] = None
    States: Optional[str] = None
    NewState: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        # absent fields are omitted, the way a JS client sees undefined
        out: Dict[str, Any] = {"Query": self.Query}
        for field in ("Response", "States", "NewState"):
            value = getattr(self, field)
            if value is not None:
                out[field] = value
        return out
