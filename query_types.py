# query_types.py
from enum import Enum

# ============================================================================
# ENUMS
# ============================================================================


class QueryType(Enum):
    """All supported query types."""
    BUILDING_PARKING = "building_parking"
    FIND_PARKING = "find_parking"
    ERROR = "error"
