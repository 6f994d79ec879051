from enum import Enum


class SinkOperation(Enum):
    CREATE = "create"
    HEADER = "header"
    ROW = "row"
    FLUSH = "flush"
