"""Exceptions raised while building the dataset bundle."""


class LoadError(Exception):
    """The dataset source could not be read or decoded."""


class SchemaViolation(LoadError, ValueError):
    """A row breaks its table's invariants.

    Carries enough context to point at the offending cell:
    table name, row index (None for table-level checks) and field.
    """

    def __init__(self, table: str, row, field: str, message: str):
        self.table = table
        self.row = row
        self.field = field
        where = f"{table}[{row}].{field}" if row is not None else f"{table}.{field}"
        super().__init__(f"{where}: {message}")
